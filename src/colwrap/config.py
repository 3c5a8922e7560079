"""Configuration constants used across the colwrap package."""

# Line width used by msgcat/msgmerge when writing PO files.
DEFAULT_WRAP_WIDTH: int = 77

ESCAPE_PREFIX: str = "\\"
# Characters that form a single-letter escape when preceded by a backslash.
ESCAPE_CHARS: frozenset = frozenset("ntr\\\"'")

# Format character that terminals still render as a visible hyphen.
SOFT_HYPHEN: str = "\u00ad"
