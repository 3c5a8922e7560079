"""Greedy line packing following the gettext PO wrapping convention."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .chunker import Chunk, split_chunks
from .config import DEFAULT_WRAP_WIDTH
from .segmentation import TextInput, ensure_text

__all__ = ["Line", "pack_chunks", "wrap_lines", "gettext_wrap"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Line:
    """One output line made of whole chunks."""

    chunks: Tuple[Chunk, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        return "".join(chunk.text for chunk in self.chunks)

    @property
    def width(self) -> int:
        return sum(chunk.width for chunk in self.chunks)


def _check_width(max_width: int) -> None:
    if isinstance(max_width, bool) or not isinstance(max_width, int):
        raise TypeError(f"max_width must be an int, got {type(max_width).__name__}")


def pack_chunks(chunks: Iterable[Chunk], max_width: int) -> List[Line]:
    """Place ``chunks`` into lines no wider than ``max_width`` where possible.

    A chunk always goes onto an empty line, however wide it is, so an
    oversized word ends up alone on its line and ``max_width <= 0`` gives
    one chunk per line.
    """

    _check_width(max_width)
    lines: List[Line] = []
    current: List[Chunk] = []
    current_width = 0
    for chunk in chunks:
        if current and current_width + chunk.width > max_width:
            lines.append(Line(tuple(current)))
            current = []
            current_width = 0
        current.append(chunk)
        current_width += chunk.width
    if current:
        lines.append(Line(tuple(current)))
    return lines


def wrap_lines(text: TextInput, max_width: int = DEFAULT_WRAP_WIDTH) -> List[Line]:
    """Wrap ``text`` and return the lines together with their chunks."""

    _check_width(max_width)
    text = ensure_text(text)
    if not text:
        return []
    chunks = split_chunks(text)
    lines = pack_chunks(chunks, max_width)
    logger.debug("Wrapped %d chunks into %d lines at width %d", len(chunks), len(lines), max_width)
    return lines


def gettext_wrap(text: TextInput, max_width: int = DEFAULT_WRAP_WIDTH) -> List[str]:
    """Wrap ``text`` the way gettext wraps PO strings.

    Lines keep their trailing whitespace, so ``"".join(result) == text``.
    Escape sequences such as ``\\n`` are never split, and the empty string
    yields an empty list.
    """

    return [line.text for line in wrap_lines(text, max_width)]
