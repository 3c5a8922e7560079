"""Helpers for measuring and shaping the terminal column width of text."""

from __future__ import annotations

import unicodedata
from enum import IntEnum

import wcwidth

from .config import SOFT_HYPHEN
from .segmentation import TextInput, east_asian_width_class, ensure_text

__all__ = ["WidthClass", "width_class", "char_width", "text_width", "pad_to_width"]


class WidthClass(IntEnum):
    ZERO = 0
    NARROW = 1
    WIDE = 2


def width_class(ch: str) -> WidthClass:
    """Classify a single code point.

    Zero-width marks and format characters win over East Asian Width; control
    characters (TAB and LF included) and unassigned code points are narrow.
    """

    category = unicodedata.category(ch)
    if category == "Cc" or ch == SOFT_HYPHEN:
        return WidthClass.NARROW
    if wcwidth.wcwidth(ch) == 0:
        return WidthClass.ZERO
    # Newer unicodedata releases report "F" for unassigned code points.
    if category == "Cn":
        return WidthClass.NARROW
    if east_asian_width_class(ch) in ("F", "W"):
        return WidthClass.WIDE
    return WidthClass.NARROW


def char_width(ch: str) -> int:
    return int(width_class(ch))


def text_width(text: TextInput) -> int:
    """Return the number of terminal columns ``text`` occupies."""

    return sum(char_width(ch) for ch in ensure_text(text))


def pad_to_width(text: TextInput, width: int, pad_char: str = " ") -> str:
    text = ensure_text(text)
    current = text_width(text)
    if current >= width:
        return text
    return text + pad_char * (width - current)
