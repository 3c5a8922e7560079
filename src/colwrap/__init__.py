"""Display width measurement and gettext-style wrapping for translation tooling."""

from .chunker import Chunk, split_chunks
from .segmentation import (
    Token,
    east_asian_width_class,
    grapheme_indices,
    graphemes,
    split_word_bound_indices,
    split_word_bounds,
    unicode_sentences,
    unicode_words,
)
from .width import WidthClass, char_width, text_width
from .wrap import Line, gettext_wrap, wrap_lines

__all__ = [
    "Chunk",
    "Line",
    "Token",
    "WidthClass",
    "char_width",
    "east_asian_width_class",
    "gettext_wrap",
    "grapheme_indices",
    "graphemes",
    "split_chunks",
    "split_word_bound_indices",
    "split_word_bounds",
    "text_width",
    "unicode_sentences",
    "unicode_words",
    "wrap_lines",
]
