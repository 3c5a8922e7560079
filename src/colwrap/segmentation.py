"""Adapter around the Unicode segmentation provided by :mod:`uniseg`.

Every other module obtains boundaries through the helpers defined here, so the
segmentation backend stays opaque to the chunker and the packer. Offsets are
code point offsets into the ``str`` being segmented.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import List, Tuple, Union

from uniseg.graphemecluster import grapheme_clusters
from uniseg.sentencebreak import sentences
from uniseg.wordbreak import words

__all__ = [
    "Token",
    "ensure_text",
    "word_tokens",
    "split_word_bounds",
    "split_word_bound_indices",
    "unicode_words",
    "graphemes",
    "grapheme_indices",
    "unicode_sentences",
    "east_asian_width_class",
]

TextInput = Union[str, bytes]


@dataclass(frozen=True)
class Token:
    """A word-boundary segment ``text[start:end]``."""

    start: int
    end: int
    text: str
    word_like: bool


def ensure_text(text: TextInput) -> str:
    """Return ``text`` as a well-formed ``str``.

    ``bytes`` are decoded as strict UTF-8. A ``str`` holding lone surrogates
    cannot be encoded and raises :class:`UnicodeEncodeError` here, before any
    offsets are computed from it.
    """

    if isinstance(text, bytes):
        return text.decode("utf-8")
    if not isinstance(text, str):
        raise TypeError(f"expected str or bytes, got {type(text).__name__}")
    text.encode("utf-8")
    return text


def _is_word_like(segment: str) -> bool:
    return any(ch.isalnum() for ch in segment)


def word_tokens(text: TextInput) -> List[Token]:
    """Split ``text`` at UAX #29 word boundaries into classified tokens."""

    text = ensure_text(text)
    if not text:
        return []
    tokens: List[Token] = []
    start = 0
    for segment in words(text):
        end = start + len(segment)
        tokens.append(Token(start, end, segment, _is_word_like(segment)))
        start = end
    return tokens


def split_word_bounds(text: TextInput) -> List[str]:
    """Return the word-boundary segments, punctuation and whitespace included."""

    return [token.text for token in word_tokens(text)]


def split_word_bound_indices(text: TextInput) -> List[Tuple[int, str]]:
    return [(token.start, token.text) for token in word_tokens(text)]


def unicode_words(text: TextInput) -> List[str]:
    """Return only the word-like segments of ``text``."""

    return [token.text for token in word_tokens(text) if token.word_like]


def graphemes(text: TextInput, is_extended: bool = True) -> List[str]:
    """Split ``text`` into extended grapheme clusters.

    Legacy clusters are not supported by :mod:`uniseg`; passing
    ``is_extended=False`` raises :class:`ValueError`.
    """

    if not is_extended:
        raise ValueError("only extended grapheme clusters are supported")
    text = ensure_text(text)
    return list(grapheme_clusters(text)) if text else []


def grapheme_indices(text: TextInput, is_extended: bool = True) -> List[Tuple[int, str]]:
    result: List[Tuple[int, str]] = []
    offset = 0
    for cluster in graphemes(text, is_extended):
        result.append((offset, cluster))
        offset += len(cluster)
    return result


def unicode_sentences(text: TextInput) -> List[str]:
    text = ensure_text(text)
    return list(sentences(text)) if text else []


def east_asian_width_class(ch: str) -> str:
    """Return the East Asian Width property of ``ch`` (``"Na"``, ``"W"``, ...)."""

    return unicodedata.east_asian_width(ch)
