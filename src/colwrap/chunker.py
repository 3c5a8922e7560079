"""Group word-boundary tokens into the atomic units used for line wrapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .config import ESCAPE_CHARS, ESCAPE_PREFIX
from .segmentation import TextInput, Token, ensure_text, word_tokens
from .width import text_width

__all__ = ["Chunk", "escape_spans", "merge_escapes", "split_chunks"]

Span = Tuple[int, int]


@dataclass(frozen=True)
class Chunk:
    """A run of tokens the line packer never splits.

    ``width`` is the display width of ``text``; ``start`` and ``end`` locate
    the chunk in the source string.
    """

    text: str
    width: int
    start: int
    end: int

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> "Chunk":
        if not tokens:
            raise ValueError("a chunk needs at least one token")
        text = "".join(token.text for token in tokens)
        return cls(text=text, width=text_width(text), start=tokens[0].start, end=tokens[-1].end)


def escape_spans(text: str) -> List[Span]:
    """Locate backslash escapes such as ``\\n`` or ``\\"`` in ``text``.

    Pairs are matched left to right, so in ``\\\\n`` the first two characters
    form an escaped backslash and the ``n`` is a plain letter.
    """

    spans: List[Span] = []
    index = 0
    limit = len(text) - 1
    while index < limit:
        if text[index] == ESCAPE_PREFIX and text[index + 1] in ESCAPE_CHARS:
            spans.append((index, index + 2))
            index += 2
        else:
            index += 1
    return spans


def merge_escapes(text: str, tokens: Iterable[Token]) -> List[Token]:
    """Fuse tokens whose shared boundary would cut an escape pair in half.

    A fused token is word-like when any of its parts was.
    """

    inner_boundaries = {start + 1 for start, _ in escape_spans(text)}
    merged: List[Token] = []
    for token in tokens:
        if merged and token.start in inner_boundaries:
            previous = merged.pop()
            token = Token(
                start=previous.start,
                end=token.end,
                text=previous.text + token.text,
                word_like=previous.word_like or token.word_like,
            )
        merged.append(token)
    return merged


def split_chunks(text: TextInput) -> List[Chunk]:
    """Split ``text`` into chunks: a word followed by its trailing separators.

    Separators that precede the first word become a chunk of their own.
    Joining the ``text`` of all chunks reproduces the input exactly.
    """

    text = ensure_text(text)
    chunks: List[Chunk] = []
    pending: List[Token] = []
    for unit in merge_escapes(text, word_tokens(text)):
        if unit.word_like and pending:
            chunks.append(Chunk.from_tokens(pending))
            pending = []
        pending.append(unit)
    if pending:
        chunks.append(Chunk.from_tokens(pending))
    return chunks
