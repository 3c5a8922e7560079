"""Command-line entry point for colwrap."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .chunker import escape_spans
from .config import DEFAULT_WRAP_WIDTH
from .segmentation import ensure_text
from .width import pad_to_width, text_width
from .wrap import wrap_lines

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    """Run the ``colwrap`` command and return its exit status."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    out = stdout if stdout is not None else sys.stdout
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = _read_text(args.text)
    except UnicodeError as exc:
        logger.error("Input is not valid UTF-8 text: %s", exc)
        return 1

    if args.command == "width":
        print(text_width(text), file=out)
        return 0

    lines = wrap_lines(text, args.width)
    label_width = len(str(max((line.width for line in lines), default=0)))
    for line in lines:
        rendered = _po_literal(line.text) if args.quote else line.text
        if args.show_width:
            rendered = f"{pad_to_width(str(line.width), label_width)} {rendered}"
        print(rendered, file=out)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colwrap",
        description="Measure display width and wrap text like gettext PO files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    wrap_cmd = commands.add_parser("wrap", help="wrap text into lines")
    wrap_cmd.add_argument(
        "-w",
        "--width",
        type=int,
        default=DEFAULT_WRAP_WIDTH,
        help=f"column budget per line (default: {DEFAULT_WRAP_WIDTH})",
    )
    wrap_cmd.add_argument("--show-width", action="store_true", help="prefix each line with its width")
    wrap_cmd.add_argument(
        "--quote",
        action="store_true",
        help="print lines as PO string literals, escaping bare quotes and control characters",
    )
    wrap_cmd.add_argument("text", nargs="?", help="text to wrap (default: read stdin)")

    width_cmd = commands.add_parser("width", help="print the display width of text")
    width_cmd.add_argument("text", nargs="?", help="text to measure (default: read stdin)")
    return parser


_LITERAL_ESCAPES = {'"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _po_literal(text: str) -> str:
    # Escapes already present in the text are copied unchanged.
    inside_escape = {index for start, end in escape_spans(text) for index in range(start, end)}
    parts = [
        ch if index in inside_escape else _LITERAL_ESCAPES.get(ch, ch)
        for index, ch in enumerate(text)
    ]
    return '"' + "".join(parts) + '"'


def _read_text(argument: Optional[str]) -> str:
    if argument is not None:
        return ensure_text(argument)
    data = ensure_text(sys.stdin.buffer.read())
    # Drop the newline terminating the last input line.
    if data.endswith("\n"):
        data = data[:-1]
    return data


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
