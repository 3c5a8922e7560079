"""Tests for the colwrap command line."""

import io
import sys

import pytest

from colwrap.cli import main


def _run(argv):
    out = io.StringIO()
    status = main(argv, stdout=out)
    return status, out.getvalue()


class TestWrapCommand:
    """Tests for ``colwrap wrap``."""

    def test_wrap_argument(self):
        status, output = _run(["wrap", "-w", "20", "This is a simple test string"])
        assert status == 0
        assert output == "This is a simple \ntest string\n"

    def test_quote(self):
        _, output = _run(["wrap", "--width", "20", "--quote", "This is a simple test string"])
        assert output == '"This is a simple "\n"test string"\n'

    def test_quote_escapes_raw_characters(self):
        """Bare quotes and real control characters become escapes."""
        _, output = _run(["wrap", "--quote", 'say "hi"\tnow'])
        assert output == '"say \\"hi\\"\\tnow"\n'

    def test_quote_keeps_existing_escapes(self):
        _, output = _run(["wrap", "--quote", 'say \\"hi\\"\\n'])
        assert output == '"say \\"hi\\"\\n"\n'

    def test_show_width(self):
        _, output = _run(["wrap", "-w", "20", "--show-width", "This is a simple test string"])
        assert output == "17 This is a simple \n11 test string\n"

    def test_reads_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO("Hello 世界\n".encode("utf-8"))))
        status, output = _run(["wrap"])
        assert status == 0
        assert output == "Hello 世界\n"

    def test_empty_input_prints_nothing(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"")))
        assert _run(["wrap"]) == (0, "")

    def test_invalid_utf8_on_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\xff\xfe")))
        status, output = _run(["wrap"])
        assert status == 1
        assert output == ""

    def test_bad_width_is_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            _run(["wrap", "-w", "wide", "text"])
        assert excinfo.value.code == 2


class TestWidthCommand:
    """Tests for ``colwrap width``."""

    def test_width_argument(self):
        assert _run(["width", "Hello 世界"]) == (0, "10\n")

    def test_verbose_flag(self):
        assert _run(["-v", "width", "abc"]) == (0, "3\n")

    def test_missing_command(self):
        with pytest.raises(SystemExit):
            _run([])
