"""Test error messages, offsets, and context snippets."""

import pytest

from clex.errors import ConverterError, LexError
from clex.lexer import lex


class TestErrorOffsets:
    def test_offset_and_remaining(self):
        with pytest.raises(LexError) as exc_info:
            lex("a + `b")
        err = exc_info.value
        assert err.offset == 4
        assert err.remaining == "`b"
        assert err.source == "a + `b"

    def test_line_and_column(self):
        with pytest.raises(LexError) as exc_info:
            lex("int x;\n  @")
        err = exc_info.value
        assert err.line == 2
        assert err.column == 3

    def test_first_column(self):
        with pytest.raises(LexError) as exc_info:
            lex("$")
        assert exc_info.value.line == 1
        assert exc_info.value.column == 1


class TestErrorMessage:
    def test_message_quotes_input(self):
        with pytest.raises(LexError) as exc_info:
            lex("@foo")
        assert exc_info.value.message == "unrecognized input '@foo'"

    def test_long_input_truncated(self):
        with pytest.raises(LexError) as exc_info:
            lex("@" + "x" * 100)
        message = exc_info.value.message
        assert message.endswith("...'")
        assert len(message) < 60

    def test_message_stops_at_newline(self):
        with pytest.raises(LexError) as exc_info:
            lex("@a\nb")
        assert exc_info.value.message == "unrecognized input '@a...'"


class TestErrorFormatting:
    def test_format_contains_line(self):
        with pytest.raises(LexError) as exc_info:
            lex("int x = @;")
        assert "int x = @;" in exc_info.value.format()

    def test_format_contains_carets(self):
        with pytest.raises(LexError) as exc_info:
            lex("@")
        assert "^" in exc_info.value.format()

    def test_format_contains_error_prefix(self):
        with pytest.raises(LexError) as exc_info:
            lex("@")
        assert exc_info.value.format().startswith("error:")

    def test_format_contains_position(self):
        with pytest.raises(LexError) as exc_info:
            lex("a\nb\n  @")
        assert "3:3" in exc_info.value.format()

    def test_format_with_custom_filename(self):
        with pytest.raises(LexError) as exc_info:
            lex("@")
        assert "main.c:1:1" in exc_info.value.format("main.c")

    def test_caret_under_offending_char(self):
        with pytest.raises(LexError) as exc_info:
            lex("ab @")
        last = exc_info.value.format().splitlines()[-1]
        assert last.index("^") - last.index("|") == 5


class TestConverterError:
    def test_message(self):
        err = ConverterError("12x", "int", 5)
        assert "internal error" in str(err)
        assert "'12x'" in str(err)
        assert err.token_name == "int"
        assert err.offset == 5
        assert "offset 5" in str(err)

    def test_long_text_truncated(self):
        err = ConverterError("1" * 10000, "int")
        assert "..." in str(err)
        assert len(str(err)) < 100
