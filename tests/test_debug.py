"""Test the token dump helpers."""

import io
import json

from clex.debug import dump_tokens, format_token, int_to_decimal, tokens_to_json
from clex.lexer import lex
from clex.tokens import Token, TokenType


class TestFormatToken:
    def test_fixed(self):
        assert format_token(Token(TokenType.KW_INT)) == "KW_INT"

    def test_identifier(self):
        assert format_token(Token(TokenType.IDENTIFIER, "main")) == "IDENTIFIER 'main'"

    def test_number(self):
        assert format_token(Token(TokenType.CONST_INT, 42)) == "CONST_INT 42"
        assert format_token(Token(TokenType.CONST_DOUBLE, 1.5)) == "CONST_DOUBLE 1.5"

    def test_huge_int(self):
        tok = Token(TokenType.CONST_INT, 10**5000)
        assert format_token(tok) == "CONST_INT 1" + "0" * 5000


class TestDump:
    def test_one_per_line(self):
        buf = io.StringIO()
        dump_tokens(lex("return 0;"), file=buf)
        assert buf.getvalue() == "KW_RETURN\nCONST_INT 0\nSEMICOLON\n"


class TestJson:
    def test_shape(self):
        data = json.loads(tokens_to_json(lex('x = "s";')))
        assert data == [
            {"type": "IDENTIFIER", "value": "x"},
            {"type": "EQUAL_SIGN", "value": None},
            {"type": "STRING_LITERAL", "value": "s"},
            {"type": "SEMICOLON", "value": None},
        ]

    def test_big_int_preserved(self):
        data = json.loads(tokens_to_json(lex("123456789012345678901234567890")))
        assert data[0]["value"] == 123456789012345678901234567890

    def test_int_beyond_str_conversion_limit(self):
        digits = "7" * 5000
        text = tokens_to_json(lex(digits + "L"))
        assert text == f'[\n  {{"type": "CONST_LONG", "value": {digits}}}\n]\n'

    def test_empty(self):
        assert json.loads(tokens_to_json([])) == []

    def test_infinite_double(self):
        data = json.loads(tokens_to_json(lex("1e999")))
        assert data[0] == {"type": "CONST_DOUBLE", "value": "inf"}


class TestIntToDecimal:
    def test_small(self):
        assert int_to_decimal(0) == "0"
        assert int_to_decimal(1234) == "1234"

    def test_negative(self):
        assert int_to_decimal(-42) == "-42"

    def test_inner_chunks_keep_zeros(self):
        assert int_to_decimal(10**8001 + 5) == "1" + "0" * 8000 + "5"
