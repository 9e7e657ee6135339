"""Converters from a matched lexeme to a Token.

Each converter trusts that its input already matched the pattern that
selected it and never re-validates the shape.
"""

from __future__ import annotations

from collections.abc import Callable

from clex.tokens import KEYWORDS, Token, TokenType, is_keyword

Converter = Callable[[str], Token]

# Stays under CPython's int/str conversion digit limit (4300 by default)
_DECIMAL_CHUNK = 4000


def chop_suffix(s: str, n: int = 1) -> str:
    """Drop the last n characters of s."""
    return s[: len(s) - n]


def _parse_decimal(digits: str) -> int:
    """Parse a run of decimal digits of any length."""
    if len(digits) <= _DECIMAL_CHUNK:
        return int(digits, 10)
    value = 0
    for i in range(0, len(digits), _DECIMAL_CHUNK):
        chunk = digits[i : i + _DECIMAL_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk, 10)
    return value


def literal(tt: TokenType) -> Converter:
    """Return a converter that ignores its input and yields a fixed token."""
    tok = Token(tt)

    def _convert(_s: str) -> Token:
        return tok

    return _convert


def convert_identifier(s: str) -> Token:
    if is_keyword(s):
        return Token(KEYWORDS[s])
    return Token(TokenType.IDENTIFIER, s)


def convert_int(s: str) -> Token:
    return Token(TokenType.CONST_INT, _parse_decimal(s))


def convert_long(s: str) -> Token:
    # drop l/L
    return Token(TokenType.CONST_LONG, _parse_decimal(chop_suffix(s)))


def convert_uint(s: str) -> Token:
    # drop u/U
    return Token(TokenType.CONST_UINT, _parse_decimal(chop_suffix(s)))


def convert_ulong(s: str) -> Token:
    # drop ul/lu in either case
    return Token(TokenType.CONST_ULONG, _parse_decimal(chop_suffix(s, 2)))


def convert_double(s: str) -> Token:
    return Token(TokenType.CONST_DOUBLE, float(s))


def convert_char(s: str) -> Token:
    """Strip the surrounding single quotes, keeping the raw interior."""
    return Token(TokenType.CONST_CHAR, chop_suffix(s)[1:])


def convert_string(s: str) -> Token:
    """Strip the surrounding double quotes, keeping the raw interior."""
    return Token(TokenType.STRING_LITERAL, chop_suffix(s)[1:])
