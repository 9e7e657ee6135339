"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from clex.lexer import lex as _lex_source
from clex.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source, optionally skipping comments."""

    def _lex(source: str, skip_comments: bool = False) -> list[Token]:
        return _lex_source(source, skip_comments=skip_comments)

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def single(tokens: list[Token]) -> Token:
    """Return the only token in the list."""
    assert len(tokens) == 1, f"Expected one token, got {tokens}"
    return tokens[0]
