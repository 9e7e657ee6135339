"""clex: a table-driven, longest-match lexer for a C subset."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clex.tokens import Token

__version__ = "0.1.0"


def lex(source: str, *, skip_comments: bool = False) -> list[Token]:
    """Tokenize C source text into an ordered list of tokens."""
    from clex.lexer import lex as _lex

    return _lex(source, skip_comments=skip_comments)
