"""Token types and the token value record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Keywords
    KW_INT = auto()
    KW_RETURN = auto()
    KW_VOID = auto()
    KW_IF = auto()
    KW_ELSE = auto()
    KW_DO = auto()
    KW_WHILE = auto()
    KW_FOR = auto()
    KW_BREAK = auto()
    KW_CONTINUE = auto()
    KW_STATIC = auto()
    KW_EXTERN = auto()
    KW_LONG = auto()
    KW_UNSIGNED = auto()
    KW_SIGNED = auto()
    KW_DOUBLE = auto()
    KW_CHAR = auto()
    KW_SIZEOF = auto()
    KW_STRUCT = auto()

    # Punctuation
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    OPEN_BRACE = auto()  # {
    CLOSE_BRACE = auto()  # }
    SEMICOLON = auto()  # ;
    COMMA = auto()  # ,
    COLON = auto()  # :
    QUESTION_MARK = auto()  # ?
    OPEN_BRACKET = auto()  # [
    CLOSE_BRACKET = auto()  # ]

    # Operators
    HYPHEN = auto()  # -
    DOUBLE_HYPHEN = auto()  # --
    TILDE = auto()  # ~
    PLUS = auto()  # +
    STAR = auto()  # *
    SLASH = auto()  # /
    PERCENT = auto()  # %
    BANG = auto()  # !
    LOGICAL_AND = auto()  # &&
    LOGICAL_OR = auto()  # ||
    DOUBLE_EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=
    LESS_THAN = auto()  # <
    GREATER_THAN = auto()  # >
    LESS_OR_EQUAL = auto()  # <=
    GREATER_OR_EQUAL = auto()  # >=
    EQUAL_SIGN = auto()  # =
    AMPERSAND = auto()  # &
    ARROW = auto()  # ->
    DOT = auto()  # .

    # Tokens carrying a value
    IDENTIFIER = auto()  # str
    CONST_INT = auto()  # int
    CONST_LONG = auto()  # int, l/L suffix stripped
    CONST_UINT = auto()  # int, u/U suffix stripped
    CONST_ULONG = auto()  # int, ul/lu suffix stripped
    CONST_DOUBLE = auto()  # float
    CONST_CHAR = auto()  # str, quotes stripped, escapes left raw
    STRING_LITERAL = auto()  # str, quotes stripped, escapes left raw


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: its type and decoded value (None for fixed tokens)."""

    type: TokenType
    value: int | float | str | None = None


KEYWORDS: dict[str, TokenType] = {
    "int": TokenType.KW_INT,
    "return": TokenType.KW_RETURN,
    "void": TokenType.KW_VOID,
    "if": TokenType.KW_IF,
    "else": TokenType.KW_ELSE,
    "do": TokenType.KW_DO,
    "while": TokenType.KW_WHILE,
    "for": TokenType.KW_FOR,
    "break": TokenType.KW_BREAK,
    "continue": TokenType.KW_CONTINUE,
    "static": TokenType.KW_STATIC,
    "extern": TokenType.KW_EXTERN,
    "long": TokenType.KW_LONG,
    "unsigned": TokenType.KW_UNSIGNED,
    "signed": TokenType.KW_SIGNED,
    "double": TokenType.KW_DOUBLE,
    "char": TokenType.KW_CHAR,
    "sizeof": TokenType.KW_SIZEOF,
    "struct": TokenType.KW_STRUCT,
}

PAYLOAD_TYPES = frozenset(
    {
        TokenType.IDENTIFIER,
        TokenType.CONST_INT,
        TokenType.CONST_LONG,
        TokenType.CONST_UINT,
        TokenType.CONST_ULONG,
        TokenType.CONST_DOUBLE,
        TokenType.CONST_CHAR,
        TokenType.STRING_LITERAL,
    }
)


def is_keyword(word: str) -> bool:
    """Return True if word is a reserved keyword (exact, case-sensitive)."""
    return word in KEYWORDS
