"""clex lexer: converts C source text into a flat token stream.

Tokens are recognized by a fixed table of (pattern, group, converter)
definitions. At each position every definition is tried and the longest
match wins.

Several patterns look one character past the token (a guard) so that e.g.
``123abc`` is not split into ``123`` and ``abc``. The guard is examined but
never consumed: the token text is the pattern's capture group, and the
cursor advances by the length of that group only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from clex.converters import (
    Converter,
    convert_char,
    convert_double,
    convert_identifier,
    convert_int,
    convert_long,
    convert_string,
    convert_uint,
    convert_ulong,
    literal,
)
from clex.errors import ConverterError, LexError
from clex.tokens import Token, TokenType


@dataclass(frozen=True, slots=True)
class TokenDef:
    """How to recognize one token shape and convert it to a Token."""

    name: str
    pattern: re.Pattern[str]
    # Capture group holding just the token text, excluding any guard
    group: int
    converter: Converter


@dataclass(frozen=True, slots=True)
class MatchCandidate:
    """Token text matched at the cursor and the definition that matched it."""

    text: str
    definition: TokenDef


def token_def(name: str, regex: str, converter: Converter, group: int = 0) -> TokenDef:
    """Compile a token definition. ASCII mode keeps \\w, \\d, \\s and \\b to ASCII."""
    return TokenDef(name, re.compile(regex, re.ASCII), group, converter)


# The literal must not run into a word character or '.'; end of input is fine.
_GUARD = r"(?:[^\w.]|\Z)"

TOKEN_DEFS: tuple[TokenDef, ...] = (
    # identifiers, including keywords
    token_def("identifier", r"[A-Za-z_][A-Za-z0-9_]*\b", convert_identifier),
    # constants
    token_def("int", r"([0-9]+)" + _GUARD, convert_int, group=1),
    token_def("long", r"([0-9]+[lL])" + _GUARD, convert_long, group=1),
    token_def("uint", r"([0-9]+[uU])" + _GUARD, convert_uint, group=1),
    token_def("ulong", r"([0-9]+(?:[lL][uU]|[uU][lL]))" + _GUARD, convert_ulong, group=1),
    token_def(
        "double",
        r"((?:[0-9]*\.[0-9]+|[0-9]+\.?)[Ee][+-]?[0-9]+|[0-9]*\.[0-9]+|[0-9]+\.)" + _GUARD,
        convert_double,
        group=1,
    ),
    token_def("char", r"""'(?:[^'\\\n]|\\['"?\\abfnrtv])'""", convert_char),
    token_def("string", r'''"(?:[^"\\\n]|\\['"\\?abfnrtv])*"''', convert_string),
    # punctuation
    token_def("(", r"\(", literal(TokenType.OPEN_PAREN)),
    token_def(")", r"\)", literal(TokenType.CLOSE_PAREN)),
    token_def("{", r"\{", literal(TokenType.OPEN_BRACE)),
    token_def("}", r"\}", literal(TokenType.CLOSE_BRACE)),
    token_def(";", r";", literal(TokenType.SEMICOLON)),
    token_def(",", r",", literal(TokenType.COMMA)),
    token_def(":", r":", literal(TokenType.COLON)),
    token_def("?", r"\?", literal(TokenType.QUESTION_MARK)),
    token_def("[", r"\[", literal(TokenType.OPEN_BRACKET)),
    token_def("]", r"\]", literal(TokenType.CLOSE_BRACKET)),
    # operators
    token_def("-", r"-", literal(TokenType.HYPHEN)),
    token_def("--", r"--", literal(TokenType.DOUBLE_HYPHEN)),
    token_def("~", r"~", literal(TokenType.TILDE)),
    token_def("+", r"\+", literal(TokenType.PLUS)),
    token_def("*", r"\*", literal(TokenType.STAR)),
    token_def("/", r"/", literal(TokenType.SLASH)),
    token_def("%", r"%", literal(TokenType.PERCENT)),
    token_def("!", r"!", literal(TokenType.BANG)),
    token_def("&&", r"&&", literal(TokenType.LOGICAL_AND)),
    token_def("||", r"\|\|", literal(TokenType.LOGICAL_OR)),
    token_def("==", r"==", literal(TokenType.DOUBLE_EQUAL)),
    token_def("!=", r"!=", literal(TokenType.NOT_EQUAL)),
    token_def("<", r"<", literal(TokenType.LESS_THAN)),
    token_def(">", r">", literal(TokenType.GREATER_THAN)),
    token_def("<=", r"<=", literal(TokenType.LESS_OR_EQUAL)),
    token_def(">=", r">=", literal(TokenType.GREATER_OR_EQUAL)),
    token_def("=", r"=", literal(TokenType.EQUAL_SIGN)),
    token_def("&", r"&", literal(TokenType.AMPERSAND)),
    token_def("->", r"->", literal(TokenType.ARROW)),
    # '.' must not be followed by a digit, otherwise it starts a double
    token_def(".", r"(\.)(?:\D|\Z)", literal(TokenType.DOT), group=1),
)

_WHITESPACE = re.compile(r"\s+", re.ASCII)
_LINE_COMMENT = re.compile(r"//[^\n]*")
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def find_candidates(
    text: str, pos: int = 0, defs: tuple[TokenDef, ...] = TOKEN_DEFS
) -> list[MatchCandidate]:
    """Return every definition matching at text[pos:], in table order."""
    candidates = []
    for d in defs:
        m = d.pattern.match(text, pos)
        if m is not None:
            candidates.append(MatchCandidate(m.group(d.group), d))
    return candidates


def select_longest(candidates: list[MatchCandidate]) -> MatchCandidate:
    """Pick the candidate with the longest text.

    Ties go to the candidate listed first, i.e. the earlier table entry.
    """
    best = candidates[0]
    for cand in candidates[1:]:
        if len(cand.text) > len(best.text):
            best = cand
    return best


class Lexer:
    """Tokenize C source text into a list of Token objects."""

    def __init__(
        self,
        source: str,
        *,
        skip_comments: bool = False,
        defs: tuple[TokenDef, ...] = TOKEN_DEFS,
    ) -> None:
        self._source = source
        self._skip_comments = skip_comments
        self._defs = defs
        self._pos = 0

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return a new token list.

        The lexer keeps no reference to the returned tokens; calling this
        again lexes the source from the start.
        """
        self._pos = 0
        tokens: list[Token] = []
        while True:
            self._skip_ignored()
            if self._pos >= len(self._source):
                return tokens
            tokens.append(self._lex_token())

    # ------------------------------------------------------------------
    # Whitespace and comments
    # ------------------------------------------------------------------

    def _skip_ignored(self) -> None:
        while self._pos < len(self._source):
            m = _WHITESPACE.match(self._source, self._pos)
            if m is None and self._skip_comments:
                m = self._match_comment()
            if m is None:
                return
            self._pos = m.end()

    def _match_comment(self) -> re.Match[str] | None:
        m = _LINE_COMMENT.match(self._source, self._pos)
        if m is not None:
            return m
        if self._source.startswith("/*", self._pos):
            m = _BLOCK_COMMENT.match(self._source, self._pos)
            if m is None:
                raise self._error("unterminated block comment")
        return m

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def _lex_token(self) -> Token:
        candidates = find_candidates(self._source, self._pos, self._defs)
        if not candidates:
            raise self._error()

        best = select_longest(candidates)
        try:
            tok = best.definition.converter(best.text)
        except ValueError as exc:
            raise ConverterError(best.text, best.definition.name, self._pos) from exc

        # Advance past the token text only; a guard character stays put
        self._pos += len(best.text)
        return tok

    def _error(self, message: str | None = None) -> LexError:
        return LexError(self._source[self._pos :], self._pos, self._source, message)


def lex(source: str, *, skip_comments: bool = False) -> list[Token]:
    """Convenience wrapper: tokenize source and return the token list."""
    return Lexer(source, skip_comments=skip_comments).tokenize()
