"""Escape decoding for char and string literal contents."""

from __future__ import annotations

_SIMPLE_ESCAPES = {
    "'": "'",
    '"': '"',
    "?": "?",
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}


def unescape(content: str) -> str:
    """Decode the escape sequences in lexed char/string contents.

    The lexer keeps literal contents raw; a parser that needs the actual
    character values calls this. Only the simple escapes the lexer accepts
    are recognized:

        \\'  \\"  \\?  \\\\  \\a  \\b  \\f  \\n  \\r  \\t  \\v

    Raises ValueError on an unknown escape or a trailing lone backslash.
    """
    if "\\" not in content:
        return content

    out: list[str] = []
    i = 0
    n = len(content)
    while i < n:
        ch = content[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            raise ValueError("unexpected end of input after '\\'")
        esc = content[i + 1]
        if esc not in _SIMPLE_ESCAPES:
            raise ValueError(f"invalid escape sequence '\\{esc}'")
        out.append(_SIMPLE_ESCAPES[esc])
        i += 2
    return "".join(out)


def char_value(content: str) -> int:
    """Return the character code of a lexed char constant's contents."""
    decoded = unescape(content)
    if len(decoded) != 1:
        raise ValueError(f"char constant must hold exactly one character, got {content!r}")
    return ord(decoded)
