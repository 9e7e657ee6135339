"""Human-readable and JSON token dumps."""

from __future__ import annotations

import json
import math
import sys
from collections.abc import Iterable
from typing import TextIO

from clex.tokens import PAYLOAD_TYPES, Token

# Stays under CPython's int/str conversion digit limit (4300 by default)
_DECIMAL_CHUNK = 4000


def int_to_decimal(n: int) -> str:
    """Render an int of any size in base 10."""
    if n < 0:
        return "-" + int_to_decimal(-n)
    base = 10**_DECIMAL_CHUNK
    if n < base:
        return str(n)
    parts = []
    while n >= base:
        n, low = divmod(n, base)
        parts.append(str(low).zfill(_DECIMAL_CHUNK))
    parts.append(str(n))
    return "".join(reversed(parts))


def format_token(tok: Token) -> str:
    """Render a token as ``TYPE`` or ``TYPE value``."""
    if tok.type not in PAYLOAD_TYPES:
        return tok.type.name
    if isinstance(tok.value, str):
        return f"{tok.type.name} {tok.value!r}"
    if isinstance(tok.value, int):
        return f"{tok.type.name} {int_to_decimal(tok.value)}"
    return f"{tok.type.name} {tok.value}"


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one token per line to *file*."""
    for tok in tokens:
        file.write(format_token(tok) + "\n")


def _value_json(value: int | float | str | None) -> str:
    # json.dumps hits the digit limit on huge ints; write the digits directly
    if isinstance(value, int):
        return int_to_decimal(value)
    # Out-of-range doubles (1e999) become inf, which JSON cannot encode
    if isinstance(value, float) and not math.isfinite(value):
        return json.dumps(repr(value))
    return json.dumps(value)


def tokens_to_json(tokens: Iterable[Token]) -> str:
    """Serialize tokens as a JSON array of {"type", "value"} objects."""
    items = [
        f'  {{"type": {json.dumps(t.type.name)}, "value": {_value_json(t.value)}}}'
        for t in tokens
    ]
    if not items:
        return "[]\n"
    return "[\n" + ",\n".join(items) + "\n]\n"
