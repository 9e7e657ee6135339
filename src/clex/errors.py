"""Error types with formatted source context."""

from __future__ import annotations

# Longest prefix of the unrecognized input quoted in the message
_PREFIX_LEN = 16


def _quote_prefix(text: str) -> str:
    prefix = text[:_PREFIX_LEN].split("\n", 1)[0]
    if len(prefix) < len(text):
        prefix += "..."
    return repr(prefix)


class LexError(Exception):
    """Raised when no token definition matches at the cursor.

    Carries the unrecognized remainder of the input and its 0-based offset
    into the source. Line and column are derived from the offset for
    display only; tokens themselves carry no positions.
    """

    def __init__(
        self,
        remaining: str,
        offset: int,
        source: str,
        message: str | None = None,
    ) -> None:
        self.remaining = remaining
        self.offset = offset
        self.source = source
        self.message = message or f"unrecognized input {_quote_prefix(remaining)}"
        super().__init__(self.format())

    @property
    def line(self) -> int:
        """1-based line of the failing offset."""
        return self.source.count("\n", 0, self.offset) + 1

    @property
    def column(self) -> int:
        """1-based column of the failing offset."""
        return self.offset - (self.source.rfind("\n", 0, self.offset) + 1) + 1

    def format(self, filename: str = "<input>") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.line - 1
        col = self.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)
        carets = "^"

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class ConverterError(Exception):
    """A converter rejected text that its own pattern accepted.

    This is a defect in the token table, not a problem with the input.
    """

    def __init__(self, text: str, token_name: str, offset: int = 0) -> None:
        self.text = text
        self.token_name = token_name
        self.offset = offset
        super().__init__(
            f"internal error: cannot convert {_quote_prefix(text)} to {token_name} at offset {offset}"
        )
