"""Error types with formatted source context."""

from __future__ import annotations

from skiff.tokens import Position, Span, TokenKind


def _render(
    message: str, source: str, filename: str, start: Position, underline_len: int | None
) -> str:
    lines = source.splitlines(keepends=True)
    line_idx = start.line - 1
    col = start.column

    # Build the source line (strip trailing newline for display)
    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\n").rstrip("\r")
    else:
        source_line = ""

    if underline_len is None:
        underline_len = max(1, len(source_line) - col + 1)

    pad = " " * (col - 1)
    carets = "^" * underline_len

    line_num = str(start.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{start.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


def _describe(kind: TokenKind | None) -> str:
    if kind is None:
        return "expression"
    return kind.name.lower().replace("_", " ")


class LexError(Exception):
    """Raised on the first scanning error, with position and source context."""

    def __init__(
        self, message: str, position: Position, source: str, filename: str = "input.skf"
    ) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.filename = filename
        super().__init__(self.format(filename))

    def format(self, filename: str | None = None) -> str:
        return _render(self.message, self.source, filename or self.filename, self.position, 1)


class UnterminatedStringError(LexError):
    """A string literal ran to end of input without its closing quote."""

    def __init__(self, position: Position, source: str, filename: str = "input.skf") -> None:
        super().__init__("unterminated string literal", position, source, filename)


class UnrecognizedCharacterError(LexError):
    """A character that starts no token."""

    def __init__(
        self, char: str, position: Position, source: str, filename: str = "input.skf"
    ) -> None:
        self.char = char
        super().__init__(f"unrecognized character {char!r}", position, source, filename)


class ParseError(Exception):
    """Raised on the first parse error, with span and source context."""

    def __init__(
        self, message: str, span: Span, source: str, filename: str = "input.skf"
    ) -> None:
        self.message = message
        self.span = span
        self.source = source
        self.filename = filename
        super().__init__(self.format(filename))

    def format(self, filename: str | None = None) -> str:
        # Underline the full span when on one line, otherwise to end of line
        if self.span.end.line == self.span.start.line:
            underline_len: int | None = max(1, self.span.end.column - self.span.start.column)
        else:
            underline_len = None
        return _render(
            self.message, self.source, filename or self.filename, self.span.start, underline_len
        )


class UnexpectedTokenError(ParseError):
    """The current token matches no production (or not the one required)."""

    def __init__(
        self,
        expected: TokenKind | None,
        found: TokenKind,
        literal: str,
        span: Span,
        source: str,
        filename: str = "input.skf",
    ) -> None:
        self.expected = expected
        self.found = found
        self.literal = literal
        super().__init__(
            f"expected {_describe(expected)}, found {_describe(found)} {literal!r}",
            span,
            source,
            filename,
        )


class UnexpectedEndOfInputError(ParseError):
    """Input ended while a production still needed tokens."""

    def __init__(
        self,
        expected: TokenKind | None,
        span: Span,
        source: str,
        filename: str = "input.skf",
    ) -> None:
        self.expected = expected
        super().__init__(
            f"unexpected end of input, expected {_describe(expected)}", span, source, filename
        )


class NumericOverflowError(ParseError):
    """An integer literal outside the signed 32-bit range."""

    def __init__(self, literal: str, span: Span, source: str, filename: str = "input.skf") -> None:
        self.literal = literal
        super().__init__(
            f"integer literal {literal} does not fit in 32 bits", span, source, filename
        )


class NestingTooDeepError(ParseError):
    """Parentheses or function bodies nested past the parser's limit."""

    def __init__(
        self, limit: int, span: Span, source: str, filename: str = "input.skf"
    ) -> None:
        self.limit = limit
        super().__init__(f"nesting deeper than {limit} levels", span, source, filename)
