"""Skiff scanner — pulls tokens one at a time out of source text."""

from __future__ import annotations

from skiff.errors import UnrecognizedCharacterError, UnterminatedStringError
from skiff.tokens import (
    KEYWORDS,
    PAIRED_KINDS,
    SINGLE_CHAR_KINDS,
    WHITESPACE,
    Position,
    Span,
    Token,
    TokenKind,
    is_digit,
    is_ident_char,
    is_ident_start,
)


class Scanner:
    """Produce Skiff tokens on demand from a source string.

    Once the input is exhausted every further call to next_token() returns
    an EOF token.
    """

    def __init__(self, source: str, filename: str = "input.skf") -> None:
        self._source = source
        self._filename = filename
        self._pos = 0
        self._line = 1
        self._col = 1

    @property
    def source(self) -> str:
        return self._source

    @property
    def filename(self) -> str:
        return self._filename

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()

        start = self._current_pos()
        ch = self._peek()

        if ch == "":
            return self._make(TokenKind.EOF, "", start)

        kind = SINGLE_CHAR_KINDS.get(ch)
        if kind is not None:
            self._advance()
            return self._make(kind, ch, start)

        pair = PAIRED_KINDS.get(ch)
        if pair is not None:
            self._advance()
            if self._peek() == "=":
                self._advance()
                return self._make(pair[1], ch + "=", start)
            return self._make(pair[0], ch, start)

        if ch == '"':
            return self._scan_string(start)

        if is_ident_start(ch):
            return self._scan_identifier(start)

        if is_digit(ch):
            return self._scan_number(start)

        raise UnrecognizedCharacterError(ch, start, self._source, self._filename)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _make(self, kind: TokenKind, literal: str, start: Position) -> Token:
        return Token(kind, literal, Span(start, self._current_pos()))

    def _skip_whitespace(self) -> None:
        while self._peek() in WHITESPACE:
            self._advance()

    # ------------------------------------------------------------------
    # Literals and words
    # ------------------------------------------------------------------

    def _scan_string(self, start: Position) -> Token:
        self._advance()  # consume opening quote
        body_start = self._pos
        while self._peek() != '"':
            if self._peek() == "\0":
                raise UnrecognizedCharacterError(
                    "\0", self._current_pos(), self._source, self._filename
                )
            if self._peek() == "":
                raise UnterminatedStringError(start, self._source, self._filename)
            self._advance()
        body = self._source[body_start : self._pos]
        self._advance()  # consume closing quote
        return self._make(TokenKind.STRING, body, start)

    def _scan_identifier(self, start: Position) -> Token:
        while is_ident_char(self._peek()):
            self._advance()
        text = self._source[start.offset : self._pos]
        return self._make(KEYWORDS.get(text, TokenKind.IDENTIFIER), text, start)

    def _scan_number(self, start: Position) -> Token:
        while is_digit(self._peek()):
            self._advance()
        return self._make(TokenKind.NUMBER, self._source[start.offset : self._pos], start)


def tokenize(source: str, filename: str = "input.skf") -> list[Token]:
    """Convenience function: scan source text and return every token, EOF included."""
    scanner = Scanner(source, filename)
    tokens = [scanner.next_token()]
    while tokens[-1].kind != TokenKind.EOF:
        tokens.append(scanner.next_token())
    return tokens
