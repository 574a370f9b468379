"""Token kinds, token data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    # Arithmetic
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    COMMA = auto()  # ,

    # One- or two-character operators
    ASSIGN = auto()  # =
    EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=
    LESS = auto()  # <
    GREATER = auto()  # >
    LESS_EQUAL = auto()  # <=
    GREATER_EQUAL = auto()  # >=
    BANG = auto()  # !

    # Literals
    NUMBER = auto()  # digit+
    STRING = auto()  # "..." (literal is the body)
    IDENTIFIER = auto()  # (letter | _) (letter | digit | _)*

    # Keywords
    KW_FUNC = auto()
    KW_VAR = auto()
    KW_IF = auto()
    KW_ELSE = auto()
    KW_TRUE = auto()
    KW_FALSE = auto()

    # Separators
    NEWLINE = auto()  # \n
    SEMICOLON = auto()  # ;

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanner token: its kind, its lexeme, and where it came from."""

    kind: TokenKind
    literal: str
    span: Span


KEYWORDS: dict[str, TokenKind] = {
    "func": TokenKind.KW_FUNC,
    "var": TokenKind.KW_VAR,
    "if": TokenKind.KW_IF,
    "else": TokenKind.KW_ELSE,
    "true": TokenKind.KW_TRUE,
    "false": TokenKind.KW_FALSE,
}

SINGLE_CHAR_KINDS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "\n": TokenKind.NEWLINE,
}

# first char -> (kind alone, kind when followed by '=')
PAIRED_KINDS: dict[str, tuple[TokenKind, TokenKind]] = {
    "=": (TokenKind.ASSIGN, TokenKind.EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
    "!": (TokenKind.BANG, TokenKind.NOT_EQUAL),
}

# Skipped between tokens; newline is significant and not listed here.
WHITESPACE = frozenset(" \t\r")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_ident_start(ch: str) -> bool:
    """Return True if ch may begin an identifier (ASCII letter or underscore)."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_ident_start(ch) or is_digit(ch)
