"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from skiff.ast import Expr, ExprStmt, Program, Stmt
from skiff.parser import parse
from skiff.scanner import tokenize
from skiff.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.kind != TokenKind.EOF]

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns a Program."""

    def _parse(source: str, filename: str = "test.skf") -> Program:
        return parse(source, filename)

    return _parse


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_literals(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token literals match the expected list."""
    actual = [t.literal for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def only_stmt(program: Program) -> Stmt:
    """Return the single statement of a program, failing if there isn't exactly one."""
    assert len(program.statements) == 1, f"Expected 1 statement, got {program.statements}"
    return program.statements[0]


def only_expr(program: Program) -> Expr:
    """Return the expression of a program holding a single expression statement."""
    stmt = only_stmt(program)
    assert isinstance(stmt, ExprStmt), f"Expected ExprStmt, got {type(stmt).__name__}"
    return stmt.expr
