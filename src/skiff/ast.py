"""AST node types for parsed Skiff programs."""

from __future__ import annotations

from dataclasses import dataclass

# ----------------------------------------------------------------------
# Expressions
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class IntLiteral:
    """Signed 32-bit integer literal."""

    value: int


@dataclass(frozen=True, slots=True)
class StringLiteral:
    value: str


@dataclass(frozen=True, slots=True)
class BoolLiteral:
    value: bool


@dataclass(frozen=True, slots=True)
class Identifier:
    """Reference to a name."""

    name: str


@dataclass(frozen=True, slots=True)
class BinaryOp:
    """Binary operation; operator is the source spelling, e.g. '+' or '<='."""

    left: Expr
    right: Expr
    operator: str


@dataclass(frozen=True, slots=True)
class FunctionLiteral:
    """Named function: func name(params) { body }."""

    name: str
    params: tuple[str, ...]
    body: tuple[Stmt, ...]


# ----------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ExprStmt:
    expr: Expr


@dataclass(frozen=True, slots=True)
class VarDecl:
    """Variable declaration: var name = expr."""

    name: str
    expr: Expr


@dataclass(frozen=True, slots=True)
class Program:
    """Root node."""

    statements: tuple[Stmt, ...]


Expr = IntLiteral | StringLiteral | BoolLiteral | Identifier | BinaryOp | FunctionLiteral
Stmt = ExprStmt | VarDecl
