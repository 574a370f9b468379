"""Human-readable AST dump."""

from __future__ import annotations

import sys
from typing import TextIO

from skiff.ast import (
    BinaryOp,
    BoolLiteral,
    Expr,
    ExprStmt,
    FunctionLiteral,
    Identifier,
    IntLiteral,
    Program,
    Stmt,
    StringLiteral,
    VarDecl,
)


def dump_ast(program: Program, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable AST tree to *file*."""
    file.write("Program\n")
    for stmt in program.statements:
        _dump_stmt(stmt, 1, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_stmt(stmt: Stmt, depth: int, f: TextIO) -> None:
    if isinstance(stmt, VarDecl):
        f.write(f"{_indent(depth)}VarDecl {stmt.name}\n")
        _dump_expr(stmt.expr, depth + 1, f)
    elif isinstance(stmt, ExprStmt):
        f.write(f"{_indent(depth)}ExprStmt\n")
        _dump_expr(stmt.expr, depth + 1, f)


def _dump_expr(expr: Expr, depth: int, f: TextIO) -> None:
    if isinstance(expr, IntLiteral):
        f.write(f"{_indent(depth)}IntLiteral({expr.value})\n")
    elif isinstance(expr, StringLiteral):
        f.write(f"{_indent(depth)}StringLiteral({expr.value!r})\n")
    elif isinstance(expr, BoolLiteral):
        f.write(f"{_indent(depth)}BoolLiteral({'true' if expr.value else 'false'})\n")
    elif isinstance(expr, Identifier):
        f.write(f"{_indent(depth)}Identifier({expr.name})\n")
    elif isinstance(expr, BinaryOp):
        f.write(f"{_indent(depth)}BinaryOp {expr.operator!r}\n")
        _dump_expr(expr.left, depth + 1, f)
        _dump_expr(expr.right, depth + 1, f)
    elif isinstance(expr, FunctionLiteral):
        f.write(f"{_indent(depth)}FunctionLiteral {expr.name}({', '.join(expr.params)})\n")
        for stmt in expr.body:
            _dump_stmt(stmt, depth + 1, f)
