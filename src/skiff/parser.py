"""Skiff parser — recursive descent from a live token stream to an AST."""

from __future__ import annotations

from collections.abc import Callable

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
from skiff.errors import (
    NestingTooDeepError,
    NumericOverflowError,
    ParseError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from skiff.scanner import Scanner
from skiff.tokens import Token, TokenKind

INT32_MAX = 2**31 - 1
_INT32_DIGITS = len(str(INT32_MAX))

# Parentheses and blocks; one paren level is about ten frames of the precedence chain.
MAX_NESTING = 48


class Parser:
    """Recursive descent parser pulling tokens from a Scanner.

    Keeps exactly one token of look-ahead in ``_current`` and never
    backtracks. Each instance produces one Program.
    """

    def __init__(self, scanner: Scanner) -> None:
        self._scanner = scanner
        self._current = scanner.next_token()
        self._consumed = False
        self._depth = 0

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _at(self, *kinds: TokenKind) -> bool:
        return self._current.kind in kinds

    def _read(self) -> Token:
        """Return the current token and refill look-ahead from the scanner."""
        prev = self._current
        if prev.kind != TokenKind.EOF:
            self._current = self._scanner.next_token()
        return prev

    def _expect(self, kind: TokenKind) -> Token:
        if not self._at(kind):
            raise self._error(kind)
        return self._read()

    def _skip_separators(self) -> None:
        while self._at(*_SEPARATORS):
            self._read()

    # ------------------------------------------------------------------
    # Program and statements
    # ------------------------------------------------------------------

    def parse(self) -> Program:
        if self._consumed:
            raise RuntimeError("Parser.parse() may only be called once per instance")
        self._consumed = True

        statements: list[Stmt] = []
        self._skip_separators()
        while not self._at(TokenKind.EOF):
            statements.append(self._parse_statement())
            self._skip_separators()
        return Program(tuple(statements))

    def _parse_statement(self) -> Stmt:
        if self._at(TokenKind.KW_VAR):
            return self._parse_var_decl()
        return ExprStmt(self._parse_expression())

    def _parse_var_decl(self) -> VarDecl:
        self._read()  # consume 'var'
        name = self._expect(TokenKind.IDENTIFIER).literal
        self._expect(TokenKind.ASSIGN)
        expr = self._parse_expression()
        if self._at(*_SEPARATORS):
            self._read()
        return VarDecl(name, expr)

    def _parse_block(self) -> tuple[Stmt, ...]:
        self._enter()
        self._expect(TokenKind.LBRACE)
        statements: list[Stmt] = []
        self._skip_separators()
        while not self._at(TokenKind.RBRACE):
            if self._at(TokenKind.EOF):
                raise self._error(TokenKind.RBRACE)
            statements.append(self._parse_statement())
            self._skip_separators()
        self._read()  # consume '}'
        self._depth -= 1
        return tuple(statements)

    # ------------------------------------------------------------------
    # Expressions, lowest to highest binding
    # ------------------------------------------------------------------

    def _parse_expression(self) -> Expr:
        if self._at(TokenKind.KW_FUNC):
            return self._parse_function_literal()
        return self._parse_equality()

    def _parse_binary(self, operators: frozenset[TokenKind], operand: Callable[[], Expr]) -> Expr:
        """Parse a left-associative chain: operand (op operand)*."""
        left = operand()
        while self._current.kind in operators:
            op = self._read().literal
            left = BinaryOp(left, operand(), op)
        return left

    def _parse_equality(self) -> Expr:
        return self._parse_binary(_EQUALITY_OPS, self._parse_comparison)

    def _parse_comparison(self) -> Expr:
        return self._parse_binary(_COMPARISON_OPS, self._parse_term)

    def _parse_term(self) -> Expr:
        return self._parse_binary(_TERM_OPS, self._parse_factor)

    def _parse_factor(self) -> Expr:
        return self._parse_binary(_FACTOR_OPS, self._parse_primary)

    def _parse_primary(self) -> Expr:
        tok = self._current

        if tok.kind == TokenKind.NUMBER:
            self._read()
            digits = tok.literal.lstrip("0")
            # Length check first: int() refuses very long digit strings
            if len(digits) > _INT32_DIGITS or int(digits or "0") > INT32_MAX:
                raise NumericOverflowError(
                    tok.literal, tok.span, self._scanner.source, self._scanner.filename
                )
            return IntLiteral(int(digits or "0"))

        if tok.kind == TokenKind.STRING:
            self._read()
            return StringLiteral(tok.literal)

        if tok.kind in (TokenKind.KW_TRUE, TokenKind.KW_FALSE):
            self._read()
            return BoolLiteral(tok.kind == TokenKind.KW_TRUE)

        if tok.kind == TokenKind.IDENTIFIER:
            self._read()
            return Identifier(tok.literal)

        if tok.kind == TokenKind.LPAREN:
            self._enter()
            self._read()
            expr = self._parse_expression()
            self._expect(TokenKind.RPAREN)
            self._depth -= 1
            return expr

        raise self._error(None)

    def _parse_function_literal(self) -> FunctionLiteral:
        self._read()  # consume 'func'
        name = self._expect(TokenKind.IDENTIFIER).literal

        self._expect(TokenKind.LPAREN)
        params: list[str] = []
        if not self._at(TokenKind.RPAREN):
            params.append(self._expect(TokenKind.IDENTIFIER).literal)
            while self._at(TokenKind.COMMA):
                self._read()
                params.append(self._expect(TokenKind.IDENTIFIER).literal)
        self._expect(TokenKind.RPAREN)

        body = self._parse_block()
        return FunctionLiteral(name, tuple(params), body)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _enter(self) -> None:
        """Step one nesting level deeper, failing past MAX_NESTING."""
        self._depth += 1
        if self._depth > MAX_NESTING:
            raise NestingTooDeepError(
                MAX_NESTING, self._current.span, self._scanner.source, self._scanner.filename
            )

    def _error(self, expected: TokenKind | None) -> ParseError:
        tok = self._current
        source = self._scanner.source
        filename = self._scanner.filename
        if tok.kind == TokenKind.EOF:
            return UnexpectedEndOfInputError(expected, tok.span, source, filename)
        return UnexpectedTokenError(expected, tok.kind, tok.literal, tok.span, source, filename)


# Module-level constants
_SEPARATORS: tuple[TokenKind, ...] = (TokenKind.NEWLINE, TokenKind.SEMICOLON)
_EQUALITY_OPS: frozenset[TokenKind] = frozenset({TokenKind.EQUAL, TokenKind.NOT_EQUAL})
_COMPARISON_OPS: frozenset[TokenKind] = frozenset(
    {TokenKind.LESS, TokenKind.LESS_EQUAL, TokenKind.GREATER, TokenKind.GREATER_EQUAL}
)
_TERM_OPS: frozenset[TokenKind] = frozenset({TokenKind.PLUS, TokenKind.MINUS})
_FACTOR_OPS: frozenset[TokenKind] = frozenset({TokenKind.STAR, TokenKind.SLASH})


def parse(source: str, filename: str = "input.skf") -> Program:
    """Convenience function: parse source text and return a Program AST."""
    return Parser(Scanner(source, filename)).parse()
