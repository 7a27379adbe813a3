"""Recursive-descent parser producing expression-tree nodes.

Grammar, loosest binding first::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := "-" unary | power
    power      := primary ("^" unary)?
    primary    := NUMBER | VARIABLE | FUNCTION "(" expression ")" | "(" expression ")"

``power`` recurses through ``unary`` on its right-hand side, which makes
``^`` right-associative and lets an exponent carry its own sign (``2^-1``),
while ``-x1^2`` still parses as ``-(x1^2)``.
"""

from __future__ import annotations

from neldermead.errors import ExpressionSyntaxError
from neldermead.expressions.nodes import (
    BinaryNode,
    FunctionNode,
    NegateNode,
    Node,
    NumberNode,
    VariableNode,
)
from neldermead.expressions.tokens import Token, TokenKind, tokenize


class Parser:
    """Single-use parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self.max_variable_index = 0

    def parse(self) -> Node:
        if not self._tokens:
            raise ExpressionSyntaxError()
        node = self._expression()
        if self._pos != len(self._tokens):
            raise ExpressionSyntaxError()
        return node

    def _peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _peek_operator(self, symbols: str) -> str | None:
        token = self._peek()
        if token is not None and token.kind is TokenKind.OPERATOR and token.value in symbols:
            return str(token.value)
        return None

    def _advance(self) -> Token:
        token = self._peek()
        if token is None:
            raise ExpressionSyntaxError()
        self._pos += 1
        return token

    def _expect(self, kind: TokenKind) -> Token:
        token = self._advance()
        if token.kind is not kind:
            raise ExpressionSyntaxError()
        return token

    def _expression(self) -> Node:
        node = self._term()
        while (symbol := self._peek_operator("+-")) is not None:
            self._pos += 1
            node = BinaryNode(symbol, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._unary()
        while (symbol := self._peek_operator("*/")) is not None:
            self._pos += 1
            node = BinaryNode(symbol, node, self._unary())
        return node

    def _unary(self) -> Node:
        if self._peek_operator("-") is not None:
            self._pos += 1
            return NegateNode(self._unary())
        return self._power()

    def _power(self) -> Node:
        base = self._primary()
        if self._peek_operator("^") is not None:
            self._pos += 1
            return BinaryNode("^", base, self._unary())
        return base

    def _primary(self) -> Node:
        token = self._advance()
        if token.kind is TokenKind.NUMBER:
            return NumberNode(float(token.value))
        if token.kind is TokenKind.VARIABLE:
            index = int(token.value)
            self.max_variable_index = max(self.max_variable_index, index)
            return VariableNode(index)
        if token.kind is TokenKind.FUNCTION:
            self._expect(TokenKind.LPAREN)
            argument = self._expression()
            self._expect(TokenKind.RPAREN)
            return FunctionNode(str(token.value), argument)
        if token.kind is TokenKind.LPAREN:
            inner = self._expression()
            self._expect(TokenKind.RPAREN)
            return inner
        raise ExpressionSyntaxError()


def parse(expression: str) -> tuple[Node, int]:
    """Parse ``expression`` and return ``(root, highest variable index)``."""
    parser = Parser(tokenize(expression))
    root = parser.parse()
    return root, parser.max_variable_index


__all__ = ["Parser", "parse"]
