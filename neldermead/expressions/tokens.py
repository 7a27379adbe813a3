"""Tokenizer for formula strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from neldermead.errors import ExpressionSyntaxError

FUNCTIONS: Final = frozenset({"sin", "cos", "abs", "sqrt"})
OPERATORS: Final = frozenset("+-*/^")

_NUMBER_CHARS: Final = frozenset("0123456789.")
_NUMBER_RE: Final = re.compile(r"\d+(?:\.\d+)?|\.\d+")
_VARIABLE_RE: Final = re.compile(r"x([1-9]\d*)")
_IDENTIFIER_RE: Final = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class TokenKind(Enum):
    NUMBER = "NUMBER"
    VARIABLE = "VARIABLE"
    FUNCTION = "FUNCTION"
    OPERATOR = "OPERATOR"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical unit and its offset in the source text.

    ``value`` holds the float for numbers, the 1-based index for variables and
    the text for everything else.
    """

    kind: TokenKind
    value: float | int | str
    position: int


def tokenize(expression: str) -> list[Token]:
    """Split ``expression`` into tokens, rejecting anything outside the grammar."""
    tokens: list[Token] = []
    pos = 0
    length = len(expression)
    while pos < length:
        char = expression[pos]
        if char.isspace():
            pos += 1
            continue

        if char in _NUMBER_CHARS:
            end = pos
            while end < length and expression[end] in _NUMBER_CHARS:
                end += 1
            literal = expression[pos:end]
            if _NUMBER_RE.fullmatch(literal) is None:
                raise ExpressionSyntaxError()
            tokens.append(Token(TokenKind.NUMBER, float(literal), pos))
            pos = end
            continue

        if (char.isascii() and char.isalpha()) or char == "_":
            match = _IDENTIFIER_RE.match(expression, pos)
            assert match is not None
            name = match.group()
            if name in FUNCTIONS:
                tokens.append(Token(TokenKind.FUNCTION, name, pos))
            else:
                variable = _VARIABLE_RE.fullmatch(name)
                if variable is None:
                    raise ExpressionSyntaxError()
                tokens.append(Token(TokenKind.VARIABLE, int(variable.group(1)), pos))
            pos = match.end()
            continue

        if char in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, char, pos))
        elif char == "(":
            tokens.append(Token(TokenKind.LPAREN, char, pos))
        elif char == ")":
            tokens.append(Token(TokenKind.RPAREN, char, pos))
        else:
            raise ExpressionSyntaxError()
        pos += 1

    return tokens


__all__ = ["FUNCTIONS", "OPERATORS", "Token", "TokenKind", "tokenize"]
