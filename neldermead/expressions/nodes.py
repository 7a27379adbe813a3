"""Immutable expression-tree nodes.

Every node evaluates against a flat array of variable values where ``x1`` is
element ``0``. Arithmetic follows IEEE-754 double precision through numpy; the
only checked condition is a divisor that is exactly zero. Callers are expected
to run evaluation inside ``numpy.errstate(all="ignore")``.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Final, Union

import numpy as np

from neldermead.errors import EvaluationZeroDivisionError

Values = np.ndarray


@dataclass(frozen=True, slots=True)
class NumberNode:
    value: float

    def evaluate(self, values: Values) -> float:
        return self.value

    def to_dict(self) -> dict[str, object]:
        return {"type": "number", "value": self.value}


@dataclass(frozen=True, slots=True)
class VariableNode:
    """Reference to ``x<index>``; ``index`` is 1-based."""

    index: int

    def evaluate(self, values: Values) -> float:
        return values[self.index - 1]

    def to_dict(self) -> dict[str, object]:
        return {"type": "variable", "name": f"x{self.index}"}


@dataclass(frozen=True, slots=True)
class NegateNode:
    operand: Node

    def evaluate(self, values: Values) -> float:
        return -self.operand.evaluate(values)

    def to_dict(self) -> dict[str, object]:
        return {"type": "unary", "operator": "-", "operand": self.operand.to_dict()}


def _divide(left: float, right: float) -> float:
    if right == 0.0:
        raise EvaluationZeroDivisionError()
    return np.divide(left, right)


BINARY_OPERATORS: Final[Mapping[str, Callable[[float, float], float]]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    # np.power keeps IEEE results where the builtin raises or goes complex.
    "^": np.power,
}


@dataclass(frozen=True, slots=True)
class BinaryNode:
    symbol: str
    left: Node
    right: Node

    def evaluate(self, values: Values) -> float:
        apply = BINARY_OPERATORS[self.symbol]
        return apply(self.left.evaluate(values), self.right.evaluate(values))

    def to_dict(self) -> dict[str, object]:
        return {
            "type": "binary",
            "operator": self.symbol,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }


FUNCTION_TABLE: Final[Mapping[str, Callable[[float], float]]] = {
    "sin": np.sin,
    "cos": np.cos,
    "abs": np.abs,
    "sqrt": np.sqrt,
}


@dataclass(frozen=True, slots=True)
class FunctionNode:
    name: str
    argument: Node

    def evaluate(self, values: Values) -> float:
        return FUNCTION_TABLE[self.name](self.argument.evaluate(values))

    def to_dict(self) -> dict[str, object]:
        return {"type": "function", "name": self.name, "argument": self.argument.to_dict()}


Node = Union[NumberNode, VariableNode, NegateNode, BinaryNode, FunctionNode]


__all__ = [
    "BINARY_OPERATORS",
    "FUNCTION_TABLE",
    "BinaryNode",
    "FunctionNode",
    "NegateNode",
    "Node",
    "NumberNode",
    "VariableNode",
]
