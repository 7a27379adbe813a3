"""Parsed formulas that can be evaluated at a point."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

import numpy as np

from neldermead.core.point import Point
from neldermead.errors import ExpressionSyntaxError, MissingPointError, VariableCountError
from neldermead.expressions.nodes import Node
from neldermead.expressions.parser import parse

_LOGGER = logging.getLogger(__name__)

_EMPTY = np.zeros(0)


class ExpressionTree:
    """A formula over ``x1..xN`` compiled once into an immutable tree.

    Construction either yields a well-formed tree or raises
    :class:`~neldermead.errors.ExpressionSyntaxError`; evaluation never reports
    syntax problems. ``required_variable_count`` is the highest variable index
    referenced (``0`` for constant formulas), and a point passed to
    :meth:`evaluate` must have exactly that many coordinates.

    Example::

        tree = ExpressionTree("x1^2 + x2^2")
        tree.evaluate(Point([3.0, 4.0]))  # 25.0
    """

    __slots__ = ("_expression", "_root", "_required_variable_count")

    def __init__(self, expression: str) -> None:
        if not isinstance(expression, str):
            raise ExpressionSyntaxError()
        try:
            root, required = parse(expression)
        except ExpressionSyntaxError:
            _LOGGER.debug("Rejected expression %r", expression)
            raise
        except RecursionError as exc:
            _LOGGER.debug("Expression nested too deeply: %.40r...", expression)
            raise ExpressionSyntaxError() from exc
        self._expression = expression
        self._root = root
        self._required_variable_count = required

    @classmethod
    def create_tree(cls, expression: str) -> ExpressionTree:
        return cls(expression)

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def root(self) -> Node:
        return self._root

    @property
    def required_variable_count(self) -> int:
        return self._required_variable_count

    def evaluate(self, point: Point | Sequence[float] | np.ndarray | None) -> float:
        """Evaluate the formula at ``point``.

        ``point`` may be a :class:`Point` or any flat sequence of numbers. It may
        be ``None`` (or of any length) only when the formula has no variables.
        """
        values = self._resolve_values(point)
        with np.errstate(all="ignore"):
            return float(self._root.evaluate(values))

    def _resolve_values(self, point: Point | Sequence[float] | np.ndarray | None) -> np.ndarray:
        required = self._required_variable_count
        if point is None:
            if required:
                msg = f"Expression references {required} variable(s) but no point was given"
                raise MissingPointError(msg)
            return _EMPTY
        if required == 0:
            return _EMPTY
        if isinstance(point, Point):
            values = point.as_array()
        else:
            values = np.asarray(point, dtype=float).ravel()
        if values.size != required:
            raise VariableCountError()
        return values

    def json_tree(self) -> str:
        """Return the tree as an indented JSON document (diagnostics only)."""
        payload = {
            "expression": self._expression,
            "required_variable_count": self._required_variable_count,
            "root": self._root.to_dict(),
        }
        return json.dumps(payload, indent=2)

    def __call__(self, point: Point | Sequence[float] | np.ndarray | None) -> float:
        return self.evaluate(point)

    def __repr__(self) -> str:
        return f"ExpressionTree({self._expression!r})"
