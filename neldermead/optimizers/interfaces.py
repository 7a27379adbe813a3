"""Objective protocol consumed by the optimizers (no implementations).

:class:`~neldermead.expressions.ExpressionTree` satisfies it; any object with
the same two members can be minimized as well.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from neldermead.core.point import Point


@runtime_checkable
class Objective(Protocol):
    """Scalar function of a point, evaluated many times per iteration.

    ``evaluate`` must be free of side effects. ``required_variable_count`` is
    the dimension of the points it accepts, or ``0`` when any point will do.
    """

    @property
    def required_variable_count(self) -> int:
        """Dimension expected by :meth:`evaluate`."""

    def evaluate(self, point: Point) -> float:
        """Return the objective value at ``point``."""


__all__ = ["Objective"]
