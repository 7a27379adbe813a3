"""Expression-driven Nelder–Mead minimization.

Parse a formula once with :class:`ExpressionTree`, seed a :class:`Simplex`,
and let :class:`NelderMeadMethod` walk it downhill::

    tree = ExpressionTree("(x1-2)^2 + (x2-3)^2")
    method = NelderMeadMethod(tree)
    method.set_simplex(Simplex.from_step(0.5, 2, Point([0.0, 0.0])))
    history = method.minimum_search(200)
    history.final.get_vertex(0)  # close to Point([2.0, 3.0])
"""

from __future__ import annotations

from .core import Point, Simplex, SimplexHistory
from .errors import (
    DimensionError,
    EvaluationZeroDivisionError,
    ExpressionSyntaxError,
    MissingPointError,
    NelderMeadError,
    VariableCountError,
)
from .expressions import ExpressionTree
from .optimizers import NelderMeadMethod
from .utils import NelderMeadConfig

__all__ = [
    "DimensionError",
    "EvaluationZeroDivisionError",
    "ExpressionSyntaxError",
    "ExpressionTree",
    "MissingPointError",
    "NelderMeadConfig",
    "NelderMeadError",
    "NelderMeadMethod",
    "Point",
    "Simplex",
    "SimplexHistory",
    "VariableCountError",
]

__version__ = "0.1.0"
