"""Error types raised by the expression engine and the optimizer."""

from __future__ import annotations

INVALID_EXPRESSION_MESSAGE = "Invalid expression string"
VARIABLE_COUNT_MESSAGE = "The number of variables is incorrect"
DIVISION_BY_ZERO_MESSAGE = "division by zero."


class NelderMeadError(Exception):
    """Base class for every error raised by ``neldermead``."""


class ExpressionSyntaxError(NelderMeadError, ValueError):
    """The formula text could not be parsed into a tree."""

    def __init__(self, message: str = INVALID_EXPRESSION_MESSAGE) -> None:
        super().__init__(message)


class VariableCountError(NelderMeadError, ValueError):
    """The point dimension does not match the variables a tree references."""

    def __init__(self, message: str = VARIABLE_COUNT_MESSAGE) -> None:
        super().__init__(message)


class EvaluationZeroDivisionError(NelderMeadError, ZeroDivisionError):
    """A divisor evaluated to exactly ``0.0``."""

    def __init__(self, message: str = DIVISION_BY_ZERO_MESSAGE) -> None:
        super().__init__(message)


class DimensionError(NelderMeadError, IndexError):
    """Out-of-range coordinate/vertex index or mismatched dimensions."""


class MissingPointError(NelderMeadError, TypeError):
    """Evaluation was requested without a point for a tree that needs one."""


__all__ = [
    "DIVISION_BY_ZERO_MESSAGE",
    "INVALID_EXPRESSION_MESSAGE",
    "VARIABLE_COUNT_MESSAGE",
    "DimensionError",
    "EvaluationZeroDivisionError",
    "ExpressionSyntaxError",
    "MissingPointError",
    "NelderMeadError",
    "VariableCountError",
]
