"""Scalar arithmetic primitives.

``division`` does not raise on a zero divisor: it saturates to the largest
unsigned 64-bit integer expressed as a double.
"""

from __future__ import annotations

from typing import Final

SATURATED_QUOTIENT: Final[float] = float(2**64 - 1)


def addition(number_one: float, number_two: float) -> float:
    return float(number_one) + float(number_two)


def subtraction(number_one: float, number_two: float) -> float:
    return float(number_one) - float(number_two)


def multiplication(number_one: float, number_two: float) -> float:
    return float(number_one) * float(number_two)


def division(divisible: float, divisor: float) -> float:
    if divisor == 0.0:
        return SATURATED_QUOTIENT
    return float(divisible) / float(divisor)


__all__ = [
    "SATURATED_QUOTIENT",
    "addition",
    "division",
    "multiplication",
    "subtraction",
]
