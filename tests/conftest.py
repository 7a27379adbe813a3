"""Shared test fixtures for the neldermead tests."""

import pytest

from neldermead import ExpressionTree, Point, Simplex


@pytest.fixture
def paraboloid():
    """f(x1, x2) = x1^2 + x2^2, minimum 0 at the origin."""
    return ExpressionTree("x1^2 + x2^2")


@pytest.fixture
def unit_triangle():
    """Explicit 2-D simplex with vertices (0,0), (1,0), (0,1)."""
    return Simplex([Point([0.0, 0.0]), Point([1.0, 0.0]), Point([0.0, 1.0])])
