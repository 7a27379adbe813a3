"""Geometric building blocks: points, simplexes and search history."""

from .history import SimplexHistory
from .point import Point
from .simplex import Simplex

__all__ = ["Point", "Simplex", "SimplexHistory"]
