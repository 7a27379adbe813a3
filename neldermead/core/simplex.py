"""Simplex: the ``n + 1`` vertices Nelder–Mead works on."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

import numpy as np

from neldermead.core.point import Point
from neldermead.errors import DimensionError


class Simplex:
    """An ordered set of ``dimension + 1`` points sharing one dimension.

    Vertices are stored as rows of a private ``(dimension + 1, dimension)``
    array. The constructor copies its input and accessors return copies, so a
    simplex cannot change once built.
    """

    __slots__ = ("_vertices",)

    def __init__(self, points: Sequence[Point]) -> None:
        points = list(points)
        if not points:
            raise DimensionError("A simplex needs at least two vertices")
        dimension = points[0].dimension
        if len(points) != dimension + 1:
            msg = f"A simplex of dimension {dimension} needs {dimension + 1} vertices, got {len(points)}"
            raise DimensionError(msg)
        for idx, point in enumerate(points):
            if point.dimension != dimension:
                msg = f"Vertex {idx} has dimension {point.dimension}, expected {dimension}"
                raise DimensionError(msg)
        self._vertices = np.vstack([point.as_array() for point in points])

    @classmethod
    def from_step(cls, step: float, dimension: int, start: Point | None = None) -> Simplex:
        """Build the axis-aligned simplex around ``start``.

        The first vertex is ``start`` (the origin when omitted); vertex ``i + 1``
        is ``start`` moved by ``step`` along axis ``i``.
        """
        if dimension <= 0:
            raise DimensionError("Simplex dimension must be at least 1")
        if start is None:
            start = Point.origin(dimension)
        elif start.dimension != dimension:
            msg = f"Start point has dimension {start.dimension}, expected {dimension}"
            raise DimensionError(msg)
        if step == 0 or not math.isfinite(step):
            raise ValueError(f"step must be finite and non-zero, got {step}")

        base = start.as_array()
        vertices = np.tile(base, (dimension + 1, 1))
        vertices[1:] += step * np.eye(dimension)
        return cls._wrap(vertices)

    @classmethod
    def create_simplex(
        cls,
        points_or_step: Sequence[Point] | float,
        dimension: int | None = None,
        start: Point | None = None,
    ) -> Simplex:
        """Build from an explicit vertex list, or from ``(step, dimension, start)``."""
        if isinstance(points_or_step, (int, float)):
            if dimension is None:
                raise ValueError("dimension is required when building from a step")
            return cls.from_step(float(points_or_step), dimension, start)
        return cls(points_or_step)

    @classmethod
    def from_array(cls, array: np.ndarray) -> Simplex:
        vertices = np.array(array, dtype=float)
        if vertices.ndim != 2 or vertices.shape[1] < 1:
            raise DimensionError("Simplex array must have shape (dimension + 1, dimension)")
        if vertices.shape[0] != vertices.shape[1] + 1:
            msg = f"A simplex of dimension {vertices.shape[1]} needs {vertices.shape[1] + 1} vertices, got {vertices.shape[0]}"
            raise DimensionError(msg)
        return cls._wrap(vertices)

    @classmethod
    def _wrap(cls, vertices: np.ndarray) -> Simplex:
        simplex = cls.__new__(cls)
        simplex._vertices = vertices
        return simplex

    @property
    def dimension(self) -> int:
        return int(self._vertices.shape[1])

    def vertex_count(self) -> int:
        return int(self._vertices.shape[0])

    def get_vertex(self, index: int) -> Point:
        if not 0 <= index < self._vertices.shape[0]:
            msg = f"Vertex index {index} out of range for {self._vertices.shape[0]} vertices"
            raise DimensionError(msg)
        return Point._wrap(self._vertices[index].copy())

    def vertices(self) -> list[Point]:
        return [Point._wrap(row.copy()) for row in self._vertices]

    def centroid(self) -> Point:
        return Point._wrap(self._vertices.mean(axis=0))

    def as_array(self) -> np.ndarray:
        return self._vertices.copy()

    def to_dict(self) -> dict[str, object]:
        return {
            "dimension": self.dimension,
            "vertices": [[float(value) for value in row] for row in self._vertices],
        }

    def __len__(self) -> int:
        return self.vertex_count()

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Simplex):
            return NotImplemented
        return bool(np.array_equal(self._vertices, other._vertices))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Simplex({self.to_dict()['vertices']!r})"
