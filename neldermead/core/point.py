"""Fixed-dimension points in real coordinate space."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from neldermead.errors import DimensionError


class Point:
    """A vector of ``float64`` coordinates whose dimension never changes.

    The point owns a private copy of its coordinates; nothing passed in or
    handed out aliases the internal storage.
    """

    __slots__ = ("_coords",)

    def __init__(self, coords: Iterable[float], dimension: int | None = None) -> None:
        values = np.array(list(coords), dtype=float)
        if values.ndim != 1:
            raise DimensionError("Point coordinates must be a flat sequence")
        if dimension is None:
            dimension = values.size
        if dimension <= 0:
            raise DimensionError("Point dimension must be at least 1")
        if values.size != dimension:
            msg = f"Expected {dimension} coordinates, got {values.size}"
            raise DimensionError(msg)
        self._coords = values

    @classmethod
    def create_point(cls, coords: Iterable[float], dimension: int) -> Point:
        return cls(coords, dimension)

    @classmethod
    def origin(cls, dimension: int) -> Point:
        if dimension <= 0:
            raise DimensionError("Point dimension must be at least 1")
        return cls(np.zeros(dimension))

    @classmethod
    def _wrap(cls, array: np.ndarray) -> Point:
        # Takes ownership of ``array`` without copying; callers pass fresh arrays.
        point = cls.__new__(cls)
        point._coords = array
        return point

    @property
    def dimension(self) -> int:
        return int(self._coords.size)

    def dimensions(self) -> int:
        return self.dimension

    def get(self, index: int) -> float:
        self._check_index(index)
        return float(self._coords[index])

    def set(self, value: float, index: int) -> None:
        self._check_index(index)
        self._coords[index] = value

    def clone(self) -> Point:
        return Point._wrap(self._coords.copy())

    def to_list(self) -> list[float]:
        return [float(value) for value in self._coords]

    def as_array(self) -> np.ndarray:
        """Return a copy of the coordinates as a numpy array."""
        return self._coords.copy()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._coords.size:
            msg = f"Index {index} out of range for point of dimension {self._coords.size}"
            raise DimensionError(msg)

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_list())

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.dimension == other.dimension and bool(np.array_equal(self._coords, other._coords))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Point({self.to_list()!r})"
