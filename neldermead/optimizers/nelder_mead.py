"""Nelder–Mead downhill simplex minimization.

Each iteration orders the vertices by objective value, reflects the worst
vertex through the centroid of the others and then, depending on how the
reflected point compares with the best, second-worst and worst vertices,
keeps it, expands further, contracts, or shrinks the whole simplex towards the
best vertex. Every resulting simplex is recorded in a
:class:`~neldermead.core.history.SimplexHistory`.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from enum import Enum
from typing import Final

import numpy as np

from neldermead.core.history import SimplexHistory
from neldermead.core.point import Point
from neldermead.core.simplex import Simplex
from neldermead.errors import VariableCountError
from neldermead.optimizers.interfaces import Objective
from neldermead.utils.config import NelderMeadConfig
from neldermead.utils.logging import get_logger

_LOGGER = get_logger("nelder_mead")

DEFAULT_STEP: Final[float] = 1.0


class Move(Enum):
    """Transformation applied to the simplex in one iteration."""

    REFLECTION = "reflection"
    EXPANSION = "expansion"
    OUTSIDE_CONTRACTION = "outside_contraction"
    INSIDE_CONTRACTION = "inside_contraction"
    SHRINK = "shrink"


class NelderMeadMethod:
    """Minimize an :class:`~neldermead.optimizers.interfaces.Objective`.

    Coefficients are validated through :class:`NelderMeadConfig`. Seed the
    search with :meth:`set_simplex`; without one, the first search starts from
    the axis-aligned simplex of step ``1.0`` at the origin, sized by the
    objective's ``required_variable_count``.

    The working simplex persists between calls, so consecutive
    :meth:`minimum_search` calls continue where the previous one stopped.
    Errors raised by the objective propagate unchanged and leave the working
    simplex as it was before the failing iteration.
    """

    def __init__(
        self,
        objective: Objective,
        alpha: float = 1.0,
        gamma: float = 2.0,
        beta: float = 0.5,
        sigma: float = 0.5,
        epsilon: float = 1e-8,
        *,
        simplex: Simplex | None = None,
    ) -> None:
        if not isinstance(objective, Objective):
            msg = f"objective must provide evaluate() and required_variable_count, got {type(objective).__name__}"
            raise TypeError(msg)
        self._objective = objective
        self._config = NelderMeadConfig(
            alpha=alpha,
            gamma=gamma,
            beta=beta,
            sigma=sigma,
            epsilon=epsilon,
        )
        self._simplex: Simplex | None = None
        self._values: np.ndarray | None = None
        self._summary: dict[str, object] = {}
        if simplex is not None:
            self.set_simplex(simplex)

    @property
    def config(self) -> NelderMeadConfig:
        return self._config

    @property
    def objective(self) -> Objective:
        return self._objective

    @property
    def simplex(self) -> Simplex | None:
        """Current working simplex, or ``None`` before one is set or generated."""
        return self._simplex

    @property
    def summary(self) -> Mapping[str, object]:
        """Statistics of the most recent :meth:`minimum_search` call."""
        return dict(self._summary)

    def set_simplex(self, simplex: Simplex) -> None:
        if not isinstance(simplex, Simplex):
            msg = f"simplex must be a Simplex, got {type(simplex).__name__}"
            raise TypeError(msg)
        required = self._objective.required_variable_count
        if required and simplex.dimension != required:
            raise VariableCountError()
        self._simplex = simplex
        self._values = None

    def best(self) -> tuple[Point, float] | None:
        """Return the best vertex of the working simplex and its value, if known."""
        if self._simplex is None or self._values is None:
            return None
        idx = int(np.argmin(self._values))
        return self._simplex.get_vertex(idx), float(self._values[idx])

    def minimum_search(self, max_iterations: int) -> SimplexHistory:
        """Run at most ``max_iterations`` iterations and return the visited simplexes.

        Entry ``0`` of the returned history is the working simplex as it was
        when the call started; every later entry is sorted best-first. The
        search stops early once the spread between the worst and best vertex
        values is at most ``epsilon``, so ``len(history) <= max_iterations + 1``.
        """
        if isinstance(max_iterations, bool) or not isinstance(max_iterations, int):
            msg = f"max_iterations must be an int, got {type(max_iterations).__name__}"
            raise ValueError(msg)
        if max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")

        simplex = self._ensure_simplex()
        history = SimplexHistory()
        history.append(simplex)

        evaluations = 0
        vertices = simplex.as_array()
        if self._values is None:
            values = np.array([self._evaluate(row) for row in vertices])
            evaluations += len(values)
            self._values = values.copy()
        else:
            values = self._values.copy()

        _LOGGER.info(
            "Starting Nelder-Mead search dimension=%d max_iterations=%d",
            simplex.dimension,
            max_iterations,
        )

        moves: Counter[str] = Counter()
        converged = False
        completed = 0
        for iteration in range(max_iterations):
            order = np.argsort(values, kind="stable")
            vertices, values = vertices[order], values[order]
            if values[-1] - values[0] <= self._config.epsilon:
                converged = True
                break

            vertices, values, move, used = self._iterate(vertices, values)
            evaluations += used
            order = np.argsort(values, kind="stable")
            vertices, values = vertices[order], values[order]

            self._simplex = Simplex._wrap(vertices.copy())
            self._values = values.copy()
            history.append(self._simplex)
            moves[move.value] += 1
            completed += 1
            _LOGGER.debug(
                "iteration=%d move=%s best=%.6g worst=%.6g",
                iteration,
                move.value,
                values[0],
                values[-1],
            )

        if converged and completed == 0:
            # Nothing moved, but the working simplex is now known best-first.
            self._simplex = Simplex._wrap(vertices.copy())
            self._values = values.copy()

        best_value = float(np.min(values))
        self._summary = {
            "iterations_completed": completed,
            "converged": converged,
            "evaluations": evaluations,
            "best_value": best_value,
            "moves": dict(moves),
        }
        _LOGGER.info(
            "Finished Nelder-Mead search iterations=%d converged=%s best=%.6g",
            completed,
            converged,
            best_value,
        )
        return history

    def _ensure_simplex(self) -> Simplex:
        if self._simplex is None:
            dimension = self._objective.required_variable_count
            if dimension <= 0:
                msg = "Objective has no variables; call set_simplex() to choose a dimension"
                raise ValueError(msg)
            self._simplex = Simplex.from_step(DEFAULT_STEP, dimension)
            self._values = None
        return self._simplex

    def _evaluate(self, coords: np.ndarray) -> float:
        return float(self._objective.evaluate(Point._wrap(coords.copy())))

    def _iterate(
        self, vertices: np.ndarray, values: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray, Move, int]:
        """Apply one move to a best-first simplex; returns the evaluation count too."""
        cfg = self._config
        f_best, f_second_worst, f_worst = values[0], values[-2], values[-1]
        worst = vertices[-1]
        centroid = vertices[:-1].mean(axis=0)

        reflected = centroid + cfg.alpha * (centroid - worst)
        f_reflected = self._evaluate(reflected)

        if f_reflected < f_best:
            expanded = centroid + cfg.gamma * (reflected - centroid)
            f_expanded = self._evaluate(expanded)
            if f_expanded < f_reflected:
                return (*self._replace_worst(vertices, values, expanded, f_expanded), Move.EXPANSION, 2)
            return (*self._replace_worst(vertices, values, reflected, f_reflected), Move.REFLECTION, 2)

        if f_reflected < f_second_worst:
            return (*self._replace_worst(vertices, values, reflected, f_reflected), Move.REFLECTION, 1)

        if f_reflected < f_worst:
            contracted = centroid + cfg.beta * (reflected - centroid)
            f_contracted = self._evaluate(contracted)
            if f_contracted <= f_reflected:
                replaced = self._replace_worst(vertices, values, contracted, f_contracted)
                return (*replaced, Move.OUTSIDE_CONTRACTION, 2)
        else:
            contracted = centroid + cfg.beta * (worst - centroid)
            f_contracted = self._evaluate(contracted)
            if f_contracted < f_worst:
                replaced = self._replace_worst(vertices, values, contracted, f_contracted)
                return (*replaced, Move.INSIDE_CONTRACTION, 2)

        shrunk, shrunk_values = self._shrink(vertices, values)
        return shrunk, shrunk_values, Move.SHRINK, 2 + len(values) - 1

    @staticmethod
    def _replace_worst(
        vertices: np.ndarray, values: np.ndarray, point: np.ndarray, value: float
    ) -> tuple[np.ndarray, np.ndarray]:
        new_vertices = vertices.copy()
        new_values = values.copy()
        new_vertices[-1] = point
        new_values[-1] = value
        return new_vertices, new_values

    def _shrink(self, vertices: np.ndarray, values: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        best = vertices[0]
        new_vertices = vertices.copy()
        new_vertices[1:] = best + self._config.sigma * (vertices[1:] - best)
        new_values = values.copy()
        for idx in range(1, len(new_vertices)):
            new_values[idx] = self._evaluate(new_vertices[idx])
        return new_vertices, new_values


__all__ = ["DEFAULT_STEP", "Move", "NelderMeadMethod"]
