"""Configuration utilities."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NelderMeadConfig:
    """Tuning coefficients for the simplex moves.

    - ``alpha``: reflection, must be positive
    - ``gamma``: expansion, must exceed both 1 and ``alpha``
    - ``beta``: contraction, strictly between 0 and 1
    - ``sigma``: shrink, strictly between 0 and 1
    - ``epsilon``: stop once the spread of vertex values is at most this
    """

    alpha: float = 1.0
    gamma: float = 2.0
    beta: float = 0.5
    sigma: float = 0.5
    epsilon: float = 1e-8

    def __post_init__(self) -> None:
        for name in ("alpha", "gamma", "beta", "sigma", "epsilon"):
            value = getattr(self, name)
            if not math.isfinite(value):
                msg = f"{name} must be finite, got {value}"
                raise ValueError(msg)
        if self.alpha <= 0:
            raise ValueError(f"alpha must be positive, got {self.alpha}")
        if self.gamma <= 1 or self.gamma <= self.alpha:
            msg = f"gamma must be > 1 and > alpha ({self.alpha}), got {self.gamma}"
            raise ValueError(msg)
        if not 0 < self.beta < 1:
            raise ValueError(f"beta must be in (0, 1), got {self.beta}")
        if not 0 < self.sigma < 1:
            raise ValueError(f"sigma must be in (0, 1), got {self.sigma}")
        if self.epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")

    def as_dict(self) -> dict[str, float]:
        return {
            "alpha": self.alpha,
            "gamma": self.gamma,
            "beta": self.beta,
            "sigma": self.sigma,
            "epsilon": self.epsilon,
        }
