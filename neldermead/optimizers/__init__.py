"""Optimizer exports."""

from .interfaces import Objective
from .nelder_mead import DEFAULT_STEP, Move, NelderMeadMethod

__all__ = ["DEFAULT_STEP", "Move", "NelderMeadMethod", "Objective"]
