"""Utility exports."""

from .arithmetic import addition, division, multiplication, subtraction
from .config import NelderMeadConfig
from .logging import get_logger

__all__ = [
    "NelderMeadConfig",
    "addition",
    "division",
    "get_logger",
    "multiplication",
    "subtraction",
]
