"""Formula parsing and evaluation."""

from .parser import parse
from .tokens import FUNCTIONS, tokenize
from .tree import ExpressionTree

__all__ = ["ExpressionTree", "FUNCTIONS", "parse", "tokenize"]
