"""Ten-pin scoring engine: normalizer, carryover automaton and scorer."""

from .carryover import Carryover, chain, handle_carryover
from .normalizer import normalize
from .rolls import Mark, Spare, value
from .scorer import calculate, score, summary

__all__ = [
    "Carryover",
    "Mark",
    "Spare",
    "calculate",
    "chain",
    "handle_carryover",
    "normalize",
    "score",
    "summary",
    "value",
]
