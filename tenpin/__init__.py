"""Ten-pin bowling scores computed in one pass, without lookahead."""

from .exceptions import (
    ScoringError,
    SpareFollowsMarkError,
    SparePinsOutOfRangeError,
    SpareWithoutPreviousRollError,
    UndefinedCarryoverError,
    UnresolvedRollError,
)
from .scoring import Mark, calculate

__all__ = [
    "Mark",
    "calculate",
    "ScoringError",
    "SpareFollowsMarkError",
    "SparePinsOutOfRangeError",
    "SpareWithoutPreviousRollError",
    "UndefinedCarryoverError",
    "UnresolvedRollError",
]
