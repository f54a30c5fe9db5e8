"""Resolve raw roll markers into concrete pin values."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..config import DASH_VALUE, PINS_PER_FRAME
from ..exceptions import (
    SpareFollowsMarkError,
    SparePinsOutOfRangeError,
    SpareWithoutPreviousRollError,
)
from .rolls import Mark, RawRoll, Roll, Spare, value

logger = logging.getLogger(__name__)


def _resolve_spare(previous: Optional[Roll]) -> Spare:
    if previous is None:
        logger.warning("Spare marker found before any roll")
        raise SpareWithoutPreviousRollError()
    if previous is Mark.STRIKE or isinstance(previous, Spare):
        logger.warning("Spare marker follows %r", previous)
        raise SpareFollowsMarkError(previous)
    knocked = value(previous)
    if not 0 <= knocked <= PINS_PER_FRAME:
        logger.warning("Spare follows a roll of %d pins", knocked)
        raise SparePinsOutOfRangeError(knocked)
    return Spare(pins=PINS_PER_FRAME - knocked)


def normalize(rolls: Iterable[RawRoll]) -> List[Roll]:
    """Return ``rolls`` with dashes zeroed and spares resolved.

    A spare becomes ``Spare(pins=10 - previous)`` where ``previous`` is the
    numeric roll just before it.  A spare after a strike or another spare
    raises :class:`SpareFollowsMarkError`.  Strikes and numeric rolls pass
    through unchanged, so the result always has the same length and order as
    the input.
    """

    normalized: List[Roll] = []
    previous: Optional[Roll] = None
    for roll in rolls:
        if roll is Mark.DASH:
            updated: Roll = DASH_VALUE
        elif roll is Mark.SPARE:
            updated = _resolve_spare(previous)
        else:
            updated = roll
        normalized.append(updated)
        previous = updated
    return normalized
