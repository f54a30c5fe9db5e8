"""Roll markers and their pin values."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from ..config import PINS_PER_FRAME, STRIKE_VALUE
from ..exceptions import UnresolvedRollError

logger = logging.getLogger(__name__)


class Mark(str, Enum):
    """Non-numeric roll markers, valued with the usual scoresheet symbols."""

    STRIKE = "X"
    SPARE = "/"
    DASH = "-"


class Spare(BaseModel):
    """A spare whose remaining pin count has been resolved."""

    pins: int = Field(..., ge=0, le=PINS_PER_FRAME)

    model_config = ConfigDict(frozen=True)


RawRoll = Union[int, Mark]
Roll = Union[int, Mark, Spare]


def value(roll: Roll) -> int:
    """Return the pins knocked down by a normalized ``roll``."""

    if roll is Mark.STRIKE:
        return STRIKE_VALUE
    if isinstance(roll, Spare):
        return roll.pins
    if isinstance(roll, Mark):
        logger.warning("Raw marker %s has no pin value", roll)
        raise UnresolvedRollError(roll)
    return roll
