"""Single-pass ten-pin bowling scorer.

Rolls are folded left to right without looking ahead.  Bonuses owed to
earlier strikes and spares are tracked by the carryover automaton in
:mod:`tenpin.scoring.carryover` and paid as later rolls arrive.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Union

from ..config import LAST_FRAME_ROLL_INDEX, STRIKE_VALUE
from ..schemas import GameScoreOut
from .carryover import Carryover, chain, handle_carryover
from .normalizer import normalize
from .rolls import Mark, RawRoll, Roll, Spare, value

logger = logging.getLogger(__name__)


def score(normalized: Iterable[Roll]) -> int:
    """Return the total score of an already normalized roll sequence."""

    roll_index = 1
    total = 0
    carry = Carryover.NO_CARRYOVER

    for roll in normalized:
        total, carry = handle_carryover(total, roll, carry)

        if roll_index > LAST_FRAME_ROLL_INDEX:
            # Final frame bonus deliveries count once and owe nothing onward.
            total += value(roll)
            roll_index += 1
        elif roll is Mark.STRIKE:
            total += STRIKE_VALUE
            roll_index += 2
            carry = chain(Mark.STRIKE, carry)
        elif isinstance(roll, Spare):
            total += roll.pins
            roll_index += 1
            carry = chain(Mark.SPARE, carry)
        else:
            total += value(roll)
            roll_index += 1

        logger.debug(
            "roll=%r next_index=%d total=%d carry=%s",
            roll,
            roll_index,
            total,
            carry.value,
        )

    logger.debug("Scored game total=%d", total)
    return total


def calculate(rolls: Iterable[RawRoll]) -> int:
    """Score a game given as raw roll markers.

    The sequence is assumed to describe a legal game; legality is not
    checked.  For example::

        >>> calculate([2, 1, Mark.STRIKE, 4, Mark.SPARE, 2, 4, 4, 2, 2,
        ...            7, Mark.STRIKE, 4, 2, 3, Mark.DASH, 4, 2])
        87
    """

    return score(normalize(rolls))


def _plain(roll: Roll) -> Union[int, str]:
    if roll is Mark.STRIKE:
        return Mark.STRIKE.value
    return value(roll)


def summary(rolls: Iterable[RawRoll]) -> Dict[str, Any]:
    """Return the resolved rolls and total of a game as plain data.

    The result is checked through :class:`~tenpin.schemas.GameScoreOut`, the
    only check applied to it: a sequence whose total comes out negative
    raises :class:`pydantic.ValidationError` rather than a
    :class:`~tenpin.exceptions.ScoringError`.
    """

    normalized = normalize(rolls)
    plain: List[Union[int, str]] = [_plain(r) for r in normalized]
    return GameScoreOut(rolls=plain, total=score(normalized)).model_dump()
