"""Carry-forward automaton for strike and spare bonuses.

After each roll the pending :class:`Carryover` says how many times the next
roll's value is owed to earlier strikes or spares.  Settling a roll always
moves the state one step towards ``NO_CARRYOVER``; scoring a strike or spare
chains a new obligation onto whatever is still pending.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Tuple

from ..exceptions import UndefinedCarryoverError
from .rolls import Mark, Roll, value

logger = logging.getLogger(__name__)


class Carryover(Enum):
    NO_CARRYOVER = "no_carryover"
    ADD_NEXT_FIRST_ROLL = "add_next_first_roll"
    ADD_NEXT_FIRST_SECOND_ROLL = "add_next_first_second_roll"
    ADD_NEXT_DOUBLE_FIRST_SECOND_ROLL = "add_next_double_first_second_roll"


# state -> (multiplier applied to the settled roll, state afterwards)
_SETTLE: Dict[Carryover, Tuple[int, Carryover]] = {
    Carryover.ADD_NEXT_DOUBLE_FIRST_SECOND_ROLL: (2, Carryover.ADD_NEXT_FIRST_ROLL),
    Carryover.ADD_NEXT_FIRST_SECOND_ROLL: (1, Carryover.ADD_NEXT_FIRST_ROLL),
    Carryover.ADD_NEXT_FIRST_ROLL: (1, Carryover.NO_CARRYOVER),
    Carryover.NO_CARRYOVER: (0, Carryover.NO_CARRYOVER),
}

# A spare always follows a settled first roll, so it only chains from
# NO_CARRYOVER.
_CHAIN: Dict[Tuple[Mark, Carryover], Carryover] = {
    (Mark.STRIKE, Carryover.NO_CARRYOVER): Carryover.ADD_NEXT_FIRST_SECOND_ROLL,
    (Mark.STRIKE, Carryover.ADD_NEXT_FIRST_ROLL): Carryover.ADD_NEXT_DOUBLE_FIRST_SECOND_ROLL,
    (Mark.SPARE, Carryover.NO_CARRYOVER): Carryover.ADD_NEXT_FIRST_ROLL,
}


def chain(event: Mark, state: Carryover) -> Carryover:
    """Return the carryover pending after a strike or spare is scored.

    Raises :class:`UndefinedCarryoverError` for combinations a valid game
    cannot produce, e.g. a spare while a strike bonus is still open.
    """

    try:
        return _CHAIN[(event, state)]
    except KeyError:
        logger.warning("No carryover chain for %s while %s is pending", event, state)
        raise UndefinedCarryoverError(event, state) from None


def handle_carryover(total: int, roll: Roll, state: Carryover) -> Tuple[int, Carryover]:
    """Pay the bonus owed by ``state`` out of ``roll`` and advance the state."""

    multiplier, next_state = _SETTLE[state]
    if multiplier:
        total += multiplier * value(roll)
    return total, next_state
