import os, sys
import pytest
from pydantic import ValidationError

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from tenpin.config import PINS_PER_FRAME
from tenpin.exceptions import UndefinedCarryoverError, UnresolvedRollError
from tenpin.scoring import Carryover, Mark, Spare, chain, handle_carryover, value

C = Carryover


@pytest.mark.parametrize(
    "state, expected",
    [
        (C.ADD_NEXT_DOUBLE_FIRST_SECOND_ROLL, (14, C.ADD_NEXT_FIRST_ROLL)),
        (C.ADD_NEXT_FIRST_SECOND_ROLL, (7, C.ADD_NEXT_FIRST_ROLL)),
        (C.ADD_NEXT_FIRST_ROLL, (7, C.NO_CARRYOVER)),
        (C.NO_CARRYOVER, (0, C.NO_CARRYOVER)),
    ],
    ids=["double", "first-second", "first", "none"],
)
def test_handle_carryover_settles_next_roll(state, expected):
    assert handle_carryover(0, 7, state) == expected


def test_handle_carryover_uses_roll_value():
    assert handle_carryover(30, Mark.STRIKE, C.ADD_NEXT_DOUBLE_FIRST_SECOND_ROLL) == (
        50,
        C.ADD_NEXT_FIRST_ROLL,
    )
    assert handle_carryover(10, Spare(pins=6), C.ADD_NEXT_FIRST_ROLL) == (
        16,
        C.NO_CARRYOVER,
    )


@pytest.mark.parametrize(
    "event, state, expected",
    [
        (Mark.STRIKE, C.NO_CARRYOVER, C.ADD_NEXT_FIRST_SECOND_ROLL),
        (Mark.STRIKE, C.ADD_NEXT_FIRST_ROLL, C.ADD_NEXT_DOUBLE_FIRST_SECOND_ROLL),
        (Mark.SPARE, C.NO_CARRYOVER, C.ADD_NEXT_FIRST_ROLL),
    ],
    ids=["strike", "strike-after-strike", "spare"],
)
def test_chain_transitions(event, state, expected):
    assert chain(event, state) == expected


@pytest.mark.parametrize(
    "event, state",
    [
        (Mark.SPARE, C.ADD_NEXT_FIRST_ROLL),
        (Mark.SPARE, C.ADD_NEXT_FIRST_SECOND_ROLL),
        (Mark.SPARE, C.ADD_NEXT_DOUBLE_FIRST_SECOND_ROLL),
        (Mark.STRIKE, C.ADD_NEXT_FIRST_SECOND_ROLL),
        (Mark.STRIKE, C.ADD_NEXT_DOUBLE_FIRST_SECOND_ROLL),
        (Mark.DASH, C.NO_CARRYOVER),
    ],
)
def test_chain_rejects_undefined_pairs(event, state):
    with pytest.raises(UndefinedCarryoverError) as exc:
        chain(event, state)
    assert exc.value.code == "undefined_carryover"
    assert exc.value.event is event
    assert exc.value.state is state


def test_value_of_normalized_rolls():
    assert value(Mark.STRIKE) == 10
    assert value(Spare(pins=3)) == 3
    assert value(0) == 0
    assert value(8) == 8


@pytest.mark.parametrize("marker", [Mark.SPARE, Mark.DASH])
def test_value_rejects_raw_markers(marker):
    with pytest.raises(UnresolvedRollError, match="normalize"):
        value(marker)


@pytest.mark.parametrize("pins", [-1, PINS_PER_FRAME + 1])
def test_spare_pins_bounded_by_frame(pins):
    with pytest.raises(ValidationError):
        Spare(pins=pins)
    assert Spare(pins=PINS_PER_FRAME).pins == PINS_PER_FRAME
