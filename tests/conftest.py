import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tenpin.scoring import Mark  # noqa: E402

X, SPARE, DASH = Mark.STRIKE, Mark.SPARE, Mark.DASH


@pytest.fixture
def perfect_game():
    """Twelve strikes in a row."""

    return [X] * 12


@pytest.fixture
def all_spares_game():
    """Ten 5/5 frames plus a bonus five."""

    return [5, SPARE] * 10 + [5]
