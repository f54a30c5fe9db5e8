class ScoringError(Exception):
    """Base class for precondition violations detected while scoring."""

    def __init__(
        self,
        title: str,
        *,
        code: str,
        detail: str | None = None,
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.code = code


class SpareWithoutPreviousRollError(ScoringError):
    def __init__(self) -> None:
        super().__init__(
            title="Spare without previous roll",
            detail="a spare must follow the first roll of its frame",
            code="spare_without_previous_roll",
        )


class SparePinsOutOfRangeError(ScoringError):
    def __init__(self, previous: int) -> None:
        super().__init__(
            title="Spare pins out of range",
            detail=f"previous roll knocked down {previous} pins; expected 0-10",
            code="spare_pins_out_of_range",
        )
        self.previous = previous


class UndefinedCarryoverError(ScoringError):
    def __init__(self, event: object, state: object) -> None:
        super().__init__(
            title="Undefined carryover",
            detail=f"no carryover transition for {event!r} while {state!r} is pending",
            code="undefined_carryover",
        )
        self.event = event
        self.state = state


class UnresolvedRollError(ScoringError):
    def __init__(self, roll: object) -> None:
        super().__init__(
            title="Unresolved roll",
            detail=f"roll {roll!r} has no pin value; normalize the sequence first",
            code="unresolved_roll",
        )
        self.roll = roll


class SpareFollowsMarkError(ScoringError):
    def __init__(self, previous: object) -> None:
        super().__init__(
            title="Spare follows a mark",
            detail=f"a spare cannot follow {previous!r}; it must follow a numeric first roll",
            code="spare_follows_mark",
        )
        self.previous = previous
