"""Game constants shared by the scoring engine."""

FRAMES = 10
PINS_PER_FRAME = 10

STRIKE_VALUE = PINS_PER_FRAME
DASH_VALUE = 0

# Rolls past this 1-based index belong to the final frame's bonus deliveries
# and never start a new carryover.
LAST_FRAME_ROLL_INDEX = (FRAMES - 1) * 2
