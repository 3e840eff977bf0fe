# Canonical cell values. Sentinels reuse the code point of the character
# they render as, so a cell value is either a weight 1..9 or a marker.

from typing import Optional

WALL_CHAR = "X"
START_CHAR = "S"
GOAL_CHAR = "G"

BORDER = ord(WALL_CHAR)
START = ord(START_CHAR)
GOAL = ord(GOAL_CHAR)

STICKY_MIN, STICKY_MAX = 1, 9

def is_sticky(value: int) -> bool:
    return STICKY_MIN <= value <= STICKY_MAX

def marker_char(value: int) -> Optional[str]:
    """Character for a sentinel value, or None for a stickiness weight."""
    if value in (BORDER, START, GOAL):
        return chr(value)
    return None
