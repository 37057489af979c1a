"""Navigation direction definitions."""

from types import MappingProxyType


class Direction:
    """Constants for turn directions."""
    START = 0
    STRAIGHT = 1
    SLIGHT_LEFT = 2
    SLIGHT_RIGHT = 3
    RIGHT = 4
    LEFT = 5
    SHARP_LEFT = 6
    SHARP_RIGHT = 7

    NUM_DIRECTIONS = 8


# Indexed by Direction value
DIRECTION_PHRASES = (
    "Start",
    "Go straight",
    "Slight left",
    "Slight right",
    "Turn right",
    "Turn left",
    "Sharp left",
    "Sharp right",
)

PHRASE_TO_DIRECTION = MappingProxyType(
    {phrase: i for i, phrase in enumerate(DIRECTION_PHRASES)}
)

# Label used when a route edge has no resolvable way name
UNKNOWN_ROAD = "unknown road"
