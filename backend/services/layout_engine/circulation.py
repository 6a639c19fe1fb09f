"""
Circulation placeholders: a central corridor and an upper-floor stairwell.

Neither is checked against the placed rooms.
"""

from typing import List, Optional

from .room_model import Rect, RoomLayout
from .standards import WALL_THICKNESS

CORRIDOR_WIDTH = 4.0
CORRIDOR_MIN_ROOMS = 3

STAIR_WIDTH = 4.0
STAIR_LENGTH = 10.0
STAIR_INSET = 2.0

GROUND_LEVEL = "Ground"


def generate_corridors(rooms: List[RoomLayout], plot_width: float,
                       plot_height: float) -> List[Rect]:
    """One full-height corridor on the plot's x-midpoint once a floor has 3+ rooms."""
    if len(rooms) < CORRIDOR_MIN_ROOMS:
        return []
    t = WALL_THICKNESS["exterior"]
    return [Rect(
        x=plot_width / 2 - CORRIDOR_WIDTH / 2,
        y=t,
        width=CORRIDOR_WIDTH,
        height=plot_height - 2 * t,
    )]


def generate_stairs(level: str, plot_width: float) -> Optional[Rect]:
    """Stairwell near the interior corner at ``x = plot_width``; none on the ground floor."""
    if level == GROUND_LEVEL:
        return None
    t = WALL_THICKNESS["exterior"]
    return Rect(
        x=plot_width - t - STAIR_WIDTH - STAIR_INSET,
        y=t + STAIR_INSET,
        width=STAIR_WIDTH,
        height=STAIR_LENGTH,
    )
