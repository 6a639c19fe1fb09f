"""
Door and window placement for a single placed room.

Every room gets one door centred on the edge at ``y = room.y``.  Living
spaces (bedrooms, living rooms, kitchens, ...) that sit against the
exterior also get one window centred on the opposite edge.  Positions are
absolute plot coordinates.
"""

from typing import List, Tuple

from .room_model import DoorLayout, RoomLayout, WindowLayout
from .standards import (
    DOOR_HEIGHT,
    DOOR_WIDTH,
    WALL_THICKNESS,
    WINDOW_HEIGHT,
    WINDOW_ROOM_KEYWORDS,
    WINDOW_WIDTH,
)

# A room this close (feet) to the usable boundary counts as exterior-facing
EXTERIOR_MARGIN = 1.0

WINDOW_RULES = ("x_axis", "all_sides")


def generate_doors(room: RoomLayout) -> List[DoorLayout]:
    door_type = "double" if "main" in room.name.lower() else "single"
    return [DoorLayout(
        x=room.x + room.width / 2 - DOOR_WIDTH / 2,
        y=room.y,
        width=DOOR_WIDTH,
        height=DOOR_HEIGHT,
        rotation=0.0,
        type=door_type,
    )]


def wants_window(room: RoomLayout) -> bool:
    """True when the room's type is a living space (bedroom, kitchen, office, ...)."""
    room_type = (room.type or "").lower()
    return any(k in room_type for k in WINDOW_ROOM_KEYWORDS)


def faces_exterior(room: RoomLayout, plot_width: float, plot_height: float,
                   rule: str = "x_axis") -> bool:
    """
    Is *room* within :data:`EXTERIOR_MARGIN` of an exterior wall?

    ``x_axis`` looks only at the left and right walls; ``all_sides`` also
    checks the walls at ``y = 0`` and ``y = plot_height``.
    """
    if rule not in WINDOW_RULES:
        raise ValueError(f"Unknown window rule '{rule}'")
    t = WALL_THICKNESS["exterior"]
    x1, y1, x2, y2 = room.bounds
    near_x = x1 <= t + EXTERIOR_MARGIN or x2 >= plot_width - t - EXTERIOR_MARGIN
    if rule == "x_axis":
        return near_x
    near_y = y1 <= t + EXTERIOR_MARGIN or y2 >= plot_height - t - EXTERIOR_MARGIN
    return near_x or near_y


def generate_windows(room: RoomLayout, plot_width: float, plot_height: float,
                     rule: str = "x_axis") -> List[WindowLayout]:
    if not wants_window(room) or not faces_exterior(room, plot_width, plot_height, rule):
        return []
    return [WindowLayout(
        x=room.x + room.width / 2 - WINDOW_WIDTH / 2,
        y=room.y + room.height - WINDOW_HEIGHT,
        width=WINDOW_WIDTH,
        height=WINDOW_HEIGHT,
        rotation=0.0,
        type="double",
    )]


def attach_openings(room: RoomLayout, plot_width: float, plot_height: float,
                    rule: str = "x_axis") -> Tuple[List[DoorLayout], List[WindowLayout]]:
    """Generate the room's openings and store them on it."""
    room.doors = generate_doors(room)
    room.windows = generate_windows(room, plot_width, plot_height, rule)
    return room.doors, room.windows
