"""
Layout Engine for Floor Plan Generation.

Turns an abstract room list (plus an optional placement prompt) into
absolute room rectangles, walls, doors, windows and circulation inside a
rectangular plot.  Room geometry uses Shapely polygons.
"""

from .constraints import LayoutConstraint, parse_constraints
from .engine import LayoutEngine, generate_accurate_layout, resolve_plot_dimensions
from .errors import InvalidInputError, LayoutError
from .room_model import (
    DoorLayout,
    FloorLayout,
    LayoutResult,
    PlanData,
    RoomLayout,
    RoomSpec,
    WallLayout,
    WindowLayout,
)

__all__ = [
    "LayoutEngine",
    "generate_accurate_layout",
    "resolve_plot_dimensions",
    "parse_constraints",
    "LayoutConstraint",
    "LayoutError",
    "InvalidInputError",
    "RoomSpec",
    "PlanData",
    "RoomLayout",
    "DoorLayout",
    "WindowLayout",
    "WallLayout",
    "FloorLayout",
    "LayoutResult",
]
