"""
Containment and overlap checks for placed rooms.

Rooms sharing only an edge are not overlapping; a positive-area
intersection is.
"""

from typing import List, Sequence, Tuple

from shapely.geometry import Polygon, box

from .room_model import RoomLayout
from .standards import WALL_THICKNESS

# Geometry comparisons tolerate float noise from x.5 ft arithmetic
EPS = 1e-6


def usable_interior(plot_width: float, plot_height: float,
                    wall: float = WALL_THICKNESS["exterior"]) -> Polygon:
    """The plot rectangle minus the exterior wall on every side."""
    return box(wall, wall, plot_width - wall, plot_height - wall)


def is_contained(room: RoomLayout, interior: Polygon) -> bool:
    minx, miny, maxx, maxy = interior.bounds
    rx1, ry1, rx2, ry2 = room.bounds
    return (rx1 >= minx - EPS and ry1 >= miny - EPS
            and rx2 <= maxx + EPS and ry2 <= maxy + EPS)


def overlap_area(a: Polygon, b: Polygon) -> float:
    inter = a.intersection(b)
    return 0.0 if inter.is_empty else inter.area


def overlaps_any(candidate: Polygon, others: Sequence[Polygon],
                 tolerance: float = 0.01) -> bool:
    return any(overlap_area(candidate, o) > tolerance for o in others)


def detect_overlaps(rooms: List[RoomLayout],
                    tolerance: float = 0.01) -> List[Tuple[int, int]]:
    """
    Return ``(i, j)`` index pairs of rooms whose rectangles intersect.

    Parameters
    ----------
    rooms : list[RoomLayout]
        Placed rooms.
    tolerance : float
        Minimum intersection area (sq ft) to count as an overlap.
    """
    polys = [r.polygon for r in rooms]
    overlaps = []
    for i in range(len(polys)):
        for j in range(i + 1, len(polys)):
            if overlap_area(polys[i], polys[j]) > tolerance:
                overlaps.append((i, j))
    return overlaps


def clamp_into(room: RoomLayout, interior: Polygon) -> bool:
    """
    Translate *room* so it lies inside *interior* where its size allows.

    A room wider (or taller) than the interior is anchored at the
    interior's left (or bottom) edge.  Returns True if the room moved.
    """
    minx, miny, maxx, maxy = interior.bounds
    x = min(max(room.x, minx), maxx - room.width)
    y = min(max(room.y, miny), maxy - room.height)
    if room.width > maxx - minx:
        x = minx
    if room.height > maxy - miny:
        y = miny
    moved = abs(x - room.x) > EPS or abs(y - room.y) > EPS
    room.x, room.y = x, y
    return moved
