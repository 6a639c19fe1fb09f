"""
Room placement inside the usable interior of a rectangular plot.

Rooms named by a prompt constraint are placed first, then the rest from
largest to smallest.  Each room is positioned by, in priority order:

  1. its position constraint (left / right / front / back / center)
  2. its explicit upstream position
  3. shelf packing: left-to-right rows, wrapping downward when a room
     would overflow the usable width, rows separated by an interior wall

A bounded repair pass then clamps pinned rooms into the interior and
moves shelf-packed rooms that overlap or spill out to the first free
corner-aligned spot.  Whatever cannot be repaired is reported, not hidden.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .adjacency import reorder_for_adjacency, unsatisfied_adjacencies
from .constraints import (
    LayoutConstraint,
    constrained_room_ids,
    find_position,
    find_sizing,
)
from .dimensions import resolve_dimensions
from .errors import (
    ADJACENCY_UNSATISFIED,
    CAPACITY_EXCEEDED,
    CONTAINMENT_CLAMPED,
    OVERLAP_DETECTED,
    Diagnostics,
)
from .geometry_utils import (
    EPS,
    clamp_into,
    detect_overlaps,
    is_contained,
    overlaps_any,
    usable_interior,
)
from .room_model import RoomLayout, RoomSpec
from .standards import WALL_THICKNESS, infer_room_type

logger = logging.getLogger(__name__)


def order_rooms(rooms: Sequence[RoomSpec],
                dims: Sequence[Tuple[float, float]],
                constraints: List[LayoutConstraint]) -> List[int]:
    """
    Placement order as indices into *rooms*.

    Constrained rooms keep their input order; the remaining rooms follow
    sorted by descending resolved area (ties keep input order).
    """
    named = constrained_room_ids(constraints)
    pinned = [i for i, r in enumerate(rooms) if r.room_id in named]
    free = [i for i, r in enumerate(rooms) if r.room_id not in named]
    free.sort(key=lambda i: -(dims[i][0] * dims[i][1]))
    return pinned + free


def _constrained_position(position: str, width: float, height: float,
                          cursor: Tuple[float, float],
                          plot_width: float, plot_height: float) -> Tuple[float, float]:
    t = WALL_THICKNESS["exterior"]
    x, y = cursor
    if position == "left":
        x = t
    elif position == "right":
        x = plot_width - t - width
    elif position == "front":
        y = t
    elif position == "back":
        y = plot_height - t - height
    elif position == "center":
        x = (plot_width - width) / 2
        y = (plot_height - height) / 2
    return x, y


def _free_spot(room: RoomLayout, others: List[RoomLayout],
               interior_bounds: Tuple[float, float, float, float]) -> Optional[Tuple[float, float]]:
    """
    First position where *room* fits inside the interior without
    overlapping *others*.

    Candidates are aligned to the interior corners and to the edges of the
    other rooms (one interior wall apart), scanned by row then column.
    """
    minx, miny, maxx, maxy = interior_bounds
    gap = WALL_THICKNESS["interior"]
    w, h = room.width, room.height

    xs = {minx, maxx - w}
    ys = {miny, maxy - h}
    for o in others:
        xs.update((o.x, o.x + o.width + gap, o.x - gap - w))
        ys.update((o.y, o.y + o.height + gap, o.y - gap - h))

    xs = sorted(round(x, 6) for x in xs if x >= minx - EPS and x + w <= maxx + EPS)
    ys = sorted(round(y, 6) for y in ys if y >= miny - EPS and y + h <= maxy + EPS)
    blockers = [o.polygon for o in others]

    for y in ys:
        for x in xs:
            candidate = RoomLayout(id=room.id, name=room.name, type=room.type,
                                   x=x, y=y, width=w, height=h)
            if not overlaps_any(candidate.polygon, blockers):
                return x, y
    return None


def repair_placements(placed: List[RoomLayout], movable: List[bool],
                      plot_width: float, plot_height: float,
                      diagnostics: Diagnostics) -> None:
    """Clamp, relocate and finally report rooms that break containment or overlap."""
    interior = usable_interior(plot_width, plot_height)
    bounds = interior.bounds

    for room, can_move in zip(placed, movable):
        if can_move or is_contained(room, interior):
            continue
        if clamp_into(room, interior):
            diagnostics.warn(
                CONTAINMENT_CLAMPED,
                f"'{room.name}' moved inside the plot to ({room.x:g}, {room.y:g})",
            )

    for i, room in enumerate(placed):
        if not movable[i]:
            continue
        blockers = [o for j, o in enumerate(placed) if j < i or not movable[j]]
        if is_contained(room, interior) and not overlaps_any(
                room.polygon, [b.polygon for b in blockers]):
            continue

        others = [o for j, o in enumerate(placed) if j != i]
        spot = _free_spot(room, others, bounds)
        if spot is not None:
            logger.debug("Relocated %s from (%.1f, %.1f) to (%.1f, %.1f)",
                         room.name, room.x, room.y, spot[0], spot[1])
            room.x, room.y = spot
        elif clamp_into(room, interior):
            diagnostics.warn(
                CONTAINMENT_CLAMPED,
                f"no free spot for '{room.name}', clamped to ({room.x:g}, {room.y:g})",
            )

    for i, j in detect_overlaps(placed):
        diagnostics.warn(
            OVERLAP_DETECTED,
            f"'{placed[i].name}' overlaps '{placed[j].name}'",
        )


def place_rooms(rooms: Sequence[RoomSpec],
                constraints: List[LayoutConstraint],
                plot_width: float,
                plot_height: float,
                diagnostics: Optional[Diagnostics] = None,
                honor_adjacency: bool = False) -> List[RoomLayout]:
    """
    Size and position every room of one floor.

    Parameters
    ----------
    rooms : sequence of RoomSpec
        Rooms in input order.
    constraints : list[LayoutConstraint]
        Parsed prompt constraints (shared by all floors).
    plot_width, plot_height : float
        Full plot envelope in feet.
    diagnostics : Diagnostics, optional
        Receives capacity / overlap / containment warnings.
    honor_adjacency : bool
        Re-order the shelf so "near" pairs are packed side by side and
        report pairs that still ended up apart.

    Returns
    -------
    list[RoomLayout]
        Placed rooms in placement order, ids ``room-0``, ``room-1``, ...
        Doors and windows are empty; the opening generator fills them.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    t = WALL_THICKNESS["exterior"]
    gap = WALL_THICKNESS["interior"]
    usable_width = plot_width - 2 * t
    usable_height = plot_height - 2 * t

    dims = [
        resolve_dimensions(r, find_sizing(constraints, r.room_id), diagnostics)
        for r in rooms
    ]

    requested = sum(w * h for w, h in dims)
    if requested > usable_width * usable_height + EPS:
        diagnostics.warn(
            CAPACITY_EXCEEDED,
            f"rooms need {requested:g} sq ft but only "
            f"{usable_width * usable_height:g} sq ft is usable",
        )
    for r, (w, h) in zip(rooms, dims):
        if w > usable_width + EPS or h > usable_height + EPS:
            diagnostics.warn(
                CAPACITY_EXCEEDED,
                f"'{r.name}' ({w:g} x {h:g}) is larger than the usable interior",
            )

    order = order_rooms(rooms, dims, constraints)
    if honor_adjacency:
        order = reorder_for_adjacency(order, rooms, constraints)

    placed: List[RoomLayout] = []
    movable: List[bool] = []
    current_x, current_y = t, t
    row_height = 0.0

    for idx in order:
        room = rooms[idx]
        width, height = dims[idx]
        position = find_position(constraints, room.room_id)
        can_move = False

        if position:
            x, y = _constrained_position(position, width, height,
                                         (current_x, current_y),
                                         plot_width, plot_height)
        elif room.position is not None:
            x, y = room.position
        else:
            if current_x + width > usable_width + t + EPS and current_x > t + EPS:
                current_x = t
                current_y += row_height + gap
                row_height = 0.0
            x, y = current_x, current_y
            current_x += width + gap
            row_height = max(row_height, height)
            can_move = True

        logger.debug("Placed %s at (%.1f, %.1f) %.1fx%.1f%s", room.name, x, y,
                     width, height, f" [{position}]" if position else "")
        placed.append(RoomLayout(
            id=f"room-{len(placed)}",
            name=room.name,
            type=room.type or infer_room_type(room.name),
            x=x,
            y=y,
            width=width,
            height=height,
        ))
        movable.append(can_move)

    repair_placements(placed, movable, plot_width, plot_height, diagnostics)

    if honor_adjacency:
        for a, b in unsatisfied_adjacencies(placed, constraints):
            diagnostics.warn(ADJACENCY_UNSATISFIED, f"'{a}' is not next to '{b}'")

    return placed
