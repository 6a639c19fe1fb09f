"""
Room sizing: area (or explicit dimensions) -> width x height in feet.
"""

import logging
import math
from typing import Optional, Tuple

from .constraints import LayoutConstraint
from .errors import Diagnostics, InvalidInputError, MISSING_STANDARD
from .room_model import RoomSpec
from .standards import aspect_ratio_midpoint, lookup_standard

logger = logging.getLogger(__name__)

# Rooms are snapped to this grid for constructability
DIMENSION_STEP = 0.5


def round_to_step(value: float, step: float = DIMENSION_STEP) -> float:
    """Round half-up to the nearest *step* (0.25 -> 0.5, not banker's rounding)."""
    return math.floor(value / step + 0.5) * step


def resolve_dimensions(
    room: RoomSpec,
    sizing: Optional[LayoutConstraint] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> Tuple[float, float]:
    """
    Return ``(width, height)`` for *room*.

    Explicit ``dimensions`` win and are used verbatim (length -> width,
    width -> height) even when they disagree with ``area_sqft``.  Otherwise
    the area is split using the midpoint of the room type's aspect-ratio
    range: ``width = sqrt(area * r)``, ``height = area / width``.

    Parameters
    ----------
    room : RoomSpec
        The room to size.
    sizing : LayoutConstraint, optional
        Caller-supplied area / aspect-ratio limits for this room.
    diagnostics : Diagnostics, optional
        Receives a warning when no standards profile matched.

    Raises
    ------
    InvalidInputError
        If the area (or an explicit dimension) is not positive, or a side
        rounds to less than :data:`DIMENSION_STEP`.
    """
    if room.dimensions is not None:
        length, width = room.dimensions
        if length <= 0 or width <= 0:
            raise InvalidInputError([f"Room '{room.name}' has non-positive dimensions"])
        return _snapped(room, length, width)

    area = room.area_sqft
    if area <= 0:
        raise InvalidInputError([f"Room '{room.name}' has non-positive area ({area})"])

    key, profile, matched = lookup_standard(room.type, room.name)
    if not matched and diagnostics is not None:
        diagnostics.warn(
            MISSING_STANDARD,
            f"no standards for '{room.type or room.name}', sized as {key}",
        )
    ratio = aspect_ratio_midpoint(profile)

    if sizing is not None:
        if sizing.aspect_ratio is not None:
            ratio = (sizing.aspect_ratio[0] + sizing.aspect_ratio[1]) / 2
        if sizing.min_area is not None:
            area = max(area, sizing.min_area)
        if sizing.max_area is not None:
            area = min(area, sizing.max_area)

    width = math.sqrt(area * ratio)
    height = area / width
    logger.debug("Sized %s as %s: %.2f x %.2f (r=%.2f)", room.name, key, width, height, ratio)
    return _snapped(room, width, height)


def _snapped(room: RoomSpec, width: float, height: float) -> Tuple[float, float]:
    w, h = round_to_step(width), round_to_step(height)
    if w < DIMENSION_STEP or h < DIMENSION_STEP:
        raise InvalidInputError([
            f"Room '{room.name}' is too small: {width:.2f} x {height:.2f} ft "
            f"rounds below the {DIMENSION_STEP:g} ft grid"
        ])
    return w, h
