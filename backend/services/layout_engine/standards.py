"""
Room standards and fixed construction constants.

Dimensions are in feet.  Each room type carries a minimum / ideal area
and the acceptable aspect-ratio range (width / height) used when a room
has to be sized from its area alone.
"""

from typing import Dict, Optional, Tuple


ROOM_STANDARDS: Dict[str, dict] = {
    "bedroom":        {"min_area": 100, "ideal_area": 150, "aspect_ratio": (0.7, 1.4)},
    "master bedroom": {"min_area": 180, "ideal_area": 250, "aspect_ratio": (0.6, 1.2)},
    "living room":    {"min_area": 150, "ideal_area": 250, "aspect_ratio": (0.5, 1.5)},
    "lounge":         {"min_area": 150, "ideal_area": 250, "aspect_ratio": (0.5, 1.5)},
    "kitchen":        {"min_area": 80,  "ideal_area": 120, "aspect_ratio": (0.6, 1.4)},
    "bathroom":       {"min_area": 35,  "ideal_area": 50,  "aspect_ratio": (0.6, 1.2)},
    "toilet":         {"min_area": 20,  "ideal_area": 30,  "aspect_ratio": (0.5, 1.0)},
    "dining":         {"min_area": 100, "ideal_area": 150, "aspect_ratio": (0.7, 1.4)},
    "office":         {"min_area": 80,  "ideal_area": 120, "aspect_ratio": (0.6, 1.4)},
    "garage":         {"min_area": 200, "ideal_area": 300, "aspect_ratio": (0.4, 0.8)},
    "store":          {"min_area": 30,  "ideal_area": 50,  "aspect_ratio": (0.5, 1.5)},
    "lobby":          {"min_area": 50,  "ideal_area": 100, "aspect_ratio": (0.5, 2.0)},
    "corridor":       {"min_area": 30,  "ideal_area": 60,  "aspect_ratio": (0.1, 0.3)},
    "staircase":      {"min_area": 40,  "ideal_area": 60,  "aspect_ratio": (0.4, 0.8)},
}

# Profile used when neither the room type nor its name is in the table
DEFAULT_STANDARD = "bedroom"

# Wall thickness classes (feet)
WALL_THICKNESS = {
    "exterior": 1.0,    # 12" brick
    "interior": 0.5,    # 6"
    "partition": 0.33,  # 4"
}

DOOR_WIDTH = 3.0
DOOR_HEIGHT = 0.5
WINDOW_WIDTH = 4.0
WINDOW_HEIGHT = 0.5

# Substrings of a room's type that qualify it for a window
WINDOW_ROOM_KEYWORDS = ("bedroom", "living", "lounge", "dining", "kitchen", "office")

# (substring, inferred type) checked in order
_TYPE_KEYWORDS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("bed",), "bedroom"),
    (("bath", "toilet"), "bathroom"),
    (("kitchen",), "kitchen"),
    (("living", "lounge"), "living room"),
    (("dining",), "dining"),
    (("office",), "office"),
    (("garage",), "garage"),
    (("store",), "store"),
)


def lookup_standard(room_type: Optional[str], name: str = "") -> Tuple[str, dict, bool]:
    """
    Find the standards profile for a room.

    The room type is tried first, then the room name, then the generic
    ``bedroom`` profile.

    Returns
    -------
    tuple
        ``(key, profile, matched)`` where *matched* is False when the
        generic fallback was used.
    """
    for candidate in (room_type, name):
        if not candidate:
            continue
        key = candidate.strip().lower()
        if key in ROOM_STANDARDS:
            return key, ROOM_STANDARDS[key], True
    return DEFAULT_STANDARD, ROOM_STANDARDS[DEFAULT_STANDARD], False


def aspect_ratio_midpoint(profile: dict) -> float:
    lo, hi = profile["aspect_ratio"]
    return (lo + hi) / 2


def infer_room_type(name: str) -> str:
    """Guess a room type from its display name ("Bedroom 2" -> "bedroom")."""
    name_lower = name.lower()
    for keywords, room_type in _TYPE_KEYWORDS:
        if any(k in name_lower for k in keywords):
            return room_type
    return "room"
