"""
Placement constraints extracted from a free-text prompt.

Two phrase shapes are recognised (case-insensitive):

  * ``"kitchen near lounge"`` (also *beside*, *next to*, *adjacent to*)
  * ``"stairs on right"`` (also *at*, *in*; sides left/right/front/back/center)

Room names are one or two words and are lower-cased into room ids.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import networkx as nx


POSITIONS = ("left", "right", "front", "back", "center")

_ROOM = r"(\w+(?:\s+\w+)?)"
ADJACENCY_PATTERN = re.compile(
    _ROOM + r"\s+(?:near|beside|next to|adjacent to)\s+" + _ROOM,
    re.IGNORECASE,
)
POSITION_PATTERN = re.compile(
    _ROOM + r"\s+(?:on|at|in)\s+(left|right|front|back|center)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class LayoutConstraint:
    """A placement directive for one room."""

    room_id: str
    adjacent_to: Tuple[str, ...] = ()
    position: Optional[str] = None
    min_area: Optional[float] = None
    max_area: Optional[float] = None
    aspect_ratio: Optional[Tuple[float, float]] = None   # (min, max)

    def __post_init__(self):
        if self.position is not None and self.position not in POSITIONS:
            raise ValueError(f"Unknown position '{self.position}'")
        for label, value in (("min_area", self.min_area), ("max_area", self.max_area)):
            if value is not None and value <= 0:
                raise ValueError(f"{label} for '{self.room_id}' must be positive, got {value:g}")
        if (self.min_area is not None and self.max_area is not None
                and self.min_area > self.max_area):
            raise ValueError(f"min_area exceeds max_area for '{self.room_id}'")
        if self.aspect_ratio is not None:
            lo, hi = self.aspect_ratio
            if lo <= 0 or hi <= 0 or lo > hi:
                raise ValueError(
                    f"aspect_ratio for '{self.room_id}' must satisfy 0 < min <= max, "
                    f"got ({lo:g}, {hi:g})")

    def to_dict(self) -> dict:
        d = {"roomId": self.room_id}
        if self.adjacent_to:
            d["adjacentTo"] = list(self.adjacent_to)
        if self.position:
            d["position"] = self.position
        if self.min_area is not None:
            d["minArea"] = self.min_area
        if self.max_area is not None:
            d["maxArea"] = self.max_area
        if self.aspect_ratio is not None:
            d["aspectRatio"] = {"min": self.aspect_ratio[0], "max": self.aspect_ratio[1]}
        return d

    @staticmethod
    def from_dict(data: dict) -> "LayoutConstraint":
        ar = data.get("aspectRatio")
        min_area, max_area = data.get("minArea"), data.get("maxArea")
        return LayoutConstraint(
            room_id=str(data["roomId"]).lower(),
            adjacent_to=tuple(a.lower() for a in data.get("adjacentTo") or ()),
            position=data.get("position"),
            min_area=float(min_area) if min_area is not None else None,
            max_area=float(max_area) if max_area is not None else None,
            aspect_ratio=(float(ar["min"]), float(ar["max"])) if ar else None,
        )


def parse_constraints(prompt: Optional[str]) -> List[LayoutConstraint]:
    """
    Extract layout constraints from *prompt*.

    All adjacency matches come first, then all position matches, each in
    left-to-right order.  A room may appear in both lists.
    """
    if not prompt:
        return []

    constraints: List[LayoutConstraint] = []
    for m in ADJACENCY_PATTERN.finditer(prompt):
        constraints.append(LayoutConstraint(
            room_id=m.group(1).lower(),
            adjacent_to=(m.group(2).lower(),),
        ))
    for m in POSITION_PATTERN.finditer(prompt):
        constraints.append(LayoutConstraint(
            room_id=m.group(1).lower(),
            position=m.group(2).lower(),
        ))
    return constraints


def constrained_room_ids(constraints: List[LayoutConstraint]) -> set:
    return {c.room_id for c in constraints}


def find_position(constraints: List[LayoutConstraint], room_id: str) -> Optional[str]:
    """First position directive for *room_id*, ignoring adjacency-only entries."""
    for c in constraints:
        if c.room_id == room_id and c.position:
            return c.position
    return None


def find_sizing(constraints: List[LayoutConstraint], room_id: str) -> Optional[LayoutConstraint]:
    """First constraint for *room_id* that carries area or aspect-ratio limits."""
    for c in constraints:
        if c.room_id != room_id:
            continue
        if c.min_area is not None or c.max_area is not None or c.aspect_ratio is not None:
            return c
    return None


def build_constraint_graph(constraints: List[LayoutConstraint]) -> nx.Graph:
    """
    Build a graph of the rooms named in *constraints*.

    Nodes are room ids (with a ``position`` attribute when one was
    requested); edges join rooms that should be adjacent.
    """
    G = nx.Graph()
    for c in constraints:
        if c.room_id not in G:
            G.add_node(c.room_id, position=None)
        if c.position and G.nodes[c.room_id]["position"] is None:
            G.nodes[c.room_id]["position"] = c.position
        for other in c.adjacent_to:
            if other not in G:
                G.add_node(other, position=None)
            if other != c.room_id:
                G.add_edge(c.room_id, other)
    return G


def adjacency_pairs(constraints: List[LayoutConstraint]) -> List[Tuple[str, str]]:
    """Requested (room, neighbour) pairs in prompt order."""
    pairs = []
    for c in constraints:
        for other in c.adjacent_to:
            if other != c.room_id:
                pairs.append((c.room_id, other))
    return pairs
