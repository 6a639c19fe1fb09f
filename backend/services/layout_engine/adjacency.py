"""
Adjacency handling for placed rooms.

Builds a NetworkX graph where nodes are room ids and edges connect rooms
whose rectangles touch (allowing for the interior wall gap between them).
Used by the optional adjacency pass: prompt phrases such as "kitchen near
lounge" re-order the shelf packing so the pair lands side by side, and any
pair that still ends up apart is reported.
"""

from typing import Dict, List, Sequence, Tuple

import networkx as nx
from shapely.geometry import box

from .constraints import LayoutConstraint, adjacency_pairs, build_constraint_graph
from .room_model import RoomLayout, RoomSpec
from .standards import WALL_THICKNESS


def build_adjacency_graph(rooms: List[RoomLayout],
                          gap: float = WALL_THICKNESS["interior"],
                          tolerance: float = 1.0) -> nx.Graph:
    """
    Build an adjacency graph from placed rooms.

    Two rooms are adjacent if, after growing each by ``gap / 2`` on every
    side, they share a boundary of length > *tolerance*.

    Parameters
    ----------
    rooms : list[RoomLayout]
        Placed rooms.  Nodes are keyed by lower-cased room name.
    gap : float
        Wall gap (feet) still counted as touching.
    tolerance : float
        Minimum shared boundary length (feet) to count as adjacent.

    Returns
    -------
    nx.Graph
        Undirected graph with the shared length as edge weight
        ``shared_length``.
    """
    G = nx.Graph()
    half = gap / 2 + 1e-6
    grown = []
    for r in rooms:
        G.add_node(r.name.lower(), room_id=r.id, room_type=r.type)
        x1, y1, x2, y2 = r.bounds
        grown.append(box(x1 - half, y1 - half, x2 + half, y2 + half))

    for i in range(len(rooms)):
        for j in range(i + 1, len(rooms)):
            shared = grown[i].intersection(grown[j])
            if shared.is_empty:
                continue
            minx, miny, maxx, maxy = shared.bounds
            length = max(maxx - minx, maxy - miny)
            if length > tolerance:
                G.add_edge(
                    rooms[i].name.lower(),
                    rooms[j].name.lower(),
                    shared_length=round(length, 4),
                )
    return G


def reorder_for_adjacency(order: List[int],
                          rooms: Sequence[RoomSpec],
                          constraints: List[LayoutConstraint]) -> List[int]:
    """
    Move each room that asked to be near another right after it in *order*.

    Rooms pinned by a position constraint or an explicit position are left
    where they are, since the shelf cursor does not decide where they go.
    """
    order = list(order)
    requested = build_constraint_graph(constraints)
    index_of: Dict[str, int] = {}
    for idx, r in enumerate(rooms):
        index_of.setdefault(r.room_id, idx)

    for room_id, target_id in adjacency_pairs(constraints):
        if room_id not in index_of or target_id not in index_of:
            continue
        mover = index_of[room_id]
        if requested.nodes[room_id]["position"] or rooms[mover].position is not None:
            continue
        order.remove(mover)
        order.insert(order.index(index_of[target_id]) + 1, mover)
    return order


def unsatisfied_adjacencies(placed: List[RoomLayout],
                            constraints: List[LayoutConstraint]) -> List[Tuple[str, str]]:
    """
    Edges of the requested constraint graph missing from the placed-room
    adjacency graph.  Pairs naming a room absent from the floor are skipped.
    """
    realised = build_adjacency_graph(placed)
    requested = build_constraint_graph(constraints)
    return [
        (a, b) for a, b in requested.edges()
        if a in realised and b in realised and not realised.has_edge(a, b)
    ]
