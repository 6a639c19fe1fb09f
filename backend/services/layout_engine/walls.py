"""
Wall generation from placed room rectangles.

The plot perimeter always yields four exterior walls.  Each room adds its
four edges as interior walls; collinear edges that coincide or overlap
(two rooms built against each other) can be merged into a single wall run.
"""

import logging
from typing import Dict, List, Tuple

from shapely.geometry import LineString
from shapely.ops import linemerge, unary_union

from .room_model import RoomLayout, WallLayout
from .standards import WALL_THICKNESS

logger = logging.getLogger(__name__)

Segment = Tuple[float, float, float, float]


def exterior_walls(plot_width: float, plot_height: float) -> List[WallLayout]:
    """Bottom, top, left and right walls tracing the full plot rectangle."""
    t = WALL_THICKNESS["exterior"]
    return [
        WallLayout(0, 0, plot_width, 0, t, "exterior"),
        WallLayout(0, plot_height, plot_width, plot_height, t, "exterior"),
        WallLayout(0, 0, 0, plot_height, t, "exterior"),
        WallLayout(plot_width, 0, plot_width, plot_height, t, "exterior"),
    ]


def room_edges(room: RoomLayout) -> List[Segment]:
    """Bottom, top, left, right edges of *room*, each ordered low -> high."""
    x1, y1, x2, y2 = room.bounds
    return [
        (x1, y1, x2, y1),
        (x1, y2, x2, y2),
        (x1, y1, x1, y2),
        (x2, y1, x2, y2),
    ]


def _line_key(seg: Segment) -> Tuple[str, float]:
    x1, y1, x2, y2 = seg
    if y1 == y2:
        return ("h", round(y1, 6))
    return ("v", round(x1, 6))


def _merge_collinear(segments: List[Segment]) -> List[Segment]:
    """Union collinear segments into maximal runs, sorted along the line."""
    merged = unary_union([LineString([(s[0], s[1]), (s[2], s[3])]) for s in segments])
    if merged.is_empty:
        return []
    if merged.geom_type == "MultiLineString":
        merged = linemerge(merged)
    lines = list(merged.geoms) if hasattr(merged, "geoms") else [merged]

    runs = []
    for line in lines:
        if line.is_empty:
            continue
        (ax, ay), (bx, by) = line.coords[0], line.coords[-1]
        if (bx, by) < (ax, ay):
            ax, ay, bx, by = bx, by, ax, ay
        runs.append((ax, ay, bx, by))
    return sorted(runs)


def _clusters(edges: List[Segment], indices: List[int]) -> List[List[int]]:
    """
    Split a collinear group into clusters of edges that touch or overlap.

    Returns lists of edge indices; a lone edge forms a cluster of one.
    """
    first = edges[indices[0]]
    axis = 0 if first[1] == first[3] else 1
    ordered = sorted(indices, key=lambda i: (edges[i][axis], edges[i][axis + 2], i))

    clusters: List[List[int]] = [[ordered[0]]]
    reach = edges[ordered[0]][axis + 2]
    for i in ordered[1:]:
        start, end = edges[i][axis], edges[i][axis + 2]
        if start <= reach + 1e-9:
            clusters[-1].append(i)
            reach = max(reach, end)
        else:
            clusters.append([i])
            reach = end
    return clusters


def interior_walls(rooms: List[RoomLayout], merge_shared: bool = True) -> List[WallLayout]:
    """
    Interior walls for every room edge.

    With *merge_shared* off, every room contributes its own four walls and
    shared boundaries are drawn twice.  With it on, edges lying on the same
    line that touch or overlap are emitted once, as a merged run, in place
    of their first member.  Edges that share nothing keep their position in
    the output, so rooms standing apart always get exactly four walls each.
    """
    t = WALL_THICKNESS["interior"]
    edges = [e for r in rooms for e in room_edges(r)]
    if not merge_shared:
        return [WallLayout(*e, t, "interior") for e in edges]

    groups: Dict[Tuple[str, float], List[int]] = {}
    for i, e in enumerate(edges):
        groups.setdefault(_line_key(e), []).append(i)

    cluster_of: Dict[int, List[int]] = {}
    for indices in groups.values():
        for cluster in _clusters(edges, indices):
            for i in cluster:
                cluster_of[i] = cluster

    walls: List[WallLayout] = []
    for i, e in enumerate(edges):
        cluster = cluster_of[i]
        if len(cluster) == 1:
            walls.append(WallLayout(*e, t, "interior"))
        elif i == min(cluster):
            runs = _merge_collinear([edges[j] for j in cluster])
            walls.extend(WallLayout(*run, t, "interior") for run in runs)

    if len(walls) != len(edges):
        logger.debug("Merged %d room edges into %d interior walls", len(edges), len(walls))
    return walls


def generate_walls(rooms: List[RoomLayout], plot_width: float, plot_height: float,
                   merge_shared: bool = True) -> List[WallLayout]:
    """Interior walls followed by the four exterior walls."""
    return interior_walls(rooms, merge_shared) + exterior_walls(plot_width, plot_height)
