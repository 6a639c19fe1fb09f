"""
Layout assembly: plan data + optional prompt -> complete floor geometry.

For every floor the pipeline runs, in order: dimension resolution and
placement, wall synthesis, opening generation and circulation.  The
prompt is parsed once and its constraints apply to every floor.  All
state lives in locals of a single call, so one engine (or the module-level
helper) can serve concurrent callers.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple, Union

from config import (
    DEFAULT_PLOT_HEIGHT,
    DEFAULT_PLOT_WIDTH,
    LAYOUT_HONOR_ADJACENCY,
    LAYOUT_MERGE_SHARED_WALLS,
    LAYOUT_WINDOW_RULE,
)

from .circulation import generate_corridors, generate_stairs
from .constraints import LayoutConstraint, find_sizing, parse_constraints
from .dimensions import resolve_dimensions
from .errors import Diagnostics, InvalidInputError
from .openings import WINDOW_RULES, attach_openings
from .placement import place_rooms
from .room_model import FloorLayout, FloorSpec, LayoutResult, PlanData
from .standards import WALL_THICKNESS
from .walls import generate_walls

logger = logging.getLogger(__name__)

# width : height used when only the total area is known
PLOT_RATIO = 2 / 3


def resolve_plot_dimensions(plan: PlanData) -> Tuple[float, float]:
    """
    Plot size in feet.

    Explicit ``plotDimensions`` win; otherwise a 2:3 plot is derived from
    ``totalArea``; otherwise the configured default is used.
    """
    if plan.plot_dimensions is not None:
        return plan.plot_dimensions
    if plan.total_area is not None and plan.total_area > 0:
        width = math.sqrt(plan.total_area * PLOT_RATIO)
        return width, plan.total_area / width
    return DEFAULT_PLOT_WIDTH, DEFAULT_PLOT_HEIGHT


def check_plot(plot_width: float, plot_height: float) -> Optional[str]:
    """Problem with the plot envelope, or None if rooms can fit inside its walls."""
    minimum = 2 * WALL_THICKNESS["exterior"]
    if plot_width <= minimum or plot_height <= minimum:
        return (f"Plot must be larger than {minimum:g} x {minimum:g} ft "
                f"(twice the exterior wall), got {plot_width:g} x {plot_height:g}")
    return None


def validate_plan(plan: PlanData, constraints: Sequence[LayoutConstraint] = ()) -> None:
    """
    Reject plans that cannot be laid out.

    Every room is sized up front (with its sizing constraint, if any), so a
    room that is non-positive or rounds below the dimension grid is caught
    here rather than mid-placement.

    Raises
    ------
    InvalidInputError
        Listing every problem found: no floors, a floor without rooms,
        a room that cannot be sized, a non-positive total area, or a plot
        with no usable interior.
    """
    problems: List[str] = []
    if plan.plot_dimensions is not None:
        problem = check_plot(*plan.plot_dimensions)
        if problem:
            problems.append(problem)
    if plan.total_area is not None and plan.total_area <= 0:
        problems.append(f"Total area must be positive, got {plan.total_area:g}")
    if not plan.floors:
        problems.append("Plan has no floors")

    constraints = list(constraints)
    for floor in plan.floors:
        if not floor.rooms:
            problems.append(f"Floor '{floor.level}' has no rooms")
        for room in floor.rooms:
            try:
                resolve_dimensions(room, find_sizing(constraints, room.room_id))
            except InvalidInputError as e:
                problems.extend(f"Floor '{floor.level}': {m}" for m in e.messages)

    if problems:
        raise InvalidInputError(problems)


class LayoutEngine:
    """
    Lays out every floor of a plan inside a fixed rectangular plot.

    Parameters
    ----------
    plot_width, plot_height : float
        Plot envelope in feet (outer face of the exterior walls).
    merge_shared_walls : bool
        Emit coinciding room edges as one interior wall.
    window_rule : str
        ``"x_axis"`` or ``"all_sides"``; see :func:`openings.faces_exterior`.
    honor_adjacency : bool
        Pack "near" pairs side by side and report unmet ones.
    """

    def __init__(self, plot_width: float, plot_height: float,
                 merge_shared_walls: bool = LAYOUT_MERGE_SHARED_WALLS,
                 window_rule: str = LAYOUT_WINDOW_RULE,
                 honor_adjacency: bool = LAYOUT_HONOR_ADJACENCY):
        problem = check_plot(plot_width, plot_height)
        if problem:
            raise InvalidInputError([problem])
        if window_rule not in WINDOW_RULES:
            raise ValueError(f"Unknown window rule '{window_rule}'")
        self.plot_width = plot_width
        self.plot_height = plot_height
        self.merge_shared_walls = merge_shared_walls
        self.window_rule = window_rule
        self.honor_adjacency = honor_adjacency

    def parse_constraints(self, prompt: Optional[str]) -> List[LayoutConstraint]:
        return parse_constraints(prompt)

    def generate_floor_layout(self, floor: FloorSpec,
                              constraints: Sequence[LayoutConstraint] = (),
                              diagnostics: Optional[Diagnostics] = None) -> FloorLayout:
        """Place, wall, open and circulate one floor."""
        if diagnostics is None:
            diagnostics = Diagnostics(floor.level)

        rooms = place_rooms(
            floor.rooms, list(constraints), self.plot_width, self.plot_height,
            diagnostics=diagnostics, honor_adjacency=self.honor_adjacency,
        )
        walls = generate_walls(rooms, self.plot_width, self.plot_height,
                               merge_shared=self.merge_shared_walls)
        for room in rooms:
            attach_openings(room, self.plot_width, self.plot_height, self.window_rule)

        layout = FloorLayout(
            level=floor.level,
            rooms=rooms,
            walls=walls,
            bounding_box=(self.plot_width, self.plot_height),
            corridors=generate_corridors(rooms, self.plot_width, self.plot_height),
            stairs=generate_stairs(floor.level, self.plot_width),
        )
        logger.info(
            "Floor %s: %d rooms, %d walls, %d windows, corridor=%s, stairs=%s",
            floor.level, len(rooms), len(walls),
            sum(len(r.windows) for r in rooms),
            bool(layout.corridors), layout.stairs is not None,
        )
        return layout

    def generate_layout(self, plan: Union[PlanData, dict], prompt: Optional[str] = None,
                        constraints: Sequence[LayoutConstraint] = ()) -> LayoutResult:
        """
        Lay out every floor of *plan*.

        *constraints* are appended to those parsed from *prompt*.

        Raises
        ------
        InvalidInputError
            If the plan fails :func:`validate_plan`.
        """
        if isinstance(plan, dict):
            plan = PlanData.from_dict(plan)
        all_constraints = parse_constraints(prompt) + list(constraints)
        validate_plan(plan, all_constraints)

        if all_constraints:
            logger.debug("Constraints: %s", [c.to_dict() for c in all_constraints])

        diagnostics = Diagnostics()
        floors = [
            self.generate_floor_layout(floor, all_constraints, diagnostics.child(floor.level))
            for floor in plan.floors
        ]
        return LayoutResult(
            success=True,
            floors=floors,
            plot_dimensions=(self.plot_width, self.plot_height),
            warnings=list(diagnostics.warnings),
        )


def generate_accurate_layout(plan_data: Union[PlanData, dict],
                             prompt: Optional[str] = None,
                             constraints: Sequence[LayoutConstraint] = (),
                             **options) -> LayoutResult:
    """
    Build a :class:`LayoutResult` for *plan_data*.

    Unlike :meth:`LayoutEngine.generate_layout` this never raises for bad
    input: the result comes back with ``success=False``, no floors and the
    problems listed in ``errors``.  *options* are passed to
    :class:`LayoutEngine`.
    """
    try:
        plan = plan_data if isinstance(plan_data, PlanData) else PlanData.from_dict(plan_data)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Malformed plan data: %s", e)
        return LayoutResult(success=False, floors=[], plot_dimensions=(0.0, 0.0),
                            errors=[f"Malformed plan data: {e}"])

    plot_width, plot_height = resolve_plot_dimensions(plan)
    try:
        validate_plan(plan, parse_constraints(prompt) + list(constraints))
        engine = LayoutEngine(plot_width, plot_height, **options)
        return engine.generate_layout(plan, prompt, constraints)
    except InvalidInputError as e:
        logger.warning("Layout rejected: %s", e)
        return LayoutResult(success=False, floors=[],
                            plot_dimensions=(plot_width, plot_height),
                            errors=e.messages)
