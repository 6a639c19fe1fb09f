"""
Tests for room sizing and placement: standards lookup, dimension
resolution, ordering, position constraints, shelf packing and the
repair pass.
"""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(__file__))

import pytest

from services.layout_engine.constraints import LayoutConstraint, parse_constraints
from services.layout_engine.dimensions import resolve_dimensions, round_to_step
from services.layout_engine.errors import (
    CAPACITY_EXCEEDED,
    CONTAINMENT_CLAMPED,
    MISSING_STANDARD,
    OVERLAP_DETECTED,
    Diagnostics,
    InvalidInputError,
)
from services.layout_engine.geometry_utils import detect_overlaps, is_contained, usable_interior
from services.layout_engine.adjacency import reorder_for_adjacency
from services.layout_engine.placement import order_rooms, place_rooms
from services.layout_engine.room_model import RoomSpec
from services.layout_engine.standards import infer_room_type, lookup_standard


def _by_name(rooms):
    return {r.name: r for r in rooms}


# ============================================================================
# Standards + dimensions
# ============================================================================

class TestStandards:
    def test_lookup_by_type_then_name(self):
        key, _, matched = lookup_standard("kitchen", "Cook Space")
        assert (key, matched) == ("kitchen", True)
        key, _, matched = lookup_standard(None, "Bathroom")
        assert (key, matched) == ("bathroom", True)
        key, _, matched = lookup_standard("unknown", "Dining")
        assert (key, matched) == ("dining", True)

    def test_fallback_to_bedroom(self):
        key, profile, matched = lookup_standard(None, "Stairs")
        assert key == "bedroom"
        assert matched is False
        assert profile["aspect_ratio"] == (0.7, 1.4)

    def test_infer_room_type(self):
        assert infer_room_type("Bedroom 2") == "bedroom"
        assert infer_room_type("Guest Toilet") == "bathroom"
        assert infer_room_type("Lounge") == "living room"
        assert infer_room_type("Veranda") == "room"


class TestResolveDimensions:
    def test_round_half_up(self):
        assert round_to_step(12.25) == 12.5
        assert round_to_step(11.74) == 11.5
        assert round_to_step(6.0) == 6.0

    def test_from_area(self):
        # bedroom r = 1.05 -> sqrt(157.5) = 12.55, 150 / 12.55 = 11.95
        assert resolve_dimensions(RoomSpec("Bedroom", 150)) == (12.5, 12.0)
        assert resolve_dimensions(RoomSpec("Kitchen", 100)) == (10.0, 10.0)
        assert resolve_dimensions(RoomSpec("Bathroom", 40)) == (6.0, 6.5)

    def test_explicit_dimensions_win(self):
        """12 x 10 is used verbatim despite areaSqft = 100."""
        room = RoomSpec("Office", 100, dimensions=(12, 10))
        assert resolve_dimensions(room) == (12.0, 10.0)

    def test_type_beats_name(self):
        # garage r = 0.6 -> sqrt(180) = 13.4, 300 / 13.4 = 22.4
        room = RoomSpec("Bedroom", 300, type="garage")
        assert resolve_dimensions(room) == (13.5, 22.5)

    def test_missing_standard_warns(self):
        diag = Diagnostics()
        resolve_dimensions(RoomSpec("Stairs", 60), diagnostics=diag)
        assert diag.codes() == [MISSING_STANDARD]

    def test_sizing_constraint(self):
        sizing = LayoutConstraint(room_id="kitchen", min_area=144, aspect_ratio=(1.0, 1.0))
        assert resolve_dimensions(RoomSpec("Kitchen", 100), sizing) == (12.0, 12.0)

    @pytest.mark.parametrize("area", [0, -10])
    def test_non_positive_area(self, area):
        with pytest.raises(InvalidInputError):
            resolve_dimensions(RoomSpec("Kitchen", area))

    def test_non_positive_dimensions(self):
        with pytest.raises(InvalidInputError):
            resolve_dimensions(RoomSpec("Kitchen", 100, dimensions=(0, 10)))

    def test_area_rounding_below_grid(self):
        # sqrt(0.05 * 1.05) = 0.23 ft rounds to 0
        with pytest.raises(InvalidInputError):
            resolve_dimensions(RoomSpec("Closet", 0.05))

    def test_thin_dimensions_rejected(self):
        with pytest.raises(InvalidInputError):
            resolve_dimensions(RoomSpec("Closet", 2, dimensions=(0.2, 10)))

    def test_smallest_room_on_grid(self):
        assert resolve_dimensions(RoomSpec("Closet", 1, dimensions=(0.3, 0.5))) == (0.5, 0.5)

    def test_max_area_shrinks_below_grid(self):
        sizing = LayoutConstraint(room_id="kitchen", max_area=0.01)
        with pytest.raises(InvalidInputError):
            resolve_dimensions(RoomSpec("Kitchen", 100), sizing)


# ============================================================================
# Ordering
# ============================================================================

class TestOrderRooms:
    def test_constrained_first_then_area_desc(self):
        rooms = [
            RoomSpec("Bathroom", 40),
            RoomSpec("Kitchen", 100),
            RoomSpec("Stairs", 60),
            RoomSpec("Bedroom", 150),
        ]
        dims = [resolve_dimensions(r) for r in rooms]
        order = order_rooms(rooms, dims, parse_constraints("stairs on right"))
        assert [rooms[i].name for i in order] == ["Stairs", "Bedroom", "Kitchen", "Bathroom"]

    def test_constrained_keep_input_order(self):
        rooms = [RoomSpec("Store", 30), RoomSpec("Garage", 300), RoomSpec("Office", 100)]
        dims = [resolve_dimensions(r) for r in rooms]
        order = order_rooms(rooms, dims, parse_constraints("garage on left, store at back"))
        assert [rooms[i].name for i in order] == ["Store", "Garage", "Office"]

    def test_resolved_area_not_input_area(self):
        rooms = [RoomSpec("Office", 100, dimensions=(12, 10)), RoomSpec("Den", 110, dimensions=(10, 10))]
        dims = [resolve_dimensions(r) for r in rooms]
        assert order_rooms(rooms, dims, []) == [0, 1]


# ============================================================================
# Placement
# ============================================================================

class TestShelfPacking:
    def test_single_row(self):
        rooms = [RoomSpec("Bedroom", 150), RoomSpec("Bathroom", 40), RoomSpec("Kitchen", 100)]
        placed = place_rooms(rooms, [], 40, 60)
        assert [(r.name, r.x, r.y) for r in placed] == [
            ("Bedroom", 1.0, 1.0),
            ("Kitchen", 14.0, 1.0),
            ("Bathroom", 24.5, 1.0),
        ]
        assert [r.id for r in placed] == ["room-0", "room-1", "room-2"]

    def test_wraps_to_new_row(self):
        rooms = [
            RoomSpec("A", 120, dimensions=(12, 10)),
            RoomSpec("B", 96, dimensions=(12, 8)),
            RoomSpec("C", 60, dimensions=(10, 6)),
        ]
        placed = _by_name(place_rooms(rooms, [], 30, 40))
        assert (placed["A"].x, placed["A"].y) == (1.0, 1.0)
        assert (placed["B"].x, placed["B"].y) == (13.5, 1.0)
        # 26 + 10 > 29, so C starts a row below the tallest room plus a wall
        assert (placed["C"].x, placed["C"].y) == (1.0, 11.5)

    def test_sizes_never_change(self):
        rooms = [RoomSpec("Office", 100, dimensions=(12, 10))]
        room = place_rooms(rooms, [], 40, 60)[0]
        assert (room.width, room.height) == (12.0, 10.0)

    def test_type_inferred_when_missing(self):
        placed = place_rooms([RoomSpec("Bedroom 2", 120)], [], 40, 60)
        assert placed[0].type == "bedroom"


class TestPositionConstraints:
    @pytest.mark.parametrize("prompt, expected", [
        ("den on left", (1.0, 1.0)),
        ("den on right", (29.0, 1.0)),
        ("den at front", (1.0, 1.0)),
        ("den at back", (1.0, 51.0)),
        ("den in center", (15.0, 26.0)),
    ])
    def test_sides(self, prompt, expected):
        rooms = [RoomSpec("Den", 80, dimensions=(10, 8))]
        room = place_rooms(rooms, parse_constraints(prompt), 40, 60)[0]
        assert (room.x, room.y) == expected

    def test_right_edge_flush(self):
        """A room pinned right touches the interior-right boundary."""
        rooms = [RoomSpec("Bedroom", 150), RoomSpec("Stairs", 60)]
        placed = _by_name(place_rooms(rooms, parse_constraints("stairs on right"), 40, 60))
        stairs = placed["Stairs"]
        assert stairs.x + stairs.width == pytest.approx(40 - 1.0)

    def test_explicit_position_verbatim(self):
        rooms = [RoomSpec("Store", 40, dimensions=(8, 5), position=(20, 30))]
        room = place_rooms(rooms, [], 40, 60)[0]
        assert (room.x, room.y) == (20.0, 30.0)

    def test_constraint_beats_explicit_position(self):
        rooms = [RoomSpec("Store", 40, dimensions=(8, 5), position=(20, 30))]
        room = place_rooms(rooms, parse_constraints("store on left"), 40, 60)[0]
        assert room.x == 1.0


class TestRepair:
    def test_explicit_position_clamped(self):
        diag = Diagnostics()
        rooms = [RoomSpec("Shed", 100, dimensions=(10, 10), position=(35, 55))]
        room = place_rooms(rooms, [], 40, 60, diagnostics=diag)[0]
        assert (room.x, room.y) == (29.0, 49.0)
        assert CONTAINMENT_CLAMPED in diag.codes()

    def test_packed_room_moves_off_pinned_room(self):
        diag = Diagnostics()
        rooms = [
            RoomSpec("Den", 80, dimensions=(10, 8)),
            RoomSpec("Hall", 120, dimensions=(12, 10)),
        ]
        placed = _by_name(place_rooms(rooms, parse_constraints("den on left"), 40, 60,
                                      diagnostics=diag))
        assert (placed["Den"].x, placed["Den"].y) == (1.0, 1.0)
        assert (placed["Hall"].x, placed["Hall"].y) == (11.5, 1.0)
        assert OVERLAP_DETECTED not in diag.codes()

    def test_overflow_is_contained_and_flagged(self):
        diag = Diagnostics()
        rooms = [RoomSpec(n, 100, dimensions=(10, 10)) for n in ("A", "B", "C")]
        placed = place_rooms(rooms, [], 20, 20, diagnostics=diag)
        interior = usable_interior(20, 20)
        assert len(placed) == 3
        assert all(is_contained(r, interior) for r in placed)
        assert detect_overlaps(placed)
        assert OVERLAP_DETECTED in diag.codes()

    def test_over_capacity_flagged(self):
        diag = Diagnostics()
        rooms = [RoomSpec("Garage", 300), RoomSpec("Bedroom", 150), RoomSpec("Kitchen", 100)]
        place_rooms(rooms, [], 20, 20, diagnostics=diag)
        assert CAPACITY_EXCEEDED in diag.codes()

    def test_oversize_room_flagged(self):
        diag = Diagnostics()
        rooms = [RoomSpec("Hangar", 900, dimensions=(30, 30))]
        room = place_rooms(rooms, [], 20, 20, diagnostics=diag)[0]
        assert (room.x, room.y) == (1.0, 1.0)
        assert CAPACITY_EXCEEDED in diag.codes()

    def test_clean_layout_has_no_warnings(self):
        diag = Diagnostics()
        rooms = [RoomSpec("Bedroom", 150), RoomSpec("Bathroom", 40), RoomSpec("Kitchen", 100)]
        place_rooms(rooms, [], 40, 60, diagnostics=diag)
        assert diag.warnings == []


class TestAdjacencyPass:
    ROOMS = [RoomSpec("Bathroom", 40), RoomSpec("Bedroom", 150), RoomSpec("Kitchen", 100)]

    def test_off_by_default(self):
        placed = _by_name(place_rooms(self.ROOMS, parse_constraints("bathroom near kitchen"), 40, 60))
        assert placed["Bathroom"].x == 1.0

    def test_packs_pair_side_by_side(self):
        diag = Diagnostics()
        placed = _by_name(place_rooms(self.ROOMS, parse_constraints("bathroom near kitchen"),
                                      40, 60, diagnostics=diag, honor_adjacency=True))
        kitchen, bathroom = placed["Kitchen"], placed["Bathroom"]
        assert bathroom.x == kitchen.x + kitchen.width + 0.5
        assert bathroom.y == kitchen.y
        assert diag.warnings == []

    def test_reorder_follows_target(self):
        order = reorder_for_adjacency([0, 1, 2], self.ROOMS, parse_constraints("bathroom near kitchen"))
        assert order == [1, 2, 0]

    def test_reorder_leaves_positioned_room(self):
        constraints = parse_constraints("bathroom near kitchen, bathroom at back")
        assert reorder_for_adjacency([0, 1, 2], self.ROOMS, constraints) == [0, 1, 2]
