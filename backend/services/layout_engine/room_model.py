"""
Room and layout data model.

Input side: :class:`RoomSpec`, :class:`FloorSpec` and :class:`PlanData`
mirror the camelCase plan payload produced upstream.  Output side:
:class:`RoomLayout` and friends are plain dataclasses whose ``to_dict``
emits the same camelCase shape the renderers consume.  All coordinates
are absolute, in feet, measured from the plot corner at (0, 0).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from shapely.geometry import Polygon, box


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RoomSpec:
    """A room the caller wants placed."""

    name: str
    area_sqft: float
    type: Optional[str] = None
    dimensions: Optional[Tuple[float, float]] = None   # (length, width)
    position: Optional[Tuple[float, float]] = None     # (x, y)

    @property
    def room_id(self) -> str:
        """Key used to match text constraints against this room."""
        return self.name.lower()

    @staticmethod
    def from_dict(data: dict) -> "RoomSpec":
        dims = data.get("dimensions")
        pos = data.get("position")
        return RoomSpec(
            name=str(data.get("name", "")),
            area_sqft=float(data.get("areaSqft", 0) or 0),
            type=data.get("type") or None,
            dimensions=(float(dims["length"]), float(dims["width"])) if dims else None,
            position=(float(pos["x"]), float(pos["y"])) if pos else None,
        )


@dataclass(frozen=True)
class FloorSpec:
    level: str
    rooms: Tuple[RoomSpec, ...]

    @staticmethod
    def from_dict(data: dict) -> "FloorSpec":
        return FloorSpec(
            level=str(data.get("level", "Ground")),
            rooms=tuple(RoomSpec.from_dict(r) for r in data.get("rooms", [])),
        )


@dataclass(frozen=True)
class PlanData:
    """Top-level plan payload."""

    floors: Tuple[FloorSpec, ...]
    building_type: Optional[str] = None
    total_area: Optional[float] = None
    plot_dimensions: Optional[Tuple[float, float]] = None   # (width, height)

    @staticmethod
    def from_dict(data: dict) -> "PlanData":
        plot = data.get("plotDimensions")
        total = data.get("totalArea")
        return PlanData(
            floors=tuple(FloorSpec.from_dict(f) for f in data.get("floors", [])),
            building_type=data.get("buildingType"),
            total_area=float(total) if total else None,
            plot_dimensions=(float(plot["width"]), float(plot["height"])) if plot else None,
        )


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

@dataclass
class DoorLayout:
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0
    type: str = "single"            # single | double | sliding
    connects_to: Optional[str] = None

    def to_dict(self) -> dict:
        d = {
            "x": self.x, "y": self.y,
            "width": self.width, "height": self.height,
            "rotation": self.rotation, "type": self.type,
        }
        if self.connects_to is not None:
            d["connectsTo"] = self.connects_to
        return d


@dataclass
class WindowLayout:
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0
    type: str = "double"            # single | double | bay

    def to_dict(self) -> dict:
        return {
            "x": self.x, "y": self.y,
            "width": self.width, "height": self.height,
            "rotation": self.rotation, "type": self.type,
        }


@dataclass
class RoomLayout:
    """A placed room.  Position may change during placement; size never does."""

    id: str
    name: str
    type: str
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0
    doors: List[DoorLayout] = field(default_factory=list)
    windows: List[WindowLayout] = field(default_factory=list)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(minx, miny, maxx, maxy)"""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def polygon(self) -> Polygon:
        """Room rectangle as a Shapely Polygon."""
        return box(*self.bounds)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "rotation": self.rotation,
            "doors": [d.to_dict() for d in self.doors],
            "windows": [w.to_dict() for w in self.windows],
        }

    def __repr__(self) -> str:
        return (
            f"RoomLayout(id='{self.id}', name='{self.name}', "
            f"x={self.x:.2f}, y={self.y:.2f}, {self.width:.1f}x{self.height:.1f})"
        )


@dataclass
class WallLayout:
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float
    type: str                       # exterior | interior | partition

    @property
    def length(self) -> float:
        return ((self.x2 - self.x1) ** 2 + (self.y2 - self.y1) ** 2) ** 0.5

    def to_dict(self) -> dict:
        return {
            "x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2,
            "thickness": self.thickness, "type": self.type,
        }


@dataclass
class Rect:
    """Axis-aligned rectangle used for corridors and stairwells."""

    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass
class FloorLayout:
    level: str
    rooms: List[RoomLayout]
    walls: List[WallLayout]
    bounding_box: Tuple[float, float]           # (width, height)
    corridors: List[Rect] = field(default_factory=list)
    stairs: Optional[Rect] = None

    def to_dict(self) -> dict:
        circulation = {"corridors": [c.to_dict() for c in self.corridors]}
        if self.stairs is not None:
            circulation["stairs"] = self.stairs.to_dict()
        return {
            "level": self.level,
            "rooms": [r.to_dict() for r in self.rooms],
            "walls": [w.to_dict() for w in self.walls],
            "boundingBox": {"width": self.bounding_box[0], "height": self.bounding_box[1]},
            "circulation": circulation,
        }


@dataclass
class LayoutResult:
    success: bool
    floors: List[FloorLayout]
    plot_dimensions: Tuple[float, float]        # (width, height)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "floors": [f.to_dict() for f in self.floors],
            "plotDimensions": {
                "width": self.plot_dimensions[0],
                "height": self.plot_dimensions[1],
            },
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
