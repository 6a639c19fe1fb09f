"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Optional


# ---------- Plan input ----------
class Dimensions(BaseModel):
    length: float
    width: float


class Position(BaseModel):
    x: float
    y: float


class PlotDimensions(BaseModel):
    width: float
    height: float


class RoomIn(BaseModel):
    name: str
    type: Optional[str] = None
    areaSqft: float = 0
    dimensions: Optional[Dimensions] = None
    position: Optional[Position] = None


class FloorIn(BaseModel):
    level: str = "Ground"
    rooms: list[RoomIn] = []


class PlanIn(BaseModel):
    buildingType: Optional[str] = None
    totalArea: Optional[float] = None
    plotDimensions: Optional[PlotDimensions] = None
    floors: list[FloorIn] = []


class AspectRatio(BaseModel):
    min: float
    max: float


class ConstraintIn(BaseModel):
    roomId: str
    adjacentTo: Optional[list[str]] = None
    position: Optional[str] = Field(None, description="left | right | front | back | center")
    minArea: Optional[float] = None
    maxArea: Optional[float] = None
    aspectRatio: Optional[AspectRatio] = None


class LayoutRequest(BaseModel):
    plan: PlanIn
    prompt: Optional[str] = None
    constraints: list[ConstraintIn] = []


# ---------- Layout output ----------
class LayoutResponse(BaseModel):
    success: bool
    floors: list[dict]
    plotDimensions: PlotDimensions
    errors: list[str] = []
    warnings: list[str] = []


class StandardOut(BaseModel):
    room_type: str
    min_area: float
    ideal_area: float
    aspect_ratio_min: float
    aspect_ratio_max: float
