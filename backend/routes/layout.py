"""Floor plan layout routes."""

from fastapi import APIRouter, HTTPException
from schemas import LayoutRequest, LayoutResponse, StandardOut
from services.layout_engine import (
    InvalidInputError,
    LayoutConstraint,
    LayoutEngine,
    PlanData,
    resolve_plot_dimensions,
)
from services.layout_engine.standards import ROOM_STANDARDS

router = APIRouter(prefix="/api", tags=["layout"])


@router.post("/layout", response_model=LayoutResponse)
async def generate_layout(data: LayoutRequest):
    """Lay out every floor of a plan inside its plot."""
    try:
        plan = PlanData.from_dict(data.plan.model_dump(exclude_none=True))
        constraints = [
            LayoutConstraint.from_dict(c.model_dump(exclude_none=True))
            for c in data.constraints
        ]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        plot_width, plot_height = resolve_plot_dimensions(plan)
        engine = LayoutEngine(plot_width, plot_height)
        result = engine.generate_layout(plan, data.prompt, constraints)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=e.messages)

    return result.to_dict()


@router.get("/layout/standards", response_model=list[StandardOut])
async def list_standards():
    """Room standards used to size rooms given only an area."""
    return [
        StandardOut(
            room_type=room_type,
            min_area=s["min_area"],
            ideal_area=s["ideal_area"],
            aspect_ratio_min=s["aspect_ratio"][0],
            aspect_ratio_max=s["aspect_ratio"][1],
        )
        for room_type, s in ROOM_STANDARDS.items()
    ]
