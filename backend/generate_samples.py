"""Generate sample layout JSON files.

Creates 4 layouts:
  - a 3-room ground floor on a 40x60 plot
  - a 2-storey house sized from total area, with a placement prompt
  - a plan with explicit room dimensions and positions
  - an over-full plot, to show the capacity / overlap warnings

Each file holds the LayoutResult dictionary for one plan.
"""

import json
from pathlib import Path

from services.layout_engine import generate_accurate_layout

SAMPLES_DIR = Path(__file__).resolve().parent / "samples"

SAMPLES = {
    "ground_3_rooms.json": (
        {
            "plotDimensions": {"width": 40, "height": 60},
            "floors": [{"level": "Ground", "rooms": [
                {"name": "Bedroom", "areaSqft": 150},
                {"name": "Bathroom", "areaSqft": 40},
                {"name": "Kitchen", "areaSqft": 100},
            ]}],
        },
        None,
    ),
    "two_storey_prompt.json": (
        {
            "buildingType": "residential",
            "totalArea": 2400,
            "floors": [
                {"level": "Ground", "rooms": [
                    {"name": "Living Room", "areaSqft": 250},
                    {"name": "Kitchen", "areaSqft": 120},
                    {"name": "Dining", "areaSqft": 140},
                    {"name": "Main Entrance", "type": "lobby", "areaSqft": 60},
                ]},
                {"level": "First", "rooms": [
                    {"name": "Master Bedroom", "areaSqft": 250},
                    {"name": "Bedroom", "areaSqft": 150},
                    {"name": "Bathroom", "areaSqft": 50},
                    {"name": "Stairs", "type": "staircase", "areaSqft": 60},
                ]},
            ],
        },
        "kitchen near dining, stairs on right, living room at front",
    ),
    "explicit_geometry.json": (
        {
            "plotDimensions": {"width": 30, "height": 40},
            "floors": [{"level": "Ground", "rooms": [
                {"name": "Office", "areaSqft": 100,
                 "dimensions": {"length": 12, "width": 10}, "position": {"x": 1, "y": 1}},
                {"name": "Store", "areaSqft": 40,
                 "dimensions": {"length": 8, "width": 5}, "position": {"x": 13.5, "y": 1}},
            ]}],
        },
        None,
    ),
    "over_capacity.json": (
        {
            "plotDimensions": {"width": 20, "height": 20},
            "floors": [{"level": "Ground", "rooms": [
                {"name": "Garage", "areaSqft": 300},
                {"name": "Bedroom", "areaSqft": 150},
                {"name": "Kitchen", "areaSqft": 100},
            ]}],
        },
        None,
    ),
}


def create_sample(filename: str, plan: dict, prompt) -> Path:
    """Lay out *plan* and write the result as JSON."""
    result = generate_accurate_layout(plan, prompt)
    filepath = SAMPLES_DIR / filename
    filepath.write_text(json.dumps(result.to_dict(), indent=2))
    rooms = sum(len(f.rooms) for f in result.floors)
    print(f"  Created: {filepath.name}  ({rooms} rooms, {len(result.warnings)} warnings)")
    return filepath


def main():
    print("Generating sample layouts...\n")
    SAMPLES_DIR.mkdir(exist_ok=True)
    for filename, (plan, prompt) in SAMPLES.items():
        create_sample(filename, plan, prompt)
    print(f"\nAll {len(SAMPLES)} sample layouts saved to: {SAMPLES_DIR}")


if __name__ == "__main__":
    main()
