"""
API tests for the layout routes, using FastAPI's TestClient.

Run:  cd backend && python -m pytest test_layout_api.py -v
"""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(__file__))

import importlib

import pytest
from fastapi.testclient import TestClient

import config
from main import app


@pytest.fixture
def client():
    return TestClient(app)


PLAN = {
    "plotDimensions": {"width": 40, "height": 60},
    "floors": [{"level": "Ground", "rooms": [
        {"name": "Bedroom", "areaSqft": 150},
        {"name": "Bathroom", "areaSqft": 40},
        {"name": "Kitchen", "areaSqft": 100},
    ]}],
}


class TestHealth:
    def test_health(self, client):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"


class TestLayoutEndpoint:
    def test_three_rooms(self, client):
        r = client.post("/api/layout", json={"plan": PLAN})
        assert r.status_code == 200
        data = r.json()
        assert data["success"] is True
        assert data["plotDimensions"] == {"width": 40.0, "height": 60.0}
        floor = data["floors"][0]
        assert [room["id"] for room in floor["rooms"]] == ["room-0", "room-1", "room-2"]
        assert len(floor["walls"]) == 16
        assert floor["circulation"]["corridors"][0]["x"] == 18.0

    def test_prompt(self, client):
        plan = {"floors": [{"level": "First", "rooms": [
            {"name": "Stairs", "areaSqft": 60},
            {"name": "Bedroom", "areaSqft": 150},
        ]}]}
        r = client.post("/api/layout", json={"plan": plan, "prompt": "stairs on right"})
        assert r.status_code == 200
        data = r.json()
        stairs = next(room for room in data["floors"][0]["rooms"] if room["name"] == "Stairs")
        assert stairs["x"] + stairs["width"] == 39.0
        assert "stairs" in data["floors"][0]["circulation"]
        assert data["warnings"][0].startswith("[First] MissingStandard")

    def test_structured_constraints(self, client):
        plan = {"floors": [{"rooms": [
            {"name": "Den", "dimensions": {"length": 10, "width": 8}},
        ]}]}
        body = {"plan": plan, "constraints": [{"roomId": "Den", "position": "back"}]}
        r = client.post("/api/layout", json=body)
        assert r.status_code == 200
        den = r.json()["floors"][0]["rooms"][0]
        assert (den["x"], den["y"]) == (1.0, 51.0)

    def test_invalid_area(self, client):
        plan = {"floors": [{"rooms": [{"name": "Kitchen", "areaSqft": 0}]}]}
        r = client.post("/api/layout", json={"plan": plan})
        assert r.status_code == 422
        assert any("Kitchen" in msg for msg in r.json()["detail"])

    def test_no_floors(self, client):
        r = client.post("/api/layout", json={"plan": {"floors": []}})
        assert r.status_code == 422

    def test_bad_constraint_position(self, client):
        body = {"plan": PLAN, "constraints": [{"roomId": "Kitchen", "position": "upstairs"}]}
        r = client.post("/api/layout", json=body)
        assert r.status_code == 422

    @pytest.mark.parametrize("sizing", [
        {"aspectRatio": {"min": 0, "max": 0}},
        {"maxArea": 0},
        {"minArea": 300, "maxArea": 100},
    ])
    def test_bad_sizing_constraint(self, client, sizing):
        body = {"plan": PLAN, "constraints": [{"roomId": "Kitchen", **sizing}]}
        r = client.post("/api/layout", json=body)
        assert r.status_code == 422

    def test_room_below_grid(self, client):
        plan = {"floors": [{"rooms": [{"name": "Closet", "areaSqft": 0.05}]}]}
        r = client.post("/api/layout", json={"plan": plan})
        assert r.status_code == 422

    def test_plot_without_interior(self, client):
        plan = {"plotDimensions": {"width": 1.5, "height": 1.5},
                "floors": [{"rooms": [{"name": "Den", "areaSqft": 10}]}]}
        r = client.post("/api/layout", json={"plan": plan})
        assert r.status_code == 422

    def test_missing_plan(self, client):
        r = client.post("/api/layout", json={"prompt": "kitchen near dining"})
        assert r.status_code == 422


class TestStandardsEndpoint:
    def test_lists_all_types(self, client):
        r = client.get("/api/layout/standards")
        assert r.status_code == 200
        data = r.json()
        assert len(data) == 14
        bedroom = next(s for s in data if s["room_type"] == "bedroom")
        assert bedroom["aspect_ratio_min"] == 0.7
        assert bedroom["aspect_ratio_max"] == 1.4


class TestConfig:
    def test_unknown_window_rule_rejected_at_import(self, monkeypatch):
        monkeypatch.setenv("LAYOUT_WINDOW_RULE", "diagonal")
        with pytest.raises(ValueError):
            importlib.reload(config)
        monkeypatch.setenv("LAYOUT_WINDOW_RULE", "all_sides")
        importlib.reload(config)
        assert config.LAYOUT_WINDOW_RULE == "all_sides"
        monkeypatch.undo()
        importlib.reload(config)
