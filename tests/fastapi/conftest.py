"""
Fixtures for FastAPI endpoint tests.

Each test gets its own planner over a fresh copy of the shared graph,
injected through the get_planner dependency.
"""

import pytest
from fastapi.testclient import TestClient

from src.fastapi.itinerary_api import app, get_planner
from src.trip_planner.application import PlanItinerary


@pytest.fixture
def api_planner(us_graph) -> PlanItinerary:
    return PlanItinerary(graph=us_graph)


@pytest.fixture
def client(api_planner):
    app.dependency_overrides[get_planner] = lambda: api_planner
    yield TestClient(app)
    app.dependency_overrides.clear()
