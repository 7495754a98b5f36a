"""Pytest configuration for service tests."""

import pandas as pd
import pytest

from src.trip_planner.adapters.data_providers import FrameScheduleProvider


@pytest.fixture
def frame_provider() -> FrameScheduleProvider:
    """Three cities, two good flights and one to an unlisted city."""
    cities = pd.DataFrame({
        "code": ["ALB", "CHI", "LAX"],
        "name": ["Albany", "Chicago", "Los Angeles"],
        "gmt_offset": [-500, -600, -800],
        "x": [0.0, 30.0, 90.0],
        "y": [0.0, 40.0, 40.0],
    })
    flights = pd.DataFrame({
        "airline": ["AA", "UA", "DL"],
        "flight_number": ["748", "12", "900"],
        "origin": ["ALB", "CHI", "CHI"],
        "depart_clock": [800, 1200, 1300],
        "destination": ["CHI", "LAX", "SEA"],
        "arrive_clock": [830, 1400, 1500],
    })
    return FrameScheduleProvider(cities, flights)
