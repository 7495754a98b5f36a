"""
Tests for GraphBuilderService.

Tests cover:
- Cities and flights are loaded from provider tables
- Flights naming unknown cities are skipped with a warning
- Duplicate city rows keep the first occurrence
"""

import logging
from unittest.mock import MagicMock

import pandas as pd

from src.trip_planner.adapters.data_providers import FrameScheduleProvider
from src.trip_planner.services import GraphBuilderService


class TestGraphBuilderService:
    def test_builds_cities(self, frame_provider):
        graph = GraphBuilderService(frame_provider).build()
        assert graph.size == 3
        chicago = graph.get_city("CHI")
        assert chicago.name == "Chicago"
        assert chicago.gmt_offset == -600
        assert (chicago.x, chicago.y) == (30.0, 40.0)

    def test_builds_flights(self, frame_provider):
        graph = GraphBuilderService(frame_provider).build()
        assert graph.has_direct_flight("ALB", "CHI")
        assert graph.has_direct_flight("CHI", "LAX")
        assert not graph.has_direct_flight("ALB", "LAX")

    def test_unknown_city_flight_skipped(self, frame_provider, caplog):
        with caplog.at_level(logging.WARNING):
            graph = GraphBuilderService(frame_provider).build()
        assert graph.get_city("CHI").adjacent == ["LAX"]
        assert "SEA" in caplog.text

    def test_graph_is_searchable(self, frame_provider):
        graph = GraphBuilderService(frame_provider).build()
        itinerary = graph.shortest_time("ALB", "LAX", 700)
        assert itinerary.total_cost == 600

    def test_duplicate_city_keeps_first(self):
        cities = pd.DataFrame({
            "code": ["AAA", "AAA"],
            "name": ["First", "Second"],
            "gmt_offset": [0, 0],
            "x": [0.0, 0.0],
            "y": [0.0, 0.0],
        })
        graph = GraphBuilderService(FrameScheduleProvider(cities)).build()
        assert graph.size == 1
        assert graph.get_city("AAA").name == "First"

    def test_provider_name(self, frame_provider):
        assert GraphBuilderService(frame_provider).provider_name == "In-memory schedule"

    def test_reads_both_tables_once(self, frame_provider):
        provider = MagicMock(wraps=frame_provider)
        provider.name = "Mock schedule"
        GraphBuilderService(provider).build()
        provider.get_cities_df.assert_called_once_with()
        provider.get_flights_df.assert_called_once_with()
