"""
Tests for the itinerary HTTP API.

Tests cover:
- City listing, lookup and creation
- Departure, arrival and direct-flight listings
- Fewest-stops and quickest itinerary endpoints
- Error mapping for unknown cities, duplicates and invalid input
- Logging configured at server startup rather than on import
"""

import logging
from unittest.mock import patch

from fastapi.testclient import TestClient

from src.fastapi.itinerary_api import app


# =============================================================================
# CITIES
# =============================================================================


class TestCities:
    def test_list_cities(self, client):
        response = client.get("/cities")
        assert response.status_code == 200
        assert [c["code"] for c in response.json()] == ["ALB", "CHI", "HNL", "LAX"]

    def test_get_city_by_name(self, client):
        response = client.get("/cities/Chicago")
        assert response.status_code == 200
        body = response.json()
        assert body["code"] == "CHI"
        assert body["gmt_offset"] == -600
        assert body["adjacent"] == ["LAX"]

    def test_unknown_city_is_404(self, client):
        response = client.get("/cities/Boston")
        assert response.status_code == 404
        assert "Boston" in response.json()["detail"]

    def test_create_city(self, client, api_planner):
        response = client.post(
            "/cities",
            json={"code": "bos", "name": "Boston", "gmt_offset": -500, "x": 1.0, "y": 2.0},
        )
        assert response.status_code == 201
        assert response.json()["code"] == "BOS"
        assert api_planner.graph.contains_code("BOS")

    def test_create_duplicate_city_is_409(self, client):
        response = client.post(
            "/cities", json={"code": "ALB", "name": "Albany Again", "gmt_offset": -500}
        )
        assert response.status_code == 409

    def test_create_city_invalid_offset_is_422(self, client):
        response = client.post(
            "/cities", json={"code": "BOS", "name": "Boston", "gmt_offset": -575}
        )
        assert response.status_code == 422


# =============================================================================
# FLIGHTS
# =============================================================================


class TestFlights:
    def test_departures(self, client):
        response = client.get("/cities/CHI/flights")
        assert response.status_code == 200
        (flight,) = response.json()
        assert flight["origin"] == "CHI"
        assert flight["destination"] == "LAX"
        assert flight["destination_name"] == "Los Angeles"
        assert flight["depart_clock"] == 1200
        assert flight["arrive_clock"] == 1400
        assert flight["departure"] == "12:00 pm"
        assert flight["duration"] == 240
        assert flight["duration_text"] == "4 hrs, 0 mins"

    def test_departures_filtered(self, client):
        response = client.get("/cities/ALB/flights", params={"to": "LAX"})
        assert response.status_code == 200
        assert response.json() == []

    def test_arrivals(self, client):
        response = client.get("/cities/Los Angeles/arrivals")
        assert response.status_code == 200
        body = response.json()
        assert list(body) == ["CHI"]
        assert body["CHI"][0]["arrival"] == "2:00 pm"

    def test_create_flight(self, client):
        response = client.post(
            "/flights",
            json={"origin": "LAX", "destination": "Honolulu", "depart_clock": 900, "arrive_clock": 1100},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["origin"] == "LAX"
        assert body["destination"] == "HNL"
        assert body["duration"] == 240

    def test_create_flight_invalid_time_is_422(self, client):
        response = client.post(
            "/flights",
            json={"origin": "LAX", "destination": "HNL", "depart_clock": 960, "arrive_clock": 1100},
        )
        assert response.status_code == 422

    def test_direct(self, client):
        response = client.get("/direct", params={"origin": "Albany", "destination": "CHI"})
        assert response.status_code == 200
        body = response.json()
        assert body["direct"] is True
        assert len(body["flights"]) == 1

    def test_not_direct(self, client):
        response = client.get("/direct", params={"origin": "ALB", "destination": "LAX"})
        assert response.json()["direct"] is False


# =============================================================================
# ITINERARIES
# =============================================================================


class TestItineraries:
    def test_quickest(self, client):
        response = client.get(
            "/itineraries/quickest",
            params={"origin": "ALB", "destination": "LAX", "start_time": 700},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["start_clock"] == "7:00 am"
        assert body["route_cities"] == ["ALB", "CHI", "LAX"]
        assert body["total_cost"] == 600
        assert body["total_cost_text"] == "10 hrs, 0 mins"
        assert [leg["leg_cost"] for leg in body["legs"]] == [150, 450]
        assert body["legs"][1]["departure_clock"] == "12:00 pm"

    def test_fewest_stops(self, client):
        response = client.get(
            "/itineraries/fewest-stops",
            params={"origin": "Albany", "destination": "Los Angeles", "start_time": 700},
        )
        assert response.status_code == 200
        assert response.json()["num_legs"] == 2

    def test_no_path_is_404(self, client):
        response = client.get(
            "/itineraries/quickest",
            params={"origin": "ALB", "destination": "HNL", "start_time": 700},
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "No path found"

    def test_invalid_start_time_is_422(self, client):
        response = client.get(
            "/itineraries/fewest-stops",
            params={"origin": "ALB", "destination": "LAX", "start_time": 2460},
        )
        assert response.status_code == 422

    def test_missing_start_time_is_422(self, client):
        response = client.get(
            "/itineraries/quickest", params={"origin": "ALB", "destination": "LAX"}
        )
        assert response.status_code == 422


# =============================================================================
# GRAPH DUMP
# =============================================================================


def test_graph_dump(client):
    response = client.get("/graph")
    assert response.status_code == 200
    assert response.text.startswith("Num cities = 4\nAlbany, ALB\n")


def test_graph_dump_verbose(client):
    response = client.get("/graph", params={"verbose": True})
    assert "Chicago, distance = 50.0" in response.text


# =============================================================================
# STARTUP
# =============================================================================


class TestStartup:
    def test_import_leaves_root_logger_alone(self):
        root = logging.getLogger()
        assert not any(getattr(h, "_trip_planner", False) for h in root.handlers)

    def test_logging_configured_on_startup(self):
        with patch("src.fastapi.itinerary_api.setup_logging") as mock_setup:
            client = TestClient(app)
            mock_setup.assert_not_called()
            with client:
                mock_setup.assert_called_once()
