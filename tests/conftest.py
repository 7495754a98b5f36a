"""Shared graph fixtures."""

from typing import Iterable, Tuple

import pytest

from src.itinerary.graph import CityGraph


def make_graph(
    cities: Iterable[Tuple[str, int]],
    flights: Iterable[Tuple[str, str, int, int]],
) -> CityGraph:
    """
    Build a graph from (code, gmt_offset) and
    (origin, destination, depart_clock, arrive_clock) tuples.
    City names are the codes in lower case.
    """
    graph = CityGraph()
    for code, offset in cities:
        graph.add_city(code, code.lower(), offset)
    for origin, dest, depart, arrive in flights:
        graph.add_flight(origin, dest, depart, arrive)
    return graph


@pytest.fixture
def us_graph() -> CityGraph:
    """
    ALB (GMT -5) -> CHI (GMT -6) -> LAX (GMT -8), plus HNL with no flights.

    ALB->CHI leaves 8:00 am local, lands 8:30 am local (90 minutes).
    CHI->LAX leaves 12:00 pm local, lands 2:00 pm local (240 minutes).
    """
    graph = CityGraph()
    graph.add_city("ALB", "Albany", -500, 0.0, 0.0)
    graph.add_city("CHI", "Chicago", -600, 30.0, 40.0)
    graph.add_city("LAX", "Los Angeles", -800, 90.0, 40.0)
    graph.add_city("HNL", "Honolulu", -1000, 200.0, 10.0)
    graph.add_flight("ALB", "CHI", 800, 830)
    graph.add_flight("CHI", "LAX", 1200, 1400)
    return graph
