"""
Tests for projecting a hop-count path onto a subgraph, and for the
minimum-time search restricted to that path.
"""

import pytest

from src.itinerary.projection import project_path

from .conftest import make_graph


@pytest.fixture
def graph():
    """
    Hop path A -> B -> D (slow), and a faster detour A -> C -> E -> D
    that needs one more flight. B -> A goes back along the path.
    """
    return make_graph(
        [(code, 0) for code in "ABCDEF"],
        [
            ("A", "B", 600, 1000),
            ("A", "B", 900, 1100),
            ("A", "C", 600, 630),
            ("B", "D", 1200, 1500),
            ("B", "A", 1300, 1400),
            ("C", "E", 700, 730),
            ("E", "D", 800, 830),
        ],
    )


class TestProjectPath:
    def test_contains_only_path_cities(self, graph):
        tree = graph.fewest_stops("A")
        subgraph = project_path(graph, tree, "D")
        assert sorted(subgraph.codes()) == ["A", "B", "D"]

    def test_inserted_in_walk_order(self, graph):
        subgraph = project_path(graph, graph.fewest_stops("A"), "D")
        assert subgraph.codes() == ["D", "B", "A"]

    def test_copies_every_flight_to_next_hop(self, graph):
        subgraph = project_path(graph, graph.fewest_stops("A"), "D")
        a_flights = subgraph.flights_from("A")
        assert len(a_flights) == 2
        assert {f.dest_code for f in a_flights} == {"B"}
        assert subgraph.get_city("A").adjacent == ["B"]

    def test_drops_flights_leaving_the_path(self, graph):
        subgraph = project_path(graph, graph.fewest_stops("A"), "D")
        assert [f.dest_code for f in subgraph.flights_from("B")] == ["D"]
        assert subgraph.flights_from("D") == []

    def test_copies_identity_not_edges(self, graph):
        subgraph = project_path(graph, graph.fewest_stops("A"), "D")
        original, copy = graph.get_city("B"), subgraph.get_city("B")
        assert copy is not original
        assert (copy.name, copy.gmt_offset, copy.x, copy.y) == (
            original.name,
            original.gmt_offset,
            original.x,
            original.y,
        )

    def test_original_graph_unchanged(self, graph):
        project_path(graph, graph.fewest_stops("A"), "D")
        assert graph.size == 6
        assert len(graph.flights_from("A")) == 3
        assert graph.get_city("B").adjacent == ["D", "A"]


class TestMinimizeTimeOnPath:
    def test_faster_detour_exists_in_full_graph(self, graph):
        itinerary = graph.shortest_time("A", "D", 500)
        assert itinerary.route_cities == ["A", "C", "E", "D"]
        assert itinerary.total_cost == 210

    def test_stays_on_hop_path(self, graph):
        itinerary = graph.minimize_time_on_path("A", "D", 500)
        assert itinerary.route_cities == ["A", "B", "D"]
        assert itinerary.total_cost == 600

    def test_never_uses_off_path_city(self, graph):
        itinerary = graph.minimize_time_on_path("A", "D", 500)
        visited = {leg.origin_code for leg in itinerary.legs} | {
            leg.dest_code for leg in itinerary.legs
        }
        assert visited <= {"A", "B", "D"}

    def test_unreachable_destination(self, graph):
        assert graph.minimize_time_on_path("A", "F", 500) is None

    def test_start_equals_finish(self, graph):
        itinerary = graph.minimize_time_on_path("B", "B", 1200)
        assert itinerary.legs == ()

    def test_one_hop(self, graph):
        itinerary = graph.minimize_time_on_path("A", "C", 500)
        assert itinerary.route_cities == ["A", "C"]
        assert itinerary.total_cost == 90
