"""
Tests for rebuilding itineraries from shortest-time search trees.
"""

import pytest

from src.itinerary.graph import CityGraph
from src.itinerary.path_tree import PathTree
from src.itinerary.reconstruction import reconstruct_itinerary


@pytest.fixture
def midnight_graph():
    """GMT city to a GMT-5 city on a flight that lands after GMT midnight."""
    graph = CityGraph()
    graph.add_city("LHR", "London", 0)
    graph.add_city("JFK", "New York", -500)
    graph.add_city("BOS", "Boston", -500)
    graph.add_flight("LHR", "JFK", 2300, 2000)
    graph.add_flight("JFK", "BOS", 2130, 2230)
    return graph


class TestReconstructItinerary:
    def test_legs_in_travel_order(self, us_graph):
        tree = us_graph.shortest_time_tree("ALB", 700)
        itinerary = reconstruct_itinerary(us_graph, tree, "LAX")
        assert [(leg.origin_code, leg.dest_code) for leg in itinerary.legs] == [
            ("ALB", "CHI"),
            ("CHI", "LAX"),
        ]
        assert [leg.dest_name for leg in itinerary.legs] == ["Chicago", "Los Angeles"]

    def test_cumulative_cost_is_running_total(self, us_graph):
        tree = us_graph.shortest_time_tree("ALB", 700)
        itinerary = reconstruct_itinerary(us_graph, tree, "LAX")
        assert [leg.cumulative_cost for leg in itinerary.legs] == [150, 600]
        assert sum(leg.leg_cost for leg in itinerary.legs) == itinerary.total_cost

    def test_local_times_use_each_city_offset(self, midnight_graph):
        itinerary = midnight_graph.shortest_time("LHR", "JFK", 2200)
        leg = itinerary.legs[0]
        assert leg.depart_gmt == 1380
        assert leg.arrive_gmt == 60
        assert leg.departure_clock == "11:00 pm"
        assert leg.arrival_clock == "8:00 pm"

    def test_start_time_in_local_zone(self, midnight_graph):
        itinerary = midnight_graph.shortest_time("LHR", "BOS", 2200)
        assert itinerary.start_name == "London"
        assert itinerary.start_clock == "10:00 pm"
        # 60 wait + 120 flight, then 90 wait + 60 flight
        assert itinerary.total_cost == 330
        assert itinerary.finish_code == "BOS"

    def test_unreached_finish_returns_none(self, us_graph):
        tree = us_graph.shortest_time_tree("ALB", 700)
        assert reconstruct_itinerary(us_graph, tree, "HNL") is None

    def test_source_only(self, us_graph):
        tree = us_graph.shortest_time_tree("LAX", 1215)
        itinerary = reconstruct_itinerary(us_graph, tree, "LAX")
        assert itinerary.num_legs == 0
        assert itinerary.route_cities == ["LAX"]
        assert itinerary.finish_code == "LAX"
        assert itinerary.start_clock == "12:15 pm"


class TestPathTree:
    def test_unknown_source_raises(self):
        from src.itinerary.exceptions import UnknownCityError

        with pytest.raises(UnknownCityError):
            PathTree("XXX", ["AAA", "BBB"])

    def test_fresh_tree_is_unreached(self):
        tree = PathTree("AAA", ["AAA", "BBB"])
        assert len(tree) == 2
        assert list(tree) == ["AAA", "BBB"]
        assert tree.reached() == []
        assert tree["BBB"].arrival_gmt == -1
        assert tree["BBB"].departure_from_parent_gmt == -1
        assert not tree["BBB"].visited

    def test_chain_from(self, us_graph):
        tree = us_graph.shortest_time_tree("ALB", 700)
        assert tree.chain_from("LAX") == ["LAX", "CHI", "ALB"]
