"""
City graph: airports as vertices, scheduled flights as directed edges.

Cities are stored once, keyed by code, with a second map from name to
code. Everything else (adjacency, flight destinations, search parents)
refers to cities by code. Cities and flights are never removed.
"""

import logging
from typing import Dict, List, Optional

from .city import City
from .exceptions import UnknownCityError
from .flight import Flight
from .itinerary import Itinerary
from .path_tree import PathTree
from .projection import project_path
from .reconstruction import reconstruct_itinerary
from .search import fewest_stops, shortest_time
from .time_model import MIN_CONNECTION_MINUTES, clock_to_gmt_minutes

logger = logging.getLogger(__name__)


class CityGraph:
    """
    Directed graph of cities and flights with the itinerary queries.

    Searches keep their state in a PathTree they return, so the graph is
    read-only while a query runs. Building the graph while queries run
    is not supported.

    Example:
        >>> graph = CityGraph()
        >>> graph.add_city("ALB", "Albany", -500)
        True
        >>> graph.add_city("CHI", "Chicago", -600)
        True
        >>> _ = graph.add_flight("ALB", "CHI", 800, 830)
        >>> graph.shortest_time("ALB", "CHI", 700).total_cost
        150
    """

    def __init__(self) -> None:
        self._cities: Dict[str, City] = {}
        self._codes_by_name: Dict[str, str] = {}

    @property
    def size(self) -> int:
        """Number of cities in the graph."""
        return len(self._cities)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, code: object) -> bool:
        return code in self._cities

    def __repr__(self) -> str:
        flights = sum(len(city.flights) for city in self._cities.values())
        return f"CityGraph(cities={self.size}, flights={flights})"

    # ------------------------------------------------------------------
    # Build surface
    # ------------------------------------------------------------------

    def add_city(
        self,
        code: str,
        name: str,
        gmt_offset: int,
        x: float = 0.0,
        y: float = 0.0,
    ) -> bool:
        """
        Create and insert a city.

        Returns:
            True if inserted, False if the code or name was already taken.
        """
        return self.insert_city(City(code=code, name=name, gmt_offset=gmt_offset, x=x, y=y))

    def insert_city(self, city: City) -> bool:
        """
        Insert an existing City vertex.

        A duplicate code or name leaves the graph unchanged; the clash is
        logged and reported through the return value.
        """
        if city.code in self._cities:
            logger.warning("City code %s is already in the graph, skipping", city.code)
            return False
        if city.name in self._codes_by_name:
            logger.warning(
                "City name %r already belongs to %s, skipping %s",
                city.name,
                self._codes_by_name[city.name],
                city.code,
            )
            return False

        self._cities[city.code] = city
        self._codes_by_name[city.name] = city.code
        return True

    def add_flight(
        self,
        start_code: str,
        dest_code: str,
        depart_clock: int,
        arrive_clock: int,
    ) -> Flight:
        """
        Add a flight given local clock times at each end.

        The departure is converted to GMT with the start city's offset and
        the arrival with the destination's offset.

        Raises:
            UnknownCityError: If either code is not in the graph.
        """
        start = self.get_city(start_code)
        dest = self.get_city(dest_code)

        flight = Flight(
            dest_code=dest.code,
            depart_gmt=clock_to_gmt_minutes(depart_clock, start.gmt_offset),
            arrive_gmt=clock_to_gmt_minutes(arrive_clock, dest.gmt_offset),
            depart_offset=start.gmt_offset_minutes,
            arrive_offset=dest.gmt_offset_minutes,
        )
        start.add_flight(flight)
        return flight

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    def contains_code(self, code: str) -> bool:
        return code in self._cities

    def contains_name(self, name: str) -> bool:
        return name in self._codes_by_name

    def get_city(self, code: str) -> City:
        try:
            return self._cities[code]
        except KeyError:
            raise UnknownCityError(code) from None

    def get_city_by_name(self, name: str) -> City:
        try:
            return self._cities[self._codes_by_name[name]]
        except KeyError:
            raise UnknownCityError(name) from None

    def find_city(self, key: str) -> City:
        """Resolve a city by name first, then by code."""
        if key in self._codes_by_name:
            return self.get_city_by_name(key)
        return self.get_city(key)

    def codes(self) -> List[str]:
        return list(self._cities)

    def cities(self) -> List[City]:
        """All cities, ordered by code."""
        return [self._cities[code] for code in sorted(self._cities)]

    def flights_from(self, code: str, dest_code: Optional[str] = None) -> List[Flight]:
        """Outgoing flights of a city, optionally only those to dest_code."""
        city = self.get_city(code)
        if dest_code is None:
            return list(city.flights)
        return city.flights_to(dest_code)

    def flights_to(self, dest_code: str) -> Dict[str, List[Flight]]:
        """Flights arriving at dest_code, grouped by origin code."""
        self.get_city(dest_code)
        return {
            city.code: city.flights_to(dest_code)
            for city in self.cities()
            if city.has_edge_to(dest_code)
        }

    def has_direct_flight(self, origin_code: str, dest_code: str) -> bool:
        return self.get_city(origin_code).has_edge_to(dest_code)

    def distance(self, first_code: str, second_code: str) -> float:
        return self.get_city(first_code).distance_to(self.get_city(second_code))

    # ------------------------------------------------------------------
    # Query surface
    # ------------------------------------------------------------------

    def fewest_stops(self, start_code: str) -> PathTree:
        """Hop-count search tree from start_code over the whole graph."""
        return fewest_stops(self, start_code)

    def fewest_stops_path(self, start_code: str, finish_code: str) -> Optional[List[str]]:
        """City codes of one minimum-hop path, or None if unreachable."""
        return self.fewest_stops(start_code).path_to(finish_code)

    def shortest_time_tree(
        self,
        start_code: str,
        start_clock: int,
        min_connection: int = MIN_CONNECTION_MINUTES,
    ) -> PathTree:
        return shortest_time(self, start_code, start_clock, min_connection)

    def shortest_time(
        self,
        start_code: str,
        finish_code: str,
        start_clock: int,
        min_connection: int = MIN_CONNECTION_MINUTES,
    ) -> Optional[Itinerary]:
        """
        Minimum-time itinerary over the whole graph.

        Returns:
            Itinerary, or None if no flight chain reaches finish_code.
        """
        self.get_city(finish_code)
        tree = self.shortest_time_tree(start_code, start_clock, min_connection)
        return reconstruct_itinerary(self, tree, finish_code)

    def minimize_time_on_path(
        self,
        start_code: str,
        finish_code: str,
        start_clock: int,
        min_connection: int = MIN_CONNECTION_MINUTES,
    ) -> Optional[Itinerary]:
        """
        Minimum-time itinerary through the fewest-stops airport sequence.

        Runs the hop-count search, projects its path to finish_code onto
        a new graph and runs the minimum-time search there, so the result
        never leaves that airport sequence.

        Returns:
            Itinerary, or None if finish_code is unreachable.
        """
        self.get_city(finish_code)
        hops = self.fewest_stops(start_code)
        if not hops.is_reachable(finish_code):
            logger.debug("No hop path from %s to %s", start_code, finish_code)
            return None

        subgraph = project_path(self, hops, finish_code)
        return subgraph.shortest_time(start_code, finish_code, start_clock, min_connection)
