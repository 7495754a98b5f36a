"""
PlanItinerary Use Case - Public API for the itinerary engine.

This module provides the main entry point for front ends. It acts as a
Facade: it builds the graph from a schedule provider, validates user
input, resolves cities by name or code and runs the queries.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from src.itinerary.city import City
from src.itinerary.exceptions import DuplicateCityError
from src.itinerary.flight import Flight
from src.itinerary.graph import CityGraph
from src.itinerary.itinerary import Itinerary
from src.itinerary.validation import (
    validate_city_code,
    validate_clock_time,
    validate_flight_times,
    validate_gmt_offset,
)
from src.trip_planner.adapters.data_providers.text_schedule_provider import (
    TextScheduleProvider,
)
from src.trip_planner.config import Config
from src.trip_planner.ports.schedule_provider import ScheduleProvider
from src.trip_planner.services.graph_builder_service import GraphBuilderService
from src.trip_planner.services.reporting_service import (
    describe_graph,
    write_graph_dump,
)

logger = logging.getLogger(__name__)


class PlanItinerary:
    """
    Public API for building a flight graph and planning itineraries.

    Example usage:
        >>> planner = PlanItinerary.from_path("data/schedule.txt")
        >>> itinerary = planner.quickest("Albany NY", "LAX", start_time=700)
        >>> itinerary.route_cities if itinerary else "no path"

    Cities may be given by name or by code wherever a city is expected.
    Clock times are local 24-hour HHMM integers.

    Every public method that touches the graph takes the same lock, so
    lookups, mutations and queries issued from several threads (e.g. API
    worker threads) run one at a time.

    Attributes:
        _graph: The CityGraph being served.
        _min_connection: Minimum minutes to change planes.
    """

    def __init__(
        self,
        provider: Optional[ScheduleProvider] = None,
        graph: Optional[CityGraph] = None,
        min_connection: int = Config.MIN_CONNECTION_MINUTES,
    ) -> None:
        """
        Initialize the planner.

        Args:
            provider: Schedule to build the graph from. Ignored if graph
                is given. If both are None, the planner starts empty.
            graph: Ready-made graph to serve.
            min_connection: Minimum layover in minutes.
        """
        if graph is not None:
            self._graph = graph
        elif provider is not None:
            self._graph = GraphBuilderService(provider).build()
        else:
            self._graph = CityGraph()

        self._min_connection = min_connection
        self._lock = threading.Lock()

        logger.info(
            "PlanItinerary initialized with %d cities (min connection %d mins)",
            self._graph.size,
            self._min_connection,
        )

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        coordinate_scale: float = Config.COORDINATE_SCALE,
        min_connection: int = Config.MIN_CONNECTION_MINUTES,
    ) -> "PlanItinerary":
        """Build a planner from a flat-file schedule."""
        return cls(
            provider=TextScheduleProvider(path, coordinate_scale=coordinate_scale),
            min_connection=min_connection,
        )

    @property
    def graph(self) -> CityGraph:
        return self._graph

    @property
    def min_connection(self) -> int:
        return self._min_connection

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _resolve(self, key: str) -> City:
        """find_city without taking the lock; callers must hold it."""
        return self._graph.find_city(key.strip())

    def list_cities(self) -> List[City]:
        """All cities in code order."""
        with self._lock:
            return self._graph.cities()

    def find_city(self, key: str) -> City:
        """
        Resolve a city by name or code.

        Raises:
            UnknownCityError: If neither a name nor a code matches.
        """
        with self._lock:
            return self._resolve(key)

    def has_direct_flight(self, origin: str, destination: str) -> bool:
        with self._lock:
            start = self._resolve(origin)
            dest = self._resolve(destination)
            return self._graph.has_direct_flight(start.code, dest.code)

    def flights_from(self, origin: str, destination: Optional[str] = None) -> List[Flight]:
        """Flights leaving origin, optionally only those to destination."""
        with self._lock:
            start = self._resolve(origin)
            dest_code = self._resolve(destination).code if destination else None
            return self._graph.flights_from(start.code, dest_code)

    def flights_to(self, destination: str) -> Dict[str, List[Flight]]:
        """Flights arriving at destination, grouped by origin code."""
        with self._lock:
            return self._graph.flights_to(self._resolve(destination).code)

    def distance(self, first: str, second: str) -> float:
        with self._lock:
            return self._resolve(first).distance_to(self._resolve(second))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_city(
        self,
        code: str,
        name: str,
        gmt_offset: int,
        x: float = 0.0,
        y: float = 0.0,
    ) -> City:
        """
        Add a city after validating its code and offset.

        Raises:
            InvalidCityCodeError: If code is not three letters.
            InvalidGmtOffsetError: If the offset is out of range.
            DuplicateCityError: If the code or name is already taken.
        """
        code = validate_city_code(code)
        validate_gmt_offset(gmt_offset)
        name = name.strip()

        with self._lock:
            if self._graph.contains_code(code):
                raise DuplicateCityError(code, "code")
            if self._graph.contains_name(name):
                raise DuplicateCityError(name, "name")
            self._graph.add_city(code, name, gmt_offset, x, y)
            return self._graph.get_city(code)

    def add_flight(
        self,
        origin: str,
        destination: str,
        depart_clock: int,
        arrive_clock: int,
    ) -> Flight:
        """
        Add a flight between two existing cities.

        depart_clock is local to origin, arrive_clock local to destination.

        Raises:
            UnknownCityError: If either city does not resolve.
            InvalidClockTimeError: If either time is invalid.
        """
        validate_flight_times(depart_clock, arrive_clock)
        with self._lock:
            start = self._resolve(origin)
            dest = self._resolve(destination)
            flight = self._graph.add_flight(start.code, dest.code, depart_clock, arrive_clock)
        logger.info("Added flight %s -> %s", start.code, dest.code)
        return flight

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def fewest_stops(self, origin: str, destination: str, start_time: int) -> Optional[Itinerary]:
        """
        Itinerary with the fewest connections, timed as early as possible.

        Returns:
            Itinerary, or None if destination cannot be reached.
        """
        validate_clock_time(start_time)
        with self._lock:
            start = self._resolve(origin)
            finish = self._resolve(destination)
            return self._graph.minimize_time_on_path(
                start.code, finish.code, start_time, self._min_connection
            )

    def quickest(self, origin: str, destination: str, start_time: int) -> Optional[Itinerary]:
        """
        Itinerary with the least total elapsed time.

        Returns:
            Itinerary, or None if destination cannot be reached.
        """
        validate_clock_time(start_time)
        with self._lock:
            start = self._resolve(origin)
            finish = self._resolve(destination)
            return self._graph.shortest_time(
                start.code, finish.code, start_time, self._min_connection
            )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def describe(self, verbose: bool = False) -> str:
        with self._lock:
            return describe_graph(self._graph, verbose)

    def dump(self, path: Union[str, Path], verbose: bool = False) -> Path:
        """Write the graph listing to a file."""
        with self._lock:
            return write_graph_dump(self._graph, path, verbose)
