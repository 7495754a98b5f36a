"""
Graph Builder Service - schedule tables to CityGraph.

Turns the validated DataFrames of a ScheduleProvider into a CityGraph by
calling the graph's build surface row by row.
"""

import logging

from src.itinerary.graph import CityGraph
from src.trip_planner.ports.schedule_provider import ScheduleProvider

logger = logging.getLogger(__name__)


class GraphBuilderService:
    """
    Builds CityGraph instances from a schedule provider.

    Rows the graph cannot accept are skipped and logged rather than
    failing the whole load: duplicate cities, and flights whose origin
    or destination code is not among the cities.
    """

    def __init__(self, provider: ScheduleProvider) -> None:
        self._provider = provider

    @property
    def provider_name(self) -> str:
        return self._provider.name

    def build(self) -> CityGraph:
        """
        Build a new graph from the provider's current tables.

        Returns:
            Fully populated CityGraph.
        """
        graph = CityGraph()
        cities_df = self._provider.get_cities_df()
        flights_df = self._provider.get_flights_df()

        for row in cities_df.itertuples(index=False):
            graph.add_city(
                code=str(row.code),
                name=str(row.name),
                gmt_offset=int(row.gmt_offset),
                x=float(row.x),
                y=float(row.y),
            )

        skipped = 0
        for row in flights_df.itertuples(index=False):
            origin, destination = str(row.origin), str(row.destination)
            missing = [c for c in (origin, destination) if not graph.contains_code(c)]
            if missing:
                logger.warning(
                    "Skipping flight %s%s %s -> %s: unknown city %s",
                    row.airline,
                    row.flight_number,
                    origin,
                    destination,
                    ", ".join(missing),
                )
                skipped += 1
                continue
            graph.add_flight(origin, destination, int(row.depart_clock), int(row.arrive_clock))

        logger.info(
            "Built graph from %s: %d cities, %d flights (%d skipped)",
            self._provider.name,
            graph.size,
            len(flights_df) - skipped,
            skipped,
        )
        return graph
