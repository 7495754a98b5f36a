"""
Reporting Service - plain-text views of graphs, flights and itineraries.

Produces the listings a console or file front end shows. Nothing here
affects search results.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Union

from src.itinerary.city import City
from src.itinerary.flight import Flight
from src.itinerary.graph import CityGraph
from src.itinerary.itinerary import Itinerary
from src.itinerary.time_model import minutes_to_hours_and_minutes

logger = logging.getLogger(__name__)

NO_PATH_MESSAGE = "Sorry! There is no such path."


def describe_flights(graph: CityGraph, flights: Iterable[Flight]) -> List[str]:
    """One line per flight, naming its destination."""
    return [f.describe(graph.get_city(f.dest_code).name) for f in flights]


def describe_city(graph: CityGraph, city: City) -> str:
    """Identity, neighbours with planar distance, and departing flights."""
    lines = [
        f"name = {city.name}",
        f"code = {city.code}",
        f"diffGMT = {city.gmt_offset}",
        f"x = {city.x}",
        f"y = {city.y}",
        "adjacent cities:",
    ]
    for code in city.adjacent:
        neighbour = graph.get_city(code)
        lines.append(f"{neighbour.name}, distance = {city.distance_to(neighbour)}")
    lines.append("departing flights:")
    lines.extend(describe_flights(graph, city.flights))
    return "\n".join(lines)


def describe_graph(graph: CityGraph, verbose: bool = False) -> str:
    """
    Text dump of the whole graph, cities in code order.

    Terse output lists "name, code" per city; verbose output adds each
    city's neighbours and flights.
    """
    parts = [f"Num cities = {graph.size}"]
    for city in graph.cities():
        if verbose:
            parts.append(describe_city(graph, city) + "\n")
        else:
            parts.append(f"{city.name}, {city.code}")
    return "\n".join(parts) + "\n"


def describe_arrivals(graph: CityGraph, dest_code: str) -> List[str]:
    """Flights arriving at dest_code, grouped under their origin."""
    lines: List[str] = []
    arrivals: Dict[str, List[Flight]] = graph.flights_to(dest_code)
    for origin_code, flights in arrivals.items():
        lines.append(f"Flights from {graph.get_city(origin_code).name}:")
        lines.extend(describe_flights(graph, flights))
    return lines


def describe_itinerary(itinerary: Union[Itinerary, None]) -> str:
    """
    Step-by-step itinerary text, or the no-path message for None.

    Example output:
        Start at Albany at 7:00 am
        depart at 8:00 am to Chicago, arriving at 8:30 am
            with additional cost of 2 hrs, 30 mins
        Total cost = 2 hrs, 30 mins
    """
    if itinerary is None:
        return NO_PATH_MESSAGE

    lines = [f"Start at {itinerary.start_name} at {itinerary.start_clock}"]
    for leg in itinerary.legs:
        lines.append(
            f"depart at {leg.departure_clock} to {leg.dest_name}, "
            f"arriving at {leg.arrival_clock}"
        )
        lines.append(f"\twith additional cost of {minutes_to_hours_and_minutes(leg.leg_cost)}")
    lines.append(f"Total cost = {itinerary.total_cost_text}")
    return "\n".join(lines)


def write_graph_dump(graph: CityGraph, path: Union[str, Path], verbose: bool = False) -> Path:
    """
    Write describe_graph() output to a file.

    Returns:
        The path written.
    """
    path = Path(path)
    path.write_text(describe_graph(graph, verbose), encoding="utf-8")
    logger.info("Wrote %s graph dump to %s", "verbose" if verbose else "terse", path)
    return path
