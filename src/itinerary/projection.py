"""
Projection of a hop-count path onto a new, smaller graph.

The minimum-time search run on the projected graph can only follow the
airport sequence the fewest-stops search chose; it only picks which
flights to take between consecutive airports.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .path_tree import PathTree

if TYPE_CHECKING:
    from .graph import CityGraph

logger = logging.getLogger(__name__)


def project_path(graph: CityGraph, tree: PathTree, finish_code: str) -> CityGraph:
    """
    Build a graph holding only the cities on the tree path to finish_code.

    Cities are copied without their edges, in walk order (finish first).
    For each copied city except the finish, every original flight to the
    next city on the path is reattached. Flights to any other city,
    including cities earlier on the path, are dropped.

    Args:
        graph: Graph the tree was computed on.
        tree: Result of fewest_stops().
        finish_code: Destination city code.

    Returns:
        New CityGraph; the original graph is not modified.
    """
    from .graph import CityGraph

    chain = tree.chain_from(finish_code)
    subgraph = CityGraph()
    for code in chain:
        subgraph.insert_city(graph.get_city(code).copy_identity())

    for next_hop, code in zip(chain, chain[1:]):
        copy = subgraph.get_city(code)
        for flight in graph.get_city(code).flights_to(next_hop):
            copy.add_flight(flight)

    logger.debug(
        "Projected %d-city path %s with %d flights",
        len(chain),
        " -> ".join(reversed(chain)),
        sum(len(city.flights) for city in subgraph.cities()),
    )
    return subgraph
