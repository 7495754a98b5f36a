from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from .city import City
from .itinerary import Itinerary, ItineraryLeg
from .path_tree import UNREACHED, PathTree
from .time_model import MINUTES_IN_A_DAY

if TYPE_CHECKING:
    from .graph import CityGraph

logger = logging.getLogger(__name__)


def reconstruct_itinerary(
    graph: CityGraph, tree: PathTree, finish_code: str
) -> Optional[Itinerary]:
    """
    Rebuild the itinerary to finish_code from a shortest-time PathTree.

    Parent links are followed recursively so legs come out in travel
    order. Local departure uses the parent's offset, local arrival the
    arriving city's offset, and each leg's cost is the difference of
    the two cumulative costs.

    Args:
        graph: Graph the tree was computed on.
        tree: Result of shortest_time().
        finish_code: Destination city code.

    Returns:
        Itinerary, or None if the search never reached finish_code.
    """
    if tree[finish_code].best_cost == UNREACHED:
        logger.debug("No path from %s to %s", tree.source, finish_code)
        return None

    legs: List[ItineraryLeg] = []
    start = _collect_legs(graph, tree, finish_code, legs)
    start_state = tree[start.code]

    return Itinerary(
        start_code=start.code,
        start_name=start.name,
        start_local_time=(start_state.arrival_gmt + start.gmt_offset_minutes)
        % MINUTES_IN_A_DAY,
        legs=tuple(legs),
    )


def _collect_legs(
    graph: CityGraph, tree: PathTree, code: str, legs: List[ItineraryLeg]
) -> City:
    """Append the legs leading to `code`, parent first. Returns the root city."""
    city = graph.get_city(code)
    state = tree[code]
    if state.parent is None:
        return city

    root = _collect_legs(graph, tree, state.parent, legs)

    parent = graph.get_city(state.parent)
    parent_state = tree[state.parent]
    legs.append(
        ItineraryLeg(
            origin_code=parent.code,
            origin_name=parent.name,
            dest_code=city.code,
            dest_name=city.name,
            depart_gmt=state.departure_from_parent_gmt,
            arrive_gmt=state.arrival_gmt,
            local_departure=(state.departure_from_parent_gmt + parent.gmt_offset_minutes)
            % MINUTES_IN_A_DAY,
            local_arrival=(state.arrival_gmt + city.gmt_offset_minutes)
            % MINUTES_IN_A_DAY,
            leg_cost=state.best_cost - parent_state.best_cost,
            cumulative_cost=state.best_cost,
        )
    )
    return root
