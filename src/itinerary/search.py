"""
Shortest-path searches over a CityGraph.

- fewest_stops: unweighted breadth-first search on hop count.
- shortest_time: Dijkstra on elapsed minutes, where the weight of a
  flight depends on when the traveller reached its origin and on
  whether it is the first leg of the trip.

Both return a PathTree; neither mutates the graph.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, List, Tuple

from .path_tree import UNREACHED, PathTree
from .time_model import MIN_CONNECTION_MINUTES, clock_to_gmt_minutes, connection_wait

if TYPE_CHECKING:
    from .graph import CityGraph

logger = logging.getLogger(__name__)


def fewest_stops(graph: CityGraph, start_code: str) -> PathTree:
    """
    Breadth-first search from start_code over city adjacency.

    The first time a city is reached fixes its hop count and parent, so
    every reachable city ends up with one minimum-hop path back to the
    start. Unreached cities keep UNREACHED hops and no parent.

    Args:
        graph: Graph to search.
        start_code: Code of the starting city.

    Returns:
        PathTree with best_hops and parent filled in.

    Raises:
        UnknownCityError: If start_code is not in the graph.
    """
    tree = PathTree(start_code, graph.codes())
    tree[start_code].best_hops = 0
    queue: Deque[str] = deque([start_code])

    while queue:
        code = queue.popleft()
        hops = tree[code].best_hops
        for next_code in graph.get_city(code).adjacent:
            state = tree[next_code]
            if state.best_hops == UNREACHED:
                state.best_hops = hops + 1
                state.parent = code
                queue.append(next_code)

    logger.debug(
        "Fewest-stops search from %s reached %d of %d cities",
        start_code,
        len(tree.reached()),
        graph.size,
    )
    return tree


def shortest_time(
    graph: CityGraph,
    start_code: str,
    start_clock: int,
    min_connection: int = MIN_CONNECTION_MINUTES,
) -> PathTree:
    """
    Minimum elapsed-time search from start_code, leaving at start_clock.

    Cost of taking a flight = waiting time at its origin + its duration.
    Flights leaving the start city are first legs and accept any wait.
    Every later connection shorter than min_connection is pushed to the
    next day's departure of the same flight.

    The heap may hold stale entries for a city whose cost improved after
    it was pushed; those are skipped when popped. The loop stops when
    every city is finalized or the heap runs dry, so cities with no
    flight chain from the start keep UNREACHED cost.

    Args:
        graph: Graph to search.
        start_code: Code of the starting city.
        start_clock: Local clock time (HHMM) at the starting city.
        min_connection: Minimum minutes needed to change planes.

    Returns:
        PathTree with best_cost, parent, arrival_gmt and
        departure_from_parent_gmt filled in.

    Raises:
        UnknownCityError: If start_code is not in the graph.
    """
    start = graph.get_city(start_code)
    tree = PathTree(start_code, graph.codes())

    source = tree[start_code]
    source.best_cost = 0
    source.arrival_gmt = clock_to_gmt_minutes(start_clock, start.gmt_offset)

    # (cost, insertion order, code): ties pop in push order
    sequence = itertools.count()
    pq: List[Tuple[int, int, str]] = [(0, next(sequence), start_code)]

    while pq and tree.finalized < graph.size:
        _, _, code = heapq.heappop(pq)
        current = tree[code]
        if current.visited:
            continue

        current.visited = True
        first_leg = tree.finalized == 0
        tree.finalized += 1

        for flight in graph.get_city(code).flights:
            wait = connection_wait(
                current.arrival_gmt,
                flight.depart_gmt,
                first_leg=first_leg,
                min_connection=min_connection,
            )
            candidate = current.best_cost + wait + flight.duration

            dest = tree[flight.dest_code]
            if candidate < dest.best_cost:
                dest.best_cost = candidate
                dest.arrival_gmt = flight.arrive_gmt
                dest.departure_from_parent_gmt = flight.depart_gmt
                dest.parent = code
                heapq.heappush(pq, (candidate, next(sequence), flight.dest_code))

    logger.debug(
        "Shortest-time search from %s finalized %d of %d cities",
        start_code,
        tree.finalized,
        graph.size,
    )
    return tree
