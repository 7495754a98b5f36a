from dataclasses import dataclass
from typing import List, Tuple

from .time_model import minute_of_day_to_clock_string, minutes_to_hours_and_minutes


@dataclass(frozen=True)
class ItineraryLeg:
    """
    One flight of an itinerary.

    GMT times are minutes-of-day; local times are minutes-of-day in the
    time zone of the city where the event happens. leg_cost is the
    waiting time before boarding plus the flight time.
    """

    origin_code: str
    origin_name: str
    dest_code: str
    dest_name: str
    depart_gmt: int
    arrive_gmt: int
    local_departure: int
    local_arrival: int
    leg_cost: int
    cumulative_cost: int

    @property
    def departure_clock(self) -> str:
        return minute_of_day_to_clock_string(self.local_departure)

    @property
    def arrival_clock(self) -> str:
        return minute_of_day_to_clock_string(self.local_arrival)


@dataclass(frozen=True)
class Itinerary:
    """
    A minimum-time path from a start city, ordered start to finish.

    An itinerary with no legs means the traveller is already at the
    destination.
    """

    start_code: str
    start_name: str
    start_local_time: int
    legs: Tuple[ItineraryLeg, ...]

    @property
    def total_cost(self) -> int:
        """Elapsed minutes from the start time to the final arrival."""
        if not self.legs:
            return 0
        return self.legs[-1].cumulative_cost

    @property
    def total_cost_text(self) -> str:
        return minutes_to_hours_and_minutes(self.total_cost)

    @property
    def num_legs(self) -> int:
        return len(self.legs)

    @property
    def finish_code(self) -> str:
        if not self.legs:
            return self.start_code
        return self.legs[-1].dest_code

    @property
    def route_cities(self) -> List[str]:
        """Ordered list of city codes visited, start included."""
        return [self.start_code] + [leg.dest_code for leg in self.legs]

    @property
    def start_clock(self) -> str:
        return minute_of_day_to_clock_string(self.start_local_time)
