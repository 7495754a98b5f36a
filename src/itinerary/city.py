import math
from dataclasses import dataclass, field
from typing import List

from .flight import Flight
from .time_model import clock_to_minute_of_day


@dataclass(eq=False)
class City:
    """
    A vertex of the city graph.

    Holds identity (code, name), the GMT offset in signed HHMM form, a
    planar position used only for distance display, the codes of the
    cities it has at least one flight to, and its outgoing flights.
    Several flights may lead to the same neighbour; the neighbour is
    listed once in `adjacent`.

    Search state is not kept here; each search run owns a PathTree.
    """

    code: str
    name: str
    gmt_offset: int
    x: float = 0.0
    y: float = 0.0
    adjacent: List[str] = field(default_factory=list)
    flights: List[Flight] = field(default_factory=list)

    @property
    def gmt_offset_minutes(self) -> int:
        return clock_to_minute_of_day(self.gmt_offset)

    def has_edge_to(self, other_code: str) -> bool:
        """Check whether at least one flight leads to other_code."""
        return other_code in self.adjacent

    def add_flight(self, flight: Flight) -> None:
        """Attach an outgoing flight, listing its destination once."""
        self.flights.append(flight)
        if not self.has_edge_to(flight.dest_code):
            self.adjacent.append(flight.dest_code)

    def flights_to(self, other_code: str) -> List[Flight]:
        return [f for f in self.flights if f.dest_code == other_code]

    def distance_to(self, other: "City") -> float:
        """Straight-line distance between the two positions."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def copy_identity(self) -> "City":
        """New vertex with the same identity and position but no edges."""
        return City(
            code=self.code,
            name=self.name,
            gmt_offset=self.gmt_offset,
            x=self.x,
            y=self.y,
        )
