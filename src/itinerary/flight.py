from dataclasses import dataclass, field

from .time_model import (
    MINUTES_IN_A_DAY,
    minute_of_day_to_clock_string,
    minutes_to_hours_and_minutes,
    waiting_time,
)


@dataclass(frozen=True, slots=True)
class Flight:
    """
    A scheduled flight: one directed edge of the city graph.

    Departure and arrival are GMT-normalized minutes-of-day. The offsets
    of both endpoints (in minutes) are kept so local clock times can be
    re-derived for display. The destination is referenced by code only;
    the owning graph resolves it.

    Attributes:
        dest_code: Code of the destination city.
        depart_gmt: Departure, GMT minute-of-day.
        arrive_gmt: Arrival, GMT minute-of-day.
        depart_offset: Origin city offset from GMT in minutes.
        arrive_offset: Destination city offset from GMT in minutes.
        duration: Minutes in the air, wrapping past midnight.
    """

    dest_code: str
    depart_gmt: int
    arrive_gmt: int
    depart_offset: int
    arrive_offset: int
    duration: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "duration", waiting_time(self.depart_gmt, self.arrive_gmt)
        )

    @property
    def local_departure(self) -> int:
        """Departure as a minute-of-day in the origin's time zone."""
        return (self.depart_gmt + self.depart_offset) % MINUTES_IN_A_DAY

    @property
    def local_arrival(self) -> int:
        """Arrival as a minute-of-day in the destination's time zone."""
        return (self.arrive_gmt + self.arrive_offset) % MINUTES_IN_A_DAY

    def describe(self, dest_name: str) -> str:
        """One-line listing, e.g. "to Chicago; 8:00 am to 8:30 am; takes 1 hrs, 30 mins"."""
        depart = minute_of_day_to_clock_string(self.local_departure)
        arrive = minute_of_day_to_clock_string(self.local_arrival)
        return (
            f"to {dest_name}; {depart} to {arrive}; "
            f"takes {minutes_to_hours_and_minutes(self.duration)}"
        )
