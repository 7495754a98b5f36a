"""
Schedule data schemas using Pandera.

Defines the contract for city and flight tables produced by schedule
providers. Validation happens once at the provider boundary, before
the tables are turned into a CityGraph.
"""

import pandera as pa
from pandera.typing import DataFrame, Series


class CityScheduleSchema(pa.DataFrameModel):
    """One row per city."""

    code: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 3, "max_value": 3},
        description="Three-letter airport code (e.g., 'ALB')",
    )
    name: Series[str] = pa.Field(
        nullable=False,
        description="Display name (e.g., 'Albany NY')",
    )
    gmt_offset: Series[int] = pa.Field(
        ge=-1200,
        le=1400,
        description="Offset from GMT in signed HHMM form (e.g., -500)",
    )
    x: Series[float] = pa.Field(description="Planar x coordinate")
    y: Series[float] = pa.Field(description="Planar y coordinate")

    @pa.check("gmt_offset", name="offset_minutes_below_60")
    def check_offset_minutes(cls, series: Series[int]) -> Series[bool]:
        return series.abs() % 100 < 60

    class Config:
        strict = False
        coerce = True
        name = "CityScheduleSchema"
        description = "Cities of a flight schedule"


class FlightScheduleSchema(pa.DataFrameModel):
    """
    One row per scheduled flight.

    Times are local 24-hour HHMM clock times: departure in the origin's
    time zone, arrival in the destination's.
    """

    airline: Series[str] = pa.Field(nullable=True, description="Airline code")
    flight_number: Series[str] = pa.Field(nullable=True, description="Flight number")
    origin: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 3, "max_value": 3},
        description="Departure city code",
    )
    depart_clock: Series[int] = pa.Field(ge=0, le=2359, description="Local departure time")
    destination: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 3, "max_value": 3},
        description="Arrival city code",
    )
    arrive_clock: Series[int] = pa.Field(ge=0, le=2359, description="Local arrival time")

    @pa.check("depart_clock", "arrive_clock", name="clock_minutes_below_60")
    def check_clock_minutes(cls, series: Series[int]) -> Series[bool]:
        return series % 100 < 60

    class Config:
        strict = False
        coerce = True
        name = "FlightScheduleSchema"
        description = "Flights of a flight schedule"


CITY_COLUMNS = ["code", "name", "gmt_offset", "x", "y"]
FLIGHT_COLUMNS = [
    "airline",
    "flight_number",
    "origin",
    "depart_clock",
    "destination",
    "arrive_clock",
]

# Type aliases for clarity in function signatures
CityDataFrame = DataFrame[CityScheduleSchema]
FlightScheduleDataFrame = DataFrame[FlightScheduleSchema]
