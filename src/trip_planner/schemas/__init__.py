"""
Schema definitions for the trip planner.

Pandera-validated DataFrames as the data contracts for schedules and
itinerary tables.
"""

from .itinerary import ItineraryLegSchema, itinerary_to_frame
from .schedule import (
    CITY_COLUMNS,
    FLIGHT_COLUMNS,
    CityDataFrame,
    CityScheduleSchema,
    FlightScheduleDataFrame,
    FlightScheduleSchema,
)

__all__ = [
    # Schedule schemas
    "CityScheduleSchema",
    "FlightScheduleSchema",
    "CityDataFrame",
    "FlightScheduleDataFrame",
    "CITY_COLUMNS",
    "FLIGHT_COLUMNS",
    # Itinerary schemas
    "ItineraryLegSchema",
    "itinerary_to_frame",
]
