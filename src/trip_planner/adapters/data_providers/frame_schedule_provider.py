"""
In-memory schedule provider.

Wraps ready-made DataFrames, e.g. tables assembled by a script or
fixtures in tests.
"""

from typing import Optional

import pandas as pd

from src.trip_planner.ports.schedule_provider import ScheduleProvider
from src.trip_planner.schemas.schedule import (
    CITY_COLUMNS,
    FLIGHT_COLUMNS,
    CityDataFrame,
    CityScheduleSchema,
    FlightScheduleDataFrame,
    FlightScheduleSchema,
)


class FrameScheduleProvider(ScheduleProvider):
    """
    Schedule provider serving DataFrames held in memory.

    Both tables are validated once, at construction. A missing flights
    table means a schedule with cities only.
    """

    def __init__(
        self,
        cities_df: pd.DataFrame,
        flights_df: Optional[pd.DataFrame] = None,
    ) -> None:
        if flights_df is None:
            flights_df = pd.DataFrame(columns=FLIGHT_COLUMNS)
        self._cities_df = CityScheduleSchema.validate(cities_df[CITY_COLUMNS])
        self._flights_df = FlightScheduleSchema.validate(flights_df)

    @property
    def name(self) -> str:
        return "In-memory schedule"

    def get_cities_df(self) -> CityDataFrame:
        return self._cities_df

    def get_flights_df(self) -> FlightScheduleDataFrame:
        return self._flights_df
