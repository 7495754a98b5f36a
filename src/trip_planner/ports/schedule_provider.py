"""
Schedule Provider port interface.

Defines the abstract contract for sources of city and flight data.
Implementations handle the specifics of each backend (flat file,
in-memory tables, ...).
"""

from abc import ABC, abstractmethod

from src.trip_planner.schemas.schedule import CityDataFrame, FlightScheduleDataFrame


class ScheduleProvider(ABC):
    """
    Abstract interface for schedule providers.

    Providers return validated DataFrames; schema validation happens at
    this boundary, not per row when the graph is built.

    Implementations:
    - TextScheduleProvider: flat-file schedule with A/P clock times
    - FrameScheduleProvider: in-memory DataFrames
    """

    @abstractmethod
    def get_cities_df(self) -> CityDataFrame:
        """
        Return cities as a DataFrame validated against CityScheduleSchema.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @abstractmethod
    def get_flights_df(self) -> FlightScheduleDataFrame:
        """
        Return flights as a DataFrame validated against FlightScheduleSchema.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this provider."""
        ...
