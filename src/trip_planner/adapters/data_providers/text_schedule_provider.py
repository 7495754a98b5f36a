"""
Flat-file schedule provider.

Reads the plain-text schedule format:

    # optional comment lines
    ALB -500 362 208 Albany NY          <- code, GMT offset, x, y, name
    ...
    !                                   <- end of cities
    ALB CHI                             <- connection list (ignored)
    ...
                                        <- blank line ends connections
    # optional comment lines
    AA 748 ALB 800A CHI 830A            <- airline, number, from, time, to, time
    CO1594 CHI 1200P LAX 200P           <- airline and number may be fused

Times are local 12-hour clock times with an A/P suffix. The connection
list is redundant with the flight lines and is skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import pandas as pd

from src.itinerary.exceptions import InvalidClockTimeError, ScheduleFormatError
from src.itinerary.validation import validate_clock_time
from src.trip_planner.config import Config
from src.trip_planner.ports.schedule_provider import ScheduleProvider
from src.trip_planner.schemas.schedule import (
    CITY_COLUMNS,
    FLIGHT_COLUMNS,
    CityDataFrame,
    CityScheduleSchema,
    FlightScheduleDataFrame,
    FlightScheduleSchema,
)

logger = logging.getLogger(__name__)

CITIES_END_MARKER = "!"
COMMENT_MARKER = "#"


def parse_meridiem_time(value: str) -> int:
    """
    Convert a time like "800A" or "1230P" to a 24-hour HHMM integer.

    12xxA is just after midnight and 12xxP just after noon.

    Raises:
        ValueError: If the suffix is not A/P or the digits are not a
            valid clock time.
    """
    suffix = value[-1:].upper()
    if suffix not in ("A", "P"):
        raise ValueError(f"time {value!r} must end in A or P")

    clock_time = int(value[:-1])
    hours = clock_time // 100
    if suffix == "P" and hours != 12:
        clock_time += 1200
    if suffix == "A" and hours == 12:
        clock_time -= 1200

    try:
        return validate_clock_time(clock_time)
    except InvalidClockTimeError as e:
        raise ValueError(str(e)) from e


def _parse_city_line(line: str, coordinate_scale: float) -> dict:
    tokens = line.split()
    if len(tokens) < 5:
        raise ValueError("expected code, GMT offset, x, y and name")
    code, gmt_offset, x, y = tokens[:4]
    return {
        "code": code,
        "name": " ".join(tokens[4:]),
        "gmt_offset": int(gmt_offset),
        "x": coordinate_scale * int(x),
        "y": coordinate_scale * int(y),
    }


def _parse_flight_line(line: str) -> dict:
    tokens = line.split()
    airline = tokens[0] if tokens else ""
    if len(airline) <= 2:
        if len(tokens) < 6:
            raise ValueError("expected airline, number, origin, time, destination, time")
        flight_number, rest = tokens[1], tokens[2:]
    else:
        if len(tokens) < 5:
            raise ValueError("expected airline+number, origin, time, destination, time")
        airline, flight_number, rest = airline[:2], airline[2:], tokens[1:]

    origin, depart, destination, arrive = rest[:4]
    return {
        "airline": airline,
        "flight_number": flight_number,
        "origin": origin,
        "depart_clock": parse_meridiem_time(depart),
        "destination": destination,
        "arrive_clock": parse_meridiem_time(arrive),
    }


def parse_schedule(
    lines: Iterable[str],
    coordinate_scale: float = Config.COORDINATE_SCALE,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Parse schedule lines into raw city and flight DataFrames.

    Args:
        lines: Lines of a schedule file.
        coordinate_scale: Factor applied to the x and y columns.

    Returns:
        (cities_df, flights_df) with CITY_COLUMNS and FLIGHT_COLUMNS.

    Raises:
        ScheduleFormatError: If a city or flight line is malformed.
    """
    cities: List[dict] = []
    flights: List[dict] = []
    section = "header"

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\n")
        stripped = line.strip()

        try:
            if section == "header":
                if not stripped or stripped.startswith(COMMENT_MARKER):
                    continue
                section = "cities"

            if section == "cities":
                if not stripped:
                    continue
                if stripped.startswith(CITIES_END_MARKER):
                    section = "connections"
                    continue
                cities.append(_parse_city_line(stripped, coordinate_scale))
            elif section == "connections":
                if not stripped:
                    section = "flights"
            elif section == "flights":
                if not stripped or stripped.startswith(COMMENT_MARKER):
                    continue
                flights.append(_parse_flight_line(stripped))
        except ValueError as e:
            raise ScheduleFormatError(line_number, line, str(e)) from e

    logger.debug("Parsed %d cities and %d flights", len(cities), len(flights))
    return (
        pd.DataFrame(cities, columns=CITY_COLUMNS),
        pd.DataFrame(flights, columns=FLIGHT_COLUMNS),
    )


class TextScheduleProvider(ScheduleProvider):
    """
    Schedule provider backed by a flat text file.

    The file is parsed once, on first access, and both tables are
    validated before being returned.
    """

    def __init__(
        self,
        path: Union[str, Path],
        coordinate_scale: float = Config.COORDINATE_SCALE,
    ) -> None:
        self._path = Path(path)
        self._coordinate_scale = coordinate_scale
        self._frames: Optional[Tuple[pd.DataFrame, pd.DataFrame]] = None

    @property
    def name(self) -> str:
        return f"Text schedule ({self._path.name})"

    def _load(self) -> Tuple[pd.DataFrame, pd.DataFrame]:
        if self._frames is None:
            with open(self._path, "r", encoding="utf-8") as f:
                cities_df, flights_df = parse_schedule(f, self._coordinate_scale)
            self._frames = (
                CityScheduleSchema.validate(cities_df),
                FlightScheduleSchema.validate(flights_df),
            )
            logger.info(
                "Loaded %d cities and %d flights from %s",
                len(cities_df),
                len(flights_df),
                self._path,
            )
        return self._frames

    def get_cities_df(self) -> CityDataFrame:
        return self._load()[0]

    def get_flights_df(self) -> FlightScheduleDataFrame:
        return self._load()[1]
