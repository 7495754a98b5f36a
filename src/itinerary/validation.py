"""
Input validation for values entering the itinerary engine.

The graph assumes well-formed input. Front ends (schedule readers, the
HTTP API, the planner facade) call these checks first so bad values
fail fast with a clear error instead of producing a wrong itinerary.
"""

from .exceptions import (
    InvalidCityCodeError,
    InvalidClockTimeError,
    InvalidGmtOffsetError,
)

MIN_GMT_OFFSET = -1200
MAX_GMT_OFFSET = 1400


def validate_clock_time(clock_time: int) -> int:
    """
    Validate a 24-hour HHMM clock time.

    Raises:
        InvalidClockTimeError: If outside 0000-2359 or minutes >= 60.
    """
    if not 0 <= clock_time <= 2359 or clock_time % 100 >= 60:
        raise InvalidClockTimeError(clock_time)
    return clock_time


def validate_gmt_offset(gmt_offset: int) -> int:
    """
    Validate a signed HHMM offset from GMT.

    Raises:
        InvalidGmtOffsetError: If outside -1200..1400 or minutes >= 60.
    """
    if not MIN_GMT_OFFSET <= gmt_offset <= MAX_GMT_OFFSET or abs(gmt_offset) % 100 >= 60:
        raise InvalidGmtOffsetError(gmt_offset)
    return gmt_offset


def validate_city_code(code: str) -> str:
    """
    Validate and normalize a three-letter city code.

    Returns:
        The code in upper case.

    Raises:
        InvalidCityCodeError: If the code is not three ASCII letters.
    """
    stripped = code.strip()
    if len(stripped) != 3 or not (stripped.isascii() and stripped.isalpha()):
        raise InvalidCityCodeError(code)
    return stripped.upper()


def validate_flight_times(depart_clock: int, arrive_clock: int) -> None:
    """
    Validate both local clock times of a flight.

    Raises:
        InvalidClockTimeError: If either time is invalid.
    """
    validate_clock_time(depart_clock)
    validate_clock_time(arrive_clock)
