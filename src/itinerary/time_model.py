"""
Clock, minute-of-day and GMT conversions.

All comparisons between flights in different time zones happen on
GMT-normalized minutes-of-day. Clock times are integers in 24-hour
HHMM form (1734 is 5:34 pm); GMT offsets use the same form with a
sign (-600 is six hours behind GMT).
"""

from .exceptions import InvalidDurationError

MINUTES_IN_A_DAY = 24 * 60
MIN_CONNECTION_MINUTES = 30


def clock_to_minute_of_day(clock_time: int) -> int:
    """
    Convert a clock-formatted integer to minutes since midnight.

    Signed values keep their sign on both components, so an offset of
    -630 becomes -390 minutes. No range checking is done.

    Example:
        >>> clock_to_minute_of_day(1734)
        1054
        >>> clock_to_minute_of_day(-600)
        -360
    """
    sign = -1 if clock_time < 0 else 1
    hours, minutes = divmod(abs(clock_time), 100)
    return sign * (hours * 60 + minutes)


def clock_to_gmt_minutes(clock_time: int, gmt_offset: int) -> int:
    """
    Convert a local clock time to a GMT minute-of-day in [0, 1440).

    Args:
        clock_time: Local time in HHMM form.
        gmt_offset: The city's offset from GMT in signed HHMM form.

    Returns:
        GMT-normalized minute-of-day. Results that fall on the previous
        or next day wrap around.

    Example:
        >>> clock_to_gmt_minutes(1734, -600)
        1414
    """
    local = clock_to_minute_of_day(clock_time)
    return (local - clock_to_minute_of_day(gmt_offset)) % MINUTES_IN_A_DAY


def gmt_minutes_to_local(minute_of_day: int, gmt_offset: int) -> int:
    """Shift a GMT minute-of-day into a city's local minute-of-day."""
    return (minute_of_day + clock_to_minute_of_day(gmt_offset)) % MINUTES_IN_A_DAY


def minute_of_day_to_clock(minute_of_day: int) -> int:
    """Render a minute-of-day (any value) as a 24-hour HHMM integer."""
    hours, minutes = divmod(minute_of_day % MINUTES_IN_A_DAY, 60)
    return hours * 100 + minutes


def minute_of_day_to_clock_string(minute_of_day: int) -> str:
    """
    Render a minute-of-day as a 12-hour "H:MM am/pm" string.

    Negative values and values past midnight are treated as times on
    the previous or following day and wrap into [0, 1440).

    Example:
        >>> minute_of_day_to_clock_string(1266)
        '9:06 pm'
        >>> minute_of_day_to_clock_string(-60)
        '11:00 pm'
    """
    hours, minutes = divmod(minute_of_day % MINUTES_IN_A_DAY, 60)
    suffix = "pm" if hours > 11 else "am"
    hours = hours % 12 or 12
    return f"{hours}:{minutes:02d} {suffix}"


def minutes_to_hours_and_minutes(duration: int) -> str:
    """
    Render a duration as "<h> hrs, <m> mins".

    Raises:
        InvalidDurationError: If duration is negative.
    """
    if duration < 0:
        raise InvalidDurationError(duration)

    hours, minutes = divmod(duration, 60)
    return f"{hours} hrs, {minutes} mins"


def waiting_time(arrive_minute: int, depart_minute: int) -> int:
    """
    Minutes from arriving to a later departure.

    If the departure minute is numerically earlier than the arrival
    minute, the departure is on the following day.

    Example:
        >>> waiting_time(780, 770)
        1430
    """
    if depart_minute >= arrive_minute:
        return depart_minute - arrive_minute
    return MINUTES_IN_A_DAY + depart_minute - arrive_minute


def connection_wait(
    arrive_minute: int,
    depart_minute: int,
    first_leg: bool,
    min_connection: int = MIN_CONNECTION_MINUTES,
) -> int:
    """
    Waiting time before boarding, with the minimum layover rule applied.

    The first leg of a trip has no previous plane to get off, so any
    wait is accepted. On later legs a wait shorter than min_connection
    means the traveller misses the flight and takes it the next day.

    Args:
        arrive_minute: GMT minute the traveller is at the airport.
        depart_minute: GMT departure minute of the candidate flight.
        first_leg: True if no leg has been flown yet.
        min_connection: Minimum minutes needed to change planes.

    Returns:
        Adjusted waiting time in minutes.
    """
    wait = waiting_time(arrive_minute, depart_minute)
    if not first_leg and wait < min_connection:
        wait += MINUTES_IN_A_DAY
    return wait
