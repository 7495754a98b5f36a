"""
Custom exceptions for the itinerary module.

Provides a hierarchy of exceptions for clear error handling
of graph construction, schedule ingestion and time formatting.
Unreachable destinations are not errors: queries return None.
"""


class ItineraryError(Exception):
    """Base exception for all itinerary module errors."""

    pass


class DuplicateCityError(ItineraryError):
    """Raised when a city code or name is already present in the graph."""

    def __init__(self, key: str, kind: str = "code") -> None:
        self.key = key
        self.kind = kind
        message = f"City with {kind} '{key}' is already in the graph"
        super().__init__(message)


class UnknownCityError(ItineraryError):
    """Raised when a city code or name does not resolve to a vertex."""

    def __init__(self, key: str, context: str = "graph") -> None:
        self.key = key
        message = f"City '{key}' not found in {context}"
        super().__init__(message)


class InvalidDurationError(ItineraryError, ValueError):
    """Raised when a negative duration is passed to time formatting."""

    def __init__(self, minutes: int) -> None:
        self.minutes = minutes
        message = f"Duration cannot be negative, got {minutes} minutes"
        super().__init__(message)


class ValidationError(ItineraryError):
    """Base exception for input validation errors."""

    pass


class InvalidClockTimeError(ValidationError):
    """Raised when a clock time is outside 0000-2359 or has minutes >= 60."""

    def __init__(self, clock_time: int) -> None:
        self.clock_time = clock_time
        message = f"Invalid clock time: {clock_time} (expected HHMM between 0000 and 2359)"
        super().__init__(message)


class InvalidGmtOffsetError(ValidationError):
    """Raised when a GMT offset is outside -1200..+1400 or malformed."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        message = f"Invalid GMT offset: {offset} (expected signed HHMM between -1200 and 1400)"
        super().__init__(message)


class InvalidCityCodeError(ValidationError):
    """Raised when a city code is not three letters."""

    def __init__(self, code: str) -> None:
        self.code = code
        message = f"Invalid city code: '{code}' (expected three letters)"
        super().__init__(message)


class ScheduleFormatError(ItineraryError):
    """Raised when a schedule file line cannot be parsed."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        message = f"Line {line_number}: {reason}: {line!r}"
        super().__init__(message)
