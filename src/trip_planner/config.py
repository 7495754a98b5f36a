"""
Configuration module for the trip planner.

Loads environment variables (optionally from a .env file) and provides
centralized settings for schedule loading, search and logging.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Application configuration class.

    Attributes:
        SCHEDULE_PATH: Flat-file schedule loaded by the HTTP API.
        COORDINATE_SCALE: Factor applied to raw schedule coordinates so
            planar distances read as approximate miles.
        MIN_CONNECTION_MINUTES: Minimum minutes to change planes.
        LOG_LEVEL: Root logger level name.
    """

    SCHEDULE_PATH: str = os.getenv("ITINERARY_SCHEDULE_PATH", "data/schedule.txt")
    COORDINATE_SCALE: float = float(os.getenv("ITINERARY_COORDINATE_SCALE", "4.9"))
    MIN_CONNECTION_MINUTES: int = int(os.getenv("ITINERARY_MIN_CONNECTION_MINUTES", "30"))
    LOG_LEVEL: str = os.getenv("ITINERARY_LOG_LEVEL", "INFO")


def setup_logging(level: str = Config.LOG_LEVEL) -> None:
    """
    Configure the root logger with timestamped output to stdout.

    Safe to call more than once; handlers are only added the first time.
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if any(getattr(h, "_trip_planner", False) for h in root_logger.handlers):
        return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    console_handler._trip_planner = True
    root_logger.addHandler(console_handler)
