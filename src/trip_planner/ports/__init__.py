"""
Port interfaces for the trip planner.

Ports define the abstract interfaces that the application layer uses to
reach external data sources (Ports and Adapters architecture).
"""

from src.trip_planner.ports.schedule_provider import ScheduleProvider

__all__ = ["ScheduleProvider"]
