"""
Service layer for the trip planner.
"""

from src.trip_planner.services.graph_builder_service import GraphBuilderService

__all__ = ["GraphBuilderService"]
