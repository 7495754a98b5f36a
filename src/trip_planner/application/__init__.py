"""
Application layer for the trip planner.

This layer provides the public API for the itinerary engine. It acts as
a facade, handling graph construction and input validation.
"""

from src.trip_planner.application.plan_itinerary import PlanItinerary

__all__ = ["PlanItinerary"]
