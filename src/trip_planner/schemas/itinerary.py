"""
Itinerary table schema using Pandera.

Flattens an Itinerary into one row per leg for export and display.
"""

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series

from src.itinerary.itinerary import Itinerary


class ItineraryLegSchema(pa.DataFrameModel):
    """Each row is one flight of an itinerary, in travel order."""

    leg_index: Series[int] = pa.Field(ge=0, description="Zero-based leg index")
    origin: Series[str] = pa.Field(nullable=False, description="Departure city code")
    destination: Series[str] = pa.Field(nullable=False, description="Arrival city code")
    departure: Series[str] = pa.Field(description="Local departure, 'H:MM am/pm'")
    arrival: Series[str] = pa.Field(description="Local arrival, 'H:MM am/pm'")
    depart_gmt: Series[int] = pa.Field(ge=0, lt=1440, description="GMT minute-of-day")
    arrive_gmt: Series[int] = pa.Field(ge=0, lt=1440, description="GMT minute-of-day")
    leg_cost: Series[int] = pa.Field(ge=0, description="Wait plus flight minutes")
    cumulative_cost: Series[int] = pa.Field(ge=0, description="Minutes since the start")

    class Config:
        strict = True
        coerce = True
        ordered = True
        name = "ItineraryLegSchema"


ITINERARY_COLUMNS = list(ItineraryLegSchema.to_schema().columns)


def itinerary_to_frame(itinerary: Itinerary) -> DataFrame[ItineraryLegSchema]:
    """
    Convert an Itinerary to a validated DataFrame, one row per leg.

    An itinerary with no legs gives an empty frame with the same columns.
    """
    rows = [
        {
            "leg_index": i,
            "origin": leg.origin_code,
            "destination": leg.dest_code,
            "departure": leg.departure_clock,
            "arrival": leg.arrival_clock,
            "depart_gmt": leg.depart_gmt,
            "arrive_gmt": leg.arrive_gmt,
            "leg_cost": leg.leg_cost,
            "cumulative_cost": leg.cumulative_cost,
        }
        for i, leg in enumerate(itinerary.legs)
    ]
    df = pd.DataFrame(rows, columns=ITINERARY_COLUMNS)
    return ItineraryLegSchema.validate(df)
