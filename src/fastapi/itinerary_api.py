import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field

from src.itinerary.exceptions import (
    DuplicateCityError,
    UnknownCityError,
    ValidationError,
)
from src.itinerary.flight import Flight
from src.itinerary.time_model import (
    minute_of_day_to_clock,
    minute_of_day_to_clock_string,
    minutes_to_hours_and_minutes,
)
from src.trip_planner.application import PlanItinerary
from src.trip_planner.config import Config, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging when the server starts, not on import."""
    setup_logging(Config.LOG_LEVEL)
    yield


app = FastAPI(title="Flight Itinerary API", lifespan=lifespan)

_planner: Optional[PlanItinerary] = None


def get_planner() -> PlanItinerary:
    """Planner built from Config.SCHEDULE_PATH on first use."""
    global _planner
    if _planner is None:
        path = Path(Config.SCHEDULE_PATH)
        if path.exists():
            _planner = PlanItinerary.from_path(path)
        else:
            logger.warning("Schedule %s not found, starting with an empty graph", path)
            _planner = PlanItinerary()
    return _planner


# --- Error mapping ---


@app.exception_handler(UnknownCityError)
async def unknown_city_handler(request: Request, exc: UnknownCityError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(DuplicateCityError)
async def duplicate_city_handler(request: Request, exc: DuplicateCityError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# --- Pydantic Schemas (The JSON Contract) ---


class CitySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    gmt_offset: int
    x: float
    y: float
    adjacent: List[str]


class FlightSchema(BaseModel):
    origin: str
    destination: str
    destination_name: str
    depart_clock: int  # local HHMM at origin
    arrive_clock: int  # local HHMM at destination
    departure: str
    arrival: str
    duration: int
    duration_text: str


class ItineraryLegSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    origin_code: str
    origin_name: str
    dest_code: str
    dest_name: str
    departure_clock: str  # Captures @property
    arrival_clock: str  # Captures @property
    leg_cost: int
    cumulative_cost: int


class ItinerarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    start_code: str
    start_name: str
    start_clock: str  # Captures @property
    legs: List[ItineraryLegSchema]
    total_cost: int  # Captures @property
    total_cost_text: str  # Captures @property
    route_cities: List[str]  # Captures @property
    num_legs: int  # Captures @property


class DirectFlightSchema(BaseModel):
    origin: str
    destination: str
    direct: bool
    flights: List[FlightSchema]


class CityCreateRequest(BaseModel):
    code: str = Field(min_length=3, max_length=3)
    name: str = Field(min_length=1)
    gmt_offset: int
    x: float = 0.0
    y: float = 0.0


class FlightCreateRequest(BaseModel):
    origin: str
    destination: str
    depart_clock: int
    arrive_clock: int


def _flight_schema(planner: PlanItinerary, origin_code: str, flight: Flight) -> FlightSchema:
    return FlightSchema(
        origin=origin_code,
        destination=flight.dest_code,
        destination_name=planner.graph.get_city(flight.dest_code).name,
        depart_clock=minute_of_day_to_clock(flight.local_departure),
        arrive_clock=minute_of_day_to_clock(flight.local_arrival),
        departure=minute_of_day_to_clock_string(flight.local_departure),
        arrival=minute_of_day_to_clock_string(flight.local_arrival),
        duration=flight.duration,
        duration_text=minutes_to_hours_and_minutes(flight.duration),
    )


# --- API Endpoints ---


@app.get("/cities", response_model=List[CitySchema])
def list_cities(planner: PlanItinerary = Depends(get_planner)):
    return [CitySchema.model_validate(c) for c in planner.list_cities()]


@app.post("/cities", response_model=CitySchema, status_code=201)
def add_city(request: CityCreateRequest, planner: PlanItinerary = Depends(get_planner)):
    city = planner.add_city(
        code=request.code,
        name=request.name,
        gmt_offset=request.gmt_offset,
        x=request.x,
        y=request.y,
    )
    return CitySchema.model_validate(city)


@app.get("/cities/{key}", response_model=CitySchema)
def get_city(key: str, planner: PlanItinerary = Depends(get_planner)):
    """Look up a city by name or code."""
    return CitySchema.model_validate(planner.find_city(key))


@app.get("/cities/{key}/flights", response_model=List[FlightSchema])
def get_departures(
    key: str,
    to: Optional[str] = None,
    planner: PlanItinerary = Depends(get_planner),
):
    """Flights leaving a city, optionally only those to `to`."""
    origin = planner.find_city(key)
    return [_flight_schema(planner, origin.code, f) for f in planner.flights_from(key, to)]


@app.get("/cities/{key}/arrivals", response_model=Dict[str, List[FlightSchema]])
def get_arrivals(key: str, planner: PlanItinerary = Depends(get_planner)):
    """Flights arriving at a city, grouped by origin code."""
    return {
        origin: [_flight_schema(planner, origin, f) for f in flights]
        for origin, flights in planner.flights_to(key).items()
    }


@app.post("/flights", response_model=FlightSchema, status_code=201)
def add_flight(request: FlightCreateRequest, planner: PlanItinerary = Depends(get_planner)):
    flight = planner.add_flight(
        origin=request.origin,
        destination=request.destination,
        depart_clock=request.depart_clock,
        arrive_clock=request.arrive_clock,
    )
    return _flight_schema(planner, planner.find_city(request.origin).code, flight)


@app.get("/direct", response_model=DirectFlightSchema)
def direct_flight(origin: str, destination: str, planner: PlanItinerary = Depends(get_planner)):
    start = planner.find_city(origin)
    dest = planner.find_city(destination)
    flights = planner.flights_from(start.code, dest.code)
    return DirectFlightSchema(
        origin=start.code,
        destination=dest.code,
        direct=bool(flights),
        flights=[_flight_schema(planner, start.code, f) for f in flights],
    )


@app.get("/itineraries/fewest-stops", response_model=ItinerarySchema)
def fewest_stops(
    origin: str,
    destination: str,
    start_time: int = Query(..., description="Local HHMM start time at origin"),
    planner: PlanItinerary = Depends(get_planner),
):
    itinerary = planner.fewest_stops(origin, destination, start_time)
    if itinerary is None:
        raise HTTPException(status_code=404, detail="No path found")
    return ItinerarySchema.model_validate(itinerary)


@app.get("/itineraries/quickest", response_model=ItinerarySchema)
def quickest(
    origin: str,
    destination: str,
    start_time: int = Query(..., description="Local HHMM start time at origin"),
    planner: PlanItinerary = Depends(get_planner),
):
    itinerary = planner.quickest(origin, destination, start_time)
    if itinerary is None:
        raise HTTPException(status_code=404, detail="No path found")
    return ItinerarySchema.model_validate(itinerary)


@app.get("/graph", response_class=PlainTextResponse)
def graph_dump(verbose: bool = False, planner: PlanItinerary = Depends(get_planner)):
    return planner.describe(verbose)
