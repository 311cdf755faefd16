from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer

BOARD_TYPES = ["All Inclusive", "Half Board", "Bed & Breakfast", "Full Board"]


class Hotel(BaseModel):
    id: int
    name: str
    slug: str | None = None
    city: str
    country: str | None = None
    address: str | None = None


class Provider(BaseModel):
    id: str
    name: str
    website: str | None = None


class FlightLeg(BaseModel):
    departure: str | None = None  # "HH:MM"
    arrival: str | None = None


class FlightInfo(BaseModel):
    airline: str | None = None
    outbound: FlightLeg | None = None
    return_leg: FlightLeg | None = Field(default=None, alias="return")
    transfer_included: bool = False
    transfer_duration: str | None = None  # free text, e.g. "45 min"

    model_config = {"populate_by_name": True}


class Offer(BaseModel):
    id: str
    hotel: Hotel
    provider: Provider | None = None
    price: Decimal = Field(ge=0, decimal_places=2)
    price_per_person: bool = True
    departure_city: str
    departure_date: date
    return_date: date
    duration_days: int
    board_type: str
    room_type: str
    flight_info: FlightInfo = Field(default_factory=FlightInfo)
    external_url: str | None = None
    is_active: bool = True

    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)


class OfferFilters(BaseModel):
    departure_city: str | None = None
    departure_date_from: date | None = None
    departure_date_to: date | None = None
    duration_days: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    board_type: str | None = None
    provider_id: str | None = None
