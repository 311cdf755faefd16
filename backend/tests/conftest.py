from datetime import date
from decimal import Decimal

import pytest

from offerscore.schemas.group import Person, TravelGroup
from offerscore.schemas.offer import FlightInfo, FlightLeg, Hotel, Offer, Provider

# Fixed reference date so ages never drift
TODAY = date(2026, 6, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_offer():
    """
    Fixture that returns a function: make_offer(**overrides) -> Offer
    Defaults describe a plain offer that earns no bonus beyond base and price.
    """
    def _make(
        offer_id: str = "offer-1",
        hotel_name: str = "Hotel Central",
        city: str = "Antalya",
        price: str = "5000",
        price_per_person: bool = True,
        board_type: str = "Half Board",
        room_type: str = "Suite 3+3",
        departure_city: str = "Warszawa",
        departure_date: date = date(2026, 7, 10),
        duration_days: int = 7,
        provider_id: str = "tui",
        is_active: bool = True,
        transfer_included: bool = False,
        transfer_duration: str | None = "75 min",
        outbound_departure: str | None = "06:00",
    ) -> Offer:
        return Offer(
            id=offer_id,
            hotel=Hotel(id=1, name=hotel_name, city=city),
            provider=Provider(id=provider_id, name=provider_id.upper()),
            price=Decimal(price),
            price_per_person=price_per_person,
            departure_city=departure_city,
            departure_date=departure_date,
            return_date=date.fromordinal(departure_date.toordinal() + duration_days),
            duration_days=duration_days,
            board_type=board_type,
            room_type=room_type,
            flight_info=FlightInfo(
                airline="LOT",
                outbound=FlightLeg(departure=outbound_departure, arrival="09:30"),
                transfer_included=transfer_included,
                transfer_duration=transfer_duration,
            ),
            is_active=is_active,
        )
    return _make


@pytest.fixture
def make_group():
    """
    Fixture that returns a function: make_group(adults=2, child_birth_dates=(), ai="") -> TravelGroup
    """
    def _make(
        adults: int = 2,
        child_birth_dates: tuple[date, ...] = (),
        ai_instructions: str | None = None,
        name: str = "Family",
    ) -> TravelGroup:
        people = [
            Person(name=f"Adult {i}", birth_date=date(1985, 1, 1), gender="f", type="adult")
            for i in range(adults)
        ]
        people += [
            Person(name=f"Child {i}", birth_date=born, gender="m", type="child")
            for i, born in enumerate(child_birth_dates)
        ]
        return TravelGroup(id=1, name=name, people=people, ai_instructions=ai_instructions)
    return _make
