"""Demo data for the in-memory offer catalog."""

import logging
import random
import uuid
from datetime import date, timedelta
from decimal import Decimal

from offerscore.schemas.offer import BOARD_TYPES, FlightInfo, FlightLeg, Hotel, Offer, Provider
from offerscore.services.offer_catalog import OfferCatalog

logger = logging.getLogger(__name__)

# ── Providers ──────────────────────────────────────────────────────────────────

PROVIDERS = [
    ("TUI", "https://www.tui.pl"),
    ("Itaka", "https://www.itaka.pl"),
    ("Rainbow Tours", "https://www.rainbowtours.pl"),
    ("Wakacje.pl", "https://www.wakacje.pl"),
]

# ── Hotels ─────────────────────────────────────────────────────────────────────

HOTELS = [
    # (name, city, country)
    ("Aqua Paradise Club", "Hersonissos", "Greece"),
    ("Star Beach Village", "Hersonissos", "Greece"),
    ("Creta Maris Spa Resort", "Hersonissos", "Greece"),
    ("Rixos Family Park", "Antalya", "Turkey"),
    ("Delphin Kids Club", "Alanya", "Turkey"),
    ("Sunrise Wellness Hotel", "Hurghada", "Egypt"),
    ("Iberostar Sea Garden", "Sharm el-Sheikh", "Egypt"),
    ("Hotel Playa Dorada", "Mallorca", "Spain"),
]

DEPARTURE_CITIES = ["Warszawa", "Kraków", "Gdańsk", "Wrocław", "Poznań"]
ROOM_TYPES = ["Standard 2+2", "Family 2+3", "Suite 2+2", "Apartament 2+4"]
AIRLINES = ["LOT", "Ryanair", "Wizz Air", "Enter Air"]


def _slugify(name: str) -> str:
    return name.lower().replace(" ", "-")


def build_demo_offers(seed: int = 42, today: date | None = None) -> list[Offer]:
    """Generate 2-3 offers per demo hotel; same seed and date give the same offers."""
    rng = random.Random(seed)
    today = today or date.today()

    providers = [
        Provider(id=str(uuid.UUID(int=rng.getrandbits(128))), name=name, website=website)
        for name, website in PROVIDERS
    ]

    offers = []
    for hotel_id, (name, city, country) in enumerate(HOTELS, start=1):
        hotel = Hotel(id=hotel_id, name=name, slug=_slugify(name), city=city, country=country)

        for provider in providers[: rng.randint(2, 3)]:
            departure = today + timedelta(days=rng.randint(30, 180))
            duration = rng.randint(7, 14)

            offers.append(
                Offer(
                    id=str(uuid.UUID(int=rng.getrandbits(128))),
                    hotel=hotel,
                    provider=provider,
                    price=Decimal(rng.randint(2500, 5500)),
                    price_per_person=True,
                    departure_city=rng.choice(DEPARTURE_CITIES),
                    departure_date=departure,
                    return_date=departure + timedelta(days=duration),
                    duration_days=duration,
                    board_type=rng.choice(BOARD_TYPES),
                    room_type=rng.choice(ROOM_TYPES),
                    flight_info=FlightInfo(
                        airline=rng.choice(AIRLINES),
                        outbound=FlightLeg(departure="06:00", arrival="09:30"),
                        return_leg=FlightLeg(departure="18:00", arrival="21:30"),
                        transfer_included=rng.random() < 0.5,
                        transfer_duration=f"{rng.randint(30, 90)} min",
                    ),
                    external_url=f"{provider.website}/oferta/{hotel.slug}?ref=offerscore",
                )
            )

    return offers


def seed_catalog(catalog: OfferCatalog, seed: int = 42) -> int:
    """Load demo offers into an empty catalog. Returns the number added."""
    if len(catalog):
        logger.info("Offer catalog already populated, skipping seed")
        return 0

    offers = build_demo_offers(seed)
    catalog.extend(offers)
    logger.info(f"Seeded {len(offers)} demo offers for {len(HOTELS)} hotels")
    return len(offers)
