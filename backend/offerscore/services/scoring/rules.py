"""Rule tables for the rule-based scoring engine: single source for all keywords and thresholds.

Trigger phrases are matched as plain substrings of the lower-cased
``ai_instructions`` text; hotel keywords are matched against the lower-cased
hotel name. Tables are ordered: evaluation walks them top to bottom.
"""

from dataclasses import dataclass
from decimal import Decimal

BASE_POINTS = 20
MAX_SCORE = 100

YOUNG_CHILD_MAX_AGE = 12
FAMILY_ROOM_MIN_PEOPLE = 4
ALL_INCLUSIVE = "All Inclusive"

# Hotel name hints that the property caters for small children
FAMILY_HOTEL_KEYWORDS = ("aqua", "park", "family", "kids", "children", "club")

SHORT_TRANSFER_TRIGGERS = ("short transfer", "close to airport")
LATE_FLIGHT_TRIGGERS = ("doesn't like flying in the morning", "late flight")
ALL_INCLUSIVE_TRIGGER = "all inclusive"

DEFAULT_TRANSFER_MINUTES = 60
DEFAULT_DEPARTURE_HOUR = 12
DEFAULT_ROOM_CAPACITY = 4
DEFAULT_GROUP_SIZE = 2  # price normalisation for an empty group

LATE_DEPARTURE_MIN_HOUR = 10

BUDGET_PATTERN = r"up to (\d+)"


@dataclass(frozen=True)
class TransferBand:
    """Transfer shorter than ``max_minutes`` earns ``points``."""
    max_minutes: int
    points: int
    label: str


# Tightest band first, only one band fires
TRANSFER_BANDS: tuple[TransferBand, ...] = (
    TransferBand(max_minutes=30, points=15, label="very short transfer"),
    TransferBand(max_minutes=60, points=10, label="short transfer"),
)


@dataclass(frozen=True)
class AmenityRule:
    """Preference keyword in the instructions mapped to hotel-name synonyms."""
    keyword: str
    hotel_synonyms: tuple[str, ...]


AMENITY_RULES: tuple[AmenityRule, ...] = (
    AmenityRule("pool", ("pool", "aqua")),
    AmenityRule("beach", ("beach", "sea")),
    AmenityRule("spa", ("spa", "wellness", "relax")),
    AmenityRule("waterpark", ("aqua", "park", "waterpark")),
    AmenityRule("entertainment", ("animation", "club", "kids")),
)

AMENITY_POINTS = 8


@dataclass(frozen=True)
class DestinationRule:
    """Destination named in the instructions matched against the hotel city."""
    keyword: str
    city_fragment: str
    points: int
    reason: str


DESTINATION_RULES: tuple[DestinationRule, ...] = (
    DestinationRule("greece", "hersonissos", 5, "Greece — selected destination"),
)


@dataclass(frozen=True)
class PriceTier:
    """Per-person price strictly below ``below`` earns ``points``."""
    below: Decimal
    points: int
    reason: str | None


# Cheapest tier first, only one tier fires
PRICE_TIERS: tuple[PriceTier, ...] = (
    PriceTier(below=Decimal("2500"), points=10, reason="very attractive price"),
    PriceTier(below=Decimal("3500"), points=7, reason="good price"),
    PriceTier(below=Decimal("4500"), points=3, reason=None),
)

BUDGET_POINTS = 5
