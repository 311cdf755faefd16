"""Total parsing helpers for the free-text fields scoring depends on.

None of these raise: malformed input resolves to the documented default.
"""

import re
from datetime import date

from offerscore.services.scoring.rules import (
    BUDGET_PATTERN,
    DEFAULT_DEPARTURE_HOUR,
    DEFAULT_ROOM_CAPACITY,
    DEFAULT_TRANSFER_MINUTES,
)

_ROOM_CAPACITY_RE = re.compile(r"(\d+)\+(\d+)")
_BUDGET_RE = re.compile(BUDGET_PATTERN)
_LEADING_DIGITS_RE = re.compile(r"\d+")
_ASCII_DIGIT_RE = re.compile(r"[0-9]")


def calculate_age(birth_date: date, today: date) -> int:
    """Whole calendar years between ``birth_date`` and ``today``."""
    if birth_date > today:
        birth_date, today = today, birth_date
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def parse_transfer_minutes(raw: str | None) -> int:
    """Digits of a free-text duration ("45 min" -> 45); 60 when there are none."""
    digits = "".join(_ASCII_DIGIT_RE.findall(raw or ""))
    if not digits:
        return DEFAULT_TRANSFER_MINUTES
    return int(digits)


def parse_departure_hour(raw: str | None) -> int:
    """Hour from the first two characters of "HH:MM", noon if missing."""
    if not raw:
        return DEFAULT_DEPARTURE_HOUR
    match = _LEADING_DIGITS_RE.match(raw[:2])
    if not match:
        return DEFAULT_DEPARTURE_HOUR
    return int(match.group())


def parse_room_capacity(room_type: str | None) -> int:
    """Capacity encoded as "<adults>+<children>" in the room label, else 4."""
    match = _ROOM_CAPACITY_RE.search(room_type or "")
    if not match:
        return DEFAULT_ROOM_CAPACITY
    return int(match.group(1)) + int(match.group(2))


def parse_budget(instructions: str) -> int | None:
    """Budget from an "up to <amount>" phrase in lower-cased instructions."""
    match = _BUDGET_RE.search(instructions)
    if not match:
        return None
    return int(match.group(1))
