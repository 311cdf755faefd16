"""Rule-based scoring engine: explainable offer scores for a travel group.

Each factor is a pure function returning a ``FactorScore``; ``score`` sums
them in a fixed order, which is also the order reasons appear in.
"""

import logging
from datetime import date
from decimal import Decimal

from offerscore.schemas.group import TravelGroup
from offerscore.schemas.offer import Offer
from offerscore.services.scoring import rules
from offerscore.services.scoring.base import (
    FactorScore,
    ScoreResult,
    ScoringService,
    format_reasoning,
)
from offerscore.services.scoring.parsing import (
    calculate_age,
    parse_budget,
    parse_departure_hour,
    parse_room_capacity,
    parse_transfer_minutes,
)

logger = logging.getLogger(__name__)


def _instructions(group: TravelGroup) -> str:
    return (group.ai_instructions or "").lower()


def _has_children(group: TravelGroup) -> bool:
    return any(p.type == "child" for p in group.people)


def score_children_features(offer: Offer, group: TravelGroup, today: date) -> FactorScore:
    result = FactorScore()

    children = [p for p in group.people if p.type == "child"]
    if not children:
        return result

    ages = [calculate_age(child.birth_date, today) for child in children]
    if not any(age <= rules.YOUNG_CHILD_MAX_AGE for age in ages):
        return result

    hotel_name = offer.hotel.name.lower()
    if any(keyword in hotel_name for keyword in rules.FAMILY_HOTEL_KEYWORDS):
        result.add(15, "hotel ideal for families with children")

    total_people = len(group.people)
    if total_people >= rules.FAMILY_ROOM_MIN_PEOPLE and "family" in offer.room_type.lower():
        result.add(10, f"family room for {total_people} people")

    return result


def score_board_type(offer: Offer, group: TravelGroup) -> FactorScore:
    result = FactorScore()
    all_inclusive = offer.board_type == rules.ALL_INCLUSIVE

    if all_inclusive and _has_children(group):
        result.add(15, "All Inclusive — convenient for families")

    if all_inclusive and rules.ALL_INCLUSIVE_TRIGGER in _instructions(group):
        result.add(10, "board type you selected")

    return result


def score_transfer(offer: Offer, group: TravelGroup) -> FactorScore:
    result = FactorScore()
    instructions = _instructions(group)
    flight = offer.flight_info

    if any(trigger in instructions for trigger in rules.SHORT_TRANSFER_TRIGGERS):
        minutes = parse_transfer_minutes(flight.transfer_duration)
        for band in rules.TRANSFER_BANDS:
            if minutes < band.max_minutes:
                result.add(band.points, f"{band.label} ({minutes} min)")
                break

    if flight.transfer_included:
        result.add(5, "transfer included in price")

    if any(trigger in instructions for trigger in rules.LATE_FLIGHT_TRIGGERS):
        departure = flight.outbound.departure if flight.outbound else None
        if parse_departure_hour(departure) >= rules.LATE_DEPARTURE_MIN_HOUR:
            result.add(8, "departs after 10:00 — no early rising")

    return result


def score_room_type(offer: Offer, group: TravelGroup) -> FactorScore:
    result = FactorScore()
    total_people = len(group.people)
    capacity = parse_room_capacity(offer.room_type)

    if capacity == total_people:
        result.add(10, f"perfect room size ({total_people} people)")
    elif total_people <= capacity <= total_people + 1:
        result.add(5, "appropriate room for group")

    return result


def match_amenity(instructions: str, hotel_name: str) -> rules.AmenityRule | None:
    """
    First amenity requested in the instructions whose synonyms appear in the hotel name.

    Evaluation stops at the first hit across the whole table, so at most one
    amenity bonus is ever awarded per offer.
    """
    for rule in rules.AMENITY_RULES:
        if rule.keyword not in instructions:
            continue
        if any(synonym in hotel_name for synonym in rule.hotel_synonyms):
            return rule
    return None


def score_ai_keywords(offer: Offer, group: TravelGroup) -> FactorScore:
    result = FactorScore()
    instructions = _instructions(group)
    if not instructions:
        return result

    hotel_name = offer.hotel.name.lower()
    city = offer.hotel.city.lower()

    amenity = match_amenity(instructions, hotel_name)
    if amenity:
        label = amenity.keyword[:1].upper() + amenity.keyword[1:]
        result.add(rules.AMENITY_POINTS, f"{label} at the hotel")

    for destination in rules.DESTINATION_RULES:
        if destination.keyword in instructions and destination.city_fragment in city:
            result.add(destination.points, destination.reason)

    return result


def per_person_price(offer: Offer, group_size: int) -> Decimal:
    """Offer price normalised to one traveller."""
    if group_size == 0:
        group_size = rules.DEFAULT_GROUP_SIZE
    total = offer.price * group_size if offer.price_per_person else offer.price
    return total / group_size


def score_pricing(offer: Offer, group: TravelGroup) -> FactorScore:
    result = FactorScore()
    price = per_person_price(offer, len(group.people))

    for tier in rules.PRICE_TIERS:
        if price < tier.below:
            result.add(tier.points, tier.reason)
            break

    budget = parse_budget(_instructions(group))
    if budget is not None and price <= budget:
        result.add(rules.BUDGET_POINTS, f"within budget (up to {budget} zł)")

    return result


class RuleBasedScoringService(ScoringService):
    """Additive point scoring across seven independent factors."""

    name = "rule-based-v1"

    def score(self, offer: Offer, group: TravelGroup, today: date | None = None) -> ScoreResult:
        if today is None:
            today = date.today()

        factors = {
            "base": FactorScore(points=rules.BASE_POINTS),
            "children": score_children_features(offer, group, today),
            "board_type": score_board_type(offer, group),
            "transfer": score_transfer(offer, group),
            "room_type": score_room_type(offer, group),
            "ai_keywords": score_ai_keywords(offer, group),
            "price": score_pricing(offer, group),
        }

        breakdown = {name: factor.points for name, factor in factors.items()}
        reasons = [reason for factor in factors.values() for reason in factor.reasons]
        total = min(rules.MAX_SCORE, sum(breakdown.values()))

        logger.debug(f"Offer {offer.id} scored {total} ({breakdown})")

        return ScoreResult(
            score=total,
            breakdown=breakdown,
            reasons=reasons,
            reasoning=format_reasoning(reasons),
        )
