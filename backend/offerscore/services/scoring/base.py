"""Scoring service contract shared by every offer scoring engine."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date

from offerscore.schemas.group import TravelGroup
from offerscore.schemas.offer import Offer

logger = logging.getLogger(__name__)

REASONING_SEPARATOR = " • "
REASONING_MAX_REASONS = 3
FALLBACK_REASONING = "Standard offer"


@dataclass
class FactorScore:
    points: int = 0
    reasons: list[str] = field(default_factory=list)

    def add(self, points: int, reason: str | None = None) -> None:
        self.points += points
        if reason:
            self.reasons.append(reason)


@dataclass
class ScoreResult:
    score: int  # clamped to 0-100
    breakdown: dict[str, int]
    reasons: list[str]
    reasoning: str


@dataclass
class ScoredOffer:
    offer: Offer
    score: int
    reasoning: str
    breakdown: dict[str, int]


def format_reasoning(reasons: list[str]) -> str:
    """Condense the first reasons into one display string."""
    if not reasons:
        return FALLBACK_REASONING
    return REASONING_SEPARATOR.join(reasons[:REASONING_MAX_REASONS])


class ScoringService(ABC):
    """Scores offers against a travel group.

    Engines implement ``score``; ranking a batch is shared so every engine
    sorts and ties the same way.
    """

    name: str

    @abstractmethod
    def score(self, offer: Offer, group: TravelGroup, today: date | None = None) -> ScoreResult:
        ...

    def score_many(
        self,
        offers: list[Offer],
        group: TravelGroup,
        today: date | None = None,
    ) -> list[ScoredOffer]:
        """
        Score every offer and rank by score descending.

        Ties keep their input order (list.sort is stable). A failure on any
        offer propagates and aborts the whole batch.
        """
        if not offers:
            return []

        if today is None:
            today = date.today()

        scored = []
        for offer in offers:
            result = self.score(offer, group, today=today)
            scored.append(
                ScoredOffer(
                    offer=offer,
                    score=result.score,
                    reasoning=result.reasoning,
                    breakdown=result.breakdown,
                )
            )

        scored.sort(key=lambda s: s.score, reverse=True)
        logger.debug(f"{self.name}: ranked {len(scored)} offers for group '{group.name}'")
        return scored
