"""Offer scoring engines: interchangeable behind one contract.

Modules:
    base        ScoringService contract, result types, batch ranking
    rules       Keyword tables and thresholds for the rule-based engine
    parsing     Total parsers for free-text offer fields
    rule_based  Deterministic seven-factor scoring engine

Pipeline:
    OfferCatalog.find_with_filters → ScoringService.score_many
    → RecommendationService truncation and serialization
"""

from offerscore.config import settings
from offerscore.services.scoring.base import ScoredOffer, ScoreResult, ScoringService
from offerscore.services.scoring.rule_based import RuleBasedScoringService

SCORING_ENGINES: dict[str, type[ScoringService]] = {
    RuleBasedScoringService.name: RuleBasedScoringService,
}


def get_scoring_service(name: str | None = None) -> ScoringService:
    """Resolve a scoring engine by name, defaulting to the configured one."""
    name = name or settings.scoring_engine
    engine_cls = SCORING_ENGINES.get(name)
    if engine_cls is None:
        raise ValueError(f"Unknown scoring engine: {name}")
    return engine_cls()


__all__ = [
    "SCORING_ENGINES",
    "RuleBasedScoringService",
    "ScoreResult",
    "ScoredOffer",
    "ScoringService",
    "get_scoring_service",
]
