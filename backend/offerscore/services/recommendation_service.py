"""Recommendation service: ranks catalog offers for a travel group."""

import logging
from datetime import date

from offerscore.config import settings
from offerscore.schemas.group import TravelGroup
from offerscore.schemas.offer import OfferFilters
from offerscore.services.offer_catalog import OfferCatalog, offer_catalog
from offerscore.services.scoring import ScoringService, get_scoring_service

logger = logging.getLogger(__name__)


class RecommendationService:
    """Fetches a capped candidate set, scores it, and keeps the top entries."""

    def __init__(
        self,
        catalog: OfferCatalog | None = None,
        scoring_service: ScoringService | None = None,
    ):
        self.catalog = catalog or offer_catalog
        self.scoring_service = scoring_service or get_scoring_service()

    def recommend(
        self,
        group: TravelGroup,
        filters: OfferFilters | None = None,
        today: date | None = None,
    ) -> dict:
        # Ranking narrows by city, board type and budget ceiling only
        candidate_filters = OfferFilters(
            departure_city=filters.departure_city if filters else None,
            board_type=filters.board_type if filters else None,
            price_max=filters.price_max if filters else None,
        )
        offers = self.catalog.find_with_filters(
            candidate_filters, limit=settings.scoring_candidate_limit, offset=0
        )

        scored = self.scoring_service.score_many(offers, group, today=today)
        top = scored[: settings.recommendation_top_n]

        logger.info(
            f"{self.scoring_service.name}: scored {len(scored)} offers for group "
            f"'{group.name}', returning {len(top)}"
        )

        return {
            "data": [
                {
                    "offer": s.offer,
                    "ai_score": {
                        "score": s.score,
                        "reasoning": s.reasoning,
                        "breakdown": s.breakdown,
                    },
                }
                for s in top
            ],
            "meta": {
                "scoring_service": self.scoring_service.name,
                "group_name": group.name,
                "total_scored": len(scored),
                "returned": len(top),
            },
        }


recommendation_service = RecommendationService()
