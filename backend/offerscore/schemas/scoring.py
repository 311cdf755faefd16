from pydantic import BaseModel

from offerscore.schemas.group import TravelGroup
from offerscore.schemas.offer import Offer, OfferFilters


class RecommendRequest(BaseModel):
    group: TravelGroup
    filters: OfferFilters | None = None


class AiScore(BaseModel):
    score: int
    reasoning: str
    breakdown: dict[str, int]


class ScoredOfferResponse(BaseModel):
    offer: Offer
    ai_score: AiScore


class RecommendationMeta(BaseModel):
    scoring_service: str
    group_name: str
    total_scored: int
    returned: int


class RecommendationResponse(BaseModel):
    data: list[ScoredOfferResponse]
    meta: RecommendationMeta
