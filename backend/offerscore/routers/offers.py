"""Offers router: listing, detail and group-personalised ranking."""

import logging
import math
from datetime import date
from decimal import Decimal

from fastapi import APIRouter, HTTPException, Query

from offerscore.config import settings
from offerscore.schemas.offer import OfferFilters
from offerscore.schemas.scoring import RecommendationResponse, RecommendRequest
from offerscore.services.offer_catalog import offer_catalog
from offerscore.services.recommendation_service import recommendation_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_offers(
    departure_city: str | None = Query(None),
    departure_date_from: date | None = Query(None),
    departure_date_to: date | None = Query(None),
    duration_days: int | None = Query(None),
    price_min: Decimal | None = Query(None),
    price_max: Decimal | None = Query(None),
    board_type: str | None = Query(None),
    provider_id: str | None = Query(None),
    page: int = Query(1),
    limit: int = Query(settings.offers_default_page_size),
):
    """List active offers, cheapest first, with pagination."""
    page = max(1, page)
    limit = min(settings.offers_max_page_size, max(1, limit))

    filters = OfferFilters(
        departure_city=departure_city,
        departure_date_from=departure_date_from,
        departure_date_to=departure_date_to,
        duration_days=duration_days,
        price_min=price_min,
        price_max=price_max,
        board_type=board_type,
        provider_id=provider_id,
    )

    offers = offer_catalog.find_with_filters(filters, limit=limit, offset=(page - 1) * limit)
    total = offer_catalog.count_with_filters(filters)

    return {
        "data": offers,
        "meta": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit),
        },
    }


@router.get("/filters")
async def filter_options():
    """Distinct values the offer list can be filtered by."""
    return {
        "data": {
            "departure_cities": offer_catalog.unique_departure_cities(),
            "board_types": offer_catalog.unique_board_types(),
        }
    }


@router.post("/ai-recommended", response_model=RecommendationResponse)
async def ai_recommended(req: RecommendRequest):
    """Rank offers for a travel group and return the best matches with explanations."""
    return recommendation_service.recommend(req.group, req.filters)


@router.get("/{offer_id}")
async def get_offer(offer_id: str):
    try:
        return {"data": offer_catalog.get(offer_id)}
    except ValueError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail=str(e))
