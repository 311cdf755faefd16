"""Offer catalog: in-memory offer store with filtered, price-ordered queries."""

import logging

from offerscore.schemas.offer import Offer, OfferFilters

logger = logging.getLogger(__name__)


def _matches(offer: Offer, filters: OfferFilters) -> bool:
    if not offer.is_active:
        return False
    if filters.departure_city and offer.departure_city != filters.departure_city:
        return False
    if filters.departure_date_from and offer.departure_date < filters.departure_date_from:
        return False
    if filters.departure_date_to and offer.departure_date > filters.departure_date_to:
        return False
    if filters.duration_days and offer.duration_days != filters.duration_days:
        return False
    if filters.price_min is not None and offer.price < filters.price_min:
        return False
    if filters.price_max is not None and offer.price > filters.price_max:
        return False
    if filters.board_type and offer.board_type != filters.board_type:
        return False
    if filters.provider_id and (offer.provider is None or offer.provider.id != filters.provider_id):
        return False
    return True


class OfferCatalog:
    """Holds offers keyed by id; insertion order breaks price ties."""

    def __init__(self):
        self._offers: dict[str, Offer] = {}

    def __len__(self) -> int:
        return len(self._offers)

    def add(self, offer: Offer) -> None:
        self._offers[offer.id] = offer

    def extend(self, offers: list[Offer]) -> None:
        for offer in offers:
            self.add(offer)

    def clear(self) -> None:
        self._offers.clear()

    def get(self, offer_id: str) -> Offer:
        offer = self._offers.get(offer_id)
        if offer is None:
            raise ValueError(f"Offer {offer_id} not found")
        return offer

    def find_with_filters(
        self,
        filters: OfferFilters | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Offer]:
        """Active offers matching ``filters``, cheapest first."""
        filters = filters or OfferFilters()
        matched = [o for o in self._offers.values() if _matches(o, filters)]
        matched.sort(key=lambda o: o.price)
        return matched[offset:offset + limit]

    def count_with_filters(self, filters: OfferFilters | None = None) -> int:
        filters = filters or OfferFilters()
        return sum(1 for o in self._offers.values() if _matches(o, filters))

    def unique_departure_cities(self) -> list[str]:
        return sorted({o.departure_city for o in self._offers.values() if o.is_active})

    def unique_board_types(self) -> list[str]:
        return sorted({o.board_type for o in self._offers.values() if o.is_active})


offer_catalog = OfferCatalog()
