from datetime import date, timedelta

from offerscore.schemas.offer import BOARD_TYPES
from offerscore.seed import HOTELS, ROOM_TYPES, build_demo_offers, seed_catalog
from offerscore.services.offer_catalog import OfferCatalog

TODAY = date(2026, 6, 1)


def test_demo_offers_are_deterministic():
    first = build_demo_offers(seed=7, today=TODAY)
    second = build_demo_offers(seed=7, today=TODAY)
    assert [o.model_dump() for o in first] == [o.model_dump() for o in second]


def test_demo_offers_shape():
    offers = build_demo_offers(seed=1, today=TODAY)

    assert 2 * len(HOTELS) <= len(offers) <= 3 * len(HOTELS)
    for offer in offers:
        assert 2500 <= offer.price <= 5500
        assert offer.price_per_person is True
        assert offer.board_type in BOARD_TYPES
        assert offer.room_type in ROOM_TYPES
        assert TODAY + timedelta(days=30) <= offer.departure_date <= TODAY + timedelta(days=180)
        assert 7 <= offer.duration_days <= 14
        assert offer.return_date - offer.departure_date == timedelta(days=offer.duration_days)
        assert offer.flight_info.transfer_duration.endswith(" min")


def test_seed_catalog_only_fills_empty_catalog():
    catalog = OfferCatalog()
    added = seed_catalog(catalog, seed=3)
    assert added == len(catalog) > 0

    assert seed_catalog(catalog, seed=3) == 0
    assert len(catalog) == added
