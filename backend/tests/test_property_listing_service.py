"""Tests for the unified listing engine against a real (SQLite) database.

Covers union completeness, type exclusivity, pagination, sort tiebreaks,
null prices, aggregate zero-defaults and all-or-nothing failure handling.
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from marketplace.models import Apartment, HouseForSale, LandProperty
from marketplace.schemas.listing import (
    ListingFilter,
    Pagination,
    PropertyType,
    PropertyTypeFilter,
    SortSpec,
)
from marketplace.services.listing_sources import LandSource
from marketplace.services.property_listing_service import PropertyListingEngine

DEFAULT_SORT = SortSpec()


@pytest.fixture
def engine(database) -> PropertyListingEngine:
    return PropertyListingEngine(database)


@pytest.fixture
def lagos_mix(make_apartment, make_land, make_house):
    """3 live apartments, 1 soft-deleted apartment, 2 land parcels, 2 houses."""
    make_apartment(rent_amount=Decimal("100000"))
    make_apartment(rent_amount=Decimal("200000"))
    make_apartment(rent_amount=Decimal("300000"), house_name="")
    deleted = make_apartment(rent_amount=Decimal("999999"))
    make_land(price=Decimal("500000"))
    make_land(price=Decimal("750000"), property_address="Plot 3, Ibeju")
    make_house(asking_price=Decimal("2000000"))
    make_house(asking_price=Decimal("3000000"), address="9 Awolowo Road")
    return deleted


def _soft_delete(db, apartment: Apartment) -> None:
    apartment.deleted_at = apartment.created_at
    db.commit()


# ── list_unified ───────────────────────────────────────────────────────────


class TestListUnified:
    @pytest.mark.asyncio
    async def test_union_completeness(self, db, engine, lagos_mix):
        _soft_delete(db, lagos_mix)
        result = await engine.list_unified(
            ListingFilter(location="lagos"), Pagination(), DEFAULT_SORT
        )

        apartments = (
            db.query(Apartment)
            .filter(Apartment.deleted_at.is_(None), Apartment.apartment_address.ilike("%lagos%"))
            .count()
        )
        land = (
            db.query(LandProperty)
            .filter(
                LandProperty.property_address.ilike("%lagos%")
                | LandProperty.state_location.ilike("%lagos%")
            )
            .count()
        )
        houses = (
            db.query(HouseForSale)
            .filter(HouseForSale.address.ilike("%lagos%") | HouseForSale.state.ilike("%lagos%"))
            .count()
        )
        assert (apartments, land, houses) == (3, 2, 2)
        assert result.total == apartments + land + houses == 7
        assert len(result.rows) == 7
        assert result.type_counts.apartments == 3
        assert result.type_counts.land == 2
        assert result.type_counts.houses == 2

    @pytest.mark.asyncio
    async def test_type_exclusivity(self, engine, lagos_mix):
        result = await engine.list_unified(
            ListingFilter(location="Lagos", property_type=PropertyTypeFilter.APARTMENT),
            Pagination(),
            DEFAULT_SORT,
        )
        assert result.rows
        assert all(row.property_type == PropertyType.APARTMENT for row in result.rows)
        assert result.type_counts.land == 0
        assert result.type_counts.houses == 0

    @pytest.mark.asyncio
    async def test_pagination_bounds(self, engine, make_land):
        for i in range(7):
            make_land(property_name=f"Plot {i}")
        listing_filter = ListingFilter(location="Lagos")

        first = await engine.list_unified(
            listing_filter, Pagination(page=1, limit=5), DEFAULT_SORT
        )
        second = await engine.list_unified(
            listing_filter, Pagination(page=2, limit=5), DEFAULT_SORT
        )
        assert len(first.rows) == 5
        assert len(second.rows) == 2
        assert first.total == second.total == 7
        assert not {r.id for r in first.rows} & {r.id for r in second.rows}

    @pytest.mark.asyncio
    async def test_page_past_the_end_keeps_total(self, engine, make_land):
        for _ in range(3):
            make_land()
        result = await engine.list_unified(
            ListingFilter(location="Lagos"), Pagination(page=4, limit=5), DEFAULT_SORT
        )
        assert result.rows == []
        assert result.total == 3
        assert result.type_counts.land == 3

    @pytest.mark.asyncio
    async def test_default_sort_is_newest_first(self, engine, make_apartment, make_land):
        older = make_apartment()
        newer = make_land()
        result = await engine.list_unified(
            ListingFilter(location="Lagos"), Pagination(), DEFAULT_SORT
        )
        assert [r.id for r in result.rows] == [newer.property_id, older.id]

    @pytest.mark.asyncio
    async def test_price_sort_ties_break_by_created_at_desc(
        self, engine, make_apartment, make_land, make_house
    ):
        cheap = make_apartment(rent_amount=Decimal("50000"))
        tie_old = make_land(price=Decimal("500000"))
        tie_new = make_house(asking_price=Decimal("500000"), state="Lagos")
        sort = SortSpec.from_query("price", "asc")

        for _ in range(3):
            result = await engine.list_unified(
                ListingFilter(location="Lagos"), Pagination(), sort
            )
            assert [r.id for r in result.rows] == [
                cheap.id,
                tie_new.house_id,
                tie_old.property_id,
            ]

    @pytest.mark.asyncio
    async def test_name_sort_is_case_insensitive(self, engine, make_land):
        make_land(property_name="banana Plot")
        make_land(property_name="Apple Plot")
        make_land(property_name="cherry Plot")
        result = await engine.list_unified(
            ListingFilter(location="Lagos"), Pagination(), SortSpec.from_query("name", "asc")
        )
        assert [r.name for r in result.rows] == ["Apple Plot", "banana Plot", "cherry Plot"]

    @pytest.mark.asyncio
    async def test_unknown_sort_falls_back_to_created_at(self, engine, make_land):
        first = make_land()
        second = make_land()
        result = await engine.list_unified(
            ListingFilter(location="Lagos"),
            Pagination(),
            SortSpec.from_query("drop table", "asc"),
        )
        assert [r.id for r in result.rows] == [first.property_id, second.property_id]

    @pytest.mark.asyncio
    async def test_null_price_surfaces_as_none(self, engine, make_apartment):
        make_apartment(rent_amount=None)
        result = await engine.list_unified(
            ListingFilter(location="Lagos"), Pagination(), DEFAULT_SORT
        )
        assert len(result.rows) == 1
        assert result.rows[0].price is None

    @pytest.mark.asyncio
    async def test_synthesized_fields(self, engine, make_apartment, make_land, make_house):
        named = make_apartment(house_name="Palm Court")
        unnamed = make_apartment(house_name="", apartment_address="7 Lagos Street")
        land = make_land(long_description=None, short_description="Short only")
        house = make_house(address="5 Bourdillon Road, Ikoyi")

        result = await engine.list_unified(
            ListingFilter(location="Lagos"), Pagination(), DEFAULT_SORT
        )
        rows = {row.id: row for row in result.rows}

        assert rows[named.id].name == "Palm Court"
        assert rows[unnamed.id].name == "Apartment - 7 Lagos Street"
        assert rows[land.property_id].name == "Sunrise Plots"
        assert rows[land.property_id].details["description"] == "Short only"
        assert rows[land.property_id].details["state"] == "Lagos"
        assert rows[house.house_id].name == "House - 5 Bourdillon Road, Ikoyi"
        assert rows[house.house_id].location == "5 Bourdillon Road, Ikoyi"
        assert rows[house.house_id].seller_id == house.owner_id
        assert rows[house.house_id].price == 2000000.0

    @pytest.mark.asyncio
    async def test_details_blob_is_an_object(self, engine, make_apartment):
        make_apartment(images=["a.jpg", "b.jpg"], number_of_bedrooms=3)
        result = await engine.list_unified(
            ListingFilter(location="Lagos"), Pagination(), DEFAULT_SORT
        )
        details = result.rows[0].details
        assert details["images"] == ["a.jpg", "b.jpg"]
        assert details["bedrooms"] == 3
        assert details["furnishedStatus"] == "furnished"

    @pytest.mark.asyncio
    async def test_seller_and_price_filters(self, engine, seller_id, make_land, make_house):
        other_seller = uuid.uuid4()
        mine = make_land(price=Decimal("500000"))
        make_land(price=Decimal("500000"), seller_id=other_seller)
        make_house(asking_price=Decimal("9000000"))

        result = await engine.list_unified(
            ListingFilter(seller_id=seller_id, min_price=100000, max_price=600000),
            Pagination(),
            DEFAULT_SORT,
        )
        assert [r.id for r in result.rows] == [mine.property_id]
        assert result.rows[0].seller_id == seller_id

    @pytest.mark.asyncio
    async def test_location_match_is_case_insensitive_substring(self, engine, make_apartment):
        make_apartment(apartment_address="12 Admiralty Way, LEKKI")
        result = await engine.list_unified(
            ListingFilter(location="lekki"), Pagination(), DEFAULT_SORT
        )
        assert result.total == 1

    @pytest.mark.asyncio
    async def test_no_sources_skips_queries(self, database):
        engine = PropertyListingEngine(database, sources=[])
        with patch.object(database, "fetch_all_async") as fetch:
            result = await engine.list_unified(ListingFilter(), Pagination(), DEFAULT_SORT)
        fetch.assert_not_called()
        assert result.rows == []
        assert result.total == 0
        assert result.type_counts.total == 0

    @pytest.mark.asyncio
    async def test_query_failure_propagates(self, database, make_land):
        make_land()
        engine = PropertyListingEngine(database)
        calls = 0
        original = database.fetch_all

        def flaky(statement):
            nonlocal calls
            calls += 1
            if calls == 2:
                raise OperationalError("SELECT", {}, Exception("connection lost"))
            return original(statement)

        with patch.object(database, "fetch_all", side_effect=flaky):
            with pytest.raises(OperationalError):
                await engine.list_unified(
                    ListingFilter(location="Lagos"), Pagination(), DEFAULT_SORT
                )


# ── aggregate_stats ────────────────────────────────────────────────────────


class TestAggregateStats:
    @pytest.mark.asyncio
    async def test_concrete_scenario(self, engine, seller_id, make_apartment, make_land):
        make_apartment(rent_amount=Decimal("100000"))
        make_apartment(rent_amount=Decimal("200000"))
        make_land(price=Decimal("500000"))

        stats = await engine.aggregate_stats(
            ListingFilter(seller_id=seller_id, property_type=PropertyTypeFilter.ALL)
        )
        assert stats.combined.total_properties == 3
        assert stats.combined.total_market_value == pytest.approx(800000)
        assert stats.combined.overall_avg_price == pytest.approx(266666.67, abs=0.01)
        assert stats.apartments.count == 2
        assert stats.apartments.avg_price == pytest.approx(150000)
        assert stats.apartments.min_price == pytest.approx(100000)
        assert stats.apartments.max_price == pytest.approx(200000)
        assert stats.land.count == 1
        assert stats.houses.count == 0

    @pytest.mark.asyncio
    async def test_zero_defaults(self, engine):
        stats = await engine.aggregate_stats(ListingFilter(location="Nowhere"))
        for aggregate in (stats.apartments, stats.land, stats.houses):
            assert aggregate.count == 0
            assert aggregate.avg_price == 0
            assert aggregate.min_price == 0
            assert aggregate.max_price == 0
            assert aggregate.total_market_value == 0
        assert stats.combined.total_properties == 0
        assert stats.combined.overall_avg_price == 0

    @pytest.mark.asyncio
    async def test_excluded_types_are_not_queried(self, database, make_land, make_house):
        make_land(price=Decimal("500000"))
        make_house()
        engine = PropertyListingEngine(database)
        with patch.object(
            database, "fetch_all", wraps=database.fetch_all
        ) as fetch:
            stats = await engine.aggregate_stats(
                ListingFilter(property_type=PropertyTypeFilter.LAND)
            )
        assert fetch.call_count == 1
        assert stats.land.count == 1
        assert stats.houses.count == 0
        assert stats.combined.total_market_value == pytest.approx(500000)

    @pytest.mark.asyncio
    async def test_price_bounds_are_ignored(self, engine, make_land):
        make_land(price=Decimal("100"))
        make_land(price=Decimal("900"))
        stats = await engine.aggregate_stats(ListingFilter(min_price=500))
        assert stats.land.count == 2

    @pytest.mark.asyncio
    async def test_soft_deleted_apartments_are_excluded(self, db, engine, make_apartment):
        make_apartment(rent_amount=Decimal("100"))
        gone = make_apartment(rent_amount=Decimal("900"))
        _soft_delete(db, gone)
        stats = await engine.aggregate_stats(ListingFilter())
        assert stats.apartments.count == 1
        assert stats.apartments.max_price == pytest.approx(100)

    @pytest.mark.asyncio
    async def test_failure_fails_whole_call(self, database):
        engine = PropertyListingEngine(database, sources=[LandSource()])
        with patch.object(
            database,
            "fetch_all",
            side_effect=OperationalError("SELECT", {}, Exception("boom")),
        ):
            with pytest.raises(OperationalError):
                await engine.aggregate_stats(ListingFilter())
