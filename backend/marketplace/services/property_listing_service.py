"""Unified listing across apartments, land and houses for sale.

Each included table is projected into the same column set and the
projections are combined with UNION ALL, so a single ORDER BY and
LIMIT/OFFSET apply across property types. The page query and the
per-type count query are independent reads and run concurrently.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sqlalchemy import Integer, Select, func, select, union_all

from marketplace.schemas.listing import (
    ListingFilter,
    Pagination,
    PriceAggregate,
    PropertyStats,
    PropertyType,
    SortSpec,
    TypeCounts,
    UnifiedListing,
)
from marketplace.services.listing_sources import ListingSource, ListingSourceRegistry
from marketplace.services.query_builder import ParameterBinder
from marketplace.utils.concurrency import gather_or_fail

if TYPE_CHECKING:
    from sqlalchemy import RowMapping

    from marketplace.database import Database

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnifiedPage:
    rows: list[UnifiedListing] = field(default_factory=list)
    total: int = 0
    type_counts: TypeCounts = field(default_factory=TypeCounts)


@dataclass(frozen=True)
class UnifiedQueries:
    page: Select[Any]
    counts: Select[Any]
    bound_values: tuple[Any, ...]


class PropertyListingEngine:
    """Cross-type search and price statistics over the listing tables.

    The engine holds no state of its own beyond the injected ``Database``;
    every call is an independent set of reads.
    """

    def __init__(
        self, database: Database, sources: Sequence[ListingSource] | None = None
    ) -> None:
        self.database = database
        self._sources = list(sources) if sources is not None else None

    def included_sources(self, listing_filter: ListingFilter) -> list[ListingSource]:
        if self._sources is None:
            return ListingSourceRegistry.sources_for(listing_filter.property_type)
        return [
            source
            for source in self._sources
            if listing_filter.property_type.includes(source.property_type)
        ]

    def build_unified_queries(
        self, listing_filter: ListingFilter, pagination: Pagination, sort: SortSpec
    ) -> UnifiedQueries | None:
        """Compose the page and per-type count statements, or None if no
        table is selected."""
        sources = self.included_sources(listing_filter)
        if not sources:
            return None

        binder = ParameterBinder()
        selects = [source.unified_select(listing_filter, binder) for source in sources]
        combined = selects[0] if len(selects) == 1 else union_all(*selects)
        unified = combined.cte("unified")
        filter_values = binder.values

        if sort.column == "price":
            sort_column = unified.c.price
        elif sort.column == "name":
            sort_column = func.lower(unified.c.name)
        else:
            sort_column = unified.c.created_at
        primary = sort_column.desc() if sort.descending else sort_column.asc()

        page = (
            select(unified, func.count().over().label("total_count"))
            .order_by(primary, unified.c.created_at.desc())
            .limit(binder.bind(pagination.limit, Integer()))
            .offset(binder.bind(pagination.offset, Integer()))
        )
        counts = select(
            unified.c.property_type, func.count().label("count")
        ).group_by(unified.c.property_type)
        return UnifiedQueries(page=page, counts=counts, bound_values=filter_values)

    async def list_unified(
        self, listing_filter: ListingFilter, pagination: Pagination, sort: SortSpec
    ) -> UnifiedPage:
        """One page of listings plus the overall and per-type totals."""
        queries = self.build_unified_queries(listing_filter, pagination, sort)
        if queries is None:
            logger.debug("No property types selected; skipping listing query")
            return UnifiedPage()

        logger.debug(
            "Unified listing: types=%s page=%d limit=%d sort=%s %s params=%d",
            listing_filter.property_type,
            pagination.page,
            pagination.limit,
            sort.column,
            sort.sort_order,
            len(queries.bound_values),
        )
        page_rows, count_rows = await gather_or_fail(
            self.database.fetch_all_async(queries.page),
            self.database.fetch_all_async(queries.counts),
        )

        type_counts = TypeCounts.from_rows(count_rows)
        rows = [_to_listing(row) for row in page_rows]
        # An out-of-range page has no rows to carry the windowed total
        total = int(page_rows[0]["total_count"]) if page_rows else type_counts.total
        logger.info(
            "Unified listing returned %d of %d rows (apartments=%d land=%d houses=%d)",
            len(rows),
            total,
            type_counts.apartments,
            type_counts.land,
            type_counts.houses,
        )
        return UnifiedPage(rows=rows, total=total, type_counts=type_counts)

    async def aggregate_stats(self, listing_filter: ListingFilter) -> PropertyStats:
        """Price statistics per type and combined.

        Only location and seller narrow the statistics; price bounds on the
        incoming filter are ignored. Excluded types report zeros without
        being queried.
        """
        stats_filter = listing_filter.model_copy(
            update={"min_price": None, "max_price": None}
        )
        sources = self.included_sources(stats_filter)
        rows = await gather_or_fail(
            *(self._fetch_aggregate(source, stats_filter) for source in sources)
        )

        aggregates = {property_type: PriceAggregate() for property_type in PropertyType}
        for source, row in zip(sources, rows):
            aggregates[source.property_type] = PriceAggregate.from_row(row)

        stats = PropertyStats.combine(
            aggregates[PropertyType.APARTMENT],
            aggregates[PropertyType.LAND],
            aggregates[PropertyType.HOUSE],
        )
        logger.info(
            "Property stats: %d properties, market value %.2f",
            stats.combined.total_properties,
            stats.combined.total_market_value,
        )
        return stats

    async def _fetch_aggregate(
        self, source: ListingSource, listing_filter: ListingFilter
    ) -> RowMapping:
        stmt = source.aggregate_select(listing_filter, ParameterBinder())
        rows = await self.database.fetch_all_async(stmt)
        return rows[0]


def _to_listing(row: RowMapping) -> UnifiedListing:
    price = row["price"]
    details = row["details"]
    if isinstance(details, str):
        details = json.loads(details)
    return UnifiedListing(
        property_type=row["property_type"],
        id=row["id"],
        name=row["name"],
        location=row["location"],
        price=float(price) if price is not None else None,
        seller_id=row["seller_id"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        details=details,
    )
