from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query

from marketplace.database import Database, get_database
from marketplace.schemas.listing import (
    ListingFilter,
    ListingMeta,
    Pagination,
    PropertyStats,
    PropertyTypeFilter,
    SortSpec,
    UnifiedListing,
)
from marketplace.schemas.response import ApiResponse, PaginatedResponse
from marketplace.services.property_listing_service import (
    PropertyListingEngine,
    UnifiedPage,
)
from marketplace.utils.exceptions import InvalidRequestError, SellerPropertiesNotFoundError

router = APIRouter()

ListingPage = PaginatedResponse[list[UnifiedListing], ListingMeta]


def get_listing_engine(
    database: Database = Depends(get_database),
) -> PropertyListingEngine:
    return PropertyListingEngine(database)


def _pagination(
    page: str | None = Query(None), limit: str | None = Query(None)
) -> Pagination:
    return Pagination.from_query(page, limit)


def _sort(
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
) -> SortSpec:
    return SortSpec.from_query(sort_by, sort_order)


def _page_response(
    result: UnifiedPage, pagination: Pagination, message: str
) -> ListingPage:
    return ListingPage(
        message=message,
        data=result.rows,
        meta=ListingMeta(
            page=pagination.page,
            limit=pagination.limit,
            total=result.total,
            total_pages=pagination.total_pages(result.total),
            property_types=result.type_counts,
        ),
    )


@router.get("/properties", response_model=ListingPage)
async def list_properties_by_location(
    location: str = Query(...),
    property_type: PropertyTypeFilter = Query(PropertyTypeFilter.ALL, alias="propertyType"),
    seller_id: uuid.UUID | None = Query(None, alias="sellerId"),
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
    pagination: Pagination = Depends(_pagination),
    sort: SortSpec = Depends(_sort),
    engine: PropertyListingEngine = Depends(get_listing_engine),
) -> ListingPage:
    listing_filter = ListingFilter(
        location=location,
        property_type=property_type,
        seller_id=seller_id,
        min_price=min_price,
        max_price=max_price,
    )
    if not listing_filter.location:
        raise InvalidRequestError("location is required")

    result = await engine.list_unified(listing_filter, pagination, sort)
    return _page_response(
        result, pagination, f"Found {result.total} properties in {listing_filter.location}"
    )


@router.get(
    "/properties/stats",
    response_model=ApiResponse[PropertyStats],
)
async def get_properties_stats(
    location: str | None = Query(None),
    property_type: PropertyTypeFilter = Query(PropertyTypeFilter.ALL, alias="propertyType"),
    seller_id: uuid.UUID | None = Query(None, alias="sellerId"),
    engine: PropertyListingEngine = Depends(get_listing_engine),
) -> ApiResponse[PropertyStats]:
    listing_filter = ListingFilter(
        location=location, property_type=property_type, seller_id=seller_id
    )
    stats = await engine.aggregate_stats(listing_filter)
    return ApiResponse[PropertyStats](
        message="Statistics calculated successfully", data=stats
    )


@router.get(
    "/properties/seller/{seller_id}",
    response_model=ListingPage,
)
async def list_seller_properties(
    seller_id: uuid.UUID,
    location: str | None = Query(None),
    property_type: PropertyTypeFilter = Query(PropertyTypeFilter.ALL, alias="propertyType"),
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
    pagination: Pagination = Depends(_pagination),
    sort: SortSpec = Depends(_sort),
    engine: PropertyListingEngine = Depends(get_listing_engine),
) -> ListingPage:
    listing_filter = ListingFilter(
        location=location,
        property_type=property_type,
        seller_id=seller_id,
        min_price=min_price,
        max_price=max_price,
    )
    result = await engine.list_unified(listing_filter, pagination, sort)
    if result.total == 0:
        raise SellerPropertiesNotFoundError("No properties found for this seller")

    return _page_response(
        result, pagination, f"Found {result.total} properties for seller {seller_id}"
    )
