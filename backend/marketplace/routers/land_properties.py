from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from marketplace.database import get_db
from marketplace.schemas.land_property import (
    LandPropertyCreate,
    LandPropertyFilters,
    LandPropertyResponse,
    LandPropertyUpdate,
)
from marketplace.schemas.response import ApiResponse, EntityListMeta, PaginatedResponse
from marketplace.services import land_property_service

router = APIRouter()

LandPage = PaginatedResponse[list[LandPropertyResponse], EntityListMeta]


@router.get("/land-properties", response_model=LandPage)
def list_land_properties(
    status: str | None = Query(None),
    seller_id: uuid.UUID | None = Query(None, alias="sellerId"),
    estate_id: uuid.UUID | None = Query(None, alias="estateId"),
    land_type: str | None = Query(None, alias="landType"),
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
    q: str | None = Query(None),
    page: int | None = Query(None),
    limit: int | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    db: Session = Depends(get_db),
) -> LandPage:
    filters = LandPropertyFilters(
        status=status,
        seller_id=seller_id,
        estate_id=estate_id,
        land_type=land_type,
        min_price=min_price,
        max_price=max_price,
        q=q,
    )
    result = land_property_service.list_land_properties(
        db, filters, page=page, limit=limit, sort_by=sort_by, sort_order=sort_order
    )
    return LandPage(
        data=[LandPropertyResponse.model_validate(item) for item in result.items],
        meta=EntityListMeta.from_page(result),
    )


@router.get(
    "/land-properties/{property_id}", response_model=ApiResponse[LandPropertyResponse]
)
def get_land_property(
    property_id: uuid.UUID, db: Session = Depends(get_db)
) -> ApiResponse[LandPropertyResponse]:
    land = land_property_service.get_land_property(db, property_id)
    return ApiResponse[LandPropertyResponse](data=LandPropertyResponse.model_validate(land))


@router.post(
    "/land-properties", status_code=201, response_model=ApiResponse[LandPropertyResponse]
)
def create_land_property(
    body: LandPropertyCreate, db: Session = Depends(get_db)
) -> ApiResponse[LandPropertyResponse]:
    land = land_property_service.create_land_property(db, body.model_dump())
    return ApiResponse[LandPropertyResponse](
        message="Land property created successfully",
        data=LandPropertyResponse.model_validate(land),
    )


@router.patch(
    "/land-properties/{property_id}", response_model=ApiResponse[LandPropertyResponse]
)
def update_land_property(
    property_id: uuid.UUID, body: LandPropertyUpdate, db: Session = Depends(get_db)
) -> ApiResponse[LandPropertyResponse]:
    land = land_property_service.update_land_property(
        db, property_id, body.model_dump(exclude_unset=True)
    )
    return ApiResponse[LandPropertyResponse](
        message="Land property updated successfully",
        data=LandPropertyResponse.model_validate(land),
    )


@router.delete("/land-properties/{property_id}", response_model=ApiResponse[None])
def delete_land_property(
    property_id: uuid.UUID, db: Session = Depends(get_db)
) -> ApiResponse[None]:
    land_property_service.delete_land_property(db, property_id)
    return ApiResponse[None](message="Land property deleted successfully", data=None)
