from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from marketplace.database import get_db
from marketplace.models.house_for_sale import HouseSaleStatus, VerificationStatus
from marketplace.schemas.house_for_sale import (
    HouseForSaleCreate,
    HouseForSaleFilters,
    HouseForSaleResponse,
    HouseForSaleUpdate,
)
from marketplace.schemas.response import ApiResponse, EntityListMeta, PaginatedResponse
from marketplace.services import house_for_sale_service

router = APIRouter()

HousePage = PaginatedResponse[list[HouseForSaleResponse], EntityListMeta]


@router.get("/houses-for-sale", response_model=HousePage)
def list_houses_for_sale(
    status: HouseSaleStatus | None = Query(None),
    owner_id: uuid.UUID | None = Query(None, alias="ownerId"),
    state: str | None = Query(None),
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
    bedrooms: int | None = Query(None),
    verification_status: VerificationStatus | None = Query(
        None, alias="verificationStatus"
    ),
    q: str | None = Query(None),
    page: int | None = Query(None),
    limit: int | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    db: Session = Depends(get_db),
) -> HousePage:
    filters = HouseForSaleFilters(
        status=status,
        owner_id=owner_id,
        state=state,
        min_price=min_price,
        max_price=max_price,
        bedrooms=bedrooms,
        verification_status=verification_status,
        q=q,
    )
    result = house_for_sale_service.list_houses_for_sale(
        db, filters, page=page, limit=limit, sort_by=sort_by, sort_order=sort_order
    )
    return HousePage(
        data=[HouseForSaleResponse.model_validate(item) for item in result.items],
        meta=EntityListMeta.from_page(result),
    )


@router.get("/houses-for-sale/{house_id}", response_model=ApiResponse[HouseForSaleResponse])
def get_house_for_sale(
    house_id: uuid.UUID, db: Session = Depends(get_db)
) -> ApiResponse[HouseForSaleResponse]:
    house = house_for_sale_service.get_house_for_sale(db, house_id)
    return ApiResponse[HouseForSaleResponse](data=HouseForSaleResponse.model_validate(house))


@router.post(
    "/houses-for-sale", status_code=201, response_model=ApiResponse[HouseForSaleResponse]
)
def create_house_for_sale(
    body: HouseForSaleCreate, db: Session = Depends(get_db)
) -> ApiResponse[HouseForSaleResponse]:
    house = house_for_sale_service.create_house_for_sale(db, body.model_dump())
    return ApiResponse[HouseForSaleResponse](
        message="House listed for sale successfully",
        data=HouseForSaleResponse.model_validate(house),
    )


@router.patch(
    "/houses-for-sale/{house_id}", response_model=ApiResponse[HouseForSaleResponse]
)
def update_house_for_sale(
    house_id: uuid.UUID, body: HouseForSaleUpdate, db: Session = Depends(get_db)
) -> ApiResponse[HouseForSaleResponse]:
    house = house_for_sale_service.update_house_for_sale(
        db, house_id, body.model_dump(exclude_unset=True)
    )
    return ApiResponse[HouseForSaleResponse](
        message="House for sale updated successfully",
        data=HouseForSaleResponse.model_validate(house),
    )


@router.delete("/houses-for-sale/{house_id}", response_model=ApiResponse[None])
def delete_house_for_sale(
    house_id: uuid.UUID, db: Session = Depends(get_db)
) -> ApiResponse[None]:
    house_for_sale_service.delete_house_for_sale(db, house_id)
    return ApiResponse[None](message="House for sale deleted successfully", data=None)
