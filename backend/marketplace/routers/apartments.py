from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from marketplace.database import get_db
from marketplace.schemas.apartment import (
    ApartmentCreate,
    ApartmentFilters,
    ApartmentResponse,
    ApartmentUpdate,
)
from marketplace.schemas.response import ApiResponse, EntityListMeta, PaginatedResponse
from marketplace.services import apartment_service

router = APIRouter()

ApartmentPage = PaginatedResponse[list[ApartmentResponse], EntityListMeta]


@router.get("/apartments", response_model=ApartmentPage)
def list_apartments(
    seller_id: uuid.UUID | None = Query(None, alias="sellerId"),
    house_id: uuid.UUID | None = Query(None, alias="houseId"),
    min_rent: float | None = Query(None, alias="minRent"),
    max_rent: float | None = Query(None, alias="maxRent"),
    number_of_bedrooms: int | None = Query(None, alias="numberOfBedrooms"),
    furnished_status: str | None = Query(None, alias="furnishedStatus"),
    q: str | None = Query(None),
    page: int | None = Query(None),
    limit: int | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    db: Session = Depends(get_db),
) -> ApartmentPage:
    filters = ApartmentFilters(
        seller_id=seller_id,
        house_id=house_id,
        min_rent=min_rent,
        max_rent=max_rent,
        number_of_bedrooms=number_of_bedrooms,
        furnished_status=furnished_status,
        q=q,
    )
    result = apartment_service.list_apartments(
        db, filters, page=page, limit=limit, sort_by=sort_by, sort_order=sort_order
    )
    return ApartmentPage(
        data=[ApartmentResponse.model_validate(item) for item in result.items],
        meta=EntityListMeta.from_page(result),
    )


@router.get("/apartments/{apartment_id}", response_model=ApiResponse[ApartmentResponse])
def get_apartment(
    apartment_id: uuid.UUID, db: Session = Depends(get_db)
) -> ApiResponse[ApartmentResponse]:
    apartment = apartment_service.get_apartment(db, apartment_id)
    return ApiResponse[ApartmentResponse](data=ApartmentResponse.model_validate(apartment))


@router.post(
    "/apartments", status_code=201, response_model=ApiResponse[ApartmentResponse]
)
def create_apartment(
    body: ApartmentCreate, db: Session = Depends(get_db)
) -> ApiResponse[ApartmentResponse]:
    apartment = apartment_service.create_apartment(db, body.model_dump())
    return ApiResponse[ApartmentResponse](
        message="Apartment created successfully",
        data=ApartmentResponse.model_validate(apartment),
    )


@router.patch("/apartments/{apartment_id}", response_model=ApiResponse[ApartmentResponse])
def update_apartment(
    apartment_id: uuid.UUID, body: ApartmentUpdate, db: Session = Depends(get_db)
) -> ApiResponse[ApartmentResponse]:
    apartment = apartment_service.update_apartment(
        db, apartment_id, body.model_dump(exclude_unset=True)
    )
    return ApiResponse[ApartmentResponse](
        message="Apartment updated successfully",
        data=ApartmentResponse.model_validate(apartment),
    )


@router.delete("/apartments/{apartment_id}", response_model=ApiResponse[None])
def delete_apartment(
    apartment_id: uuid.UUID, db: Session = Depends(get_db)
) -> ApiResponse[None]:
    apartment_service.delete_apartment(db, apartment_id)
    return ApiResponse[None](message="Apartment deleted successfully", data=None)
