from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from marketplace.schemas.listing import CamelModel


class ApartmentFilters(BaseModel):
    seller_id: uuid.UUID | None = None
    house_id: uuid.UUID | None = None
    min_rent: float | None = None
    max_rent: float | None = None
    number_of_bedrooms: int | None = None
    furnished_status: str | None = None
    q: str | None = None


class ApartmentCreate(CamelModel):
    house_id: uuid.UUID | None = None
    seller_id: uuid.UUID | None = None
    apartment_address: str | None = None
    house_name: str | None = None
    unit_number: str | None = None
    number_of_bedrooms: int = Field(0, ge=0)
    number_of_kitchens: int = Field(0, ge=0)
    number_of_living_rooms: int = Field(0, ge=0)
    number_of_toilets: int = Field(0, ge=0)
    has_running_water: bool = False
    has_electricity: bool = False
    has_parking_space: bool = False
    has_internet: bool = False
    images: list[str] | None = None
    description: str | None = None
    apartment_condition: str | None = None
    furnished_status: str | None = None
    apartment_type: str | None = None
    rent_amount: Decimal | None = Field(None, ge=0)
    caution_fee: Decimal | None = Field(None, ge=0)
    lawyer_fee: Decimal | None = Field(None, ge=0)
    payment_duration: str | None = None
    tenant_eligibility: str | None = None


class ApartmentUpdate(CamelModel):
    apartment_address: str | None = None
    house_name: str | None = None
    unit_number: str | None = None
    number_of_bedrooms: int | None = Field(None, ge=0)
    images: list[str] | None = None
    description: str | None = None
    furnished_status: str | None = None
    apartment_type: str | None = None
    rent_amount: Decimal | None = Field(None, ge=0)
    apartment_status: str | None = None


class ApartmentResponse(CamelModel):
    id: uuid.UUID
    house_id: uuid.UUID | None
    seller_id: uuid.UUID | None
    apartment_address: str | None
    house_name: str | None
    number_of_bedrooms: int
    images: Any = None
    description: str | None
    furnished_status: str | None
    apartment_type: str | None
    rent_amount: float | None
    apartment_status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
