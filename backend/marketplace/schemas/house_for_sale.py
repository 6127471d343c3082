from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from marketplace.models.house_for_sale import HouseSaleStatus, VerificationStatus
from marketplace.schemas.listing import CamelModel


class HouseForSaleFilters(BaseModel):
    status: HouseSaleStatus | None = None
    owner_id: uuid.UUID | None = None
    state: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    bedrooms: int | None = None
    verification_status: VerificationStatus | None = None
    q: str | None = None


class HouseForSaleCreate(CamelModel):
    owner_id: uuid.UUID
    status: HouseSaleStatus = HouseSaleStatus.ACTIVE
    verification_status: VerificationStatus = VerificationStatus.PENDING
    state: str
    lga: str
    address: str
    landmark: str | None = None
    bedrooms: int | None = Field(None, ge=0)
    bathrooms: int | None = Field(None, ge=0)
    house_type: str | None = None
    asking_price: Decimal = Field(..., ge=0)
    title_document: str
    description: str | None = None
    features: list[str] | None = None
    images: list[str] | None = None


class HouseForSaleUpdate(CamelModel):
    status: HouseSaleStatus | None = None
    verification_status: VerificationStatus | None = None
    address: str | None = None
    landmark: str | None = None
    bedrooms: int | None = Field(None, ge=0)
    asking_price: Decimal | None = Field(None, ge=0)
    final_sale_price: Decimal | None = Field(None, ge=0)
    description: str | None = None
    features: list[str] | None = None
    images: list[str] | None = None


class HouseForSaleResponse(CamelModel):
    house_id: uuid.UUID
    owner_id: uuid.UUID
    status: str
    verification_status: str
    state: str
    lga: str
    address: str
    bedrooms: int | None
    house_type: str | None
    asking_price: float
    description: str | None
    features: Any = None
    images: Any = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
