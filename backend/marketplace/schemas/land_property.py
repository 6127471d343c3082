from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from marketplace.schemas.listing import CamelModel


class LandPropertyFilters(BaseModel):
    status: str | None = None
    seller_id: uuid.UUID | None = None
    estate_id: uuid.UUID | None = None
    land_type: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    q: str | None = None


class LandPropertyCreate(CamelModel):
    seller_id: uuid.UUID
    estate_id: uuid.UUID | None = None
    property_name: str
    property_address: str
    state_location: str
    country: str
    gallery_images: list[str] | None = None
    price: Decimal = Field(..., ge=0)
    available_quantity: Decimal = Field(1, ge=0)
    short_description: str
    long_description: str | None = None
    land_size: Decimal | None = None
    land_type: str | None = None
    is_estate_land: bool = False


class LandPropertyUpdate(CamelModel):
    property_name: str | None = None
    property_address: str | None = None
    state_location: str | None = None
    gallery_images: list[str] | None = None
    price: Decimal | None = Field(None, ge=0)
    short_description: str | None = None
    long_description: str | None = None
    land_size: Decimal | None = None
    land_type: str | None = None
    status: str | None = None
    sold_out: bool | None = None


class LandPropertyResponse(CamelModel):
    property_id: uuid.UUID
    estate_id: uuid.UUID | None
    seller_id: uuid.UUID
    property_name: str
    property_address: str
    state_location: str
    country: str
    gallery_images: Any = None
    price: float
    short_description: str
    long_description: str | None
    land_size: float | None
    land_type: str | None
    status: str
    is_estate_land: bool
    sold_out: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
