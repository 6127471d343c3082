"""Request/response shapes for the unified property listing endpoints."""

from __future__ import annotations

import math
import re
import uuid
from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class PropertyType(StrEnum):
    APARTMENT = "apartment"
    LAND = "land"
    HOUSE = "house"


class PropertyTypeFilter(StrEnum):
    ALL = "all"
    APARTMENT = "apartment"
    LAND = "land"
    HOUSE = "house"

    def includes(self, property_type: PropertyType) -> bool:
        return self is PropertyTypeFilter.ALL or self.value == property_type.value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListingFilter(BaseModel):
    location: str | None = None
    property_type: PropertyTypeFilter = PropertyTypeFilter.ALL
    seller_id: uuid.UUID | None = None
    min_price: float | None = None
    max_price: float | None = None

    @field_validator("location")
    @classmethod
    def strip_location(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


def _parse_int(value: int | str | None) -> int | None:
    if value is None or isinstance(value, int):
        return value
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class Pagination(BaseModel):
    page: int = Field(DEFAULT_PAGE, ge=1)
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)

    @classmethod
    def from_query(
        cls, page: int | str | None = None, limit: int | str | None = None
    ) -> Pagination:
        """Clamp raw query values into the accepted range.

        Strings are read up to their first non-digit, so ``"3rd"`` is page 3;
        values with no leading integer fall back to the defaults.
        """
        page = max(_parse_int(page) or DEFAULT_PAGE, 1)
        limit = min(max(_parse_int(limit) or DEFAULT_LIMIT, 1), MAX_LIMIT)
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit) or 1


class SortSpec(BaseModel):
    sort_by: str = "created_at"
    sort_order: str = "desc"

    @classmethod
    def from_query(cls, sort_by: str | None = None, sort_order: str | None = None) -> SortSpec:
        return cls(
            sort_by=str(sort_by or "created_at").lower(),
            sort_order="asc" if str(sort_order or "desc").lower() == "asc" else "desc",
        )

    @property
    def column(self) -> str:
        """Resolved sort key: unknown fields fall back to created_at."""
        return self.sort_by if self.sort_by in ("created_at", "price", "name") else "created_at"

    @property
    def descending(self) -> bool:
        return self.sort_order != "asc"


class UnifiedListing(CamelModel):
    property_type: PropertyType
    id: uuid.UUID
    name: str | None
    location: str | None
    price: float | None
    seller_id: uuid.UUID | None
    created_at: datetime | None
    updated_at: datetime | None
    details: dict[str, Any] | None = None


class TypeCounts(CamelModel):
    apartments: int = 0
    land: int = 0
    houses: int = 0

    @classmethod
    def from_rows(cls, rows: list[Any]) -> TypeCounts:
        counts = cls()
        for row in rows:
            count = int(row["count"] or 0)
            if row["property_type"] == PropertyType.APARTMENT:
                counts.apartments = count
            elif row["property_type"] == PropertyType.LAND:
                counts.land = count
            elif row["property_type"] == PropertyType.HOUSE:
                counts.houses = count
        return counts

    @property
    def total(self) -> int:
        return self.apartments + self.land + self.houses


class ListingMeta(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    property_types: TypeCounts


class PriceAggregate(CamelModel):
    count: int = 0
    avg_price: float = 0
    min_price: float = 0
    max_price: float = 0
    total_market_value: float = 0

    @classmethod
    def from_row(cls, row: Any) -> PriceAggregate:
        return cls(
            count=int(row["count"] or 0),
            avg_price=_to_number(row["avg_price"]),
            min_price=_to_number(row["min_price"]),
            max_price=_to_number(row["max_price"]),
            total_market_value=_to_number(row["total_price"]),
        )


class CombinedStats(CamelModel):
    total_properties: int = 0
    overall_avg_price: float = 0
    total_market_value: float = 0


class PropertyStats(CamelModel):
    apartments: PriceAggregate
    land: PriceAggregate
    houses: PriceAggregate
    combined: CombinedStats

    @classmethod
    def combine(
        cls, apartments: PriceAggregate, land: PriceAggregate, houses: PriceAggregate
    ) -> PropertyStats:
        total_properties = apartments.count + land.count + houses.count
        market_value = (
            apartments.total_market_value + land.total_market_value + houses.total_market_value
        )
        return cls(
            apartments=apartments,
            land=land,
            houses=houses,
            combined=CombinedStats(
                total_properties=total_properties,
                overall_avg_price=market_value / total_properties if total_properties else 0,
                total_market_value=market_value,
            ),
        )


def _to_number(value: Any) -> float:
    if value is None:
        return 0.0
    number = float(value)
    return 0.0 if math.isnan(number) else number
