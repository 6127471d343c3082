from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from marketplace.schemas.listing import CamelModel

T = TypeVar("T")
M = TypeVar("M")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str = "Success"
    data: T


class PaginatedResponse(ApiResponse[T], Generic[T, M]):
    meta: M


class EntityListMeta(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Any) -> EntityListMeta:
        return cls(
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        )


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Any = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorBody
