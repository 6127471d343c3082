"""Shared list/sort/paginate plumbing for the per-table repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import InstrumentedAttribute, Query

from marketplace.schemas.listing import Pagination

T = TypeVar("T")


@dataclass(frozen=True)
class EntityPage(Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int
    total_pages: int


def resolve_sort(
    sort_fields: dict[str, InstrumentedAttribute[Any]],
    sort_by: str | None,
    sort_order: str | None,
) -> Any:
    """Allow-listed ORDER BY expression; unknown fields sort by created_at."""
    column = sort_fields.get(str(sort_by or "created_at").lower(), sort_fields["created_at"])
    return column.asc() if str(sort_order or "desc").lower() == "asc" else column.desc()


def paginate(
    query: Query[T],
    order_by: Any,
    page: int | None = None,
    limit: int | None = None,
) -> EntityPage[T]:
    pagination = Pagination.from_query(page, limit)
    total = query.order_by(None).count()
    items = (
        query.order_by(order_by)
        .offset(pagination.offset)
        .limit(pagination.limit)
        .all()
    )
    return EntityPage(
        items=items,
        total=total,
        page=pagination.page,
        limit=pagination.limit,
        total_pages=pagination.total_pages(total),
    )
