"""Base class for the tables that feed the unified property listing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import Numeric, Select, Text, Uuid, and_, cast, func, literal_column, or_, select

from marketplace.schemas.listing import ListingFilter, PropertyType
from marketplace.services.query_builder import FilterFragment, ParameterBinder, sql_string

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from marketplace.database import Base


PRICE_TYPE = Numeric(asdecimal=False)

# Column order shared by every per-type select so they can be UNION ALL'd
UNIFIED_COLUMNS = (
    "property_type",
    "id",
    "name",
    "location",
    "price",
    "seller_id",
    "created_at",
    "updated_at",
    "details",
)


class ListingSource(ABC):
    """One entity table projected into the common listing shape.

    Subclasses map the logical filter fields (location, seller, price) onto
    their own physical columns and describe how to synthesize the display
    name, location string and ``details`` blob.
    """

    # Subclasses must define these
    property_type: ClassVar[PropertyType]
    model: ClassVar[type[Base]]

    def __init__(self) -> None:
        if not getattr(self, "property_type", None) or not getattr(self, "model", None):
            raise ValueError(
                f"{self.__class__.__name__} must define property_type and model"
            )

    @abstractmethod
    def location_columns(self) -> list[ColumnElement[Any]]:
        """Columns matched (OR'd) by the location substring filter."""

    @abstractmethod
    def seller_column(self) -> ColumnElement[Any]:
        pass

    @abstractmethod
    def price_column(self) -> ColumnElement[Any]:
        pass

    @abstractmethod
    def projection(self) -> dict[str, ColumnElement[Any]]:
        """Expressions for ``id``, ``name``, ``location`` and ``details``."""

    def base_conditions(self) -> list[ColumnElement[bool]]:
        """Predicates applied regardless of the caller's filter."""
        return []

    def compile_filter(
        self, listing_filter: ListingFilter, binder: ParameterBinder
    ) -> FilterFragment:
        """Translate ``listing_filter`` into a WHERE clause for this table.

        Placeholders are taken from ``binder``, which may already hold
        values for other parts of the same statement.
        """
        start = binder.next_index
        conditions: list[ColumnElement[bool]] = []

        if listing_filter.location:
            term = binder.bind(f"%{listing_filter.location}%", Text())
            matches = [column.ilike(term) for column in self.location_columns()]
            conditions.append(matches[0] if len(matches) == 1 else or_(*matches))

        if listing_filter.seller_id is not None:
            conditions.append(
                self.seller_column() == binder.bind(listing_filter.seller_id, Uuid())
            )

        if listing_filter.min_price is not None:
            conditions.append(
                self.price_column() >= binder.bind(listing_filter.min_price, PRICE_TYPE)
            )

        if listing_filter.max_price is not None:
            conditions.append(
                self.price_column() <= binder.bind(listing_filter.max_price, PRICE_TYPE)
            )

        return FilterFragment(
            where_clause=and_(*conditions) if conditions else None,
            bound_values=binder.values_from(start),
            next_index=binder.next_index,
        )

    def _where(
        self, listing_filter: ListingFilter, binder: ParameterBinder
    ) -> list[ColumnElement[bool]]:
        fragment = self.compile_filter(listing_filter, binder)
        where = self.base_conditions()
        if fragment.where_clause is not None:
            where.append(fragment.where_clause)
        return where

    def unified_select(
        self, listing_filter: ListingFilter, binder: ParameterBinder
    ) -> Select[Any]:
        """SELECT projecting this table into the unified listing columns."""
        projection = self.projection()
        columns = {
            "property_type": cast(literal_column(f"'{self.property_type.value}'"), Text),
            "id": projection["id"],
            "name": projection["name"],
            "location": projection["location"],
            "price": cast(self.price_column(), PRICE_TYPE),
            "seller_id": self.seller_column(),
            "created_at": self.model.created_at,
            "updated_at": self.model.updated_at,
            "details": projection["details"],
        }
        stmt = select(*(columns[name].label(name) for name in UNIFIED_COLUMNS))
        return stmt.where(*self._where(listing_filter, binder))

    def aggregate_select(
        self, listing_filter: ListingFilter, binder: ParameterBinder
    ) -> Select[Any]:
        """COUNT/AVG/MIN/MAX/SUM over the price column, zero when nothing matches."""
        price = cast(self.price_column(), PRICE_TYPE)
        zero = literal_column("0")
        stmt = select(
            func.count().label("count"),
            cast(func.coalesce(func.avg(price), zero), PRICE_TYPE).label("avg_price"),
            cast(func.coalesce(func.min(price), zero), PRICE_TYPE).label("min_price"),
            cast(func.coalesce(func.max(price), zero), PRICE_TYPE).label("max_price"),
            cast(func.coalesce(func.sum(price), zero), PRICE_TYPE).label("total_price"),
        ).select_from(self.model)
        return stmt.where(*self._where(listing_filter, binder))


def concat(*parts: ColumnElement[Any] | str) -> ColumnElement[str]:
    """``a || b || ...`` with plain strings inlined as constants."""
    expressions = [sql_string(part) if isinstance(part, str) else part for part in parts]
    result = expressions[0]
    for expression in expressions[1:]:
        result = result.op("||")(expression)
    return result
