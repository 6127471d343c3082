"""Land property repository (hard delete)."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from marketplace.models.land_property import LandProperty
from marketplace.schemas.land_property import LandPropertyFilters
from marketplace.services.entity_query import EntityPage, paginate, resolve_sort
from marketplace.utils.exceptions import LandPropertyNotFoundError

logger = logging.getLogger(__name__)

SORT_FIELDS = {
    "id": LandProperty.property_id,
    "property_id": LandProperty.property_id,
    "price": LandProperty.price,
    "created_at": LandProperty.created_at,
    "updated_at": LandProperty.updated_at,
    "property_name": LandProperty.property_name,
    "status": LandProperty.status,
    "listing_date": LandProperty.listing_date,
}


def _filtered(db: Session, filters: LandPropertyFilters | None) -> Query[LandProperty]:
    query = db.query(LandProperty)
    if filters is None:
        return query
    if filters.status:
        query = query.filter(LandProperty.status == filters.status)
    if filters.seller_id:
        query = query.filter(LandProperty.seller_id == filters.seller_id)
    if filters.estate_id:
        query = query.filter(LandProperty.estate_id == filters.estate_id)
    if filters.land_type:
        query = query.filter(LandProperty.land_type == filters.land_type)
    if filters.min_price is not None:
        query = query.filter(LandProperty.price >= filters.min_price)
    if filters.max_price is not None:
        query = query.filter(LandProperty.price <= filters.max_price)
    if filters.q:
        term = f"%{filters.q}%"
        query = query.filter(
            or_(
                LandProperty.property_name.ilike(term),
                LandProperty.property_address.ilike(term),
                LandProperty.short_description.ilike(term),
                LandProperty.long_description.ilike(term),
            )
        )
    return query


def list_land_properties(
    db: Session,
    filters: LandPropertyFilters | None = None,
    *,
    page: int | None = None,
    limit: int | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
) -> EntityPage[LandProperty]:
    return paginate(
        _filtered(db, filters),
        resolve_sort(SORT_FIELDS, sort_by, sort_order),
        page,
        limit,
    )


def count_land_properties(db: Session, filters: LandPropertyFilters | None = None) -> int:
    return _filtered(db, filters).count()


def get_land_property(db: Session, property_id: uuid.UUID) -> LandProperty:
    land = db.query(LandProperty).filter(LandProperty.property_id == property_id).first()
    if not land:
        raise LandPropertyNotFoundError(f"Land property {property_id} not found")
    return land


def list_seller_land(
    db: Session, seller_id: uuid.UUID, *, estate_land: bool | None = None
) -> list[LandProperty]:
    """A seller's parcels, optionally narrowed to estate or non-estate land."""
    query = db.query(LandProperty).filter(LandProperty.seller_id == seller_id)
    if estate_land is not None:
        query = query.filter(LandProperty.is_estate_land.is_(estate_land))
    return query.order_by(LandProperty.created_at.desc()).all()


def create_land_property(db: Session, data: dict[str, Any]) -> LandProperty:
    land = LandProperty(**data)
    db.add(land)
    db.commit()
    db.refresh(land)
    logger.info(
        "Created land property id=%s seller_id=%s", land.property_id, land.seller_id
    )
    return land


def update_land_property(
    db: Session, property_id: uuid.UUID, updates: dict[str, Any]
) -> LandProperty:
    land = get_land_property(db, property_id)
    for key, value in updates.items():
        if hasattr(land, key):
            setattr(land, key, value)
    db.commit()
    db.refresh(land)
    return land


def delete_land_property(db: Session, property_id: uuid.UUID) -> None:
    land = get_land_property(db, property_id)
    db.delete(land)
    db.commit()
    logger.info("Deleted land property id=%s", property_id)
