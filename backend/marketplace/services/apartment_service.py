"""Apartment repository: filtered listing, lookup and soft-deleting CRUD."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from marketplace.models.apartment import Apartment
from marketplace.schemas.apartment import ApartmentFilters
from marketplace.services.entity_query import EntityPage, paginate, resolve_sort
from marketplace.utils.exceptions import ApartmentNotFoundError

logger = logging.getLogger(__name__)

SORT_FIELDS = {
    "id": Apartment.id,
    "rent_amount": Apartment.rent_amount,
    "created_at": Apartment.created_at,
    "apartment_address": Apartment.apartment_address,
    "updated_at": Apartment.updated_at,
    "number_of_bedrooms": Apartment.number_of_bedrooms,
}


def _filtered(db: Session, filters: ApartmentFilters | None) -> Query[Apartment]:
    query = db.query(Apartment).filter(Apartment.deleted_at.is_(None))
    if filters is None:
        return query
    if filters.seller_id:
        query = query.filter(Apartment.seller_id == filters.seller_id)
    if filters.house_id:
        query = query.filter(Apartment.house_id == filters.house_id)
    if filters.min_rent is not None:
        query = query.filter(Apartment.rent_amount >= filters.min_rent)
    if filters.max_rent is not None:
        query = query.filter(Apartment.rent_amount <= filters.max_rent)
    if filters.number_of_bedrooms is not None:
        query = query.filter(Apartment.number_of_bedrooms == filters.number_of_bedrooms)
    if filters.furnished_status:
        query = query.filter(Apartment.furnished_status == filters.furnished_status)
    if filters.q:
        term = f"%{filters.q}%"
        query = query.filter(
            or_(
                Apartment.apartment_address.ilike(term),
                Apartment.description.ilike(term),
                Apartment.house_name.ilike(term),
            )
        )
    return query


def list_apartments(
    db: Session,
    filters: ApartmentFilters | None = None,
    *,
    page: int | None = None,
    limit: int | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
) -> EntityPage[Apartment]:
    return paginate(
        _filtered(db, filters),
        resolve_sort(SORT_FIELDS, sort_by, sort_order),
        page,
        limit,
    )


def count_apartments(db: Session, filters: ApartmentFilters | None = None) -> int:
    return _filtered(db, filters).count()


def get_apartment(db: Session, apartment_id: uuid.UUID) -> Apartment:
    apartment = _filtered(db, None).filter(Apartment.id == apartment_id).first()
    if not apartment:
        raise ApartmentNotFoundError(f"Apartment {apartment_id} not found")
    return apartment


def list_apartments_for_house(db: Session, house_id: uuid.UUID) -> list[Apartment]:
    return (
        _filtered(db, None)
        .filter(Apartment.house_id == house_id)
        .order_by(Apartment.created_at.desc())
        .all()
    )


def create_apartment(db: Session, data: dict[str, Any]) -> Apartment:
    apartment = Apartment(**data)
    db.add(apartment)
    db.commit()
    db.refresh(apartment)
    logger.info("Created apartment id=%s seller_id=%s", apartment.id, apartment.seller_id)
    return apartment


def update_apartment(
    db: Session, apartment_id: uuid.UUID, updates: dict[str, Any]
) -> Apartment:
    apartment = get_apartment(db, apartment_id)
    for key, value in updates.items():
        if hasattr(apartment, key):
            setattr(apartment, key, value)
    db.commit()
    db.refresh(apartment)
    return apartment


def delete_apartment(db: Session, apartment_id: uuid.UUID) -> Apartment:
    """Soft delete: the row stays but drops out of every query above."""
    apartment = get_apartment(db, apartment_id)
    apartment.deleted_at = datetime.now(timezone.utc)
    db.commit()
    logger.info("Soft-deleted apartment id=%s", apartment_id)
    return apartment
