"""Houses-for-sale repository (hard delete)."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from marketplace.models.house_for_sale import HouseForSale
from marketplace.schemas.house_for_sale import HouseForSaleFilters
from marketplace.services.entity_query import EntityPage, paginate, resolve_sort
from marketplace.utils.exceptions import HouseForSaleNotFoundError

logger = logging.getLogger(__name__)

SORT_FIELDS = {
    "house_id": HouseForSale.house_id,
    "asking_price": HouseForSale.asking_price,
    "created_at": HouseForSale.created_at,
    "address": HouseForSale.address,
    "status": HouseForSale.status,
    "updated_at": HouseForSale.updated_at,
}


def _filtered(db: Session, filters: HouseForSaleFilters | None) -> Query[HouseForSale]:
    query = db.query(HouseForSale)
    if filters is None:
        return query
    if filters.status:
        query = query.filter(HouseForSale.status == filters.status)
    if filters.owner_id:
        query = query.filter(HouseForSale.owner_id == filters.owner_id)
    if filters.state:
        query = query.filter(HouseForSale.state == filters.state)
    if filters.min_price is not None:
        query = query.filter(HouseForSale.asking_price >= filters.min_price)
    if filters.max_price is not None:
        query = query.filter(HouseForSale.asking_price <= filters.max_price)
    if filters.bedrooms is not None:
        query = query.filter(HouseForSale.bedrooms == filters.bedrooms)
    if filters.verification_status:
        query = query.filter(
            HouseForSale.verification_status == filters.verification_status
        )
    if filters.q:
        term = f"%{filters.q}%"
        query = query.filter(
            or_(
                HouseForSale.address.ilike(term),
                HouseForSale.landmark.ilike(term),
                HouseForSale.description.ilike(term),
                HouseForSale.lga.ilike(term),
                HouseForSale.state.ilike(term),
            )
        )
    return query


def list_houses_for_sale(
    db: Session,
    filters: HouseForSaleFilters | None = None,
    *,
    page: int | None = None,
    limit: int | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
) -> EntityPage[HouseForSale]:
    return paginate(
        _filtered(db, filters),
        resolve_sort(SORT_FIELDS, sort_by, sort_order),
        page,
        limit,
    )


def count_houses_for_sale(db: Session, filters: HouseForSaleFilters | None = None) -> int:
    return _filtered(db, filters).count()


def get_house_for_sale(db: Session, house_id: uuid.UUID) -> HouseForSale:
    house = db.query(HouseForSale).filter(HouseForSale.house_id == house_id).first()
    if not house:
        raise HouseForSaleNotFoundError(f"House for sale {house_id} not found")
    return house


def create_house_for_sale(db: Session, data: dict[str, Any]) -> HouseForSale:
    house = HouseForSale(**data)
    db.add(house)
    db.commit()
    db.refresh(house)
    logger.info("Created house for sale id=%s owner_id=%s", house.house_id, house.owner_id)
    return house


def update_house_for_sale(
    db: Session, house_id: uuid.UUID, updates: dict[str, Any]
) -> HouseForSale:
    house = get_house_for_sale(db, house_id)
    for key, value in updates.items():
        if hasattr(house, key):
            setattr(house, key, value)
    db.commit()
    db.refresh(house)
    return house


def delete_house_for_sale(db: Session, house_id: uuid.UUID) -> None:
    house = get_house_for_sale(db, house_id)
    db.delete(house)
    db.commit()
    logger.info("Deleted house for sale id=%s", house_id)
