"""Creates a small linked set of listings for a seller in non-production
environments, so the unified listing endpoints have something to return."""

from __future__ import annotations

import logging
import time
import uuid
from decimal import Decimal

from sqlalchemy.orm import Session

from marketplace.config import Settings, settings
from marketplace.models.apartment import Apartment
from marketplace.models.house_for_sale import HouseForSale, HouseSaleStatus
from marketplace.models.land_property import LandProperty
from marketplace.schemas.dev_seed import SeedAssetsResponse
from marketplace.utils.exceptions import ForbiddenError

logger = logging.getLogger(__name__)


def seed_test_assets(
    db: Session, seller_id: uuid.UUID, config: Settings | None = None
) -> SeedAssetsResponse:
    """Insert one apartment, one land parcel and one house for ``seller_id``.

    All three rows are committed together or not at all.
    """
    config = config or settings
    if config.is_production:
        raise ForbiddenError("Seed endpoint is disabled in production")

    suffix = int(time.time() * 1000)
    apartment = Apartment(
        seller_id=seller_id,
        house_name=f"Seed House {suffix}",
        apartment_address="Seed Apartment Address, Lekki",
        number_of_bedrooms=2,
        number_of_kitchens=1,
        number_of_living_rooms=1,
        number_of_toilets=2,
        description="Seed apartment for integration testing",
        rent_amount=Decimal("3500000"),
        caution_fee=Decimal("300000"),
        lawyer_fee=Decimal("150000"),
        payment_duration="yearly",
        apartment_type="2-bedroom",
        apartment_condition="new",
        furnished_status="furnished",
        tenant_eligibility="Employed professionals",
        has_running_water=True,
        has_electricity=True,
        has_parking_space=True,
        has_internet=True,
    )
    land = LandProperty(
        seller_id=seller_id,
        property_name=f"Seed Land {suffix}",
        property_address="Seed Land Address, Lekki",
        state_location="Lagos",
        country="Nigeria",
        price=Decimal("25000000"),
        available_quantity=Decimal("12"),
        short_description="Seed land for integration testing",
        long_description="Seed land for integration testing with full linkage",
        status="available",
        is_estate_land=True,
        land_type="residential",
    )
    house = HouseForSale(
        owner_id=seller_id,
        status=HouseSaleStatus.ACTIVE.value,
        state="Lagos",
        lga="Eti-Osa",
        address="Seed House Address, Lekki",
        bedrooms=4,
        house_type="duplex",
        asking_price=Decimal("120000000"),
        title_document="C of O",
        description="Seed house for integration testing",
    )

    try:
        db.add_all([apartment, land, house])
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Seeding test assets failed for seller_id=%s", seller_id)
        raise

    logger.info(
        "Seeded test assets for seller_id=%s (apartment=%s land=%s house=%s)",
        seller_id,
        apartment.id,
        land.property_id,
        house.house_id,
    )
    return SeedAssetsResponse(
        seller_id=seller_id,
        apartment_id=apartment.id,
        land_id=land.property_id,
        house_id=house.house_id,
    )
