import uuid
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, Numeric, Text, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.database import Base


class HouseSaleStatus(StrEnum):
    ACTIVE = "active"
    UNDER_OFFER = "under_offer"
    SOLD = "sold"
    WITHDRAWN = "withdrawn"


class VerificationStatus(StrEnum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class HouseForSale(Base):
    __tablename__ = "houses_for_sale"

    house_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    agent_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)
    buyer_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)

    status: Mapped[str] = mapped_column(Text, default=HouseSaleStatus.ACTIVE.value)
    verification_status: Mapped[str] = mapped_column(
        Text, default=VerificationStatus.PENDING.value
    )
    state: Mapped[str] = mapped_column(Text, nullable=False)
    lga: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    landmark: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    bedrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bathrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    toilets: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    floors: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    land_size: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    house_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    asking_price: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    final_sale_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(14, 2), nullable=True)
    currency: Mapped[str] = mapped_column(Text, default="NGN")
    title_document: Mapped[str] = mapped_column(Text, nullable=False)
    has_survey_plan: Mapped[bool] = mapped_column(Boolean, default=False)
    has_building_approval: Mapped[bool] = mapped_column(Boolean, default=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    features: Mapped[Optional[Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=True
    )
    images: Mapped[Optional[Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=func.now(), onupdate=func.now()
    )
    sold_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
