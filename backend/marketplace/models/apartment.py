import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, Numeric, String, Text, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.database import Base


class Apartment(Base):
    """Rentable unit inside a house. Rows are soft-deleted via ``deleted_at``."""

    __tablename__ = "apartments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    house_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True, index=True)
    seller_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True, index=True)
    tenant_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)

    apartment_address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    house_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    unit_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, default=0)
    number_of_kitchens: Mapped[int] = mapped_column(Integer, default=0)
    number_of_living_rooms: Mapped[int] = mapped_column(Integer, default=0)
    number_of_toilets: Mapped[int] = mapped_column(Integer, default=0)
    room_size: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    has_running_water: Mapped[bool] = mapped_column(Boolean, default=False)
    has_electricity: Mapped[bool] = mapped_column(Boolean, default=False)
    has_parking_space: Mapped[bool] = mapped_column(Boolean, default=False)
    has_internet: Mapped[bool] = mapped_column(Boolean, default=False)

    images: Mapped[Optional[Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=True
    )
    cover_image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    apartment_condition: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    furnished_status: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    apartment_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    rent_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    caution_fee: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    lawyer_fee: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    legal_fees: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    payment_duration: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    apartment_status: Mapped[str] = mapped_column(String(50), default="available")
    tenant_eligibility: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=func.now(), onupdate=func.now()
    )
    tenant_updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
