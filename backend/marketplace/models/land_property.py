import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Numeric, Text, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.database import Base


class LandProperty(Base):
    """Land parcel listed by a seller, standalone or inside an estate."""

    __tablename__ = "land_properties"

    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    estate_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True, index=True)
    seller_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    property_name: Mapped[str] = mapped_column(Text, nullable=False)
    property_address: Mapped[str] = mapped_column(Text, nullable=False)
    state_location: Mapped[str] = mapped_column(Text, nullable=False)
    country: Mapped[str] = mapped_column(Text, nullable=False)
    cover_image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    gallery_images: Mapped[Optional[Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=True
    )

    price: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    available_quantity: Mapped[Decimal] = mapped_column(Numeric, nullable=False, default=1)
    short_description: Mapped[str] = mapped_column(Text, nullable=False)
    long_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    land_size: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    custom_land_size: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    price_per_plot: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    booking_fee: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    survey_fee: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    legal_fee: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    documents_available: Mapped[Optional[Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=True
    )

    land_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    soil_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    fencing_status: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    access_road_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    survey_status: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(Text, default="available")
    is_estate_land: Mapped[bool] = mapped_column(Boolean, default=False)
    sold_out: Mapped[bool] = mapped_column(Boolean, default=False)

    listing_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), default=func.now()
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=func.now(), onupdate=func.now()
    )
