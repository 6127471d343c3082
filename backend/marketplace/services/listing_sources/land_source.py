"""Land parcels, priced by ``price``."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement

from marketplace.models.land_property import LandProperty
from marketplace.schemas.listing import PropertyType
from marketplace.services.listing_sources.base_source import ListingSource
from marketplace.services.query_builder import json_build_object, sql_string


class LandSource(ListingSource):
    property_type = PropertyType.LAND
    model = LandProperty

    def location_columns(self) -> list[ColumnElement[Any]]:
        return [LandProperty.property_address, LandProperty.state_location]

    def seller_column(self) -> ColumnElement[Any]:
        return LandProperty.seller_id

    def price_column(self) -> ColumnElement[Any]:
        return LandProperty.price

    def projection(self) -> dict[str, ColumnElement[Any]]:
        return {
            "id": LandProperty.property_id,
            "name": LandProperty.property_name,
            "location": func.coalesce(
                LandProperty.property_address,
                LandProperty.state_location,
                sql_string(""),
            ),
            "details": json_build_object.from_pairs(
                state=LandProperty.state_location,
                description=func.coalesce(
                    LandProperty.long_description, LandProperty.short_description
                ),
                images=LandProperty.gallery_images,
                landSize=LandProperty.land_size,
                landType=LandProperty.land_type,
            ),
        }
