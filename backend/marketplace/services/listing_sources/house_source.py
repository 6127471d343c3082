"""Houses listed for outright sale, priced by ``asking_price``."""

from __future__ import annotations

from typing import Any

from sqlalchemy.sql.elements import ColumnElement

from marketplace.models.house_for_sale import HouseForSale
from marketplace.schemas.listing import PropertyType
from marketplace.services.listing_sources.base_source import ListingSource, concat
from marketplace.services.query_builder import json_build_object


class HouseSource(ListingSource):
    property_type = PropertyType.HOUSE
    model = HouseForSale

    def location_columns(self) -> list[ColumnElement[Any]]:
        return [HouseForSale.address, HouseForSale.state]

    def seller_column(self) -> ColumnElement[Any]:
        return HouseForSale.owner_id

    def price_column(self) -> ColumnElement[Any]:
        return HouseForSale.asking_price

    def projection(self) -> dict[str, ColumnElement[Any]]:
        return {
            "id": HouseForSale.house_id,
            "name": concat("House - ", HouseForSale.address),
            "location": HouseForSale.address,
            "details": json_build_object.from_pairs(
                state=HouseForSale.state,
                lga=HouseForSale.lga,
                bedrooms=HouseForSale.bedrooms,
                description=HouseForSale.description,
                images=HouseForSale.images,
                status=HouseForSale.status,
                verificationStatus=HouseForSale.verification_status,
            ),
        }
