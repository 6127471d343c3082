"""Apartments for rent, priced by ``rent_amount``."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement

from marketplace.models.apartment import Apartment
from marketplace.schemas.listing import PropertyType
from marketplace.services.listing_sources.base_source import ListingSource, concat
from marketplace.services.query_builder import json_build_object, sql_string


class ApartmentSource(ListingSource):
    property_type = PropertyType.APARTMENT
    model = Apartment

    def location_columns(self) -> list[ColumnElement[Any]]:
        return [Apartment.apartment_address]

    def seller_column(self) -> ColumnElement[Any]:
        return Apartment.seller_id

    def price_column(self) -> ColumnElement[Any]:
        return Apartment.rent_amount

    def base_conditions(self) -> list[ColumnElement[bool]]:
        # Soft-deleted apartments never show up in listings
        return [Apartment.deleted_at.is_(None)]

    def projection(self) -> dict[str, ColumnElement[Any]]:
        return {
            "id": Apartment.id,
            "name": func.coalesce(
                func.nullif(Apartment.house_name, sql_string("")),
                concat(
                    "Apartment - ",
                    func.coalesce(Apartment.apartment_address, sql_string("Unknown")),
                ),
            ),
            "location": func.coalesce(Apartment.apartment_address, sql_string("")),
            "details": json_build_object.from_pairs(
                houseId=Apartment.house_id,
                bedrooms=Apartment.number_of_bedrooms,
                description=Apartment.description,
                images=Apartment.images,
                furnishedStatus=Apartment.furnished_status,
                apartmentType=Apartment.apartment_type,
            ),
        }
