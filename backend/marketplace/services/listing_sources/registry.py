"""Registry of the tables that contribute to the unified listing."""

from __future__ import annotations

import logging

from marketplace.schemas.listing import PropertyType, PropertyTypeFilter
from marketplace.services.listing_sources.apartment_source import ApartmentSource
from marketplace.services.listing_sources.base_source import ListingSource
from marketplace.services.listing_sources.house_source import HouseSource
from marketplace.services.listing_sources.land_source import LandSource

logger = logging.getLogger(__name__)


class ListingSourceRegistry:
    """Registry and factory for listing sources, in union order."""

    _sources: dict[PropertyType, type[ListingSource]] = {
        PropertyType.APARTMENT: ApartmentSource,
        PropertyType.LAND: LandSource,
        PropertyType.HOUSE: HouseSource,
    }

    @classmethod
    def get_source(cls, property_type: PropertyType | str) -> ListingSource:
        """
        Get a source instance by property type.

        Raises:
            ValueError: If the property type is not registered.
        """
        source_class = cls._sources.get(str(property_type))  # type: ignore[call-overload]
        if not source_class:
            raise ValueError(
                f"Unknown property type: {property_type}. "
                f"Available: {', '.join(cls._sources.keys())}"
            )
        return source_class()

    @classmethod
    def sources_for(
        cls, type_filter: PropertyTypeFilter = PropertyTypeFilter.ALL
    ) -> list[ListingSource]:
        """Instances of every registered source selected by ``type_filter``."""
        return [
            source_class()
            for property_type, source_class in cls._sources.items()
            if type_filter.includes(property_type)
        ]

    @classmethod
    def list_types(cls) -> list[PropertyType]:
        return list(cls._sources.keys())

    @classmethod
    def register_source(
        cls, property_type: PropertyType, source_class: type[ListingSource]
    ) -> None:
        """Register (or replace) the source for a property type."""
        if not issubclass(source_class, ListingSource):
            raise TypeError(
                f"{source_class.__name__} must be a subclass of ListingSource"
            )
        cls._sources[property_type] = source_class
        logger.info(
            "Registered listing source: %s -> %s", property_type, source_class.__name__
        )
