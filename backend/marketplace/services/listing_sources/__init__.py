"""Per-table projections feeding the unified property listing."""

from marketplace.services.listing_sources.apartment_source import ApartmentSource
from marketplace.services.listing_sources.base_source import ListingSource
from marketplace.services.listing_sources.house_source import HouseSource
from marketplace.services.listing_sources.land_source import LandSource
from marketplace.services.listing_sources.registry import ListingSourceRegistry

__all__ = [
    "ListingSource",
    "ApartmentSource",
    "LandSource",
    "HouseSource",
    "ListingSourceRegistry",
]
