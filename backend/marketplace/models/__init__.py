from marketplace.models.apartment import Apartment
from marketplace.models.house_for_sale import HouseForSale
from marketplace.models.land_property import LandProperty

__all__ = [
    "Apartment",
    "LandProperty",
    "HouseForSale",
]
