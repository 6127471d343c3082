from __future__ import annotations

import uuid

from marketplace.schemas.listing import CamelModel


class SeedAssetsRequest(CamelModel):
    seller_id: uuid.UUID


class SeedAssetsResponse(CamelModel):
    seller_id: uuid.UUID
    apartment_id: uuid.UUID
    land_id: uuid.UUID
    house_id: uuid.UUID
