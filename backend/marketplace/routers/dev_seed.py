from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from marketplace.database import get_db
from marketplace.schemas.dev_seed import SeedAssetsRequest, SeedAssetsResponse
from marketplace.schemas.response import ApiResponse
from marketplace.services import dev_seed_service

router = APIRouter()


@router.post(
    "/dev/seed/test-assets",
    status_code=201,
    response_model=ApiResponse[SeedAssetsResponse],
)
def seed_test_assets(
    body: SeedAssetsRequest, db: Session = Depends(get_db)
) -> ApiResponse[SeedAssetsResponse]:
    seeded = dev_seed_service.seed_test_assets(db, body.seller_id)
    return ApiResponse[SeedAssetsResponse](
        message="Seed assets created successfully", data=seeded
    )
