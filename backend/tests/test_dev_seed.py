"""Tests for the development seed endpoint."""

from __future__ import annotations

import uuid
from unittest.mock import patch

import pytest

from marketplace.config import Settings
from marketplace.models import Apartment, HouseForSale, LandProperty
from marketplace.services import dev_seed_service
from marketplace.utils.exceptions import ForbiddenError


class TestSeedService:
    def test_creates_one_of_each(self, db, seller_id):
        seeded = dev_seed_service.seed_test_assets(
            db, seller_id, Settings(environment="test")
        )
        assert db.get(Apartment, seeded.apartment_id).seller_id == seller_id
        assert db.get(LandProperty, seeded.land_id).seller_id == seller_id
        assert db.get(HouseForSale, seeded.house_id).owner_id == seller_id

    def test_disabled_in_production(self, db, seller_id):
        with pytest.raises(ForbiddenError):
            dev_seed_service.seed_test_assets(
                db, seller_id, Settings(environment="production")
            )
        assert db.query(Apartment).count() == 0


class TestSeedEndpoint:
    def test_seeded_assets_show_up_for_seller(self, client):
        seller = uuid.uuid4()
        resp = client.post("/api/dev/seed/test-assets", json={"sellerId": str(seller)})
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Seed assets created successfully"
        assert body["data"]["sellerId"] == str(seller)

        resp = client.get(f"/api/properties/seller/{seller}")
        assert resp.status_code == 200
        assert resp.json()["meta"]["propertyTypes"] == {
            "apartments": 1,
            "land": 1,
            "houses": 1,
        }

    def test_production_is_forbidden(self, client):
        with patch.object(
            dev_seed_service, "settings", Settings(environment="production")
        ):
            resp = client.post(
                "/api/dev/seed/test-assets", json={"sellerId": str(uuid.uuid4())}
            )
        assert resp.status_code == 403
        assert resp.json()["error"]["code"] == "FORBIDDEN"

    def test_seller_id_required(self, client):
        resp = client.post("/api/dev/seed/test-assets", json={})
        assert resp.status_code == 400
