"""Pytest configuration and fixtures for tests."""

from __future__ import annotations

import itertools
import uuid
from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from marketplace.database import Database, get_database
from marketplace.models import Apartment, HouseForSale, LandProperty

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def database(tmp_path) -> Database:
    """A file-backed SQLite database so concurrent queries each get a connection."""
    database = Database(f"sqlite:///{tmp_path / 'marketplace.db'}").open()
    database.create_tables()
    try:
        yield database
    finally:
        database.close()


@pytest.fixture
def db(database):
    """Provide a fresh database session for each test."""
    session = database.session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def seller_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def clock():
    """Strictly increasing created_at values, one minute apart."""
    counter = itertools.count()
    return lambda: BASE_TIME + timedelta(minutes=next(counter))


@pytest.fixture
def make_apartment(db, seller_id, clock):
    def _make(**overrides) -> Apartment:
        created_at = overrides.pop("created_at", None) or clock()
        defaults = dict(
            seller_id=seller_id,
            house_id=uuid.uuid4(),
            apartment_address="12 Admiralty Way, Lekki, Lagos",
            house_name="Palm Court",
            number_of_bedrooms=2,
            description="Two bedroom flat",
            images=["https://img.example.com/a1.jpg"],
            furnished_status="furnished",
            apartment_type="flat",
            rent_amount=Decimal("100000"),
            created_at=created_at,
            updated_at=created_at,
        )
        defaults.update(overrides)
        apartment = Apartment(**defaults)
        db.add(apartment)
        db.commit()
        db.refresh(apartment)
        return apartment

    return _make


@pytest.fixture
def make_land(db, seller_id, clock):
    def _make(**overrides) -> LandProperty:
        created_at = overrides.pop("created_at", None) or clock()
        defaults = dict(
            seller_id=seller_id,
            property_name="Sunrise Plots",
            property_address="Km 40 Lekki-Epe Expressway",
            state_location="Lagos",
            country="Nigeria",
            gallery_images=["https://img.example.com/l1.jpg"],
            price=Decimal("500000"),
            short_description="Dry land",
            long_description="Dry land with C of O",
            land_size=Decimal("600"),
            land_type="residential",
            created_at=created_at,
            updated_at=created_at,
        )
        defaults.update(overrides)
        land = LandProperty(**defaults)
        db.add(land)
        db.commit()
        db.refresh(land)
        return land

    return _make


@pytest.fixture
def make_house(db, seller_id, clock):
    def _make(**overrides) -> HouseForSale:
        created_at = overrides.pop("created_at", None) or clock()
        defaults = dict(
            owner_id=seller_id,
            state="Lagos",
            lga="Eti-Osa",
            address="5 Bourdillon Road, Ikoyi",
            bedrooms=4,
            house_type="duplex",
            asking_price=Decimal("2000000"),
            title_document="C of O",
            description="Detached duplex",
            images=["https://img.example.com/h1.jpg"],
            created_at=created_at,
            updated_at=created_at,
        )
        defaults.update(overrides)
        house = HouseForSale(**defaults)
        db.add(house)
        db.commit()
        db.refresh(house)
        return house

    return _make


@pytest.fixture
def client(database):
    """TestClient wired to the test database; the app lifespan is not started."""
    from marketplace.main import app

    app.dependency_overrides[get_database] = lambda: database
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
