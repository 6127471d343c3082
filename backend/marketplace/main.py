from __future__ import annotations

import logging
from collections.abc import AsyncGenerator  # noqa: TC003
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.config import settings
from marketplace.database import Database
from marketplace.errors import register_exception_handlers
from marketplace.routers import (
    apartments,
    dev_seed,
    health,
    houses_for_sale,
    land_properties,
    properties,
)

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    database = Database.from_settings(settings).open()
    if not database.ping():
        logger.warning("Database is not reachable at startup; requests will fail")
    elif settings.auto_create_tables:
        database.create_tables()
    app.state.database = database
    logger.info("%s started (environment=%s)", settings.app_name, settings.environment)
    try:
        yield
    finally:
        database.close()


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(properties.router, prefix=settings.api_prefix, tags=["properties"])
app.include_router(apartments.router, prefix=settings.api_prefix, tags=["apartments"])
app.include_router(
    land_properties.router, prefix=settings.api_prefix, tags=["land-properties"]
)
app.include_router(
    houses_for_sale.router, prefix=settings.api_prefix, tags=["houses-for-sale"]
)
app.include_router(dev_seed.router, prefix=settings.api_prefix, tags=["dev"])
