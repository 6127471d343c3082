from __future__ import annotations

import asyncio
import logging
from collections.abc import Generator
from typing import TYPE_CHECKING, Any

from fastapi import Depends, Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from marketplace.config import Settings, settings

if TYPE_CHECKING:
    from sqlalchemy import Executable, RowMapping

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """Owns the SQLAlchemy engine, its connection pool and the session factory.

    Nothing is created at import time: the process entry point calls
    ``open()`` on startup and ``close()`` on shutdown, and hands the
    instance to whoever needs database access.
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: float = 30.0,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ) -> None:
        self.url = url
        self._engine_kwargs: dict[str, Any] = {
            "pool_pre_ping": pool_pre_ping,
            "echo": echo,
        }
        if url.startswith("sqlite"):
            self._engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            self._engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
            )
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @classmethod
    def from_settings(cls, config: Settings = settings) -> Database:
        return cls(
            config.database_url,
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_timeout=config.db_pool_timeout,
            pool_pre_ping=config.db_pool_pre_ping,
            echo=config.debug,
        )

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open; call open() first")
        return self._engine

    def open(self) -> Database:
        if self._engine is not None:
            return self
        self._engine = create_engine(self.url, **self._engine_kwargs)
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self._engine
        )
        logger.info("Database engine opened (%s)", self._engine.dialect.name)
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database is not open; call open() first")
        return self._session_factory()

    def fetch_all(self, statement: Executable) -> list[RowMapping]:
        """Run a read-only statement on a pooled connection and return its rows."""
        with self.engine.connect() as conn:
            return list(conn.execute(statement).mappings())

    async def fetch_all_async(self, statement: Executable) -> list[RowMapping]:
        """Same as fetch_all, without blocking the event loop."""
        return await asyncio.to_thread(self.fetch_all, statement)

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception:
            logger.exception("Database ping failed")
            return False
        return True

    def create_tables(self) -> None:
        """Bootstrap the listing tables; existing tables are left untouched."""
        # registers Apartment, LandProperty and HouseForSale on Base.metadata
        import marketplace.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info(
            "Database tables ensured (%d models registered)", len(Base.metadata.tables)
        )


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(
    database: Database = Depends(get_database),
) -> Generator[Session, None, None]:
    db = database.session()
    try:
        yield db
    finally:
        db.close()
