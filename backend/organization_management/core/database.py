"""Async SQLAlchemy engine and session factory."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from organization_management.core.config import Settings
from organization_management.models.tables import Base

logger = logging.getLogger(__name__)


class Database:
    def __init__(self) -> None:
        self.engine: AsyncEngine | None = None
        self.session_maker: async_sessionmaker[AsyncSession] | None = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        url = settings.DATABASE_URL
        engine_kwargs: dict = {"echo": settings.DATABASE_ECHO}
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            # In-memory SQLite only lives as long as its single connection.
            if ":memory:" in url:
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_async_engine(url, **engine_kwargs)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        if settings.DATABASE_CREATE_ALL:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

        self.initialized = True
        logger.info("Database initialized (dialect=%s)", self.engine.dialect.name)

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_maker = None
            self.initialized = False

    def session(self) -> AsyncSession:
        if not self.session_maker:
            raise RuntimeError("Database not initialized")
        return self.session_maker()

    async def check_connection(self) -> bool:
        if not self.session_maker:
            return False
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.exception("Database connection check failed")
            return False
