"""
Wanderlust Backend: Database Client and Session Management
=============================================================

What:  The persistence client (async SQLAlchemy engine + session factory),
       the declarative Base for the models, and the FastAPI session dependency.
How:   create_app() builds one Database from Settings and stores it on
       app.state. The lifespan opens it (creating the tables) and disposes
       it on shutdown. Each request gets its own AsyncSession through
       get_db_session(); services commit their own writes, the dependency
       rolls back whatever an error left open.
Who:   Used by route handlers via FastAPI's dependency injection system.

Connection Pooling (non-SQLite URLs):
    pool_size / max_overflow: from settings
    pool_pre_ping:            validates connections before use
    pool_recycle=3600:        recycles connections every hour
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from wanderlust.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models (shares one metadata object)."""
    pass


class Database:
    """
    Long-lived persistence client shared by all requests.

    The engine is safe for concurrent use; sessions are not, so every
    request takes its own from `session_factory`.

    Lifecycle:
        Database(...)  → engine configured, no connection opened yet
        connect()      → first round trip; creates missing tables
        dispose()      → closes every pooled connection
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 10,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        engine_options = {"pool_pre_ping": pool_pre_ping, "echo": echo}
        if not url.startswith("sqlite"):
            engine_options.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine: AsyncEngine = create_async_engine(url, **engine_options)
        # expire_on_commit=False: ORM objects stay readable after the commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    async def connect(self) -> None:
        """
        Open the store and make sure the `contacts` and `favourites` tables exist.

        Raises whatever the driver raises when the store is unreachable;
        the caller (application lifespan) logs it and keeps serving.
        """
        # Registers the models on Base.metadata before create_all
        from wanderlust.models import contact, favourite  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Run SELECT 1; False when the store cannot be reached."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False
        return True

    async def dispose(self) -> None:
        """Gracefully closes all connections in the pool."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Takes a new session from the app's Database
        2. Yields it to the route handler
        3. On success: commits whatever is still open (services commit
           their own writes before answering, so a failed write is
           reported by the route and never after the response)
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/favourites")
        async def list_favourites(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.db
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
