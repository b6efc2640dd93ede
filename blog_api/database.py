import logging
from contextlib import AsyncExitStack

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from blog_api.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Build the process-wide engine and its bounded connection pool.

    ``max_overflow=0`` makes ``POOL_MAX_SIZE`` a hard ceiling; a checkout
    that waits longer than ``POOL_TIMEOUT`` raises instead of blocking.
    ``pool_pre_ping`` health-checks every connection on checkout.
    """
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "sqlite":
        # SQLite picks its own pool class; queue pool arguments do not apply.
        engine = create_async_engine(url, echo=settings.DEBUG, hide_parameters=True)
        enable_sqlite_foreign_keys(engine)
        return engine

    # Bound parameters carry password hashes; keep them out of logs and errors.
    return create_async_engine(
        url,
        echo=settings.DEBUG,
        hide_parameters=True,
        pool_size=settings.POOL_MAX_SIZE,
        max_overflow=0,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_pre_ping=True,
    )


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on FK enforcement (and ON DELETE CASCADE) for every SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def warm_pool(engine: AsyncEngine, min_idle: int) -> None:
    """
    Open *min_idle* connections up front and hand them back to the pool.

    Returned connections stay pooled, so the pool starts with that many
    idle, already-validated connections.  This happens once, at startup:
    connections the pool later discards (failed pre-ping, invalidation)
    are reopened on demand, not ahead of time.

    Connections opened before a failure are still returned to the pool.
    """
    if min_idle <= 0 or engine.dialect.name == "sqlite":
        return

    async with AsyncExitStack() as stack:
        for _ in range(min_idle):
            await stack.enter_async_context(engine.connect())
    logger.info("Connection pool warmed with %d idle connection(s)", min_idle)


async def create_tables(engine: AsyncEngine) -> None:
    # Imported for its side effect of registering the tables on Base.metadata.
    import blog_api.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
