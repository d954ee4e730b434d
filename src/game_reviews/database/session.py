from functools import lru_cache
from typing import AsyncGenerator
import logging

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)

from game_reviews.config import get_settings

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless the pragma is set on every connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str, *, echo: bool = False, pool_size: int | None = None) -> AsyncEngine:
    """
    Create an AsyncEngine for `url`.

    Server databases get a capped pool (`pool_size`, no overflow) with health checks;
    SQLite keeps SQLAlchemy's default pool and gets foreign keys switched on.
    """
    backend = make_url(url).get_backend_name()

    if backend == "sqlite":
        engine = create_async_engine(url, echo=echo)
        enable_sqlite_foreign_keys(engine)
    else:
        engine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,           # Enables connection health checks
            pool_size=pool_size or 5,
            max_overflow=0,
        )

    logger.info("db.engine.created", extra={"backend": backend, "pool_size": pool_size})
    return engine


# The engine is created lazily on first use so importing the app never opens a connection.
@lru_cache()
def get_engine() -> AsyncEngine:
    settings = get_settings()
    return build_engine(
        settings.SQLALCHEMY_DATABASE_URL,
        echo=settings.SQLALCHEMY_ECHO,
        pool_size=settings.EFFECTIVE_POOL_SIZE,
    )


@lru_cache()
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. Yields a session and ensures it's closed after the request.

    Usage:
        async def endpoint(db: AsyncSession = Depends(get_async_session)):
            await db.execute(...)
    """
    async with get_sessionmaker()() as session:
        yield session


async def dispose_engine() -> None:
    """Close pooled connections at shutdown. A no-op when no engine was created."""
    if get_engine.cache_info().currsize == 0:
        return
    await get_engine().dispose()
    get_sessionmaker.cache_clear()
    get_engine.cache_clear()
    logger.info("db.engine.disposed")
