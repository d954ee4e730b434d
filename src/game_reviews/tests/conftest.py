"""
Core pytest configuration for the entire test suite.

Every test that touches the database gets its own freshly created and seeded
schema (see test_fixtures/seed_data.py), so tests may commit freely:

- SQLite (default): a new `sqlite+aiosqlite` file under pytest's tmp_path,
  foreign keys switched on.
- Postgres: set TEST_DATABASE_URL (or TESTING=true + TEST_POSTGRES_DB); tables
  are dropped and recreated around each test. Tests marked `postgres_only`
  only run here.

Domain-specific fixtures live in:
- tests/test_fixtures/repository_fixtures.py
- tests/test_fixtures/api_fixtures.py
"""

# -------------------------------
# Standard library imports
# -------------------------------
import os
import logging
from pathlib import Path
from urllib.parse import urlparse
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Silence noisy third-party loggers before they are imported/initialized.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "asyncio",
    "aiosqlite",
    "httpx",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from pytest import FixtureRequest
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from game_reviews.config import get_settings
from game_reviews.core.logging.builder import setup_logging
from game_reviews.database.base import Base
from game_reviews.database.session import build_engine
from game_reviews import models  # noqa: F401 - registers tables on Base.metadata

from .test_fixtures.seed_data import seed_database

settings = get_settings()
logger = logging.getLogger(__name__)


# -------------------------------
# Logging
# -------------------------------
@pytest.fixture(scope="session", autouse=True)
def configure_logging(request: FixtureRequest):
    """
    Install the application's dictConfig logging for the whole session, then put
    pytest's capture handler back on the root logger (dictConfig replaces root handlers).
    """
    setup_logging(settings)

    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None)
    if handler is not None:
        logging.getLogger().addHandler(handler)

    yield


# ------------------------------------------------------------------------------------------------
# Determining the test database URL
# ------------------------------------------------------------------------------------------------

def safe_log_db_url(db_url: str) -> str:
    """Return the URL without credentials, for logging."""
    parsed = urlparse(db_url)
    return f"{parsed.scheme}://{parsed.hostname or ''}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_server_database_url() -> str | None:
    """
    1. `TEST_DATABASE_URL` environment variable (CI/CD override)
    2. the app's URL when TESTING=true and TEST_POSTGRES_DB is set
    3. None: each test uses its own SQLite file
    """
    if test_url := os.getenv("TEST_DATABASE_URL"):
        return test_url

    if settings.TESTING and settings.TEST_POSTGRES_DB:
        return settings.SQLALCHEMY_DATABASE_URL

    return None


SERVER_DATABASE_URL = get_server_database_url()
USING_SQLITE = SERVER_DATABASE_URL is None or make_url(SERVER_DATABASE_URL).get_backend_name() == "sqlite"

if SERVER_DATABASE_URL:
    logger.info("tests.database", extra={"url": safe_log_db_url(SERVER_DATABASE_URL)})


def pytest_collection_modifyitems(config, items):
    if not USING_SQLITE:
        return
    skip_pg = pytest.mark.skip(reason="needs Postgres type checking (set TEST_DATABASE_URL)")
    for item in items:
        if "postgres_only" in item.keywords:
            item.add_marker(skip_pg)


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------

@pytest.fixture
def test_database_url(tmp_path: Path) -> str:
    return SERVER_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'reviews_test.db'}"


@pytest.fixture
async def async_engine(test_database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Engine with a freshly created and seeded schema."""
    engine = build_engine(test_database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    maker = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        await seed_database(session)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_maker(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


# Shared fixtures from test_fixtures/, registered globally
from .test_fixtures.repository_fixtures import (  # noqa: E402
    base_repo,
    review_repository,
    comment_repository,
    category_repository,
    user_repository,
    comment_payload,
)
from .test_fixtures.api_fixtures import app, client  # noqa: E402
