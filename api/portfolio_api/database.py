"""Engine, request-scoped sessions and schema migrations for the portfolio store."""

import asyncio
import logging
from collections.abc import AsyncGenerator
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from alembic import command
from alembic.config import Config
from portfolio_api.config import Settings, settings

logger = logging.getLogger(__name__)

API_ROOT = Path(__file__).resolve().parents[1]

Base = declarative_base()


def create_engine_for(config: Settings) -> AsyncEngine:
    """Async engine for ``config.database_url`` (asyncpg or aiosqlite)."""
    return create_async_engine(config.database_url, pool_pre_ping=True)


engine = create_engine_for(settings)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


def upgrade_schema(db_url: str) -> None:
    """Bring the database at ``db_url`` to the latest Alembic revision."""
    config = Config(str(API_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(API_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", db_url)
    # Keep the application's logging setup when env.py loads alembic.ini
    config.attributes["configure_logger"] = False
    command.upgrade(config, "head")


async def init_db(db_url: str | None = None) -> None:
    """Apply pending migrations. Alembic is synchronous, so it runs in a thread."""
    url = db_url or settings.database_url
    await asyncio.to_thread(upgrade_schema, url)
    logger.info("Database schema is up to date")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session.

    Commits once the endpoint returns and rolls back if it raised, so a
    failed request never leaves partial writes behind.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
