"""SQLAlchemy async engine management."""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from tubesearch.config import get_settings
from tubesearch.db.models import Base

_engine: AsyncEngine | None = None


def get_engine() -> AsyncEngine:
    """Get or create the async database engine."""
    global _engine
    if _engine:
        return _engine
    url = get_settings().database_url
    # Ensure SQLite URLs use async driver
    if url.startswith("sqlite:///"):
        url = url.replace("sqlite:///", "sqlite+aiosqlite:///")
    _engine = create_async_engine(url, future=True)
    return _engine


async def init_db() -> None:
    """Create the schema if it does not exist yet."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Close all pooled connections and forget the engine."""
    global _engine
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
