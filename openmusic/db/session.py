# ============================================================================
# FILE: openmusic/db/session.py
# ============================================================================
from typing import Any
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from openmusic.config import settings
from openmusic.db.base import Base
from openmusic.db.store import Store
import logging

logger = logging.getLogger(__name__)

def create_engine(database_url: str = None) -> AsyncEngine:
    """Create the async engine, enabling foreign keys on SQLite"""
    database_url = database_url or settings.DATABASE_URL
    engine = create_async_engine(database_url, echo=settings.DEBUG, pool_pre_ping=True)
    
    if database_url.startswith("sqlite"):
        # SQLite ignores REFERENCES ... ON DELETE CASCADE unless enabled per connection
        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn: Any, _connection_record: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    
    return engine

async def init_db(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet"""
    # Import models so they are registered on Base.metadata
    from openmusic.db.models import album, collaboration, playlist, song, user  # noqa: F401
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")

engine = create_engine()
store = Store(engine)

def get_store() -> Store:
    """FastAPI dependency returning the shared store"""
    return store
