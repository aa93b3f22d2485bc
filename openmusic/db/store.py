# ============================================================================
# FILE: openmusic/db/store.py
# ============================================================================
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine
import logging

logger = logging.getLogger(__name__)

@dataclass
class QueryResult:
    """Rows returned by a statement plus the number of rows it affected"""
    rows: List[Dict[str, Any]] = field(default_factory=list)
    row_count: int = 0

class Store:
    """
    Thin adapter over an async SQLAlchemy engine.

    Every call to ``query`` runs a single parameterized statement in its own
    transaction. Parameters are bound by name (``:id``) and never formatted
    into the SQL text.
    """
    
    def __init__(self, engine: AsyncEngine):
        self.engine = engine
    
    async def query(self, sql: str, params: Optional[Dict[str, Any]] = None) -> QueryResult:
        """Execute a statement and return its rows and affected row count"""
        async with self.engine.begin() as conn:
            result = await conn.execute(text(sql), params or {})
            if result.returns_rows:
                rows = [dict(row) for row in result.mappings().all()]
                return QueryResult(rows=rows, row_count=len(rows))
            return QueryResult(rows=[], row_count=result.rowcount)
    
    async def close(self) -> None:
        await self.engine.dispose()
