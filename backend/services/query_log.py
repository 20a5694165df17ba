"""Append-only storage of lookup attempts."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bot.utils.time import format_display_time
from db import QueryLog

from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class QueryRecord:
    """A log entry as shown to the client that made the query."""

    query: str
    success: bool
    time: str
    created_at: datetime

    @classmethod
    def from_model(cls, entry: QueryLog) -> "QueryRecord":
        return cls(
            query=entry.query,
            success=bool(entry.success),
            time=format_display_time(entry.created_at),
            created_at=entry.created_at,
        )


class QueryLogRepository:
    """Repository over the ``query_logs`` table scoped to a single owner.

    Records are never updated or removed; every call to :meth:`append`
    creates a new row.
    """

    def __init__(self, session: AsyncSession, owner: str) -> None:
        self._session = session
        self._owner = owner

    @property
    def owner(self) -> str:
        return self._owner

    async def append(self, query: str, success: bool) -> QueryRecord:
        entry = QueryLog(
            owner=self._owner,
            query=query,
            success=success,
            created_at=datetime.now(tz=timezone.utc),
        )
        self._session.add(entry)
        await self._session.flush()
        logger.info(
            "Query logged",
            extra={"owner": self._owner, "query": query, "success": success},
        )
        return QueryRecord.from_model(entry)

    async def read_all(self) -> List[QueryRecord]:
        """Return the owner's records, oldest first."""
        result = await self._session.scalars(
            select(QueryLog)
            .where(QueryLog.owner == self._owner)
            .order_by(QueryLog.created_at.asc(), QueryLog.id.asc())
        )
        return [QueryRecord.from_model(entry) for entry in result.all()]


__all__ = ["QueryLogRepository", "QueryRecord"]
