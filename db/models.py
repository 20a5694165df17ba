"""SQLAlchemy models shared between the Telegram bot and the web backend."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

from db.constants import QUERY_LOGS_TABLE, QUERY_OWNER_MAX_LENGTH


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


Base = declarative_base()


class QueryLog(Base):
    """One lookup attempt. Rows are only ever inserted."""

    __tablename__ = QUERY_LOGS_TABLE

    id = Column(Integer, primary_key=True)
    owner = Column(String(QUERY_OWNER_MAX_LENGTH), index=True, nullable=False)
    query = Column(Text, nullable=False)
    success = Column(Boolean, default=False, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        default=_utcnow,
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            f"<QueryLog id={self.id} owner={self.owner!r} "
            f"query={self.query!r} success={self.success}>"
        )
