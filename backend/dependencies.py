"""FastAPI dependencies shared by the page and API routers."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AsyncIterator
from uuid import uuid4

from fastapi import Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from .config import get_settings
from .database import session_scope
from .services.query_log import QueryLogRepository

WEB_OWNER_PREFIX = "web:"
CLIENT_COOKIE_MAX_AGE = 60 * 60 * 24 * 365
_CLIENT_ID_RE = re.compile(r"[0-9a-f]{32}")


@dataclass(frozen=True)
class WebClient:
    """Browser identity used to scope the query log."""

    client_id: str
    is_new: bool

    @property
    def owner(self) -> str:
        return f"{WEB_OWNER_PREFIX}{self.client_id}"

    def remember(self, response: Response) -> Response:
        """Set the identifying cookie on *response* when it was just issued."""
        if self.is_new:
            response.set_cookie(
                get_settings().client_cookie_name,
                self.client_id,
                max_age=CLIENT_COOKIE_MAX_AGE,
                httponly=True,
                samesite="lax",
            )
        return response


async def get_db_session() -> AsyncIterator[AsyncSession]:
    async with session_scope() as session:
        yield session


def get_web_client(request: Request) -> WebClient:
    cookie_value = request.cookies.get(get_settings().client_cookie_name, "")
    if _CLIENT_ID_RE.fullmatch(cookie_value):
        return WebClient(client_id=cookie_value, is_new=False)
    return WebClient(client_id=uuid4().hex, is_new=True)


def get_query_log(
    client: WebClient = Depends(get_web_client),
    session: AsyncSession = Depends(get_db_session),
) -> QueryLogRepository:
    return QueryLogRepository(session, client.owner)


__all__ = [
    "WEB_OWNER_PREFIX",
    "WebClient",
    "get_db_session",
    "get_query_log",
    "get_web_client",
]
