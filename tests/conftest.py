"""Shared test fixtures and utilities."""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Iterable, List, Sequence

import httpx
import pytest


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("DISPLAY_TIMEZONE", "UTC")

from backend import config  # noqa: E402
from backend.services.query_log import QueryRecord  # noqa: E402


class MockMessage:
    """Simple message stub for handler tests."""

    def __init__(
        self,
        *,
        text: str = "",
        user_id: int = 1,
        username: str | None = "user",
        full_name: str = "Test User",
        message_id: int = 1,
    ) -> None:
        self.text = text
        self.from_user = SimpleNamespace(id=user_id, username=username, full_name=full_name)
        self.message_id = message_id
        self.answers: list[tuple[str, dict]] = []
        self.photos: list[tuple[str, dict]] = []

    async def answer(self, text: str, *args, **kwargs):
        if args:
            text = "".join([text, *map(str, args)])
        self.answers.append((text, kwargs))
        return text

    async def answer_photo(self, photo: str, **kwargs):
        self.photos.append((photo, kwargs))
        return photo


class FakeScalarResult:
    def __init__(self, values: Sequence):
        self._values = list(values)

    def all(self):
        return list(self._values)


class FakeAsyncSession:
    """Lightweight async session mimicking common SQLAlchemy APIs."""

    def __init__(self, *, scalars_results: Iterable[Sequence] | None = None) -> None:
        self._scalars_results = list(scalars_results or [])
        self.added: list = []
        self.statements: list = []
        self.committed = False
        self.flushed = False
        self.rolled_back = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def scalars(self, statement, *_args, **_kwargs):
        self.statements.append(statement)
        if self._scalars_results:
            values = self._scalars_results.pop(0)
        else:
            values = []
        return FakeScalarResult(values)

    def add(self, obj):
        self.added.append(obj)

    class _BeginContext:
        def __init__(self, session: "FakeAsyncSession") -> None:
            self._session = session

        async def __aenter__(self):
            return self._session

        async def __aexit__(self, exc_type, exc, tb):
            if exc_type:
                self._session.rolled_back = True
            else:
                self._session.committed = True
            return False

    def begin(self):
        return self._BeginContext(self)

    async def flush(self):
        self.flushed = True
        for idx, obj in enumerate(self.added, start=1):
            if hasattr(obj, "id") and getattr(obj, "id", None) is None:
                setattr(obj, "id", idx)

    async def commit(self):
        self.committed = True

    async def rollback(self):
        self.rolled_back = True


def make_async_session_stub(*sessions: FakeAsyncSession) -> Callable[[], FakeAsyncSession]:
    """Return a factory producing the provided fake sessions in order."""

    queue = list(sessions)

    def factory() -> FakeAsyncSession:
        if not queue:
            raise RuntimeError("No fake sessions configured")
        return queue.pop(0)

    return factory


class FakeQueryLog:
    """In-memory stand-in for ``QueryLogRepository``."""

    def __init__(self, owner: str = "web:test") -> None:
        self.owner = owner
        self.records: List[QueryRecord] = []

    async def append(self, query: str, success: bool) -> QueryRecord:
        created_at = datetime(2024, 1, 1, 12, 0, len(self.records), tzinfo=timezone.utc)
        record = QueryRecord(
            query=query,
            success=success,
            time=created_at.strftime("%d.%m.%Y %H:%M:%S"),
            created_at=created_at,
        )
        self.records.append(record)
        return record

    async def read_all(self) -> List[QueryRecord]:
        return list(self.records)


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, *, invalid_json: bool = False):
        self.status_code = status_code
        self._json = json_data
        self._invalid_json = invalid_json
        self.request = httpx.Request("GET", "https://roblox.test")

    def raise_for_status(self):
        if self.status_code >= 400:
            response = httpx.Response(self.status_code, request=self.request)
            raise httpx.HTTPStatusError("error", request=self.request, response=response)

    def json(self):
        if self._invalid_json:
            raise ValueError("invalid json")
        return self._json


class FakeClient:
    """Replacement for ``httpx.AsyncClient`` recording every GET request."""

    def __init__(self, responses: List[FakeResponse | Exception], calls: list) -> None:
        # Shared with the fixture so successive clients consume one queue.
        self._responses = responses
        self.calls = calls

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def get(self, url, params=None, **kwargs):
        self.calls.append((url, params))
        if not self._responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_http(monkeypatch) -> Callable[..., list]:
    """Patch ``httpx.AsyncClient`` to serve canned responses in order.

    Returns the list that collects ``(url, params)`` for each request.
    """

    def install(*responses: FakeResponse | Exception) -> list:
        calls: list = []
        queue = list(responses)

        def client_factory(*_args, **_kwargs):
            return FakeClient(queue, calls)

        monkeypatch.setattr(httpx, "AsyncClient", client_factory)
        return calls

    return install


@pytest.fixture(autouse=True)
def _reset_settings():
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def message_factory() -> Callable[..., MockMessage]:
    def factory(**kwargs) -> MockMessage:
        return MockMessage(**kwargs)

    return factory


@pytest.fixture
def query_log() -> FakeQueryLog:
    return FakeQueryLog()


@pytest.fixture
def anyio_backend():  # pragma: no cover - configuration hook for anyio plugin
    return "asyncio"


__all__ = [
    "FakeAsyncSession",
    "FakeClient",
    "FakeQueryLog",
    "FakeResponse",
    "MockMessage",
    "make_async_session_stub",
]
