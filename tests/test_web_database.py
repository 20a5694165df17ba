"""Route tests running the real session dependency against SQLite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backend import database
from backend.main import app
from backend.services import lookup as lookup_service
from backend.services.roblox import RobloxProfile, RobloxUserNotFoundError


@pytest.fixture
def sqlite_client(monkeypatch):
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    session_factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    monkeypatch.setattr(database, "async_engine", engine)
    monkeypatch.setattr(database, "async_session", session_factory)
    app.dependency_overrides.clear()

    # Entering the client runs the lifespan hook, which creates the tables.
    with TestClient(app) as client:
        yield client
        client.portal.call(engine.dispose)


def test_records_survive_successful_and_failed_lookups(sqlite_client, monkeypatch):
    profile = RobloxProfile(id=156, name="builderman", display_name="Builderman")
    monkeypatch.setattr(
        lookup_service,
        "resolve_profile",
        AsyncMock(
            side_effect=[
                profile,
                RobloxUserNotFoundError("No user found for that username."),
            ]
        ),
    )
    monkeypatch.setattr(lookup_service, "fetch_thumbnail", AsyncMock(return_value="placeholder.png"))

    submitted = sqlite_client.post(
        "/search", data={"query": "builderman"}, follow_redirects=False
    )
    assert submitted.status_code == 303

    results = sqlite_client.get(submitted.headers["location"])
    assert results.status_code == 200
    assert "User ID: 156" in results.text

    missing = sqlite_client.get("/api/lookup", params={"query": "ghost"})
    assert missing.status_code == 404

    logs = sqlite_client.get("/api/logs").json()
    assert [(item["query"], item["success"]) for item in logs] == [
        ("ghost", False),
        ("builderman", True),
        ("builderman", False),
    ]


def test_logs_are_scoped_to_the_browser(sqlite_client):
    sqlite_client.post("/search", data={"query": "mine"}, follow_redirects=False)

    client_id = sqlite_client.cookies.get("lookup_client")
    assert client_id

    sqlite_client.cookies.clear()
    assert sqlite_client.get("/api/logs").json() == []

    sqlite_client.cookies.clear()
    sqlite_client.cookies.set("lookup_client", client_id)
    assert [item["query"] for item in sqlite_client.get("/api/logs").json()] == ["mine"]
