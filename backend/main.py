"""ASGI entrypoint for the lookup web application."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from bot.config import WEBAPP_HOST, WEBAPP_PORT

from .config import get_settings
from .database import init_models
from .logging import get_logger
from .routers.api import router as api_router
from .routers.pages import router as pages_router

logger = get_logger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:  # pragma: no cover - lifecycle hook
    await init_models()
    logger.info("Web startup complete")
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    logger.info(
        "Starting lookup web app",
        extra={"database": settings.database_url, "users_api": settings.roblox_users_api},
    )

    app = FastAPI(title="Roblox Profile Lookup", version="1.0.0", lifespan=_lifespan)
    app.include_router(pages_router)
    app.include_router(api_router)

    @app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    uvicorn.run("backend.main:app", host=WEBAPP_HOST, port=WEBAPP_PORT)


if __name__ == "__main__":
    run()
