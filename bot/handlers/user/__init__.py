"""User handlers routers aggregation."""

from __future__ import annotations

from .logs import router as logs_router
from .lookup import router as lookup_router
from .start import router as start_router

# The lookup router accepts any plain text, so it has to come last.
routers = [
    start_router,
    logs_router,
    lookup_router,
]

__all__ = ["routers"]
