"""HTML views: search form, profile results and the query log."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from ..dependencies import WebClient, get_query_log, get_web_client
from ..logging import get_logger
from ..rendering import (
    render_logs_page,
    render_results_error,
    render_results_page,
    render_search_page,
    results_url,
)
from ..services.lookup import MissingQueryError, list_queries, resolve_query, submit_query
from ..services.query_log import QueryLogRepository
from ..services.roblox import RobloxLookupError, RobloxUserNotFoundError

router = APIRouter(tags=["pages"])
logger = get_logger(__name__)

FETCH_ERROR_PREFIX = "Error fetching profile: "


@router.get("/", response_class=HTMLResponse)
async def search_page(client: WebClient = Depends(get_web_client)) -> Response:
    return client.remember(HTMLResponse(render_search_page()))


@router.post("/search")
async def submit_search(
    query: str = Form(""),
    client: WebClient = Depends(get_web_client),
    repository: QueryLogRepository = Depends(get_query_log),
) -> Response:
    try:
        await submit_query(repository, query)
    except MissingQueryError as exc:
        response = HTMLResponse(
            render_search_page(error=str(exc), value=query),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
        return client.remember(response)

    redirect = RedirectResponse(results_url(query), status_code=status.HTTP_303_SEE_OTHER)
    return client.remember(redirect)


@router.get("/results", response_class=HTMLResponse)
async def results_page(
    query: Optional[str] = None,
    client: WebClient = Depends(get_web_client),
    repository: QueryLogRepository = Depends(get_query_log),
) -> Response:
    try:
        lookup = await resolve_query(repository, query)
    except MissingQueryError as exc:
        response = HTMLResponse(
            render_results_error(str(exc)), status_code=status.HTTP_400_BAD_REQUEST
        )
    except RobloxUserNotFoundError as exc:
        response = HTMLResponse(
            render_results_error(f"{FETCH_ERROR_PREFIX}{exc}"),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    except RobloxLookupError as exc:
        response = HTMLResponse(
            render_results_error(f"{FETCH_ERROR_PREFIX}{exc}"),
            status_code=status.HTTP_502_BAD_GATEWAY,
        )
    else:
        response = HTMLResponse(render_results_page(lookup))
    logger.info(
        "Results page rendered",
        extra={"owner": client.owner, "query": query, "status_code": response.status_code},
    )
    return client.remember(response)


@router.get("/logs", response_class=HTMLResponse)
async def logs_page(
    client: WebClient = Depends(get_web_client),
    repository: QueryLogRepository = Depends(get_query_log),
) -> Response:
    records = await list_queries(repository)
    return client.remember(HTMLResponse(render_logs_page(records)))
