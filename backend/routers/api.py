"""JSON endpoints mirroring the HTML views."""
from __future__ import annotations

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..dependencies import WebClient, get_query_log, get_web_client
from ..services.lookup import MissingQueryError, list_queries, resolve_query, submit_query
from ..services.query_log import QueryLogRepository
from ..services.roblox import RobloxLookupError, RobloxUserNotFoundError

router = APIRouter(prefix="/api", tags=["api"])


class ProfileResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    display_name: str = Field(..., alias="displayName")
    thumbnail_url: str = Field(..., alias="thumbnailUrl")


class QueryRecordResponse(BaseModel):
    query: str
    success: bool
    time: str


def _error_response(client: WebClient, status_code: int, message: str) -> JSONResponse:
    # Errors are returned rather than raised so the session scope still
    # commits the pending record.
    return client.remember(JSONResponse({"detail": message}, status_code=status_code))


@router.get(
    "/lookup",
    response_model=ProfileResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Empty query"},
        status.HTTP_404_NOT_FOUND: {"description": "No such Roblox user"},
        status.HTTP_502_BAD_GATEWAY: {"description": "Roblox API request failed"},
    },
)
async def lookup_profile(
    response: Response,
    query: Optional[str] = None,
    client: WebClient = Depends(get_web_client),
    repository: QueryLogRepository = Depends(get_query_log),
) -> Union[ProfileResponse, JSONResponse]:
    try:
        await submit_query(repository, query)
        lookup = await resolve_query(repository, query)
    except MissingQueryError as exc:
        return _error_response(client, status.HTTP_400_BAD_REQUEST, str(exc))
    except RobloxUserNotFoundError as exc:
        return _error_response(client, status.HTTP_404_NOT_FOUND, str(exc))
    except RobloxLookupError as exc:
        return _error_response(client, status.HTTP_502_BAD_GATEWAY, str(exc))

    client.remember(response)
    return ProfileResponse(
        id=lookup.profile.id,
        name=lookup.profile.name,
        display_name=lookup.profile.display_name,
        thumbnail_url=lookup.thumbnail_url,
    )


@router.get("/logs", response_model=List[QueryRecordResponse])
async def query_logs(
    response: Response,
    client: WebClient = Depends(get_web_client),
    repository: QueryLogRepository = Depends(get_query_log),
) -> List[QueryRecordResponse]:
    client.remember(response)
    records = await list_queries(repository)
    return [
        QueryRecordResponse(query=record.query, success=record.success, time=record.time)
        for record in records
    ]
