"""
Cookie refresh endpoint.
"""
import json
import logging
import uuid
from typing import Any, AsyncIterator, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from cookie_refresh import (
    CookieRefresher,
    MalformedCredential,
    RefreshError,
    RemoteClient,
    create_http_client,
)
from ..logging_utils import redact_cookie
from ..models import ErrorResponse, RefreshRequest, RefreshResponse

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_remote_client() -> AsyncIterator[RemoteClient]:
    """Provide a fresh remote client per request

    Nothing, including the httpx cookie jar, is shared between requests.
    """
    async with create_http_client() as client:
        yield RemoteClient(client)


async def _read_payload(request: Request) -> Dict[str, Any]:
    """Read the JSON body, treating empty or non-object bodies as {}"""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.debug("Request body is not valid JSON")
        return {}
    return payload if isinstance(payload, dict) else {}


def _error(status_code: int, error: RefreshError) -> JSONResponse:
    body = ErrorResponse(**error.to_dict())
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post("/refresh")
async def refresh_cookie(request: Request, remote: RemoteClient = Depends(get_remote_client)):
    """Exchange a session cookie for a freshly issued one"""
    request_id = str(uuid.uuid4())[:8]

    try:
        payload = await _read_payload(request)
        try:
            body = RefreshRequest.model_validate(payload)
        except ValidationError:
            return _error(400, MalformedCredential("Cookie must be a string"))

        logger.info(f"[{request_id}] Starting cookie refresh for {redact_cookie(body.cookie)}")
        refresher = CookieRefresher(remote)
        result = await refresher.refresh(body.cookie)

    except RefreshError as e:
        logger.info(f"[{request_id}] Refresh rejected: {e}")
        return _error(400, e)
    except Exception as e:
        logger.exception(f"[{request_id}] Unexpected error during refresh")
        return JSONResponse(status_code=500, content={"error": str(e)})

    logger.info(f"[{request_id}] Refreshed cookie via {result.method_used}: {redact_cookie(result.new_cookie)}")
    response = RefreshResponse(
        new_cookie=result.new_cookie,
        length=result.length,
        username=result.identity.name if result.identity else None,
        method=result.method_used,
        message=f"Cookie refreshed successfully via {result.method_used}",
    )
    return response.model_dump(by_alias=True)
