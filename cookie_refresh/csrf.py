"""CSRF token acquisition"""

import logging
from typing import Optional

from headers import CSRF_HEADER
from settings import LOGIN_URL
from .errors import UpstreamUnreachable
from .remote import RemoteClient

logger = logging.getLogger(__name__)


async def acquire_csrf_token(remote: RemoteClient, cookie: str) -> Optional[str]:
    """Obtain an anti-forgery token for the following state-changing calls

    Roblox answers the priming login call with 403 and still hands out the
    token, so the header is read whatever the status.

    Args:
        remote: Remote client for this refresh run
        cookie: Session cookie

    Returns:
        CSRF token, or None if it could not be obtained
    """
    try:
        response = await remote.request("POST", LOGIN_URL, cookie=cookie, json={})
    except UpstreamUnreachable as e:
        logger.warning(f"CSRF token request failed: {e.details}")
        return None

    token = response.headers.get(CSRF_HEADER)
    if not token:
        logger.warning(f"No CSRF token in login response ({response.status_line})")
        return None

    logger.debug(f"CSRF token obtained from {response.status_code} response")
    return token
