"""Single entry point for every call made to Roblox

All steps of the refresh flow go through ``RemoteClient.request`` so header
construction lives in one place and network errors never escape as raw
httpx exceptions.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from headers import (
    CSRF_HEADER,
    NEGOTIATION_HEADER,
    ORIGIN,
    REFERER,
    SESSION_COOKIE_NAME,
    USER_AGENT,
)
from settings import CONNECT_TIMEOUT, REQUEST_TIMEOUT
from .errors import UpstreamUnreachable
from .models import RemoteResponse

logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    """Create an httpx client with the configured timeouts

    Callers own the client and must close it (``async with``).
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(REQUEST_TIMEOUT, connect=CONNECT_TIMEOUT),
        follow_redirects=False,
    )


class RemoteClient:
    """Roblox HTTP caller bound to one refresh run"""

    def __init__(self, client: httpx.AsyncClient, user_agent: str = USER_AGENT):
        """
        Args:
            client: httpx client used for the calls
            user_agent: Browser User-Agent sent on every request
        """
        self.client = client
        self.user_agent = user_agent

    def build_headers(
        self,
        cookie: Optional[str] = None,
        csrf_token: Optional[str] = None,
        negotiate: bool = False,
        has_body: bool = False,
    ) -> Dict[str, str]:
        """Build request headers for a Roblox call

        Args:
            cookie: Session cookie to present
            csrf_token: CSRF token for state-changing calls
            negotiate: Add origin, referer and the negotiation marker
            has_body: Request carries a JSON body

        Returns:
            Header dictionary
        """
        headers = {"User-Agent": self.user_agent}
        if cookie:
            headers["Cookie"] = f"{SESSION_COOKIE_NAME}={cookie}"
        if csrf_token:
            headers[CSRF_HEADER] = csrf_token
        if has_body:
            headers["Content-Type"] = "application/json"
        if negotiate:
            headers["Origin"] = ORIGIN
            headers["Referer"] = REFERER
            headers[NEGOTIATION_HEADER] = "1"
        return headers

    async def request(
        self,
        method: str,
        url: str,
        *,
        cookie: Optional[str] = None,
        csrf_token: Optional[str] = None,
        negotiate: bool = False,
        json: Optional[Any] = None,
    ) -> RemoteResponse:
        """Perform one call and return its status, headers and body

        Non-2xx statuses are returned, not raised.

        Args:
            method: HTTP method
            url: Absolute URL
            cookie: Session cookie to present
            csrf_token: CSRF token for state-changing calls
            negotiate: Add origin, referer and the negotiation marker
            json: Optional JSON body

        Returns:
            RemoteResponse

        Raises:
            UpstreamUnreachable: On timeout or any transport error
        """
        headers = self.build_headers(
            cookie=cookie,
            csrf_token=csrf_token,
            negotiate=negotiate,
            has_body=json is not None,
        )

        # The session cookie is only ever sent through the explicit header
        self.client.cookies.clear()

        try:
            response = await self.client.request(
                method,
                url,
                headers=headers,
                json=json,
                follow_redirects=False,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {url} timed out")
            raise UpstreamUnreachable(f"{method} {url} timed out") from e
        except httpx.RequestError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise UpstreamUnreachable(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return RemoteResponse.from_httpx(response)
