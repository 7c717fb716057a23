"""Authentication ticket issuance and redemption"""

import logging
from typing import List, Optional

from headers import SESSION_COOKIE_NAME, TICKET_HEADER
from settings import AUTH_TICKET_REDEEM_URL, AUTH_TICKET_URL
from .errors import UpstreamUnreachable
from .models import RemoteResponse
from .remote import RemoteClient

logger = logging.getLogger(__name__)


def _note(notes: Optional[List[str]], message: str) -> None:
    logger.warning(message)
    if notes is not None:
        notes.append(message)


def extract_session_cookie(response: RemoteResponse) -> Optional[str]:
    """Pull the session cookie value out of the Set-Cookie headers

    Args:
        response: Response to inspect

    Returns:
        The cookie value, or None if no non-empty session cookie was set
    """
    for header in response.set_cookie_headers():
        pair = header.split(";", 1)[0]
        name, sep, value = pair.partition("=")
        if not sep or name.strip() != SESSION_COOKIE_NAME:
            continue
        value = value.strip()
        # An empty value is Roblox clearing the cookie
        if value:
            return value
    return None


async def issue_ticket(
    remote: RemoteClient,
    cookie: str,
    csrf_token: str,
    notes: Optional[List[str]] = None,
) -> Optional[str]:
    """Request a short-lived authentication ticket

    Args:
        remote: Remote client for this refresh run
        cookie: Session cookie the ticket is bound to
        csrf_token: CSRF token for this run
        notes: Optional list receiving a diagnostic line on failure

    Returns:
        The ticket, or None on any failure
    """
    try:
        response = await remote.request(
            "POST",
            AUTH_TICKET_URL,
            cookie=cookie,
            csrf_token=csrf_token,
            negotiate=True,
            json={},
        )
    except UpstreamUnreachable as e:
        _note(notes, f"ticket issuance failed: {e.details}")
        return None

    if response.status_code != 200:
        _note(notes, f"ticket issuance failed: {response.status_line}")
        return None

    ticket = response.headers.get(TICKET_HEADER)
    if not ticket:
        _note(notes, f"ticket issuance failed: no {TICKET_HEADER} header")
        return None

    logger.debug("Authentication ticket obtained")
    return ticket


async def redeem_ticket(
    remote: RemoteClient,
    ticket: str,
    csrf_token: str,
    notes: Optional[List[str]] = None,
) -> Optional[str]:
    """Exchange an authentication ticket for a new session cookie

    The new cookie only ever arrives in Set-Cookie, never in the body.

    Args:
        remote: Remote client for this refresh run
        ticket: Ticket from ``issue_ticket``
        csrf_token: CSRF token for this run
        notes: Optional list receiving a diagnostic line on failure

    Returns:
        The new cookie, or None on any failure
    """
    try:
        response = await remote.request(
            "POST",
            AUTH_TICKET_REDEEM_URL,
            csrf_token=csrf_token,
            negotiate=True,
            json={"authenticationTicket": ticket},
        )
    except UpstreamUnreachable as e:
        _note(notes, f"ticket redemption failed: {e.details}")
        return None

    new_cookie = extract_session_cookie(response)
    if not new_cookie:
        _note(notes, f"ticket redemption failed: no session cookie in {response.status_line} response")
        return None

    logger.debug("Session cookie extracted from redemption response")
    return new_cookie
