"""Session cookie verification against the identity lookup"""

import logging

from settings import AUTHENTICATED_USER_URL
from .errors import ExpiredOrInvalid, UpstreamUnreachable
from .models import Identity
from .remote import RemoteClient

logger = logging.getLogger(__name__)


async def verify_cookie(remote: RemoteClient, cookie: str) -> Identity:
    """Check that Roblox accepts a cookie and resolve its account

    Args:
        remote: Remote client for this refresh run
        cookie: Session cookie to check

    Returns:
        Identity of the account

    Raises:
        ExpiredOrInvalid: If Roblox answers 401
        UpstreamUnreachable: On any other status, an unusable body, or a network failure
    """
    response = await remote.request("GET", AUTHENTICATED_USER_URL, cookie=cookie)

    if response.status_code == 401:
        raise ExpiredOrInvalid()

    if response.status_code != 200:
        raise UpstreamUnreachable(
            f"Identity lookup returned {response.status_line}",
            status_code=response.status_code,
        )

    try:
        data = response.json()
        identity = Identity(
            name=str(data["name"]),
            user_id=int(data["id"]),
            display_name=data.get("displayName"),
        )
    except (ValueError, TypeError, KeyError, AttributeError) as e:
        raise UpstreamUnreachable(
            f"Identity lookup returned an unexpected body: {e}",
            status_code=response.status_code,
        ) from e

    logger.debug(f"Cookie belongs to user {identity.user_id}")
    return identity
