"""HTTP headers and cookie constants for Roblox requests"""

from .constants import (
    USER_AGENT,
    ORIGIN,
    REFERER,
    NEGOTIATION_HEADER,
    CSRF_HEADER,
    TICKET_HEADER,
    SESSION_COOKIE_NAME,
    WARNING_PREFIX,
)

__all__ = [
    "USER_AGENT",
    "ORIGIN",
    "REFERER",
    "NEGOTIATION_HEADER",
    "CSRF_HEADER",
    "TICKET_HEADER",
    "SESSION_COOKIE_NAME",
    "WARNING_PREFIX",
]
