"""
Logging utilities for keeping session cookies out of logs.
"""
from typing import Optional

from headers import WARNING_PREFIX


def redact_cookie(cookie: Optional[str], visible: int = 6) -> str:
    """Render a cookie for logs without exposing it

    Args:
        cookie: Session cookie
        visible: Number of trailing characters to keep

    Returns:
        Redacted representation with the cookie length
    """
    if not cookie:
        return "<empty>"
    body = cookie[len(WARNING_PREFIX):] if cookie.startswith(WARNING_PREFIX) else cookie
    if len(body) <= visible * 2:
        return f"[REDACTED] ({len(cookie)} chars)"
    return f"[REDACTED]...{body[-visible:]} ({len(cookie)} chars)"
