"""Session cookie validation utilities"""

import re
from typing import Optional

from headers import WARNING_PREFIX
from settings import COOKIE_MAX_LENGTH, COOKIE_MIN_LENGTH
from .errors import MalformedCredential, MissingCredential

# Characters that sneak in when a cookie is copied out of dev tools
_CONTROL_CHARS = str.maketrans("", "", "\r\n\t")

# Cookie header values must be printable ASCII
_PRINTABLE_ASCII = re.compile(r'^[\x20-\x7e]+$')


def clean_cookie(raw: Optional[str]) -> str:
    """Remove control characters and surrounding whitespace

    Args:
        raw: Cookie as supplied by the caller

    Returns:
        The cleaned cookie string, possibly empty
    """
    if not raw:
        return ""
    return raw.translate(_CONTROL_CHARS).strip()


def validate_cookie(
    raw: Optional[str],
    min_length: int = COOKIE_MIN_LENGTH,
    max_length: int = COOKIE_MAX_LENGTH,
) -> str:
    """Check the shape of a session cookie

    Args:
        raw: Cookie as supplied by the caller
        min_length: Shortest accepted cookie (inclusive)
        max_length: Longest accepted cookie (inclusive)

    Returns:
        The cleaned cookie

    Raises:
        MissingCredential: If nothing usable was supplied
        MalformedCredential: If the warning prefix is missing, the length is out of range,
            or the cookie holds characters that cannot go into a Cookie header
    """
    cookie = clean_cookie(raw)
    if not cookie:
        raise MissingCredential()

    if WARNING_PREFIX not in cookie:
        raise MalformedCredential(f"Cookie must start with {WARNING_PREFIX}")

    if not min_length <= len(cookie) <= max_length:
        raise MalformedCredential(
            f"Cookie length {len(cookie)} is outside the accepted range {min_length}-{max_length}"
        )

    if _PRINTABLE_ASCII.match(cookie) is None:
        raise MalformedCredential("Cookie must contain only printable ASCII characters")

    return cookie


def is_cookie_format(raw: Optional[str]) -> bool:
    """Check if a string looks like a session cookie

    Args:
        raw: The string to check

    Returns:
        True if ``validate_cookie`` would accept it, False otherwise
    """
    try:
        validate_cookie(raw)
    except (MissingCredential, MalformedCredential):
        return False
    return True
