"""Error taxonomy for the cookie refresh flow

Every expected failure is a ``RefreshError``. The HTTP layer turns these into
400 responses using ``error`` and ``details``; anything else is a 500.
"""

from typing import Any, Dict, Optional


class RefreshError(Exception):
    """Base class for expected refresh failures"""

    error = "Cookie refresh failed"

    def __init__(self, details: Optional[str] = None, error: Optional[str] = None):
        if error is not None:
            self.error = error
        self.details = details
        super().__init__(f"{self.error}: {details}" if details else self.error)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize into the public error body"""
        body: Dict[str, Any] = {"error": self.error}
        if self.details:
            body["details"] = self.details
        return body


class MissingCredential(RefreshError):
    error = "No cookie provided"


class MalformedCredential(RefreshError):
    error = "Invalid cookie format"


class ExpiredOrInvalid(RefreshError):
    error = "Cookie is expired or invalid"


class UpstreamUnreachable(RefreshError):
    """Network failure, timeout or unexpected status from Roblox"""

    error = "Roblox is unreachable"

    def __init__(self, details: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(details)


class CookieValidationFailed(RefreshError):
    """The input cookie was rejected by the identity lookup"""

    error = "Cookie validation failed"


class NoCsrfToken(RefreshError):
    error = "Failed to get CSRF token"


class TicketIssuanceFailed(RefreshError):
    error = "Failed to get authentication ticket"


class TicketRedemptionFailed(RefreshError):
    error = "Failed to redeem authentication ticket"


class NoRefreshPossible(RefreshError):
    error = "Failed to refresh cookie"
