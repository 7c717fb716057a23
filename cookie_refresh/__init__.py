"""Roblox session cookie refresh package"""

from .errors import (
    CookieValidationFailed,
    ExpiredOrInvalid,
    MalformedCredential,
    MissingCredential,
    NoCsrfToken,
    NoRefreshPossible,
    RefreshError,
    TicketIssuanceFailed,
    TicketRedemptionFailed,
    UpstreamUnreachable,
)
from .models import Identity, RefreshResult, RefreshState, RemoteResponse, StrategyAttempt
from .orchestrator import CookieRefresher
from .remote import RemoteClient, create_http_client
from .strategies import STRATEGIES, RefreshStrategy, StrategyContext, build_strategies
from .validators import is_cookie_format, validate_cookie

__all__ = [
    "CookieRefresher",
    "RemoteClient",
    "create_http_client",
    "RefreshStrategy",
    "StrategyContext",
    "STRATEGIES",
    "build_strategies",
    "validate_cookie",
    "is_cookie_format",
    "Identity",
    "RefreshResult",
    "RefreshState",
    "RemoteResponse",
    "StrategyAttempt",
    "RefreshError",
    "MissingCredential",
    "MalformedCredential",
    "CookieValidationFailed",
    "ExpiredOrInvalid",
    "UpstreamUnreachable",
    "NoCsrfToken",
    "TicketIssuanceFailed",
    "TicketRedemptionFailed",
    "NoRefreshPossible",
]
