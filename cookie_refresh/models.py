"""Data models for the cookie refresh flow"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

import httpx


class RefreshState(str, Enum):
    """Stages of a single refresh run"""
    VALIDATING = "validating"
    VERIFYING_INPUT = "verifying_input"
    ACQUIRING_TOKEN = "acquiring_token"
    REFRESHING = "refreshing"
    VERIFYING_RESULT = "verifying_result"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RemoteResponse:
    """Status, headers and body of one Roblox call

    Attributes:
        status_code: HTTP status code
        reason_phrase: HTTP reason phrase (may be empty under HTTP/2)
        headers: Response headers, multi-valued headers preserved
        body: Raw response body
    """
    status_code: int
    reason_phrase: str
    headers: httpx.Headers
    body: bytes = b""

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "RemoteResponse":
        return cls(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=response.headers,
            body=response.content,
        )

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason_phrase}".strip()

    def json(self) -> Any:
        """Decode the body as JSON

        Raises:
            ValueError: If the body is not valid JSON
        """
        return json.loads(self.body)

    def set_cookie_headers(self) -> List[str]:
        return self.headers.get_list("set-cookie")


@dataclass(frozen=True)
class Identity:
    """Account behind a session cookie

    Attributes:
        name: Username
        user_id: Numeric Roblox user id
        display_name: Display name, when Roblox returns one
    """
    name: str
    user_id: int
    display_name: Optional[str] = None


@dataclass
class StrategyAttempt:
    """Outcome of one refresh strategy"""
    strategy: str
    succeeded: bool
    detail: str = ""


@dataclass
class RefreshResult:
    """Final outcome of a refresh run

    Attributes:
        success: Whether a new cookie was produced
        new_cookie: The refreshed cookie on success
        failure_reason: User-facing reason on failure
        identity: Identity resolved for the response
        method_used: Name of the strategy that produced the cookie
        attempts: Every strategy tried, in order
    """
    success: bool
    new_cookie: Optional[str] = None
    failure_reason: Optional[str] = None
    identity: Optional[Identity] = None
    method_used: Optional[str] = None
    attempts: List[StrategyAttempt] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.new_cookie) if self.new_cookie else 0
