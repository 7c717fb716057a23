"""
Pytest config.

The repo uses a flat layout (``settings``, ``cookie_refresh``, ``proxy`` at the
root), so pin the repo root on sys.path for runs that do not install it.

``FakeRoblox`` stands in for the Roblox HTTP API through httpx.MockTransport.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

import httpx
import pytest


def _ensure_repo_root_on_syspath() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_ensure_repo_root_on_syspath()

from cookie_refresh import RemoteClient  # noqa: E402
from headers import WARNING_PREFIX  # noqa: E402
import settings  # noqa: E402

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


def make_cookie(length: int = 180, tag: str = "abc") -> str:
    """Build a well-formed cookie of an exact length"""
    filler = length - len(WARNING_PREFIX) - len(tag)
    assert filler >= 0
    return f"{WARNING_PREFIX}{tag}{'A' * filler}"


def session_cookie_header(value: str) -> str:
    return f".ROBLOSECURITY={value}; domain=.roblox.com; expires=Fri, 01 Jan 2100 00:00:00 GMT; path=/; secure; HttpOnly"


class FakeRoblox:
    """Routes (method, url) pairs to canned responses and records every request"""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, url: str, route: Route) -> None:
        self.routes[(method, url)] = route

    def calls(self, method: str, url: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and str(r.url) == url]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, str(request.url)))
        if route is None:
            return httpx.Response(404, json={"errors": [{"message": "NotFound"}]})
        if callable(route):
            return route(request)
        return route

    def install_happy_path(
        self,
        old_cookie: str,
        new_cookie: str,
        csrf_token: str = "tok123",
        ticket: str = "ticket456",
        username: str = "Alice",
    ) -> None:
        """Register a full successful authentication-ticket exchange"""

        def who_am_i(request: httpx.Request) -> httpx.Response:
            if request.headers.get("cookie") in (f".ROBLOSECURITY={old_cookie}", f".ROBLOSECURITY={new_cookie}"):
                return httpx.Response(200, json={"id": 1234, "name": username, "displayName": username})
            return httpx.Response(401, json={"errors": [{"code": 0, "message": "Unauthorized"}]})

        def issue(request: httpx.Request) -> httpx.Response:
            if request.headers.get("x-csrf-token") != csrf_token:
                return httpx.Response(403, headers={"x-csrf-token": csrf_token})
            return httpx.Response(200, headers={"rbx-authentication-ticket": ticket})

        def redeem(request: httpx.Request) -> httpx.Response:
            if ticket.encode() not in request.content:
                return httpx.Response(400, json={"errors": [{"code": 2, "message": "Ticket invalid"}]})
            return httpx.Response(200, headers=[("set-cookie", session_cookie_header(new_cookie))], json={})

        self.add("GET", settings.AUTHENTICATED_USER_URL, who_am_i)
        self.add("POST", settings.LOGIN_URL, httpx.Response(403, headers={"x-csrf-token": csrf_token}))
        self.add("POST", settings.AUTH_TICKET_URL, issue)
        self.add("POST", settings.AUTH_TICKET_REDEEM_URL, redeem)


@pytest.fixture
def roblox() -> FakeRoblox:
    return FakeRoblox()


@pytest.fixture
async def remote(roblox: FakeRoblox):
    async with httpx.AsyncClient(transport=httpx.MockTransport(roblox.handler)) as client:
        yield RemoteClient(client)
