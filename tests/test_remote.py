from __future__ import annotations

import httpx
import pytest

from cookie_refresh import RemoteClient, UpstreamUnreachable


async def test_request_builds_browser_and_negotiation_headers(roblox, remote) -> None:
    roblox.add("POST", "https://auth.roblox.com/x", httpx.Response(200))

    response = await remote.request(
        "POST",
        "https://auth.roblox.com/x",
        cookie="abc",
        csrf_token="tok",
        negotiate=True,
        json={},
    )

    assert response.status_code == 200
    sent = roblox.requests[0]
    assert sent.headers["user-agent"].startswith("Mozilla/5.0")
    assert sent.headers["cookie"] == ".ROBLOSECURITY=abc"
    assert sent.headers["x-csrf-token"] == "tok"
    assert sent.headers["origin"] == "https://www.roblox.com"
    assert sent.headers["referer"] == "https://www.roblox.com/"
    assert sent.headers["rbxauthenticationnegotiation"] == "1"
    assert sent.headers["content-type"] == "application/json"


async def test_plain_get_only_carries_user_agent_and_cookie(roblox, remote) -> None:
    roblox.add("GET", "https://users.roblox.com/y", httpx.Response(401))

    response = await remote.request("GET", "https://users.roblox.com/y", cookie="abc")

    assert response.status_code == 401
    sent = roblox.requests[0]
    assert "x-csrf-token" not in sent.headers
    assert "origin" not in sent.headers
    assert "rbxauthenticationnegotiation" not in sent.headers


async def test_set_cookie_from_previous_call_is_not_replayed(roblox, remote) -> None:
    roblox.add(
        "POST",
        "https://auth.roblox.com/a",
        httpx.Response(200, headers=[("set-cookie", ".ROBLOSECURITY=leaked; domain=.roblox.com; path=/")]),
    )
    roblox.add("GET", "https://auth.roblox.com/b", httpx.Response(200))

    await remote.request("POST", "https://auth.roblox.com/a", json={})
    await remote.request("GET", "https://auth.roblox.com/b")

    assert "cookie" not in roblox.requests[1].headers


async def test_transport_error_becomes_upstream_unreachable() -> None:
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(boom)) as client:
        remote = RemoteClient(client)
        with pytest.raises(UpstreamUnreachable) as exc:
            await remote.request("GET", "https://users.roblox.com/v1/users/authenticated")

    assert "connection refused" in exc.value.details


async def test_timeout_becomes_upstream_unreachable() -> None:
    def slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(slow)) as client:
        remote = RemoteClient(client)
        with pytest.raises(UpstreamUnreachable) as exc:
            await remote.request("POST", "https://auth.roblox.com/v2/login", json={})

    assert "timed out" in exc.value.details
