"""One-shot refresh handler for CLI"""

import asyncio
import sys
from typing import Optional

from cookie_refresh import CookieRefresher, RefreshResult, RemoteClient, create_http_client
from cli.status_display import show_refresh_result


async def refresh_once(raw_cookie: Optional[str]) -> RefreshResult:
    """Run a single refresh with its own HTTP client

    Args:
        raw_cookie: Cookie as supplied by the user

    Returns:
        RefreshResult, successful or not
    """
    async with create_http_client() as client:
        refresher = CookieRefresher(RemoteClient(client))
        return await refresher.refresh_result(raw_cookie)


def read_cookie(cookie_file: Optional[str]) -> str:
    """Read a cookie from a file, or from stdin when no file is given"""
    if cookie_file:
        with open(cookie_file, 'r', encoding='utf-8') as f:
            return f.read()
    return sys.stdin.read()


def run_refresh(cookie_file: Optional[str], console) -> int:
    """
    Refresh a cookie and report the outcome

    The new cookie is written to stdout so it can be piped; everything else
    goes to the console.

    Args:
        cookie_file: Optional path to a file holding the cookie
        console: Rich console for output

    Returns:
        Process exit code
    """
    try:
        raw_cookie = read_cookie(cookie_file)
    except OSError as e:
        console.print(f"[red]ERROR:[/red] Could not read cookie: {e}")
        return 1

    result = asyncio.run(refresh_once(raw_cookie))
    show_refresh_result(result, console)

    if not result.success:
        return 1

    print(result.new_cookie)
    return 0
