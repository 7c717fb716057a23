"""
Refresh strategies tried by the orchestrator.

Each strategy is one independent way of getting Roblox to hand out a new
session cookie. The orchestrator tries them in priority order and keeps the
first one that returns a cookie different from the input.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Type

from settings import REAUTHENTICATE_URL, SETTINGS_PROBE_URL
from .errors import TicketIssuanceFailed, TicketRedemptionFailed, UpstreamUnreachable
from .remote import RemoteClient
from .tickets import extract_session_cookie, issue_ticket, redeem_ticket

logger = logging.getLogger(__name__)


@dataclass
class StrategyContext:
    """Inputs shared by every strategy in one refresh run

    Attributes:
        remote: Remote client for this run
        cookie: The original session cookie
        csrf_token: CSRF token acquired for this run
        notes: Diagnostics appended by the running strategy
    """
    remote: RemoteClient
    cookie: str
    csrf_token: str
    notes: List[str] = field(default_factory=list)


class RefreshStrategy(ABC):
    """Abstract base class for refresh strategies"""

    name: str = ""

    @abstractmethod
    async def attempt(self, context: StrategyContext) -> Optional[str]:
        """Try to obtain a new session cookie

        Args:
            context: Shared inputs for this run

        Returns:
            A session cookie, or None if this strategy produced nothing

        Raises:
            RefreshError: With details explaining the failure
        """
        pass


class AuthenticationTicketStrategy(RefreshStrategy):
    """Issue an authentication ticket and redeem it for a new cookie"""

    name = "authentication_ticket"

    async def attempt(self, context: StrategyContext) -> Optional[str]:
        ticket = await issue_ticket(context.remote, context.cookie, context.csrf_token, context.notes)
        if not ticket:
            raise TicketIssuanceFailed("; ".join(context.notes) or None)

        new_cookie = await redeem_ticket(context.remote, ticket, context.csrf_token, context.notes)
        if not new_cookie:
            raise TicketRedemptionFailed("; ".join(context.notes) or None)
        return new_cookie


class HarvestingStrategy(RefreshStrategy):
    """Call an authenticated endpoint and keep any session cookie it sets"""

    method = "GET"
    url = ""
    send_csrf = False

    async def attempt(self, context: StrategyContext) -> Optional[str]:
        try:
            response = await context.remote.request(
                self.method,
                self.url,
                cookie=context.cookie,
                csrf_token=context.csrf_token if self.send_csrf else None,
                negotiate=self.send_csrf,
                json={} if self.method == "POST" else None,
            )
        except UpstreamUnreachable as e:
            context.notes.append(str(e.details))
            return None

        new_cookie = extract_session_cookie(response)
        if not new_cookie:
            context.notes.append(f"no session cookie in {response.status_line} response")
        return new_cookie


class ReauthenticateStrategy(HarvestingStrategy):
    """Sign out other sessions and take the re-issued cookie

    Side effect: Roblox ends every other session of the account even when no
    renewed cookie can be read from the response.
    """

    name = "reauthenticate"
    method = "POST"
    url = REAUTHENTICATE_URL
    send_csrf = True


class SessionProbeStrategy(HarvestingStrategy):
    """Probe the account settings endpoint for a renewed cookie"""

    name = "session_probe"
    method = "GET"
    url = SETTINGS_PROBE_URL


STRATEGIES: Dict[str, Type[RefreshStrategy]] = {
    AuthenticationTicketStrategy.name: AuthenticationTicketStrategy,
    ReauthenticateStrategy.name: ReauthenticateStrategy,
    SessionProbeStrategy.name: SessionProbeStrategy,
}


def build_strategies(names: Iterable[str]) -> List[RefreshStrategy]:
    """Instantiate strategies in the given priority order

    Args:
        names: Strategy names, highest priority first

    Returns:
        List of strategy instances

    Raises:
        ValueError: If a name is not a known strategy
    """
    strategies = []
    for name in names:
        strategy_cls = STRATEGIES.get(name)
        if strategy_cls is None:
            raise ValueError(f"Unknown refresh strategy '{name}'. Known: {', '.join(STRATEGIES)}")
        strategies.append(strategy_cls())
    return strategies
