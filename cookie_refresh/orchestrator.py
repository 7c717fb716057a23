"""Refresh orchestration: validate, verify, acquire a CSRF token, run the
strategy chain and resolve the identity for the new cookie."""

import logging
from typing import List, Optional, Sequence

from settings import REFRESH_STRATEGIES
from .csrf import acquire_csrf_token
from .errors import (
    CookieValidationFailed,
    ExpiredOrInvalid,
    NoCsrfToken,
    NoRefreshPossible,
    RefreshError,
    UpstreamUnreachable,
)
from .models import Identity, RefreshResult, RefreshState, StrategyAttempt
from .remote import RemoteClient
from .strategies import RefreshStrategy, StrategyContext, build_strategies
from .validators import validate_cookie
from .verifier import verify_cookie

logger = logging.getLogger(__name__)


class CookieRefresher:
    """Runs one cookie refresh

    Instances are request scoped: create one per refresh with the remote
    client for that request.
    """

    def __init__(self, remote: RemoteClient, strategies: Optional[Sequence[RefreshStrategy]] = None):
        """
        Args:
            remote: Remote client for this run
            strategies: Strategies in priority order. Defaults to REFRESH_STRATEGIES.
        """
        self.remote = remote
        self.strategies = list(strategies) if strategies is not None else build_strategies(REFRESH_STRATEGIES)
        self.state = RefreshState.VALIDATING
        self.attempts: List[StrategyAttempt] = []

    def _enter(self, state: RefreshState):
        logger.debug(f"Refresh state: {self.state.value} -> {state.value}")
        self.state = state

    async def refresh(self, raw_cookie: Optional[str]) -> RefreshResult:
        """Exchange a session cookie for a freshly issued one

        Args:
            raw_cookie: Cookie as supplied by the caller

        Returns:
            Successful RefreshResult

        Raises:
            RefreshError: Describing the stage that failed
        """
        try:
            return await self._run(raw_cookie)
        except RefreshError as e:
            logger.warning(f"Refresh failed while {self.state.value}: {e}")
            self._enter(RefreshState.FAILED)
            raise

    async def refresh_result(self, raw_cookie: Optional[str]) -> RefreshResult:
        """Like ``refresh`` but reports expected failures in the result

        Returns:
            RefreshResult with success False and failure_reason set on failure
        """
        try:
            return await self.refresh(raw_cookie)
        except RefreshError as e:
            return RefreshResult(success=False, failure_reason=str(e), attempts=list(self.attempts))

    async def _run(self, raw_cookie: Optional[str]) -> RefreshResult:
        self.attempts = []
        self._enter(RefreshState.VALIDATING)
        cookie = validate_cookie(raw_cookie)

        self._enter(RefreshState.VERIFYING_INPUT)
        try:
            identity = await verify_cookie(self.remote, cookie)
        except (ExpiredOrInvalid, UpstreamUnreachable) as e:
            raise CookieValidationFailed(e.details or e.error) from e
        logger.info(f"Cookie validated for user {identity.name}")

        self._enter(RefreshState.ACQUIRING_TOKEN)
        csrf_token = await acquire_csrf_token(self.remote, cookie)
        if not csrf_token:
            raise NoCsrfToken()

        self._enter(RefreshState.REFRESHING)
        new_cookie, method = await self._run_strategies(cookie, csrf_token)
        logger.info(f"New cookie generated via {method}")

        self._enter(RefreshState.VERIFYING_RESULT)
        identity = await self._resolve_identity(new_cookie, identity)

        self._enter(RefreshState.DONE)
        return RefreshResult(
            success=True,
            new_cookie=new_cookie,
            identity=identity,
            method_used=method,
            attempts=list(self.attempts),
        )

    async def _run_strategies(self, cookie: str, csrf_token: str):
        """Try each strategy once until one returns a different cookie

        Returns:
            Tuple of (new_cookie, strategy_name)

        Raises:
            NoRefreshPossible: If every strategy failed
        """
        for strategy in self.strategies:
            context = StrategyContext(remote=self.remote, cookie=cookie, csrf_token=csrf_token)
            try:
                candidate = await strategy.attempt(context)
            except RefreshError as e:
                self._record(strategy.name, False, str(e))
                continue

            if not candidate:
                self._record(strategy.name, False, "; ".join(context.notes) or "no cookie returned")
            elif candidate == cookie:
                self._record(strategy.name, False, "returned the unchanged cookie")
            else:
                self._record(strategy.name, True)
                return candidate, strategy.name

        details = "; ".join(f"{a.strategy}: {a.detail}" for a in self.attempts)
        raise NoRefreshPossible(details or "no refresh strategies configured")

    def _record(self, name: str, succeeded: bool, detail: str = ""):
        if not succeeded:
            logger.info(f"Strategy {name} failed: {detail}")
        self.attempts.append(StrategyAttempt(strategy=name, succeeded=succeeded, detail=detail))

    async def _resolve_identity(self, new_cookie: str, fallback: Identity) -> Identity:
        try:
            return await verify_cookie(self.remote, new_cookie)
        except RefreshError as e:
            logger.warning(f"New cookie could not be verified, keeping original identity: {e}")
            return fallback
