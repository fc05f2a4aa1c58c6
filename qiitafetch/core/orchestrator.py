"""Pipeline orchestrator - sequences fetching and decoding."""

import asyncio
import concurrent.futures
from datetime import datetime
from typing import Any, Callable

import httpx
from pydantic import ValidationError

from qiitafetch.config import ClientConfig
from qiitafetch.core.decoder import decode_profile
from qiitafetch.core.fetcher import fetch_profile_body
from qiitafetch.exceptions import InvalidRequestError, ProfileError
from qiitafetch.logging import configure_logging, get_logger
from qiitafetch.models.profile import Profile
from qiitafetch.models.request import ProfileRequest
from qiitafetch.models.result import Failure, Outcome

ResultCallback = Callable[[Outcome[Profile, ProfileError]], Any]
Dispatcher = Callable[[Callable[[], Any]], Any]


def _call_now(fn: Callable[[], Any]) -> Any:
    return fn()


class ProfileClient:
    """
    High-level client for fetching Qiita profiles.

    Every call is independent: no state is shared between requests.

    Example:
        async with ProfileClient() as client:
            outcome = await client.get_profile("Yuritani", token)
            if outcome.ok:
                print(outcome.value.followers_count)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize client with optional configuration.

        Args:
            config: ClientConfig instance, uses defaults if None
            transport: Optional httpx transport passed to every request
        """
        self.config = config or ClientConfig()
        self._transport = transport

    async def __aenter__(self) -> "ProfileClient":
        """Async context manager entry - configure logging."""
        configure_logging(self.config)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        pass

    async def get_profile(
        self,
        username: str,
        access_token: str,
    ) -> Outcome[Profile, ProfileError]:
        """
        Fetch and decode a single profile.

        Args:
            username: Qiita user id
            access_token: Bearer token for the Authorization header

        Returns:
            Success with the Profile, or Failure with the ProfileError
            that stopped the sequence. Never raises.
        """
        try:
            request = ProfileRequest(username=username, access_token=access_token)
        except ValidationError as e:
            get_logger("client").warning("invalid_request", username=username)
            reasons = "; ".join(f"{item['loc'][0]}: {item['msg']}" for item in e.errors())
            return Failure(InvalidRequestError(f"Invalid request: {reasons}"))

        return await self.get_profile_for(request)

    async def get_profile_for(self, request: ProfileRequest) -> Outcome[Profile, ProfileError]:
        """Fetch and decode the profile described by a prebuilt request."""
        log = get_logger("client").bind(username=request.username)
        log.info("profile_request_start")
        start = datetime.now()

        fetched = await fetch_profile_body(
            request.username,
            request.access_token,
            transport=self._transport,
            user_agent=self.config.user_agent,
        )
        if not fetched.ok:
            return fetched

        decoded = decode_profile(fetched.value)
        duration_ms = (datetime.now() - start).total_seconds() * 1000

        if not decoded.ok:
            log.error("decode_failed", error=str(decoded.error), duration_ms=duration_ms)
            return decoded

        log.info("profile_request_complete", duration_ms=duration_ms)
        return decoded

    def request_profile(
        self,
        username: str,
        access_token: str,
        on_result: ResultCallback,
        *,
        work_loop: asyncio.AbstractEventLoop,
        deliver: Dispatcher | None = None,
    ) -> concurrent.futures.Future:
        """
        Start a profile request and report the outcome through a callback.

        The request runs on ``work_loop``, which must be running (usually in
        a background thread). When it resolves, ``on_result(outcome)`` is
        handed to ``deliver`` exactly once, so a UI can pass its own
        "run on the interface thread" hook, e.g. ``root.after(0, fn)`` or
        ``ui_loop.call_soon_threadsafe``. Without ``deliver`` the callback
        runs on the work loop's thread.

        Args:
            username: Qiita user id
            access_token: Bearer token for the Authorization header
            on_result: Called with the Outcome
            work_loop: Event loop that performs the request
            deliver: Dispatcher that runs a zero-argument callable on the
                delivery context

        Returns:
            The concurrent Future of the running request. Cancelling it
            suppresses delivery.
        """
        dispatch = deliver or _call_now

        async def _run() -> Outcome[Profile, ProfileError]:
            outcome = await self.get_profile(username, access_token)
            dispatch(lambda: on_result(outcome))
            return outcome

        return asyncio.run_coroutine_threadsafe(_run(), work_loop)
