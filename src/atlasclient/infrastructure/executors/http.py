"""Resilient HTTP request executor built on httpx."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from atlasclient.core.entities.client_config import DEFAULT_TIMEOUT_MS
from atlasclient.core.entities.request import RequestDescriptor
from atlasclient.core.entities.retry_policy import RetryPolicy
from atlasclient.errors import AtlasCancelledError, AtlasNetworkError
from atlasclient.utils.query import build_query_params

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[Any]]


class HttpRequestExecutor:
    """Performs one logical HTTP operation with timeout and retry.

    Each attempt is bounded by ``timeout_ms``. Timeouts, transport
    failures and non-2xx responses are all treated as retryable network
    failures; after the last attempt the final ``AtlasNetworkError`` is
    raised. Nothing is cached here.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout_ms: float = DEFAULT_TIMEOUT_MS,
        policy: RetryPolicy | None = None,
        headers: dict[str, str] | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """Initialize the executor.

        Args:
            client: httpx client to send requests with. One is created
                (and owned) when omitted.
            timeout_ms: Upper bound for a single attempt.
            policy: Retry count, backoff and write-retry rules.
            headers: Default headers sent with every request.
            sleep: Coroutine used for backoff waits; injectable for tests.
        """
        if timeout_ms is None or timeout_ms <= 0:
            timeout_ms = DEFAULT_TIMEOUT_MS
        self._timeout_ms = timeout_ms
        self._policy = policy or RetryPolicy()
        self._headers = dict(headers or {})
        self._sleep = sleep
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_ms / 1000.0)

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    @property
    def timeout_ms(self) -> float:
        return self._timeout_ms

    def configure(
        self,
        timeout_ms: float | None = None,
        policy: RetryPolicy | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Swap timeout, policy or default headers in place."""
        if timeout_ms is not None and timeout_ms > 0:
            self._timeout_ms = timeout_ms
        if policy is not None:
            self._policy = policy
        if headers is not None:
            self._headers = dict(headers)

    async def execute(
        self,
        request: RequestDescriptor,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> Any:
        """Perform ``request`` and return the decoded JSON body.

        Args:
            request: The operation to perform.
            cancel_event: When set, aborts the whole retry loop, including
                an attempt in flight or a pending backoff.

        Returns:
            The parsed response body, or None for an empty body.

        Raises:
            AtlasNetworkError: When every permitted attempt failed.
            AtlasCancelledError: When ``cancel_event`` was set.
        """
        attempts = self._policy.max_attempts if self._policy.allows_retry(request) else 1
        headers = {**self._headers, **request.headers}
        if request.files:
            # httpx sets the multipart boundary itself
            headers = {k: v for k, v in headers.items() if k.lower() != "content-type"}

        for attempt in range(attempts):
            if cancel_event is not None and cancel_event.is_set():
                raise AtlasCancelledError()

            logger.debug(
                "%s %s attempt %d/%d", request.method, request.url, attempt + 1, attempts
            )
            try:
                return await self._race(self._attempt(request, headers), cancel_event)
            except AtlasNetworkError as e:
                if attempt + 1 >= attempts:
                    logger.error(
                        "%s %s failed after %d attempt(s): %s",
                        request.method,
                        request.url,
                        attempts,
                        e,
                    )
                    raise

                delay = self._policy.delay_for(attempt)
                logger.warning(
                    "%s %s failed on attempt %d/%d (%s); retrying in %.3fs",
                    request.method,
                    request.url,
                    attempt + 1,
                    attempts,
                    e,
                    delay,
                )
                await self._backoff(delay, cancel_event)

        raise AtlasNetworkError(f"No attempt was made for {request.method} {request.url}")

    async def aclose(self) -> None:
        """Close the underlying client if this executor created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _attempt(self, request: RequestDescriptor, headers: dict[str, str]) -> Any:
        # Same bound for httpx and the outer wait so neither cuts the other short
        timeout = self._timeout_ms / 1000.0
        try:
            response = await asyncio.wait_for(
                self._client.request(
                    request.method,
                    request.url,
                    params=build_query_params(request.params),
                    json=request.json,
                    files=request.files,
                    headers=headers,
                    timeout=timeout,
                ),
                timeout=timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise AtlasNetworkError(
                f"Request timed out after {self._timeout_ms:g} ms"
            ) from e
        except httpx.HTTPError as e:
            raise AtlasNetworkError(f"Request failed: {str(e) or type(e).__name__}") from e

        if not response.is_success:
            raise AtlasNetworkError(
                f"HTTP {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
                status_text=response.reason_phrase,
                details=_error_body(response),
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise AtlasNetworkError(
                "Response body is not valid JSON",
                status_code=response.status_code,
                status_text=response.reason_phrase,
            ) from e

    async def _race(self, coro: Awaitable[Any], cancel_event: asyncio.Event | None) -> Any:
        if cancel_event is None:
            return await coro

        send = asyncio.ensure_future(coro)
        cancelled = asyncio.ensure_future(cancel_event.wait())
        try:
            done, _ = await asyncio.wait(
                {send, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (send, cancelled):
                if not task.done():
                    task.cancel()

        if send in done:
            return send.result()
        raise AtlasCancelledError()

    async def _backoff(self, delay: float, cancel_event: asyncio.Event | None) -> None:
        await self._race(self._sleep(delay), cancel_event)


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None
