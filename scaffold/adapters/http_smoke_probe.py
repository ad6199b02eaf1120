"""HTTP smoke probe for deployed static responder services."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Final

import httpx

from .interfaces import SmokeProbePort, SmokeProbeResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ProbeRetryStrategy:
    """Immutable retry strategy config and calculation helpers.

    Attributes:
        retry_attempts: Number of probe attempts.
        backoff_base_seconds: Base delay for exponential backoff.
        max_backoff_seconds: Exponential delay cap before jitter.
        jitter_min_multiplier: Minimum jitter multiplier.
        jitter_max_multiplier: Maximum jitter multiplier.
        random_unit_interval_provider: Provider returning value in [0.0, 1.0].
    """

    retry_attempts: int
    backoff_base_seconds: float
    max_backoff_seconds: float
    jitter_min_multiplier: float
    jitter_max_multiplier: float
    random_unit_interval_provider: Callable[[], float]

    def strategy_calculate_retry_wait_seconds(self, retry_index: int) -> float:
        """Calculate exponential retry wait with cap and jitter.

        Args:
            retry_index: Zero-based index of the retry following a failed attempt.

        Returns:
            float: Seconds to wait before the next attempt.

        Raises:
            ValueError: Raised when retry index is negative.
            RuntimeError: Raised when jitter provider returns out-of-range value.
        """

        if retry_index < 0:
            raise ValueError("retry_index must be >= 0")

        backoff_seconds = self.backoff_base_seconds * (2**retry_index)
        capped_backoff_seconds = min(backoff_seconds, self.max_backoff_seconds)
        random_ratio = float(self.random_unit_interval_provider())
        if random_ratio < 0.0 or random_ratio > 1.0:
            raise RuntimeError("random_unit_interval_provider must return a value in [0.0, 1.0]")

        jitter_span = self.jitter_max_multiplier - self.jitter_min_multiplier
        return capped_backoff_seconds * (self.jitter_min_multiplier + (random_ratio * jitter_span))


class HttpSmokeProbeAdapter(SmokeProbePort):
    """Probe `GET /` on a deployed service until the expected body is served."""

    _USER_AGENT: Final[str] = "pulumi-skeleton-smoke-probe/1.0 (Python/httpx)"
    _STATUS_PASSED: Final[str] = "passed"
    _STATUS_FAILED: Final[str] = "failed"

    def __init__(
        self,
        retry_attempts: int = 5,
        retry_backoff_base_seconds: float = 2.0,
        retry_max_backoff_seconds: float = 30.0,
        jitter_min_multiplier: float = 0.5,
        jitter_max_multiplier: float = 1.5,
        request_timeout_seconds: float = 10.0,
        random_unit_interval_provider: Callable[[], float] | None = None,
        sleep_provider: Callable[[float], None] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize smoke probe adapter.

        Args:
            retry_attempts: Number of probe attempts.
            retry_backoff_base_seconds: Base retry delay used by exponential backoff.
            retry_max_backoff_seconds: Maximum retry delay cap before applying jitter.
            jitter_min_multiplier: Minimum jitter multiplier for computed retry delay.
            jitter_max_multiplier: Maximum jitter multiplier for computed retry delay.
            request_timeout_seconds: HTTP request timeout in seconds.
            random_unit_interval_provider: Optional provider returning random values in [0.0, 1.0].
            sleep_provider: Optional sleep function, `time.sleep` by default.
            transport: Optional httpx transport, used by tests.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when retry or timeout values are invalid.
        """

        if retry_attempts < 1:
            raise ValueError("retry_attempts must be >= 1")
        if retry_backoff_base_seconds < 0:
            raise ValueError("retry_backoff_base_seconds must be >= 0")
        if retry_max_backoff_seconds <= 0:
            raise ValueError("retry_max_backoff_seconds must be > 0")
        if jitter_min_multiplier <= 0:
            raise ValueError("jitter_min_multiplier must be > 0")
        if jitter_max_multiplier < jitter_min_multiplier:
            raise ValueError("jitter_max_multiplier must be >= jitter_min_multiplier")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._retry_strategy = _ProbeRetryStrategy(
            retry_attempts=retry_attempts,
            backoff_base_seconds=retry_backoff_base_seconds,
            max_backoff_seconds=retry_max_backoff_seconds,
            jitter_min_multiplier=jitter_min_multiplier,
            jitter_max_multiplier=jitter_max_multiplier,
            random_unit_interval_provider=random_unit_interval_provider or random.random,
        )
        self._request_timeout_seconds = request_timeout_seconds
        self._sleep = sleep_provider or time.sleep
        self._transport = transport

    def probe_check_url(self, url: str, expected_body: str) -> SmokeProbeResult:
        """Probe the deployment root until it serves the expected body.

        Transport failures, non-200 statuses and body mismatches are retried
        until attempts run out.

        Args:
            url: Deployment base URL.
            expected_body: Exact expected response body.

        Returns:
            SmokeProbeResult: `passed` on first matching response, `failed` after all attempts.

        Raises:
            ValueError: Raised when url is blank.
        """

        normalized_url = url.strip()
        if not normalized_url:
            raise ValueError("url must not be blank")
        root_url = f"{normalized_url.rstrip('/')}/"

        status_code: int | None = None
        detail = ""
        with httpx.Client(
            timeout=self._request_timeout_seconds,
            headers={"User-Agent": self._USER_AGENT},
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            for attempt_index in range(self._retry_strategy.retry_attempts):
                if attempt_index > 0:
                    wait_seconds = self._retry_strategy.strategy_calculate_retry_wait_seconds(attempt_index - 1)
                    if wait_seconds > 0:
                        self._sleep(wait_seconds)

                try:
                    response = client.get(root_url)
                except httpx.TimeoutException:
                    status_code = None
                    detail = "request timed out"
                except httpx.TransportError as error:
                    status_code = None
                    detail = f"transport error: {error}"
                else:
                    status_code = response.status_code
                    if status_code == 200 and response.content == expected_body.encode("utf-8"):
                        logger.info("Smoke check passed for %s after %d attempt(s)", root_url, attempt_index + 1)
                        return SmokeProbeResult(
                            url=root_url,
                            status=self._STATUS_PASSED,
                            attempts=attempt_index + 1,
                            status_code=status_code,
                            detail="",
                        )
                    if status_code != 200:
                        detail = f"unexpected HTTP status {status_code}"
                    else:
                        detail = "response body does not match expected payload"

                logger.warning(
                    "Smoke check attempt %d/%d for %s failed: %s",
                    attempt_index + 1,
                    self._retry_strategy.retry_attempts,
                    root_url,
                    detail,
                )

        return SmokeProbeResult(
            url=root_url,
            status=self._STATUS_FAILED,
            attempts=self._retry_strategy.retry_attempts,
            status_code=status_code,
            detail=detail,
        )
