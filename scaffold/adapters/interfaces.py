"""Typed interfaces for adapter-layer responsibilities."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SmokeProbeResult:
    """Result contract for one deployment smoke check.

    Attributes:
        url: Probed endpoint URL.
        status: `passed` or `failed`.
        attempts: Number of requests issued.
        status_code: Last observed HTTP status code, if any response arrived.
        detail: Last failure reason, empty on success.
    """

    url: str
    status: str
    attempts: int
    status_code: int | None
    detail: str


class SmokeProbePort(Protocol):
    """Port definition for verifying a deployed static responder."""

    def probe_check_url(self, url: str, expected_body: str) -> SmokeProbeResult:
        """Check that the deployment answers `GET /` with the expected body.

        Args:
            url: Deployment base URL.
            expected_body: Exact expected response body.

        Returns:
            SmokeProbeResult: Final check outcome.

        Raises:
            ValueError: Raised when url is blank.
        """
