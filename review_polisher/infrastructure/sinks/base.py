"""
Recording Sink - Abstraction Layer for Best-Effort Submission Recording
========================================================================

Every sink turns one Submission into one outbound HTTP call. Failures are
contained here: deliver() never raises, it returns a SinkOutcome that the
fan-out coordinator logs and discards.

USAGE:
    sink = WebhookSink(url="https://example.com/hook")
    outcome = sink.deliver(submission, SubmissionClock.now())
    if outcome.failed:
        print(outcome.error)
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import requests

from ...domain.errors import SinkDeliveryError
from ...domain.submission import Submission, SubmissionClock

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class DeliveryStatus(Enum):
    """Result of one delivery attempt."""
    DELIVERED = "delivered"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class SinkOutcome:
    """Result of a single sink delivery. Never raised, only returned."""
    sink: str
    status: DeliveryStatus
    error: Optional[SinkDeliveryError] = None
    detail: str = ""

    @property
    def delivered(self) -> bool:
        return self.status is DeliveryStatus.DELIVERED

    @property
    def failed(self) -> bool:
        return self.status is DeliveryStatus.FAILED

    @classmethod
    def ok(cls, sink: str, detail: str = "") -> "SinkOutcome":
        return cls(sink, DeliveryStatus.DELIVERED, detail=detail)

    @classmethod
    def skipped(cls, sink: str, reason: str) -> "SinkOutcome":
        return cls(sink, DeliveryStatus.SKIPPED, detail=reason)

    @classmethod
    def failure(cls, error: SinkDeliveryError) -> "SinkOutcome":
        return cls(error.sink, DeliveryStatus.FAILED, error=error, detail=str(error))


class RecordingSink(ABC):
    """
    Abstract base class for recording sinks.
    Implement is_configured() and _send() to add a new backend.
    """

    name: str = "sink"

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        self._timeout = timeout

    @abstractmethod
    def is_configured(self) -> bool:
        """True when every setting this sink needs is present."""
        ...

    @abstractmethod
    def _send(self, submission: Submission, clock: SubmissionClock) -> requests.Response:
        """Build the payload and issue exactly one outbound request."""
        ...

    def skip_reason(self, submission: Submission) -> Optional[str]:
        """Return a reason to skip this submission, or None to deliver it."""
        return None

    def deliver(self, submission: Submission, clock: SubmissionClock) -> SinkOutcome:
        """
        Deliver a submission once. Never raises.

        Returns:
            SinkOutcome: DELIVERED, SKIPPED (unconfigured or nothing to send)
            or FAILED (network error, timeout, non-2xx status).
        """
        if not self.is_configured():
            logger.warning(f"[{self.name}] not configured, skipping delivery")
            return SinkOutcome.skipped(self.name, "not configured")

        reason = self.skip_reason(submission)
        if reason:
            logger.info(f"[{self.name}] {reason}, skipping delivery")
            return SinkOutcome.skipped(self.name, reason)

        try:
            response = self._send(submission, clock)
        except requests.Timeout:
            error = SinkDeliveryError(self.name, f"timed out after {self._timeout}s")
            logger.warning(f"[{self.name}] delivery failed: {error}")
            return SinkOutcome.failure(error)
        except requests.RequestException as e:
            error = SinkDeliveryError(self.name, str(e))
            logger.warning(f"[{self.name}] delivery failed: {error}")
            return SinkOutcome.failure(error)

        if not response.ok:
            error = SinkDeliveryError(
                self.name,
                f"status {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )
            logger.error(f"[{self.name}] delivery rejected: {error}")
            return SinkOutcome.failure(error)

        detail = self._describe_success(response)
        logger.info(f"[{self.name}] delivered {detail}".rstrip())
        return SinkOutcome.ok(self.name, detail)

    def _describe_success(self, response: requests.Response) -> str:
        return f"(status {response.status_code})"
