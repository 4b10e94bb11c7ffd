"""
Fan-out Coordinator - Detached Sink Delivery
============================================

Runs every configured sink for a submission concurrently on a supervised
thread pool. dispatch() returns as soon as the work is queued; the request
handler never waits on it.

COMPLETION GUARANTEE:
- The pool is owned by the web app lifespan
- shutdown(wait=True) on app shutdown drains queued and running deliveries
  before the process exits

FAILURE POLICY:
- One attempt per sink, no retries
- Every outcome is logged and discarded; nothing reaches the caller
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Sequence

from ..domain.errors import SinkDeliveryError
from ..domain.submission import Submission, SubmissionClock
from ..infrastructure.config import Settings
from ..infrastructure.sinks import (
    FormSink,
    RecordingSink,
    SheetsAppendSink,
    SinkOutcome,
    WebhookSink,
)

logger = logging.getLogger(__name__)


def build_sinks(settings: Settings) -> List[RecordingSink]:
    """Create every sink; unconfigured ones skip themselves on delivery."""
    timeout = settings.fanout.timeout_seconds
    return [
        WebhookSink(settings.webhooks.url, name="webhook", timeout=timeout),
        WebhookSink(settings.webhooks.backup_url, name="backup_webhook", timeout=timeout),
        SheetsAppendSink(
            settings.sheets.api_key,
            settings.sheets.spreadsheet_id,
            settings.sheets.sheet_name,
            timeout=timeout,
        ),
        FormSink(settings.form.url, settings.form.field_ids, timeout=timeout),
    ]


class FanoutCoordinator:
    """
    Dispatches a submission to all sinks in the background.

    Usage:
        coordinator = FanoutCoordinator(build_sinks(settings))
        coordinator.dispatch(submission)   # returns immediately
        ...
        coordinator.shutdown()             # on app shutdown
    """

    def __init__(
        self,
        sinks: Sequence[RecordingSink],
        executor: Optional[ThreadPoolExecutor] = None,
        max_workers: int = 8,
    ):
        self._sinks = list(sinks)
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="fanout"
        )

    @property
    def sinks(self) -> List[RecordingSink]:
        return list(self._sinks)

    def dispatch(self, submission: Submission) -> List[Future]:
        """
        Queue one delivery per sink and return without waiting.

        The returned futures resolve to SinkOutcome; callers normally drop them.
        """
        clock = SubmissionClock.now()
        futures = [
            self._executor.submit(self._deliver, sink, submission, clock)
            for sink in self._sinks
        ]
        logger.info(f"Dispatched submission to {len(futures)} sink(s)")
        return futures

    def _deliver(self, sink: RecordingSink, submission: Submission, clock: SubmissionClock) -> SinkOutcome:
        try:
            return sink.deliver(submission, clock)
        except Exception as e:
            logger.exception(f"[{sink.name}] unexpected error during delivery: {e}")
            return SinkOutcome.failure(SinkDeliveryError(sink.name, f"unexpected error: {e}"))

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work; with wait=True, block until deliveries finish."""
        logger.info("Draining background sink deliveries...")
        self._executor.shutdown(wait=wait)
