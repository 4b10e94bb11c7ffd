"""
Webhook Sink
============

POSTs the submission as JSON. The primary and backup webhooks share this
class and differ only by name and URL.
"""

from typing import Any, Dict

import requests

from .base import DEFAULT_TIMEOUT_SECONDS, RecordingSink
from ...domain.categorizer import categorize
from ...domain.submission import Submission, SubmissionClock


def build_webhook_payload(submission: Submission, clock: SubmissionClock) -> Dict[str, Any]:
    return {
        "timestamp": clock.timestamp,
        "date": clock.date,
        "time": clock.time,
        "text": submission.review_text,
        "selectedTags": list(submission.selected_tags),
        "selectedLabels": list(submission.selected_labels),
        "categories": categorize(submission.selected_labels).as_dict(),
    }


class WebhookSink(RecordingSink):
    """Generic JSON webhook."""

    def __init__(self, url: str, name: str = "webhook", timeout: float = DEFAULT_TIMEOUT_SECONDS):
        super().__init__(timeout=timeout)
        self.name = name
        self._url = url

    def is_configured(self) -> bool:
        return bool(self._url)

    def _send(self, submission: Submission, clock: SubmissionClock) -> requests.Response:
        return requests.post(
            self._url,
            json=build_webhook_payload(submission, clock),
            timeout=self._timeout,
        )
