"""
Form Sink
=========

Submits URL-encoded form data to a form endpoint such as a Google Form's
`formResponse` URL. Field identifiers (e.g. `entry.123456`) come from
configuration; a field without an identifier is left out.

Each category bucket becomes its own field, joined with CATEGORY_SEPARATOR.
"""

from typing import Dict, Optional

import requests

from .base import DEFAULT_TIMEOUT_SECONDS, RecordingSink
from ...domain.categorizer import categorize
from ...domain.submission import Submission, SubmissionClock

CATEGORY_SEPARATOR = "，"


def build_form_fields(submission: Submission, clock: SubmissionClock) -> Dict[str, str]:
    """Form values keyed by logical field name (timestamp, taste, ...)."""
    fields = {
        "timestamp": clock.timestamp,
        "date": clock.date,
        "time": clock.time,
        "text": submission.review_text,
        "tags": CATEGORY_SEPARATOR.join(submission.selected_tags),
    }
    fields.update(categorize(submission.selected_labels).joined(CATEGORY_SEPARATOR))
    return fields


class FormSink(RecordingSink):
    """Multi-field form endpoint."""

    name = "form"

    def __init__(
        self,
        url: str,
        field_ids: Optional[Dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__(timeout=timeout)
        self._url = url
        self._field_ids = dict(field_ids or {})

    def is_configured(self) -> bool:
        return bool(self._url)

    def encode(self, submission: Submission, clock: SubmissionClock) -> Dict[str, str]:
        """Map logical fields onto the configured external field ids."""
        fields = build_form_fields(submission, clock)
        return {
            self._field_ids[name]: value
            for name, value in fields.items()
            if name in self._field_ids
        }

    def _send(self, submission: Submission, clock: SubmissionClock) -> requests.Response:
        return requests.post(
            self._url,
            data=self.encode(submission, clock),
            timeout=self._timeout,
        )
