"""
Google Sheets Sink
==================

Appends one row per selected tag, each row being [timestamp, tag], to the
first empty row of the configured sheet.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import requests

from .base import DEFAULT_TIMEOUT_SECONDS, RecordingSink
from ...domain.submission import Submission, SubmissionClock

logger = logging.getLogger(__name__)

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"


def build_rows(submission: Submission, clock: SubmissionClock) -> List[List[str]]:
    return [[clock.timestamp, tag] for tag in submission.selected_tags]


class SheetsAppendSink(RecordingSink):
    """Google Sheets `values:append` with an API key."""

    name = "google_sheets"

    def __init__(
        self,
        api_key: str,
        spreadsheet_id: str,
        sheet_name: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__(timeout=timeout)
        self._api_key = api_key
        self._spreadsheet_id = spreadsheet_id
        self._sheet_name = sheet_name

    def is_configured(self) -> bool:
        return bool(self._api_key and self._spreadsheet_id and self._sheet_name)

    @property
    def append_url(self) -> str:
        sheet_range = quote(f"{self._sheet_name}!A1", safe="!")
        return f"{SHEETS_API_URL}/{self._spreadsheet_id}/values/{sheet_range}:append"

    def skip_reason(self, submission: Submission) -> Optional[str]:
        if not submission.selected_tags:
            return "no selectedTags provided"
        return None

    def _send(self, submission: Submission, clock: SubmissionClock) -> requests.Response:
        body = {
            "majorDimension": "ROWS",
            "values": build_rows(submission, clock),
        }
        return requests.post(
            self.append_url,
            params={"valueInputOption": "USER_ENTERED", "key": self._api_key},
            json=body,
            timeout=self._timeout,
        )

    def _describe_success(self, response: requests.Response) -> str:
        try:
            updated_range = response.json().get("updates", {}).get("updatedRange", "")
        except ValueError:
            updated_range = ""
        return f"to {updated_range}" if updated_range else super()._describe_success(response)
