"""
Unit tests for the recording sinks.

Outbound HTTP is mocked at requests.post; nothing leaves the process.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from review_polisher.domain import SinkDeliveryError, Submission
from review_polisher.infrastructure.sinks import (
    DeliveryStatus,
    FormSink,
    SheetsAppendSink,
    WebhookSink,
    build_form_fields,
)


def _response(status_code=200, json_body=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    response.json.return_value = json_body or {}
    return response


# ── Webhook ────────────────────────────────────────────────────────

def test_webhook_posts_json_payload(submission, clock):
    sink = WebhookSink("https://hooks.example.com/review", timeout=5)

    with patch("review_polisher.infrastructure.sinks.webhook.requests.post") as mock_post:
        mock_post.return_value = _response(200)
        outcome = sink.deliver(submission, clock)

    assert outcome.delivered
    args, kwargs = mock_post.call_args
    assert args[0] == "https://hooks.example.com/review"
    assert kwargs["timeout"] == 5
    payload = kwargs["json"]
    assert payload["timestamp"] == "2024-06-01T12:30:15.250+08:00"
    assert payload["date"] == "2024-06-01"
    assert payload["time"] == "12:30:15"
    assert payload["text"] == submission.review_text
    assert payload["selectedTags"] == ["环境很舒适", "味道很正宗"]
    assert payload["categories"]["environment"] == ["环境舒适"]
    assert payload["categories"]["service"] == ["态度很好"]


def test_webhook_without_url_is_skipped(submission, clock):
    sink = WebhookSink("", name="backup_webhook")

    with patch("review_polisher.infrastructure.sinks.webhook.requests.post") as mock_post:
        outcome = sink.deliver(submission, clock)

    assert outcome.status is DeliveryStatus.SKIPPED
    assert outcome.sink == "backup_webhook"
    mock_post.assert_not_called()


def test_webhook_non_success_status_is_contained(submission, clock):
    sink = WebhookSink("https://hooks.example.com/review")

    with patch("review_polisher.infrastructure.sinks.webhook.requests.post") as mock_post:
        mock_post.return_value = _response(503, text="unavailable")
        outcome = sink.deliver(submission, clock)

    assert outcome.failed
    assert isinstance(outcome.error, SinkDeliveryError)
    assert outcome.error.status_code == 503
    assert outcome.error.sink == "webhook"


@pytest.mark.parametrize("exc", [
    requests.ConnectionError("refused"),
    requests.Timeout("slow"),
])
def test_webhook_network_errors_are_contained(submission, clock, exc):
    sink = WebhookSink("https://hooks.example.com/review")

    with patch("review_polisher.infrastructure.sinks.webhook.requests.post", side_effect=exc):
        outcome = sink.deliver(submission, clock)

    assert outcome.failed
    assert outcome.error.status_code is None


# ── Google Sheets ──────────────────────────────────────────────────

def test_sheets_appends_one_row_per_tag(submission, clock):
    sink = SheetsAppendSink("api-key", "sheet-123", "Tags")

    with patch("review_polisher.infrastructure.sinks.sheets.requests.post") as mock_post:
        mock_post.return_value = _response(200, {"updates": {"updatedRange": "Tags!A2:B3"}})
        outcome = sink.deliver(submission, clock)

    assert outcome.delivered
    assert "Tags!A2:B3" in outcome.detail
    args, kwargs = mock_post.call_args
    assert args[0] == "https://sheets.googleapis.com/v4/spreadsheets/sheet-123/values/Tags!A1:append"
    assert kwargs["params"] == {"valueInputOption": "USER_ENTERED", "key": "api-key"}
    assert kwargs["json"] == {
        "majorDimension": "ROWS",
        "values": [
            ["2024-06-01T12:30:15.250+08:00", "环境很舒适"],
            ["2024-06-01T12:30:15.250+08:00", "味道很正宗"],
        ],
    }


def test_sheets_without_tags_is_skipped(clock):
    sink = SheetsAppendSink("api-key", "sheet-123", "Tags")

    with patch("review_polisher.infrastructure.sinks.sheets.requests.post") as mock_post:
        outcome = sink.deliver(Submission(review_text="好吃"), clock)

    assert outcome.status is DeliveryStatus.SKIPPED
    mock_post.assert_not_called()


@pytest.mark.parametrize("api_key,spreadsheet_id,sheet_name", [
    ("", "sheet-123", "Tags"),
    ("api-key", "", "Tags"),
    ("api-key", "sheet-123", ""),
])
def test_sheets_partial_config_is_skipped(submission, clock, api_key, spreadsheet_id, sheet_name):
    sink = SheetsAppendSink(api_key, spreadsheet_id, sheet_name)

    with patch("review_polisher.infrastructure.sinks.sheets.requests.post") as mock_post:
        outcome = sink.deliver(submission, clock)

    assert outcome.status is DeliveryStatus.SKIPPED
    mock_post.assert_not_called()


# ── Form ───────────────────────────────────────────────────────────

def test_form_fields_include_joined_buckets(submission, clock):
    fields = build_form_fields(submission, clock)

    assert fields["timestamp"] == "2024-06-01T12:30:15.250+08:00"
    assert fields["date"] == "2024-06-01"
    assert fields["time"] == "12:30:15"
    assert fields["tags"] == "环境很舒适，味道很正宗"
    assert fields["environment"] == "环境舒适"
    assert fields["taste"] == "味道正宗"
    assert fields["service"] == "态度很好"
    assert fields["price"] == ""
    assert fields["overall"] == ""


def test_form_posts_configured_field_ids_only(submission, clock):
    field_ids = {"text": "entry.1", "taste": "entry.2", "date": "entry.3"}
    sink = FormSink("https://docs.example.com/formResponse", field_ids)

    with patch("review_polisher.infrastructure.sinks.form.requests.post") as mock_post:
        mock_post.return_value = _response(200)
        outcome = sink.deliver(submission, clock)

    assert outcome.delivered
    _, kwargs = mock_post.call_args
    assert kwargs["data"] == {
        "entry.1": submission.review_text,
        "entry.2": "味道正宗",
        "entry.3": "2024-06-01",
    }


def test_form_failure_is_contained(submission, clock):
    sink = FormSink("https://docs.example.com/formResponse", {"text": "entry.1"})

    with patch(
        "review_polisher.infrastructure.sinks.form.requests.post",
        side_effect=requests.ConnectionError("dns failure"),
    ):
        outcome = sink.deliver(submission, clock)

    assert outcome.failed
    assert "dns failure" in outcome.detail
