from .base import DeliveryStatus, RecordingSink, SinkOutcome
from .webhook import WebhookSink, build_webhook_payload
from .sheets import SheetsAppendSink, build_rows
from .form import CATEGORY_SEPARATOR, FormSink, build_form_fields

__all__ = [
    "DeliveryStatus",
    "RecordingSink",
    "SinkOutcome",
    "WebhookSink",
    "build_webhook_payload",
    "SheetsAppendSink",
    "build_rows",
    "CATEGORY_SEPARATOR",
    "FormSink",
    "build_form_fields",
]
