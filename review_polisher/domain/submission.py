"""
Submission - Immutable Snapshot of One Polish Request
=====================================================

The wire model (PolishReviewRequest) is lenient about the optional tag
fields: anything that is not a list of strings collapses to an empty list,
so malformed tags never block the review itself. Only `text` is required.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

MISSING_TEXT_MESSAGE = 'Missing "text" in request body'

# Sinks display times in China Standard Time
DISPLAY_OFFSET = timedelta(hours=8)
DISPLAY_TZ = timezone(DISPLAY_OFFSET)


class PolishReviewRequest(BaseModel):
    """JSON body of POST /api/polish-review."""

    text: Optional[str] = None
    selectedTags: List[str] = []
    selectedLabels: List[str] = []

    @field_validator("text", mode="before")
    @classmethod
    def text_must_be_string(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("selectedTags", "selectedLabels", mode="before")
    @classmethod
    def keep_string_entries(cls, value: Any) -> List[str]:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]


@dataclass(frozen=True)
class Submission:
    """One review submission, shared read-only by synthesis and every sink."""
    review_text: str
    selected_tags: Tuple[str, ...] = ()
    selected_labels: Tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any) -> "Submission":
        """
        Build a Submission from a decoded JSON body.

        Raises:
            ValidationError: if the body is not an object or `text` is empty.
        """
        if not isinstance(payload, dict):
            raise ValidationError(MISSING_TEXT_MESSAGE)
        try:
            request = PolishReviewRequest.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(MISSING_TEXT_MESSAGE) from e

        if not request.text:
            raise ValidationError(MISSING_TEXT_MESSAGE)

        return cls(
            review_text=request.text,
            selected_tags=tuple(request.selectedTags),
            selected_labels=tuple(request.selectedLabels),
        )


@dataclass(frozen=True)
class SubmissionClock:
    """A single instant shared by every sink payload of one dispatch."""
    instant: datetime

    @classmethod
    def now(cls) -> "SubmissionClock":
        return cls(datetime.now(timezone.utc))

    @property
    def local(self) -> datetime:
        return self.instant.astimezone(DISPLAY_TZ)

    @property
    def timestamp(self) -> str:
        return self.local.isoformat(timespec="milliseconds")

    @property
    def date(self) -> str:
        return self.local.strftime("%Y-%m-%d")

    @property
    def time(self) -> str:
        return self.local.strftime("%H:%M:%S")
