"""
Error Taxonomy
==============

ValidationError   -> caller sent bad input (HTTP 400)
UpstreamError     -> the synthesis service failed (HTTP 500)
SinkDeliveryError -> a background sink failed (logged only, never surfaced)
"""

from typing import Optional


class PolishReviewError(Exception):
    """Base exception for the review polisher."""
    pass


class ValidationError(PolishReviewError):
    """Request body is missing required input."""
    pass


class UpstreamError(PolishReviewError):
    """The generative text service threw or answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SinkDeliveryError(PolishReviewError):
    """A recording sink could not accept the submission."""

    def __init__(self, sink: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{sink}: {message}")
        self.sink = sink
        self.status_code = status_code
