# Domain Layer
# ============
# Pure business logic with no I/O:
# - submission: the immutable request snapshot and its wire model
# - taxonomy/categorizer: fixed label -> category mapping
# - errors: the error taxonomy shared by all layers

from .errors import PolishReviewError, ValidationError, UpstreamError, SinkDeliveryError
from .submission import Submission, SubmissionClock, PolishReviewRequest
from .taxonomy import Category, LABEL_TAXONOMY
from .categorizer import CategoryBucket, categorize

__all__ = [
    "PolishReviewError",
    "ValidationError",
    "UpstreamError",
    "SinkDeliveryError",
    "Submission",
    "SubmissionClock",
    "PolishReviewRequest",
    "Category",
    "LABEL_TAXONOMY",
    "CategoryBucket",
    "categorize",
]
