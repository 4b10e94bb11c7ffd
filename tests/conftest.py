"""Shared fixtures."""

from datetime import datetime, timezone

import pytest

from review_polisher.domain import Submission, SubmissionClock


@pytest.fixture
def submission():
    return Submission(
        review_text="环境舒适, 味道正宗, 态度很好",
        selected_tags=("环境很舒适", "味道很正宗"),
        selected_labels=("环境舒适", "味道正宗", "态度很好", "未知标签X"),
    )


@pytest.fixture
def clock():
    # 2024-06-01 04:30:15.250 UTC -> 12:30:15 in the +08:00 display zone
    return SubmissionClock(datetime(2024, 6, 1, 4, 30, 15, 250000, tzinfo=timezone.utc))
