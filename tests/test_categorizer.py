"""Unit tests for the label categorizer."""

import pytest

from review_polisher.domain import Category, LABEL_TAXONOMY, categorize
from review_polisher.domain.categorizer import CategoryBucket


def test_empty_labels_give_five_empty_buckets():
    buckets = categorize([])
    assert buckets.as_dict() == {
        "environment": [],
        "taste": [],
        "service": [],
        "price": [],
        "overall": [],
    }


def test_example_submission():
    buckets = categorize(["环境舒适", "味道正宗", "态度很好", "未知标签X"])

    assert buckets.environment == ["环境舒适"]
    assert buckets.taste == ["味道正宗"]
    assert buckets.service == ["态度很好"]
    assert buckets.price == []
    assert buckets.overall == []


def test_unknown_labels_never_appear():
    buckets = categorize(["未知标签X", "another", ""])
    assert all(not labels for labels in buckets.as_dict().values())


def test_order_follows_input():
    buckets = categorize(["偏咸", "味道正宗", "食材新鲜"])
    assert buckets.taste == ["偏咸", "味道正宗", "食材新鲜"]


def test_duplicates_are_kept():
    buckets = categorize(["性价比高", "价格实惠", "性价比高"])
    assert buckets.price == ["性价比高", "价格实惠", "性价比高"]


def test_every_bucketed_label_maps_to_its_bucket():
    labels = list(LABEL_TAXONOMY) + ["未知标签X"]
    buckets = categorize(labels)

    for category in Category:
        for label in buckets.bucket(category):
            assert LABEL_TAXONOMY[label] is category


def test_taxonomy_is_read_only():
    with pytest.raises(TypeError):
        LABEL_TAXONOMY["新标签"] = Category.OVERALL
    assert "新标签" not in LABEL_TAXONOMY


def test_custom_taxonomy():
    taxonomy = {"quiet": Category.ENVIRONMENT}
    buckets = categorize(["quiet", "环境舒适"], taxonomy=taxonomy)
    assert buckets.environment == ["quiet"]


def test_joined_buckets():
    buckets = CategoryBucket(taste=["味道正宗", "分量足"])
    joined = buckets.joined("，")
    assert joined["taste"] == "味道正宗，分量足"
    assert joined["service"] == ""
