"""
Label Categorizer
=================

Sorts canonical labels into the five category buckets.

BEHAVIOR:
- Bucket order follows first-occurrence order in the input
- Duplicate labels are kept as duplicates (no deduplication)
- Labels missing from the taxonomy are dropped
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping

from .taxonomy import Category, LABEL_TAXONOMY


@dataclass
class CategoryBucket:
    """Per-submission label buckets, one list per category."""
    environment: List[str] = field(default_factory=list)
    taste: List[str] = field(default_factory=list)
    service: List[str] = field(default_factory=list)
    price: List[str] = field(default_factory=list)
    overall: List[str] = field(default_factory=list)

    def bucket(self, category: Category) -> List[str]:
        return getattr(self, category.value)

    def as_dict(self) -> Dict[str, List[str]]:
        return {category.value: list(self.bucket(category)) for category in Category}

    def joined(self, separator: str) -> Dict[str, str]:
        """Each bucket flattened into one string, as form fields expect."""
        return {category.value: separator.join(self.bucket(category)) for category in Category}


def categorize(
    labels: Iterable[str],
    taxonomy: Mapping[str, Category] = LABEL_TAXONOMY,
) -> CategoryBucket:
    buckets = CategoryBucket()
    for label in labels:
        category = taxonomy.get(label)
        if category is None:
            continue
        buckets.bucket(category).append(label)
    return buckets
