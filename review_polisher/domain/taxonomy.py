"""
Label Taxonomy - Fixed Label to Category Mapping
================================================

Canonical labels are the identifiers the frontend sends in `selectedLabels`.
The mapping is built once at import and exposed read-only; a label that is
not listed here belongs to no category.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Category(Enum):
    """The five review aspects recorded by the form sink."""
    ENVIRONMENT = "environment"
    TASTE = "taste"
    SERVICE = "service"
    PRICE = "price"
    OVERALL = "overall"


_LABELS_BY_CATEGORY = {
    Category.ENVIRONMENT: (
        "环境舒适", "装修别致", "干净整洁", "氛围很好", "座位宽敞",
        "环境一般", "有点吵闹", "座位拥挤", "卫生欠佳",
    ),
    Category.TASTE: (
        "味道正宗", "口味很棒", "食材新鲜", "分量足", "菜品精致", "香辣够味",
        "味道一般", "偏咸", "偏油", "分量少",
    ),
    Category.SERVICE: (
        "态度很好", "服务热情", "上菜快", "服务周到",
        "服务一般", "上菜慢", "态度冷淡",
    ),
    Category.PRICE: (
        "性价比高", "价格实惠", "物有所值",
        "价格偏贵", "性价比低",
    ),
    Category.OVERALL: (
        "非常满意", "值得推荐", "会再来", "超出预期",
        "体验一般", "不会再来", "有待改进",
    ),
}


def _build_taxonomy() -> Mapping[str, Category]:
    mapping = {}
    for category, labels in _LABELS_BY_CATEGORY.items():
        for label in labels:
            mapping[label] = category
    return MappingProxyType(mapping)


LABEL_TAXONOMY: Mapping[str, Category] = _build_taxonomy()
