"""Classify PIM attribute types into a closed set of categories.

Order matters: the first predicate accepting a type string wins.
"""

from collections.abc import Callable
from enum import Enum


class AttributeCategory(str, Enum):
    NONE = "none"
    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    MULTISELECT = "multiselect"
    REFERENCE_DATA = "reference_data"
    BOOLEAN = "boolean"
    NUMBER = "number"
    METRIC = "metric"
    PRICE = "price"
    DATE = "date"
    IMAGE = "image"


TypePredicate = Callable[[str], bool]


def _one_of(*types: str) -> TypePredicate:
    accepted = frozenset(types)
    return lambda attribute_type: attribute_type in accepted


_MATCHERS: tuple[tuple[AttributeCategory, TypePredicate], ...] = (
    (AttributeCategory.TEXT, _one_of("pim_catalog_text", "pim_catalog_identifier")),
    (AttributeCategory.TEXTAREA, _one_of("pim_catalog_textarea")),
    (AttributeCategory.SELECT, _one_of("pim_catalog_simpleselect")),
    (AttributeCategory.MULTISELECT, _one_of("pim_catalog_multiselect")),
    (
        AttributeCategory.REFERENCE_DATA,
        _one_of("pim_reference_data_simpleselect", "pim_reference_data_multiselect"),
    ),
    (AttributeCategory.BOOLEAN, _one_of("pim_catalog_boolean")),
    (AttributeCategory.NUMBER, _one_of("pim_catalog_number")),
    (AttributeCategory.METRIC, _one_of("pim_catalog_metric")),
    (AttributeCategory.PRICE, _one_of("pim_catalog_price_collection")),
    (AttributeCategory.DATE, _one_of("pim_catalog_date")),
    (
        AttributeCategory.IMAGE,
        _one_of("pim_catalog_image", "pim_catalog_file", "pim_catalog_asset_collection"),
    ),
)


def match(attribute_type: str | None) -> AttributeCategory:
    normalized = str(attribute_type or "").strip().lower()
    if not normalized:
        return AttributeCategory.NONE
    for category, predicate in _MATCHERS:
        if predicate(normalized):
            return category
    return AttributeCategory.NONE


def registered_categories() -> list[AttributeCategory]:
    return [category for category, _ in _MATCHERS]


__all__ = ["AttributeCategory", "TypePredicate", "match", "registered_categories"]
