"""Value builders: raw PIM attribute values -> internal representation.

Every builder returns a list, including single-valued attributes, so callers
handle one shape. Builders only compute values and never touch entities.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from ..canonical import Measure, Money, normalize_currency, parse_decimal
from ..errors import UnsupportedAttributeTypeError
from .matchers import AttributeCategory, match
from .properties import AttributePropertiesProvider
from .transformers import AttributeOptionValueDataTransformer


class ValueBuilder:
    category: AttributeCategory = AttributeCategory.NONE

    def __init__(self, properties: AttributePropertiesProvider) -> None:
        self._properties = properties

    def support(self, attribute_code: str) -> bool:
        return match(self._properties.get_type(attribute_code)) is self.category

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        raise NotImplementedError


class TextValueBuilder(ValueBuilder):
    category = AttributeCategory.TEXT

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        if value is None:
            return []
        return [str(value).strip()]


class TextareaValueBuilder(TextValueBuilder):
    category = AttributeCategory.TEXTAREA

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        if value is None:
            return []
        return [str(value)]


class SelectValueBuilder(ValueBuilder):
    category = AttributeCategory.SELECT

    def __init__(
        self,
        properties: AttributePropertiesProvider,
        transformer: AttributeOptionValueDataTransformer,
    ) -> None:
        super().__init__(properties)
        self._transformer = transformer

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        if value is None or value == "":
            return []
        return [self._transformer.transform(value)]


class ReferenceDataValueBuilder(SelectValueBuilder):
    category = AttributeCategory.REFERENCE_DATA

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        if isinstance(value, (list, tuple)):
            return [self._transformer.transform(item) for item in value if item not in (None, "")]
        return super().build(attribute_code, locale, scope, value)


class MultiSelectValueBuilder(SelectValueBuilder):
    category = AttributeCategory.MULTISELECT

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        if value is None:
            return []
        items = value if isinstance(value, (list, tuple)) else [value]
        return [self._transformer.transform(item) for item in items if item not in (None, "")]


class BooleanValueBuilder(ValueBuilder):
    category = AttributeCategory.BOOLEAN

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value.strip().lower() in {"1", "true", "yes", "on"}]
        return [bool(value)]


class NumberValueBuilder(ValueBuilder):
    category = AttributeCategory.NUMBER

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        parsed = parse_decimal(value)
        return [parsed] if parsed is not None else []


class MetricValueBuilder(ValueBuilder):
    category = AttributeCategory.METRIC

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        if isinstance(value, dict):
            amount, unit = value.get("amount"), value.get("unit")
        else:
            amount, unit = value, None
        parsed = parse_decimal(amount)
        if parsed is None:
            return []
        return [Measure(amount=parsed, unit=str(unit).strip().upper() if unit else None)]


class PriceValueBuilder(ValueBuilder):
    category = AttributeCategory.PRICE

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        items = value if isinstance(value, (list, tuple)) else [value]
        prices: list[Money] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            amount = parse_decimal(item.get("amount"))
            currency = normalize_currency(item.get("currency"))
            if amount is None and currency is None:
                continue
            prices.append(Money(amount=amount, currency=currency))
        return prices


class DateValueBuilder(ValueBuilder):
    category = AttributeCategory.DATE

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        if isinstance(value, datetime):
            return [value.date()]
        if isinstance(value, date):
            return [value]
        text = str(value or "").strip()
        if not text:
            return []
        try:
            return [datetime.fromisoformat(text).date()]
        except ValueError:
            return []


class ImageValueBuilder(ValueBuilder):
    category = AttributeCategory.IMAGE

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        items = value if isinstance(value, (list, tuple)) else [value]
        return [str(item).strip() for item in items if item is not None and str(item).strip()]


class ProductAttributeValueValueBuilder:
    """Delegate to the first registered builder that supports the attribute."""

    def __init__(self, properties: AttributePropertiesProvider, builders: Iterable[ValueBuilder]) -> None:
        self._properties = properties
        self._builders = list(builders)

    def find_builder(self, attribute_code: str) -> ValueBuilder | None:
        for builder in self._builders:
            if builder.support(attribute_code):
                return builder
        return None

    def support(self, attribute_code: str) -> bool:
        return self.find_builder(attribute_code) is not None

    def build(self, attribute_code: str, locale: str | None, scope: str | None, value: Any) -> list[Any]:
        builder = self.find_builder(attribute_code)
        if builder is None:
            raise UnsupportedAttributeTypeError(attribute_code, self._properties.get_type(attribute_code))
        return builder.build(attribute_code, locale, scope, value)


def default_value_builder(
    properties: AttributePropertiesProvider,
    transformer: AttributeOptionValueDataTransformer | None = None,
) -> ProductAttributeValueValueBuilder:
    transformer = transformer or AttributeOptionValueDataTransformer()
    return ProductAttributeValueValueBuilder(
        properties,
        [
            TextValueBuilder(properties),
            TextareaValueBuilder(properties),
            SelectValueBuilder(properties, transformer),
            MultiSelectValueBuilder(properties, transformer),
            ReferenceDataValueBuilder(properties, transformer),
            BooleanValueBuilder(properties),
            NumberValueBuilder(properties),
            MetricValueBuilder(properties),
            PriceValueBuilder(properties),
            DateValueBuilder(properties),
            ImageValueBuilder(properties),
        ],
    )


__all__ = [
    "BooleanValueBuilder",
    "DateValueBuilder",
    "ImageValueBuilder",
    "MetricValueBuilder",
    "MultiSelectValueBuilder",
    "NumberValueBuilder",
    "PriceValueBuilder",
    "ProductAttributeValueValueBuilder",
    "ReferenceDataValueBuilder",
    "SelectValueBuilder",
    "TextValueBuilder",
    "TextareaValueBuilder",
    "ValueBuilder",
    "default_value_builder",
]
