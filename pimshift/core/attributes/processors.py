"""Attribute processors: apply one attribute's PIM values onto a variant."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from ..canonical import AttributeValue, Measure, ProductVariant, ValueRecord, parse_decimal
from ..configuration import ProductConfigurationProvider
from .builders import ProductAttributeValueValueBuilder
from .units import convert_measure

logger = logging.getLogger(__name__)

MODEL_FIELDS = ("weight", "width", "height", "depth", "shipping_required")


@dataclass
class AttributeProcessingContext:
    model: ProductVariant
    scope: str | None = None
    data: list[ValueRecord] = field(default_factory=list)


class AttributeProcessor(Protocol):
    def support(self, attribute_code: str, context: AttributeProcessingContext) -> bool:
        ...

    def process(self, attribute_code: str, context: AttributeProcessingContext) -> None:
        ...


class ModelAttributeProcessor:
    """Write mapped variant model fields such as ``weight`` or ``depth``.

    The configured attribute mapping (PIM code -> model field) is consulted
    first; an attribute whose code already names a model field maps to it.
    Metric values are converted to kilograms (weight) or centimeters
    (dimensions).
    """

    def __init__(
        self,
        builder: ProductAttributeValueValueBuilder,
        configuration_provider: ProductConfigurationProvider | None = None,
    ) -> None:
        self._builder = builder
        self._configuration_provider = configuration_provider

    def _model_field(self, attribute_code: str) -> str | None:
        mapping: dict[str, str] = {}
        if self._configuration_provider is not None:
            configuration = self._configuration_provider.get()
            if configuration is not None:
                mapping = configuration.attribute_mapping
        field_name = mapping.get(attribute_code, attribute_code)
        return field_name if field_name in MODEL_FIELDS else None

    def support(self, attribute_code: str, context: AttributeProcessingContext) -> bool:
        return self._model_field(attribute_code) is not None and self._builder.support(attribute_code)

    def process(self, attribute_code: str, context: AttributeProcessingContext) -> None:
        field_name = self._model_field(attribute_code)
        if field_name is None:
            return
        for record in context.data:
            if not record.applies_to(context.scope):
                continue
            values = self._builder.build(attribute_code, record.locale, context.scope, record.data)
            if not values:
                continue
            value = _coerce_model_value(field_name, values[0])
            if value is None:
                logger.warning(
                    'Ignored value %s of attribute "%s": it cannot be stored in field "%s".',
                    record.data,
                    attribute_code,
                    field_name,
                )
                continue
            setattr(context.model, field_name, value)


class AttributeValueProcessor:
    """Store the built values of any typed attribute on the variant."""

    def __init__(self, builder: ProductAttributeValueValueBuilder) -> None:
        self._builder = builder

    def support(self, attribute_code: str, context: AttributeProcessingContext) -> bool:
        return self._builder.support(attribute_code)

    def process(self, attribute_code: str, context: AttributeProcessingContext) -> None:
        for record in context.data:
            if not record.applies_to(context.scope):
                logger.debug(
                    'Ignored value of attribute "%s" for scope "%s" (importing scope "%s").',
                    attribute_code,
                    record.scope,
                    context.scope,
                )
                continue
            values = self._builder.build(attribute_code, record.locale, context.scope, record.data)
            context.model.set_attribute_value(
                AttributeValue(
                    attribute_code=attribute_code,
                    locale=record.locale,
                    scope=record.scope,
                    values=values,
                )
            )


def _coerce_model_value(field_name: str, value: Any) -> Any:
    if field_name == "shipping_required":
        return bool(value)
    if isinstance(value, Measure):
        return convert_measure(value, field_name)
    return parse_decimal(value)


__all__ = [
    "MODEL_FIELDS",
    "AttributeProcessingContext",
    "AttributeProcessor",
    "AttributeValueProcessor",
    "ModelAttributeProcessor",
]
