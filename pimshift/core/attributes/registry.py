"""Registry resolving an attribute code to its processor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..configuration import ProductConfigurationProvider
from ..errors import MissingAttributeProcessorError
from .builders import ProductAttributeValueValueBuilder
from .processors import (
    AttributeProcessingContext,
    AttributeProcessor,
    AttributeValueProcessor,
    ModelAttributeProcessor,
)


@dataclass
class AttributeProcessorRegistry:
    processors: list[AttributeProcessor] = field(default_factory=list)

    def register(self, processor: AttributeProcessor) -> None:
        self.processors.append(processor)

    def get_processor(self, attribute_code: str, context: AttributeProcessingContext) -> AttributeProcessor:
        for processor in self.processors:
            if processor.support(attribute_code, context):
                return processor
        raise MissingAttributeProcessorError(attribute_code)

    def list_processors(self) -> list[str]:
        return [type(processor).__name__ for processor in self.processors]


def default_registry(
    builder: ProductAttributeValueValueBuilder,
    configuration_provider: ProductConfigurationProvider | None = None,
    *,
    extra: Iterable[AttributeProcessor] = (),
) -> AttributeProcessorRegistry:
    """``extra`` processors first, then model fields, then plain attribute values."""
    registry = AttributeProcessorRegistry()
    for processor in extra:
        registry.register(processor)
    registry.register(ModelAttributeProcessor(builder, configuration_provider))
    registry.register(AttributeValueProcessor(builder))
    return registry


__all__ = ["AttributeProcessorRegistry", "default_registry"]
