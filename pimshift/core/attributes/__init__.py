from .builders import (
    ProductAttributeValueValueBuilder,
    ValueBuilder,
    default_value_builder,
)
from .matchers import AttributeCategory, match
from .processors import (
    AttributeProcessingContext,
    AttributeProcessor,
    AttributeValueProcessor,
    ModelAttributeProcessor,
)
from .properties import AttributeDefinition, AttributePropertiesProvider
from .registry import AttributeProcessorRegistry, default_registry
from .transformers import AttributeOptionValueDataTransformer, ProductOptionValueDataTransformer
from .units import convert_measure

__all__ = [
    "AttributeCategory",
    "AttributeDefinition",
    "AttributeOptionValueDataTransformer",
    "AttributeProcessingContext",
    "AttributeProcessor",
    "AttributeProcessorRegistry",
    "AttributePropertiesProvider",
    "AttributeValueProcessor",
    "ModelAttributeProcessor",
    "ProductAttributeValueValueBuilder",
    "ProductOptionValueDataTransformer",
    "ValueBuilder",
    "convert_measure",
    "default_registry",
    "default_value_builder",
    "match",
]
