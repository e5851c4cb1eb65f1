from .entities import (
    AttributeValue,
    Channel,
    ChannelPricing,
    Currency,
    Measure,
    Money,
    Product,
    ProductImage,
    ProductOption,
    ProductOptionValue,
    ProductOptionValueTranslation,
    ProductVariant,
    ProductVariantTranslation,
    VariationGroup,
    normalize_currency,
    parse_decimal,
)
from .payload import ValueRecord, VariantResource, parse_resource

__all__ = [
    "AttributeValue",
    "Channel",
    "ChannelPricing",
    "Currency",
    "Measure",
    "Money",
    "Product",
    "ProductImage",
    "ProductOption",
    "ProductOptionValue",
    "ProductOptionValueTranslation",
    "ProductVariant",
    "ProductVariantTranslation",
    "ValueRecord",
    "VariantResource",
    "VariationGroup",
    "normalize_currency",
    "parse_decimal",
    "parse_resource",
]
