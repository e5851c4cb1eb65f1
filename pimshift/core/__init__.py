"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests
and host applications that own persistence.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AttributeCategory": ("pimshift.core.attributes", "AttributeCategory"),
    "AttributeDefinition": ("pimshift.core.attributes", "AttributeDefinition"),
    "AttributeProcessorRegistry": ("pimshift.core.attributes", "AttributeProcessorRegistry"),
    "AttributePropertiesProvider": ("pimshift.core.attributes", "AttributePropertiesProvider"),
    "ImportPayload": ("pimshift.core.configuration", "ImportPayload"),
    "MissingAttributeProcessorError": ("pimshift.core.errors", "MissingAttributeProcessorError"),
    "NoProductFiltersConfigurationError": ("pimshift.core.errors", "NoProductFiltersConfigurationError"),
    "ProductConfiguration": ("pimshift.core.configuration", "ProductConfiguration"),
    "ProductFiltersRules": ("pimshift.core.configuration", "ProductFiltersRules"),
    "VariantResource": ("pimshift.core.canonical", "VariantResource"),
    "VariantSynchronizer": ("pimshift.core.sync", "VariantSynchronizer"),
    "build_in_memory_catalog": ("pimshift.core.storage", "build_in_memory_catalog"),
    "build_variant_synchronizer": ("pimshift.core.api", "build_variant_synchronizer"),
    "match": ("pimshift.core.attributes", "match"),
    "synchronize_resources": ("pimshift.core.api", "synchronize_resources"),
}

__all__ = [
    "AttributeCategory",
    "AttributeDefinition",
    "AttributeProcessorRegistry",
    "AttributePropertiesProvider",
    "ImportPayload",
    "MissingAttributeProcessorError",
    "NoProductFiltersConfigurationError",
    "ProductConfiguration",
    "ProductFiltersRules",
    "VariantResource",
    "VariantSynchronizer",
    "build_in_memory_catalog",
    "build_variant_synchronizer",
    "match",
    "synchronize_resources",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
