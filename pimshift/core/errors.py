"""Exception types raised by the synchronization engine.

Only configuration errors are meant to reach the caller of a synchronization
run. Everything else is either demoted to a log line where it is raised or
caught once at the payload boundary.
"""


class PimshiftError(Exception):
    """Base class for every error raised by pimshift."""


class ConfigurationError(PimshiftError):
    """Catalog configuration required by the import is missing or unusable."""


class NoProductFiltersConfigurationError(ConfigurationError):
    def __init__(self, message: str = "Product filters must be configured before importing product attributes.") -> None:
        super().__init__(message)


class MissingAttributeProcessorError(PimshiftError):
    """No registered processor supports the attribute code."""

    def __init__(self, attribute_code: str) -> None:
        self.attribute_code = attribute_code
        super().__init__(f'No attribute processor found for attribute "{attribute_code}".')


class UnsupportedAttributeTypeError(PimshiftError):
    """No value builder knows how to convert the attribute's values."""

    def __init__(self, attribute_code: str, attribute_type: str | None = None) -> None:
        self.attribute_code = attribute_code
        self.attribute_type = attribute_type
        super().__init__(
            f'No value builder supports attribute "{attribute_code}" of type "{attribute_type or "unknown"}".'
        )


def no_configuration_set(subject: str, action: str) -> str:
    """Log message used when an optional feature has nothing configured."""
    return f"No configuration set for {subject}. {action} skipped."


__all__ = [
    "ConfigurationError",
    "MissingAttributeProcessorError",
    "NoProductFiltersConfigurationError",
    "PimshiftError",
    "UnsupportedAttributeTypeError",
    "no_configuration_set",
]
