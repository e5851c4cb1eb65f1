"""Public package entrypoint for the Pimshift engine.

This package synchronizes product variants imported from a PIM source into a
commerce catalog entity graph. The heavy lifting lives in ``pimshift.core``.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "ImportPayload": ("pimshift.core", "ImportPayload"),
    "VariantResource": ("pimshift.core", "VariantResource"),
    "VariantSynchronizer": ("pimshift.core", "VariantSynchronizer"),
    "configure_logging": ("pimshift.config", "configure_logging"),
    "get_settings": ("pimshift.config", "get_settings"),
    "synchronize_resources": ("pimshift.core", "synchronize_resources"),
}

try:
    __version__ = version("pimshift")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ImportPayload",
    "VariantResource",
    "VariantSynchronizer",
    "__version__",
    "configure_logging",
    "get_settings",
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
