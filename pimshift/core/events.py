"""Before/after processing events and a minimal synchronous dispatcher."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from .canonical import Product, ProductVariant, VariantResource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BeforeProcessingProductVariantEvent:
    resource: VariantResource
    product: Product
    # Mapping as received from the PIM, before validation.
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AfterProcessingProductVariantEvent:
    resource: VariantResource
    variant: ProductVariant
    raw: dict[str, Any] = field(default_factory=dict)


Listener = Callable[[Any], None]


class EventDispatcher(Protocol):
    def dispatch(self, event: Any) -> Any:
        ...


@dataclass
class SimpleEventDispatcher:
    listeners: dict[type, list[Listener]] = field(default_factory=dict)

    def add_listener(self, event_type: type, listener: Listener) -> None:
        self.listeners.setdefault(event_type, []).append(listener)

    def dispatch(self, event: Any) -> Any:
        for listener in self.listeners.get(type(event), []):
            listener(event)
        return event


class NullEventDispatcher:
    def dispatch(self, event: Any) -> Any:
        logger.debug("Dispatched %s with no listeners attached.", type(event).__name__)
        return event


__all__ = [
    "AfterProcessingProductVariantEvent",
    "BeforeProcessingProductVariantEvent",
    "EventDispatcher",
    "Listener",
    "NullEventDispatcher",
    "SimpleEventDispatcher",
]
