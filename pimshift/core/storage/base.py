"""Collaborator interfaces consumed by the synchronization engine.

Persistence is not the engine's job: anything that can look entities up by
criteria and flush pending changes in one unit can back it.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class Repository(Protocol[T]):
    def find_one_by(self, criteria: Mapping[str, Any]) -> T | None:
        ...

    def find_by(self, criteria: Mapping[str, Any]) -> list[T]:
        ...

    def find_latest(self) -> T | None:
        """Return the most recently created record (highest id)."""
        ...


class EntityManager(Protocol):
    def persist(self, entity: Any) -> None:
        ...

    def flush(self) -> None:
        ...

    def clear(self) -> None:
        """Drop pending changes that were not flushed yet."""
        ...


@dataclass
class CatalogRepositories:
    products: Repository[Any]
    variants: Repository[Any]
    options: Repository[Any]
    option_values: Repository[Any]
    option_value_translations: Repository[Any]
    variation_groups: Repository[Any]
    channels: Repository[Any]


__all__ = ["CatalogRepositories", "EntityManager", "Repository"]
