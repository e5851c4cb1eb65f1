"""In-memory repositories and unit of work.

Criteria match entity attributes by equality. Entities persisted through
``InMemoryEntityManager`` become visible to lookups only after ``flush``.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from ..canonical import (
    Channel,
    Product,
    ProductOption,
    ProductOptionValue,
    ProductOptionValueTranslation,
    ProductVariant,
    VariationGroup,
)
from .base import CatalogRepositories

T = TypeVar("T")

_MISSING = object()


class InMemoryRepository(Generic[T]):
    def __init__(self, entities: Iterable[T] = ()) -> None:
        self._entities: list[T] = []
        for entity in entities:
            self.add(entity)

    def add(self, entity: T) -> None:
        if any(existing is entity for existing in self._entities):
            return
        self._entities.append(entity)

    def all(self) -> list[T]:
        return list(self._entities)

    def find_by(self, criteria: Mapping[str, Any]) -> list[T]:
        return [entity for entity in self._entities if _matches(entity, criteria)]

    def find_one_by(self, criteria: Mapping[str, Any]) -> T | None:
        for entity in self._entities:
            if _matches(entity, criteria):
                return entity
        return None

    def find_latest(self) -> T | None:
        if not self._entities:
            return None
        # Records without an id rank by insertion order.
        ranked = list(enumerate(self._entities))
        ranked.sort(key=lambda pair: (getattr(pair[1], "id", None) or 0, pair[0]))
        return ranked[-1][1]

    def __len__(self) -> int:
        return len(self._entities)


class InMemoryEntityManager:
    def __init__(self, repositories: Mapping[type, InMemoryRepository[Any]] | None = None) -> None:
        self._repositories = dict(repositories or {})
        self._pending: list[Any] = []
        self.flush_count = 0
        self.clear_count = 0

    @property
    def pending(self) -> list[Any]:
        return list(self._pending)

    def persist(self, entity: Any) -> None:
        if any(existing is entity for existing in self._pending):
            return
        self._pending.append(entity)

    def flush(self) -> None:
        for entity in self._pending:
            repository = self._repositories.get(type(entity))
            if repository is not None:
                repository.add(entity)
        self._pending.clear()
        self.flush_count += 1

    def clear(self) -> None:
        self._pending.clear()
        self.clear_count += 1


def _matches(entity: Any, criteria: Mapping[str, Any]) -> bool:
    for key, expected in criteria.items():
        if getattr(entity, key, _MISSING) != expected:
            return False
    return True


def build_in_memory_catalog(
    *,
    products: Iterable[Product] = (),
    variants: Iterable[ProductVariant] = (),
    options: Iterable[ProductOption] = (),
    option_values: Iterable[ProductOptionValue] = (),
    option_value_translations: Iterable[ProductOptionValueTranslation] = (),
    variation_groups: Iterable[VariationGroup] = (),
    channels: Iterable[Channel] = (),
) -> tuple[CatalogRepositories, InMemoryEntityManager]:
    catalog = CatalogRepositories(
        products=InMemoryRepository(products),
        variants=InMemoryRepository(variants),
        options=InMemoryRepository(options),
        option_values=InMemoryRepository(option_values),
        option_value_translations=InMemoryRepository(option_value_translations),
        variation_groups=InMemoryRepository(variation_groups),
        channels=InMemoryRepository(channels),
    )
    entity_manager = InMemoryEntityManager(
        {
            Product: catalog.products,
            ProductVariant: catalog.variants,
        }
    )
    return catalog, entity_manager


__all__ = ["InMemoryEntityManager", "InMemoryRepository", "build_in_memory_catalog"]
