"""Catalog-side import configuration.

Filter rules and product configuration are stored by the host application.
The engine only reads them: filter rules are resolved once per run into an
``ImportPayload`` snapshot, product configuration is read by the auxiliary
processors through ``ProductConfigurationProvider``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .errors import NoProductFiltersConfigurationError
from .storage.base import Repository


@dataclass
class ProductFiltersRules:
    channel: str
    id: int | None = None
    mode: str = "simple"
    advanced_filter: str | None = None
    completeness_type: str | None = None
    completeness_value: int | None = None
    status: str | None = None
    locales: list[str] = field(default_factory=list)
    exclude_families: list[str] = field(default_factory=list)
    updated_after: datetime | None = None
    updated_before: datetime | None = None


@dataclass
class ProductConfiguration:
    id: int | None = None
    image_attributes: list[str] = field(default_factory=list)
    # PIM attribute code -> catalog image type
    images_mapping: dict[str, str] = field(default_factory=dict)
    import_media_files: bool = True
    price_attribute: str | None = None
    # PIM attribute code -> variant model field
    attribute_mapping: dict[str, str] = field(default_factory=dict)

    def image_type_for(self, attribute_code: str) -> str:
        return self.images_mapping.get(attribute_code) or attribute_code


class ProductConfigurationProvider:
    def __init__(self, repository: Repository[ProductConfiguration]) -> None:
        self._repository = repository

    def get(self) -> ProductConfiguration | None:
        return self._repository.find_latest()


@dataclass(frozen=True)
class ImportPayload:
    """Configuration snapshot handed to the engine for one run."""

    filters: ProductFiltersRules | None = None

    @property
    def scope(self) -> str | None:
        return self.filters.channel if self.filters is not None else None

    @classmethod
    def from_repositories(cls, filters_repository: Repository[ProductFiltersRules]) -> ImportPayload:
        filters = filters_repository.find_latest()
        if filters is None:
            raise NoProductFiltersConfigurationError()
        return cls(filters=filters)


__all__ = [
    "ImportPayload",
    "ProductConfiguration",
    "ProductConfigurationProvider",
    "ProductFiltersRules",
]
