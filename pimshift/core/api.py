"""Stable public API facade for the Pimshift core engine."""

import logging
from collections.abc import Iterable
from typing import Any

from .attributes import (
    AttributeProcessor,
    AttributePropertiesProvider,
    ProductOptionValueDataTransformer,
    default_registry,
    default_value_builder,
)
from .canonical import VariantResource
from .configuration import ImportPayload, ProductConfiguration, ProductConfigurationProvider, ProductFiltersRules
from .events import EventDispatcher
from .locales import LocaleProvider
from .processors import ImagesProcessor, PriceProcessor
from .storage.base import CatalogRepositories, EntityManager, Repository
from .sync import VariantSynchronizer

logger = logging.getLogger(__name__)


def build_variant_synchronizer(
    catalog: CatalogRepositories,
    entity_manager: EntityManager,
    *,
    properties: AttributePropertiesProvider,
    configuration_repository: Repository[ProductConfiguration],
    locales: Iterable[str],
    dispatcher: EventDispatcher | None = None,
    extra_processors: Iterable[AttributeProcessor] = (),
) -> VariantSynchronizer:
    """Wire a synchronizer with the default builders and processors."""
    configuration_provider = ProductConfigurationProvider(configuration_repository)
    builder = default_value_builder(properties)
    return VariantSynchronizer(
        catalog=catalog,
        entity_manager=entity_manager,
        processor_registry=default_registry(builder, configuration_provider, extra=extra_processors),
        option_value_transformer=ProductOptionValueDataTransformer(),
        locale_provider=LocaleProvider(locales),
        images_processor=ImagesProcessor(configuration_provider),
        price_processor=PriceProcessor(configuration_provider, catalog.channels, entity_manager),
        dispatcher=dispatcher,
    )


def synchronize_resources(
    synchronizer: VariantSynchronizer,
    resources: Iterable[VariantResource | dict[str, Any]],
    *,
    filters_repository: Repository[ProductFiltersRules],
) -> int:
    """Run ``synchronizer`` over ``resources`` one after the other.

    The filter configuration is resolved once for the whole batch and a
    missing one raises ``NoProductFiltersConfigurationError`` before any
    resource is touched. Returns how many resources were handed over.
    """
    payload = ImportPayload.from_repositories(filters_repository)
    count = 0
    for resource in resources:
        synchronizer(payload, resource)
        count += 1
    logger.info("Processed %d variant resource(s) for channel %s", count, payload.scope)
    return count


__all__ = ["build_variant_synchronizer", "synchronize_resources"]
