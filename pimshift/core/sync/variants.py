"""Synchronize one PIM variant resource into the catalog entity graph.

The flow for a resource is: parent product, variation group, axes check,
before event, variant upsert, attribute loop (with option values,
translations, images and prices for variation axes), after event, flush.
Skip conditions are logged and end the resource quietly; any other failure
is logged once at the resource boundary, where pending unflushed changes
are dropped, so a batch never stops on one bad resource. Only a missing
filter configuration reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from ..attributes import AttributeProcessingContext, AttributeProcessorRegistry, ProductOptionValueDataTransformer
from ..canonical import (
    Product,
    ProductOption,
    ProductVariant,
    ValueRecord,
    VariantResource,
    parse_resource,
)
from ..configuration import ImportPayload
from ..errors import MissingAttributeProcessorError, NoProductFiltersConfigurationError
from ..events import (
    AfterProcessingProductVariantEvent,
    BeforeProcessingProductVariantEvent,
    EventDispatcher,
    NullEventDispatcher,
)
from ..locales import LocaleProvider
from ..logging import variant_result_to_loggable
from ..processors import ImagesProcessor, PriceProcessor
from ..storage.base import CatalogRepositories, EntityManager

logger = logging.getLogger(__name__)


def option_value_code(
    transformer: ProductOptionValueDataTransformer,
    option: ProductOption,
    data: Any,
) -> str:
    """Lookup code of an option value; multi-part data is joined with ``_``."""
    if isinstance(data, (list, tuple)):
        return transformer.transform(option, "_".join(str(part) for part in data))
    return transformer.transform(option, data)


def option_value_display(data: Any) -> str:
    if isinstance(data, (list, tuple)):
        return " ".join(str(part) for part in data)
    return str(data)


class VariantSynchronizer:
    def __init__(
        self,
        catalog: CatalogRepositories,
        entity_manager: EntityManager,
        processor_registry: AttributeProcessorRegistry,
        option_value_transformer: ProductOptionValueDataTransformer,
        locale_provider: LocaleProvider,
        images_processor: ImagesProcessor,
        price_processor: PriceProcessor,
        dispatcher: EventDispatcher | None = None,
    ) -> None:
        self._catalog = catalog
        self._entity_manager = entity_manager
        self._registry = processor_registry
        self._transformer = option_value_transformer
        self._locale_provider = locale_provider
        self._images_processor = images_processor
        self._price_processor = price_processor
        self._dispatcher = dispatcher or NullEventDispatcher()

    def __call__(self, payload: ImportPayload, resource: VariantResource | dict[str, Any]) -> None:
        if payload.filters is None:
            raise NoProductFiltersConfigurationError()
        scope = payload.filters.channel

        try:
            self._synchronize(parse_resource(resource), _raw_payload(resource), scope)
        except Exception as exc:
            # A half-synchronized variant must not reach the next flush.
            self._entity_manager.clear()
            logger.warning(str(exc))

    def _synchronize(self, resource: VariantResource, raw: dict[str, Any], scope: str | None) -> None:
        product = None
        if resource.parent:
            product = self._catalog.products.find_one_by({"code": resource.parent})

        # Many resources reference models outside the imported scope.
        if product is None or not isinstance(product.code, str) or not product.code:
            logger.warning(
                'Skipped product "%s" because model "%s" does not exist.',
                resource.identifier,
                resource.parent,
            )
            return

        group = self._catalog.variation_groups.find_one_by({"product_parent": product.code})
        if group is None:
            logger.warning(
                'Skipped product "%s" because model "%s" does not exist as group.',
                resource.identifier,
                resource.parent,
            )
            return

        if not group.variation_axes:
            logger.warning(
                'Skipped product "%s" because group has no variation axis.',
                resource.identifier,
            )
            return

        self._dispatcher.dispatch(BeforeProcessingProductVariantEvent(resource=resource, product=product, raw=raw))

        variant = self._process_variations(resource, product, group.variation_axes, scope)

        self._dispatcher.dispatch(AfterProcessingProductVariantEvent(resource=resource, variant=variant, raw=raw))
        self._entity_manager.flush()

        loggable = variant_result_to_loggable(variant, channels=self._catalog.channels)
        if loggable is not None:
            logger.debug("Synchronized variant %s: %s", variant.code, loggable)

    def _process_variations(
        self,
        resource: VariantResource,
        product: Product,
        variation_axes: list[str],
        scope: str | None,
    ) -> ProductVariant:
        variant = self._get_or_create_variant(resource.identifier, product)
        images_processed = False

        for attribute_code, records in resource.values.items():
            context = AttributeProcessingContext(model=variant, scope=scope, data=records)
            try:
                processor = self._registry.get_processor(attribute_code, context)
            except MissingAttributeProcessorError as exc:
                logger.debug(str(exc))
            else:
                processor.process(attribute_code, context)

            # Only variation axes become options of the parent product.
            if attribute_code not in variation_axes:
                continue

            option = self._catalog.options.find_one_by({"code": attribute_code})
            if option is None:
                logger.warning(
                    'Skipped ProductVariant "%s" creation because ProductOption "%s" does not exist.',
                    variant.code,
                    attribute_code,
                )
                continue

            if not product.has_option(option):
                product.add_option(option)

            self._set_option_values(variant, option, records)

            # The images processor reads the whole resource, one pass is enough.
            if not images_processed:
                self._images_processor.process(variant, resource)
                images_processed = True

            self._price_processor.process(variant, resource.values)

        return variant

    def _set_option_values(
        self,
        variant: ProductVariant,
        option: ProductOption,
        records: list[ValueRecord],
    ) -> None:
        for record in records:
            code = option_value_code(self._transformer, option, record.data)
            value = option_value_display(record.data)

            option_value = self._catalog.option_values.find_one_by({"option_code": option.code, "code": code})
            if option_value is None:
                logger.warning(
                    'Skipped variant value "%s" for option "%s" on variant "%s" because ProductOptionValue does not exist.',
                    value,
                    option.code,
                    variant.code,
                )
                return

            if not variant.has_option_value(option_value):
                variant.add_option_value(option_value)

            for locale in self._locale_provider.get_locale_codes():
                option_value_translation = self._catalog.option_value_translations.find_one_by(
                    {
                        "option_code": option.code,
                        "value_code": option_value.code,
                        "locale": locale,
                    }
                )
                if option_value_translation is None:
                    continue

                # Last axis processed for a locale names the variant.
                translation = variant.get_or_create_translation(locale)
                self._entity_manager.persist(translation)
                translation.name = option_value_translation.value

    def _get_or_create_variant(self, code: str, product: Product) -> ProductVariant:
        variant = self._catalog.variants.find_one_by({"code": code})
        if variant is not None:
            return variant

        variant = ProductVariant(code=code, product_code=product.code)
        self._entity_manager.persist(variant)
        return variant


def _raw_payload(resource: VariantResource | dict[str, Any]) -> dict[str, Any]:
    if isinstance(resource, VariantResource):
        return resource.model_dump()
    return dict(resource)


__all__ = ["VariantSynchronizer", "option_value_code", "option_value_display"]
