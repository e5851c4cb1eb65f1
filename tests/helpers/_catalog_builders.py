from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pimshift.core.attributes import (
    AttributeDefinition,
    AttributePropertiesProvider,
    ProductOptionValueDataTransformer,
    default_registry,
    default_value_builder,
)
from pimshift.core.canonical import (
    Channel,
    Product,
    ProductOption,
    ProductOptionValue,
    ProductOptionValueTranslation,
    ProductVariant,
    VariantResource,
    VariationGroup,
)
from pimshift.core.configuration import (
    ImportPayload,
    ProductConfiguration,
    ProductConfigurationProvider,
    ProductFiltersRules,
)
from pimshift.core.events import (
    AfterProcessingProductVariantEvent,
    BeforeProcessingProductVariantEvent,
    SimpleEventDispatcher,
)
from pimshift.core.locales import LocaleProvider
from pimshift.core.processors import ImagesProcessor, PriceProcessor
from pimshift.core.storage import CatalogRepositories, InMemoryEntityManager, InMemoryRepository, build_in_memory_catalog
from pimshift.core.sync import VariantSynchronizer

TRANSFORMER = ProductOptionValueDataTransformer()

DEFAULT_ATTRIBUTES = (
    AttributeDefinition(code="color", type="pim_catalog_simpleselect"),
    AttributeDefinition(code="size", type="pim_catalog_simpleselect"),
    AttributeDefinition(code="weight", type="pim_catalog_metric"),
    AttributeDefinition(code="description", type="pim_catalog_textarea", localizable=True),
    AttributeDefinition(code="price", type="pim_catalog_price_collection"),
    AttributeDefinition(code="picture", type="pim_catalog_image"),
)

# option code -> raw value -> {locale: translated value}
DEFAULT_OPTION_VALUES: dict[str, dict[Any, dict[str, str]]] = {
    "color": {"red": {"en_US": "Red", "fr_FR": "Rouge"}, "blue": {"en_US": "Blue"}},
    "size": {"42": {"en_US": "42 EU"}, "red_xl": {"en_US": "Red XL"}},
}


class RecordingImagesProcessor(ImagesProcessor):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.calls: list[str | None] = []

    def process(self, variant, resource) -> None:  # type: ignore[no-untyped-def]
        self.calls.append(variant.code)
        super().process(variant, resource)


class RecordingPriceProcessor(PriceProcessor):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.calls: list[str | None] = []

    def process(self, variant, attributes) -> None:  # type: ignore[no-untyped-def]
        self.calls.append(variant.code)
        super().process(variant, attributes)


@dataclass
class SyncFixture:
    catalog: CatalogRepositories
    entity_manager: InMemoryEntityManager
    synchronizer: VariantSynchronizer
    payload: ImportPayload
    dispatcher: SimpleEventDispatcher
    images_processor: RecordingImagesProcessor
    price_processor: RecordingPriceProcessor
    configuration_repository: InMemoryRepository[ProductConfiguration]
    filters_repository: InMemoryRepository[ProductFiltersRules]
    events: list[Any] = field(default_factory=list)

    def variant(self, code: str) -> ProductVariant | None:
        return self.catalog.variants.find_one_by({"code": code})

    def product(self, code: str) -> Product | None:
        return self.catalog.products.find_one_by({"code": code})


def option_value(option_code: str, raw_value: Any) -> ProductOptionValue:
    return ProductOptionValue(
        option_code=option_code,
        code=TRANSFORMER.transform(ProductOption(code=option_code), raw_value),
    )


def build_sync_fixture(
    *,
    axes: tuple[str, ...] = ("color", "size"),
    options: tuple[str, ...] = ("color", "size"),
    option_values: dict[str, dict[Any, dict[str, str]]] | None = None,
    locales: tuple[str, ...] = ("en_US",),
    products: tuple[str, ...] = ("SHOES",),
    with_group: bool = True,
    configuration: ProductConfiguration | None = None,
    with_filters: bool = True,
    extra_processors: tuple[Any, ...] = (),
) -> SyncFixture:
    option_values = DEFAULT_OPTION_VALUES if option_values is None else option_values

    values: list[ProductOptionValue] = []
    translations: list[ProductOptionValueTranslation] = []
    for option_code, raw_values in option_values.items():
        for raw_value, labels in raw_values.items():
            value = option_value(option_code, raw_value)
            values.append(value)
            for locale, label in labels.items():
                translations.append(
                    ProductOptionValueTranslation(
                        option_code=option_code,
                        value_code=value.code,
                        locale=locale,
                        value=label,
                    )
                )

    catalog, entity_manager = build_in_memory_catalog(
        products=[Product(code=code) for code in products],
        options=[ProductOption(code=code) for code in options],
        option_values=values,
        option_value_translations=translations,
        variation_groups=[VariationGroup(product_parent="SHOES", variation_axes=list(axes))] if with_group else [],
        channels=[Channel(code="WEB_US", base_currency_code="USD"), Channel(code="WEB_EU", base_currency_code="eur")],
    )

    if configuration is None:
        configuration = ProductConfiguration(id=1, image_attributes=["picture"], price_attribute="price")
    configuration_repository: InMemoryRepository[ProductConfiguration] = InMemoryRepository([configuration])
    filters_repository: InMemoryRepository[ProductFiltersRules] = InMemoryRepository(
        [ProductFiltersRules(id=1, channel="WEB_US")] if with_filters else []
    )

    configuration_provider = ProductConfigurationProvider(configuration_repository)
    properties = AttributePropertiesProvider(DEFAULT_ATTRIBUTES)
    builder = default_value_builder(properties)
    images_processor = RecordingImagesProcessor(configuration_provider)
    price_processor = RecordingPriceProcessor(configuration_provider, catalog.channels, entity_manager)

    events: list[Any] = []
    dispatcher = SimpleEventDispatcher()
    dispatcher.add_listener(BeforeProcessingProductVariantEvent, events.append)
    dispatcher.add_listener(AfterProcessingProductVariantEvent, events.append)

    synchronizer = VariantSynchronizer(
        catalog=catalog,
        entity_manager=entity_manager,
        processor_registry=default_registry(builder, configuration_provider, extra=extra_processors),
        option_value_transformer=TRANSFORMER,
        locale_provider=LocaleProvider(locales),
        images_processor=images_processor,
        price_processor=price_processor,
        dispatcher=dispatcher,
    )

    return SyncFixture(
        catalog=catalog,
        entity_manager=entity_manager,
        synchronizer=synchronizer,
        payload=ImportPayload(filters=filters_repository.find_latest()),
        dispatcher=dispatcher,
        images_processor=images_processor,
        price_processor=price_processor,
        configuration_repository=configuration_repository,
        filters_repository=filters_repository,
        events=events,
    )


def shoes_resource(values: dict[str, Any] | None = None, *, identifier: str = "SHOES-42", parent: str | None = "SHOES") -> dict[str, Any]:
    if values is None:
        values = {
            "color": [{"data": "red", "locale": None, "scope": None}],
            "size": [{"data": "42", "locale": None, "scope": None}],
        }
    return {"identifier": identifier, "parent": parent, "values": values}


def parse(resource: dict[str, Any]) -> VariantResource:
    return VariantResource.model_validate(resource)
