import logging

from pimshift.core.canonical import ProductImage, ProductVariant
from pimshift.core.configuration import ProductConfiguration, ProductConfigurationProvider
from pimshift.core.processors import ImagesProcessor
from pimshift.core.storage import InMemoryRepository
from tests.helpers._catalog_builders import parse, shoes_resource


def _processor(configuration: ProductConfiguration | None) -> ImagesProcessor:
    return ImagesProcessor(ProductConfigurationProvider(InMemoryRepository([configuration] if configuration else [])))


def _resource():  # type: ignore[no-untyped-def]
    return parse(
        shoes_resource(
            {
                "picture": [{"data": "p/front.jpg"}],
                "gallery": [{"data": ["p/side.jpg", "p/back.jpg"]}],
                "color": [{"data": "red"}],
            }
        )
    )


def test_images_are_replaced_from_configured_attributes() -> None:
    processor = _processor(
        ProductConfiguration(id=1, image_attributes=["picture", "gallery"], images_mapping={"picture": "main"})
    )
    variant = ProductVariant(code="SHOES-42", images=[ProductImage(path="old.jpg")])

    processor.process(variant, _resource())

    assert [(image.path, image.type) for image in variant.images] == [
        ("p/front.jpg", "main"),
        ("p/side.jpg", "gallery"),
        ("p/back.jpg", "gallery"),
    ]


def test_reprocessing_does_not_duplicate_images() -> None:
    processor = _processor(ProductConfiguration(id=1, image_attributes=["picture"]))
    variant = ProductVariant(code="SHOES-42")

    processor.process(variant, _resource())
    processor.process(variant, _resource())

    assert [image.path for image in variant.images] == ["p/front.jpg"]


def test_missing_image_configuration_warns(caplog) -> None:
    variant = ProductVariant(code="SHOES-42", images=[ProductImage(path="old.jpg")])

    with caplog.at_level(logging.WARNING, logger="pimshift"):
        _processor(None).process(variant, _resource())
        _processor(ProductConfiguration(id=1)).process(variant, _resource())

    assert caplog.text.count("No configuration set for at least one PIM image attribute. Import image skipped.") == 2
    assert [image.path for image in variant.images] == ["old.jpg"]


def test_disabled_media_import_leaves_images_untouched() -> None:
    processor = _processor(ProductConfiguration(id=1, image_attributes=["picture"], import_media_files=False))
    variant = ProductVariant(code="SHOES-42", images=[ProductImage(path="old.jpg")])

    processor.process(variant, _resource())

    assert [image.path for image in variant.images] == ["old.jpg"]


def test_latest_configuration_wins() -> None:
    repository = InMemoryRepository(
        [
            ProductConfiguration(id=2, image_attributes=["gallery"]),
            ProductConfiguration(id=1, image_attributes=["picture"]),
        ]
    )
    processor = ImagesProcessor(ProductConfigurationProvider(repository))
    variant = ProductVariant(code="SHOES-42")

    processor.process(variant, _resource())

    assert [image.path for image in variant.images] == ["p/side.jpg", "p/back.jpg"]
