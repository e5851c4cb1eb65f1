import logging

from ..canonical import ProductImage, ProductVariant, VariantResource
from ..configuration import ProductConfigurationProvider
from ..errors import no_configuration_set

logger = logging.getLogger(__name__)


class ImagesProcessor:
    """Replace a variant's images with those found under the configured image attributes.

    Image assignment is best effort: a missing configuration is a warning and
    any failure is logged without reaching the caller.
    """

    def __init__(self, configuration_provider: ProductConfigurationProvider) -> None:
        self._configuration_provider = configuration_provider

    def process(self, variant: ProductVariant, resource: VariantResource) -> None:
        try:
            configuration = self._configuration_provider.get()
            if configuration is None or not configuration.image_attributes:
                logger.warning(no_configuration_set("at least one PIM image attribute", "Import image"))
                return

            if not configuration.import_media_files:
                logger.debug('Media import disabled, images of variant "%s" left untouched.', variant.code)
                return

            variant.clear_images()

            for attribute_code in configuration.image_attributes:
                for record in resource.values.get(attribute_code, []):
                    for path in _image_paths(record.data):
                        variant.add_image(
                            ProductImage(path=path, type=configuration.image_type_for(attribute_code))
                        )
        except Exception as exc:
            logger.warning(str(exc))


def _image_paths(data: object) -> list[str]:
    items = data if isinstance(data, (list, tuple)) else [data]
    return [str(item).strip() for item in items if item is not None and str(item).strip()]


__all__ = ["ImagesProcessor"]
