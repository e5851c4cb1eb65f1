import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..canonical import Channel, ProductVariant, ValueRecord, normalize_currency, parse_decimal
from ..configuration import ProductConfigurationProvider
from ..errors import no_configuration_set
from ..storage.base import EntityManager, Repository

logger = logging.getLogger(__name__)


class PriceProcessor:
    """Propagate the configured PIM price attribute onto channel pricings.

    Each ``{amount, currency}`` entry is applied to every channel whose base
    currency matches, in minor units. Failures are logged, never raised.
    """

    def __init__(
        self,
        configuration_provider: ProductConfigurationProvider,
        channel_repository: Repository[Channel],
        entity_manager: EntityManager,
    ) -> None:
        self._configuration_provider = configuration_provider
        self._channel_repository = channel_repository
        self._entity_manager = entity_manager

    def process(self, variant: ProductVariant, attributes: dict[str, list[ValueRecord]]) -> None:
        try:
            configuration = self._configuration_provider.get()
            if configuration is None or not configuration.price_attribute:
                logger.warning(no_configuration_set("the PIM price attribute", "Set product prices"))
                return

            records = attributes.get(configuration.price_attribute)
            if not records:
                logger.debug(
                    'Variant "%s" has no value for price attribute "%s".',
                    variant.code,
                    configuration.price_attribute,
                )
                return

            for record in records:
                for entry in _price_entries(record.data):
                    self._apply_price(variant, entry)
        except Exception as exc:
            logger.warning(str(exc))

    def _apply_price(self, variant: ProductVariant, entry: dict[str, Any]) -> None:
        currency = normalize_currency(entry.get("currency"))
        amount = parse_decimal(entry.get("amount"))
        if currency is None or amount is None:
            return

        channels = self._channel_repository.find_by({"base_currency_code": currency})
        if not channels:
            logger.debug('No channel uses currency "%s", price ignored for "%s".', currency, variant.code)
            return

        minor_units = to_minor_units(amount)
        for channel in channels:
            pricing = variant.get_or_create_channel_pricing(channel.code)
            self._entity_manager.persist(pricing)
            pricing.price = minor_units
            pricing.original_price = minor_units


def to_minor_units(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _price_entries(data: Any) -> list[dict[str, Any]]:
    items = data if isinstance(data, (list, tuple)) else [data]
    return [item for item in items if isinstance(item, dict)]


__all__ = ["PriceProcessor", "to_minor_units"]
