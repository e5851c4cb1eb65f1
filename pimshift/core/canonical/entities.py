from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

Currency = str


@dataclass
class Money:
    amount: Decimal | None = None
    currency: Currency | None = None


@dataclass
class Measure:
    amount: Decimal | None = None
    unit: str | None = None


@dataclass
class Channel:
    code: str
    base_currency_code: Currency | None = None

    def __post_init__(self) -> None:
        self.base_currency_code = _normalize_currency(self.base_currency_code)


@dataclass
class ChannelPricing:
    channel_code: str
    variant_code: str | None = None
    price: int | None = None
    original_price: int | None = None


@dataclass
class ProductImage:
    path: str
    type: str | None = None


@dataclass
class ProductOption:
    code: str
    name: str | None = None


@dataclass
class ProductOptionValue:
    option_code: str
    code: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.option_code, self.code)


@dataclass
class ProductOptionValueTranslation:
    option_code: str
    value_code: str
    locale: str
    value: str | None = None


@dataclass
class Product:
    code: str | None = None
    name: str | None = None
    option_codes: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.code = _clean_text(self.code)
        self.option_codes = _ordered_unique_strings(self.option_codes)

    def has_option(self, option: ProductOption) -> bool:
        return option.code in self.option_codes

    def add_option(self, option: ProductOption) -> None:
        if not self.has_option(option):
            self.option_codes.append(option.code)


@dataclass
class VariationGroup:
    product_parent: str
    variation_axes: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.variation_axes = _ordered_unique_strings(self.variation_axes)


@dataclass
class ProductVariantTranslation:
    variant_code: str | None
    locale: str
    name: str | None = None


@dataclass
class AttributeValue:
    attribute_code: str
    locale: str | None = None
    scope: str | None = None
    values: list[Any] = field(default_factory=list)


@dataclass
class ProductVariant:
    code: str | None = None
    product_code: str | None = None
    option_values: list[ProductOptionValue] = field(default_factory=list)
    translations: dict[str, ProductVariantTranslation] = field(default_factory=dict)
    images: list[ProductImage] = field(default_factory=list)
    channel_pricings: dict[str, ChannelPricing] = field(default_factory=dict)
    attribute_values: dict[tuple[str, str | None], AttributeValue] = field(default_factory=dict)
    weight: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    depth: Decimal | None = None
    shipping_required: bool = True

    def __post_init__(self) -> None:
        self.code = _clean_text(self.code)
        self.weight = _parse_decimal(self.weight)
        self.width = _parse_decimal(self.width)
        self.height = _parse_decimal(self.height)
        self.depth = _parse_decimal(self.depth)

    def has_option_value(self, option_value: ProductOptionValue) -> bool:
        return any(item.key == option_value.key for item in self.option_values)

    def add_option_value(self, option_value: ProductOptionValue) -> None:
        if not self.has_option_value(option_value):
            self.option_values.append(option_value)

    def get_translation(self, locale: str) -> ProductVariantTranslation | None:
        return self.translations.get(locale)

    def get_or_create_translation(self, locale: str) -> ProductVariantTranslation:
        translation = self.translations.get(locale)
        if translation is None:
            translation = ProductVariantTranslation(variant_code=self.code, locale=locale)
            self.translations[locale] = translation
        return translation

    def clear_images(self) -> None:
        self.images.clear()

    def add_image(self, image: ProductImage) -> None:
        self.images.append(image)

    def get_or_create_channel_pricing(self, channel_code: str) -> ChannelPricing:
        pricing = self.channel_pricings.get(channel_code)
        if pricing is None:
            pricing = ChannelPricing(channel_code=channel_code, variant_code=self.code)
            self.channel_pricings[channel_code] = pricing
        return pricing

    def set_attribute_value(self, value: AttributeValue) -> None:
        self.attribute_values[(value.attribute_code, value.locale)] = value

    def get_attribute_value(self, attribute_code: str, locale: str | None = None) -> AttributeValue | None:
        return self.attribute_values.get((attribute_code, locale))

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "product_code": self.product_code,
            "option_values": [
                {"option": item.option_code, "code": item.code}
                for item in self.option_values
            ],
            "translations": {
                locale: translation.name
                for locale, translation in self.translations.items()
            },
            "images": [{"path": image.path, "type": image.type} for image in self.images],
            "channel_pricings": {
                channel_code: {"price": pricing.price, "original_price": pricing.original_price}
                for channel_code, pricing in self.channel_pricings.items()
            },
            "attributes": [
                {
                    "code": value.attribute_code,
                    "locale": value.locale,
                    "scope": value.scope,
                    "values": [_value_to_json(item) for item in value.values],
                }
                for value in self.attribute_values.values()
            ],
            "weight": _format_decimal(self.weight),
            "width": _format_decimal(self.width),
            "height": _format_decimal(self.height),
            "depth": _format_decimal(self.depth),
            "shipping_required": self.shipping_required,
        }


def _clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _ordered_unique_strings(items: list[Any] | tuple[Any, ...] | None) -> list[str]:
    out: list[str] = []
    seen: set[str] = set()
    for item in items or []:
        cleaned = _clean_text(item)
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        out.append(cleaned)
    return out


def _parse_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return None
    return parsed if parsed.is_finite() else None


def _normalize_currency(value: Any) -> str | None:
    cleaned = _clean_text(value)
    if cleaned is None:
        return None
    return cleaned.upper()


def _format_decimal(value: Decimal | None) -> str | None:
    if value is None or not value.is_finite():
        return None
    text = format(value.normalize(), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"", "-0"}:
        return "0"
    return text


def _value_to_json(value: Any) -> Any:
    if isinstance(value, Money):
        return {"amount": _format_decimal(value.amount), "currency": value.currency}
    if isinstance(value, Measure):
        return {"amount": _format_decimal(value.amount), "unit": value.unit}
    if isinstance(value, Decimal):
        return _format_decimal(value)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


def parse_decimal(value: Any) -> Decimal | None:
    return _parse_decimal(value)


def normalize_currency(value: Any) -> str | None:
    return _normalize_currency(value)


__all__ = [
    "AttributeValue",
    "Channel",
    "ChannelPricing",
    "Currency",
    "Measure",
    "Money",
    "Product",
    "ProductImage",
    "ProductOption",
    "ProductOptionValue",
    "ProductOptionValueTranslation",
    "ProductVariant",
    "ProductVariantTranslation",
    "VariationGroup",
    "normalize_currency",
    "parse_decimal",
]
