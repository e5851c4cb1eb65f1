from typing import Any

from babel.numbers import get_currency_symbol

from ...config import get_settings
from ..canonical import Channel, ProductVariant
from ..storage.base import Repository

_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _format_minor_units(value: int | None, currency: str | None, *, locale: str) -> str:
    if value is None:
        return ""
    number = f"{value / 100:.2f}"

    symbol = ""
    currency_code = str(currency or "").upper()
    if currency_code:
        try:
            symbol = get_currency_symbol(currency_code, locale=locale)
        except Exception:
            symbol = currency_code

    if symbol:
        if symbol.isalpha():
            return f"{number} {symbol}"
        return f"{number}{symbol}"
    return number


def _channel_currencies(channels: Repository[Channel] | None, codes: list[str]) -> dict[str, str | None]:
    if channels is None:
        return {code: None for code in codes}
    out: dict[str, str | None] = {}
    for code in codes:
        channel = channels.find_one_by({"code": code})
        out[code] = channel.base_currency_code if channel is not None else None
    return out


def variant_result_to_loggable(
    variant: ProductVariant,
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
    channels: Repository[Channel] | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    data = variant.to_dict()
    if level == "extrahigh":
        return data

    if level == "high":
        data.pop("attributes", None)
        return data

    currencies = _channel_currencies(channels, list(variant.channel_pricings.keys()))
    prices = {
        channel_code: _format_minor_units(
            pricing.price,
            currencies.get(channel_code),
            locale=settings.default_locale,
        )
        for channel_code, pricing in variant.channel_pricings.items()
    }

    summary = {
        "code": data.get("code"),
        "product_code": data.get("product_code"),
        "option_values": [item["code"] for item in data.get("option_values", [])],
        "names": data.get("translations", {}),
        "images": {"count": len(variant.images)},
        "prices": prices,
        "attributes_count": len(variant.attribute_values),
    }

    if level == "low":
        return {
            "code": summary["code"],
            "option_values": summary["option_values"],
            "images": summary["images"],
            "prices": summary["prices"],
        }

    return summary


__all__ = ["variant_result_to_loggable"]
