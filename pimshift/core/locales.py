"""Locale provider backed by Babel locale parsing."""

import logging
from collections.abc import Iterable

from babel import Locale, UnknownLocaleError

logger = logging.getLogger(__name__)


def normalize_locale_code(code: str) -> str | None:
    """Return ``code`` in ``ll_TT`` form, or ``None`` when Babel rejects it."""
    text = str(code or "").strip().replace("-", "_")
    if not text:
        return None
    try:
        return str(Locale.parse(text))
    except (UnknownLocaleError, ValueError):
        return None


class LocaleProvider:
    def __init__(self, codes: Iterable[str]) -> None:
        self._codes: list[str] = []
        for code in codes:
            normalized = normalize_locale_code(code)
            if normalized is None:
                logger.warning('Ignored unknown locale "%s".', code)
                continue
            if normalized not in self._codes:
                self._codes.append(normalized)

    def get_locale_codes(self) -> list[str]:
        return list(self._codes)


__all__ = ["LocaleProvider", "normalize_locale_code"]
