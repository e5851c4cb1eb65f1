"""Deterministic code transforms for attribute options and option values.

The results are lookup keys, so the same raw input must always produce the
same code.
"""

from typing import Any

from slugify import slugify

from ..canonical import ProductOption


class AttributeOptionValueDataTransformer:
    def transform(self, value: Any) -> str:
        return slugify(str(value), separator="_", lowercase=False)


class ProductOptionValueDataTransformer:
    def transform(self, option: ProductOption, value: Any) -> str:
        return slugify(f"{option.code}_{value}", separator="_")


__all__ = ["AttributeOptionValueDataTransformer", "ProductOptionValueDataTransformer"]
