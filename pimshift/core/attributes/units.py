"""Metric unit conversion for variant model fields.

Variants store weight in kilograms and dimensions in centimeters. PIM metric
values carry their own unit code, converted here with fixed factor tables.
"""

from decimal import Decimal
from typing import Literal

from ..canonical import Measure

MetricFamily = Literal["weight", "length"]

WEIGHT_FACTORS_TO_KG: dict[str, Decimal] = {
    "MILLIGRAM": Decimal("0.000001"),
    "GRAM": Decimal("0.001"),
    "KILOGRAM": Decimal("1"),
    "TON": Decimal("1000"),
    "OUNCE": Decimal("0.028349523125"),
    "POUND": Decimal("0.45359237"),
}

LENGTH_FACTORS_TO_CM: dict[str, Decimal] = {
    "MILLIMETER": Decimal("0.1"),
    "CENTIMETER": Decimal("1"),
    "DECIMETER": Decimal("10"),
    "METER": Decimal("100"),
    "INCH": Decimal("2.54"),
    "FEET": Decimal("30.48"),
    "YARD": Decimal("91.44"),
}

FACTORS_BY_FAMILY: dict[MetricFamily, dict[str, Decimal]] = {
    "weight": WEIGHT_FACTORS_TO_KG,
    "length": LENGTH_FACTORS_TO_CM,
}

FAMILY_BY_FIELD: dict[str, MetricFamily] = {
    "weight": "weight",
    "width": "length",
    "height": "length",
    "depth": "length",
}


def convert_measure(measure: Measure, field_name: str) -> Decimal | None:
    """Amount of ``measure`` in the unit stored on ``field_name``.

    A measure without unit is taken as already expressed in that unit.
    Returns ``None`` for a unit the field's family does not know.
    """
    if measure.amount is None:
        return None
    family = FAMILY_BY_FIELD.get(field_name)
    if family is None or not measure.unit:
        return measure.amount

    factor = FACTORS_BY_FAMILY[family].get(measure.unit.strip().upper())
    if factor is None:
        return None
    return measure.amount * factor


__all__ = [
    "FACTORS_BY_FAMILY",
    "FAMILY_BY_FIELD",
    "LENGTH_FACTORS_TO_CM",
    "WEIGHT_FACTORS_TO_KG",
    "MetricFamily",
    "convert_measure",
]
