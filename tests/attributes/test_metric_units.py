from decimal import Decimal

from pimshift.core.attributes import convert_measure
from pimshift.core.canonical import Measure


def test_weight_units_convert_to_kilograms() -> None:
    assert convert_measure(Measure(amount=Decimal("800"), unit="GRAM"), "weight") == Decimal("0.8")
    assert convert_measure(Measure(amount=Decimal("1.5"), unit="KILOGRAM"), "weight") == Decimal("1.5")
    assert convert_measure(Measure(amount=Decimal("16"), unit="ounce"), "weight") == Decimal("0.453592370")


def test_length_units_convert_to_centimeters() -> None:
    assert convert_measure(Measure(amount=Decimal("1.2"), unit="METER"), "depth") == Decimal("120")
    assert convert_measure(Measure(amount=Decimal("10"), unit="INCH"), "height") == Decimal("25.4")


def test_measure_without_unit_is_kept() -> None:
    assert convert_measure(Measure(amount=Decimal("7")), "weight") == Decimal("7")


def test_unit_from_another_family_is_rejected() -> None:
    assert convert_measure(Measure(amount=Decimal("7"), unit="METER"), "weight") is None
    assert convert_measure(Measure(amount=Decimal("7"), unit="GRAM"), "width") is None
    assert convert_measure(Measure(amount=None, unit="GRAM"), "weight") is None
