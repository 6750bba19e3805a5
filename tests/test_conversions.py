import enum
from typing import Iterator, Type

from quantikit import units
import pytest  # type: ignore

QUANTITIES = [units.RotationalSpeed, units.Acceleration, units.Length, units.Temperature]

VALUES = [1.0, -3.5, 0.0, 1e-3, 123456.789]


def _unit_cases() -> Iterator:
    for quantity in QUANTITIES:
        for unit in quantity.units():
            yield pytest.param(quantity, unit, id="{}-{}".format(quantity.__name__, unit.name))


UNIT_CASES = list(_unit_cases())


@pytest.mark.parametrize("quantity,unit", UNIT_CASES)
def test_round_trip(quantity: Type[units.Quantity], unit: enum.Enum) -> None:
    for x in VALUES:
        assert quantity.from_value(x, unit).in_unit(unit) == pytest.approx(x, rel=1e-5, abs=1e-9)


@pytest.mark.parametrize("quantity,unit", UNIT_CASES)
def test_entry_round_trip(quantity: Type[units.Quantity], unit: enum.Enum) -> None:
    entry = quantity.dimension.entry(unit)
    for x in VALUES:
        assert entry.from_base(entry.to_base(x)) == pytest.approx(x, rel=1e-5, abs=1e-9)


@pytest.mark.parametrize("quantity,unit", UNIT_CASES)
def test_named_members_match_dynamic(quantity: Type[units.Quantity], unit: enum.Enum) -> None:
    name = quantity.dimension.entry(unit).name
    q = getattr(quantity, "from_" + name)(2.5)
    assert q == quantity.from_value(2.5, unit)
    assert getattr(q, name) == q.in_unit(unit)


@pytest.mark.parametrize("quantity", QUANTITIES)
def test_base_unit_is_identity(quantity: Type[units.Quantity]) -> None:
    base_unit = quantity.dimension.base_unit
    assert quantity.from_value(42.25, base_unit).value == 42.25
    assert quantity(42.25).in_unit(base_unit) == 42.25
