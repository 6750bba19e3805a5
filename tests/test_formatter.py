from decimal import Decimal
import enum
import math

from quantikit import units
from quantikit.config import UnitsConfig, set_config
import pytest  # type: ignore


class GadgetUnit(enum.Enum):
    Undefined = 0
    Gadget = 1
    Doohickey = 2


GADGET = units.Dimension(
    "Gadget",
    GadgetUnit,
    GadgetUnit.Gadget,
    (
        units.base(GadgetUnit.Gadget, "gadgets"),
        units.linear(GadgetUnit.Doohickey, "doohickeys", 2.0),
    ),
)


class Gadget(units.Quantity[GadgetUnit], dimension=GADGET):
    pass


def test_rounding() -> None:
    assert units.round_half_away_from_zero(2.675, 2) == Decimal("2.68")
    assert units.round_half_away_from_zero(0.125, 2) == Decimal("0.13")
    assert units.round_half_away_from_zero(-0.125, 2) == Decimal("-0.13")
    assert units.round_half_away_from_zero(2.5, 0) == Decimal("3")
    assert units.round_half_away_from_zero(-2.5, 0) == Decimal("-3")
    assert units.round_half_away_from_zero(1.23456, 4) == Decimal("1.2346")
    assert str(units.round_half_away_from_zero(-0.001, 2)) == "0.00"
    assert units.round_half_away_from_zero(1e20, 2) == Decimal("100000000000000000000")

    with pytest.raises(ValueError):
        units.round_half_away_from_zero(1.0, -1)


def test_format_number() -> None:
    assert units.format_number(1234.565, 2, "en_US") == "1,234.57"
    assert units.format_number(1234.5, 1, "de_DE") == "1.234,5"
    assert units.format_number(1.5, 2, "nb_NO") == "1,5"
    assert units.format_number(2.0, 2, "en_US") == "2"
    assert units.format_number(2.5, 0, "en_US") == "3"
    assert units.format_number(0.1, 3, "en_US") == "0.1"
    assert units.format_number(-12.345, 2, "en_US") == "-12.35"
    assert units.format_number(math.nan, 2, "en_US") == "NaN"
    assert units.format_number(math.inf, 2, "en_US") == "∞"
    assert units.format_number(-math.inf, 2, "en_US") == "-∞"


def test_format() -> None:
    assert str(units.Acceleration.from_meter_per_second_squared(1)) == "1 m/s²"
    assert str(units.RotationalSpeed.from_revolutions_per_minute(100)) == "1.67 r/s"
    assert units.RotationalSpeed.from_revolutions_per_second(1).to_string(
        units.RotationalSpeedUnit.RevolutionPerMinute
    ) == "60 rpm"
    assert units.Acceleration.from_meter_per_second_squared(9.80665).to_string(
        units.AccelerationUnit.StandardGravity, significant_digits_after_radix=3
    ) == "1 g"
    assert units.Temperature.from_degrees_celsius(21.456).to_string(
        units.TemperatureUnit.DegreeCelsius, "en_US", 1
    ) == "21.5 °C"
    assert units.Length.from_meters(1500).to_string(units.LengthUnit.Kilometer, "en_US", 0) == "2 km"


def test_format_locale() -> None:
    speed = units.RotationalSpeed.from_revolutions_per_minute(1.5)
    assert speed.to_string(units.RotationalSpeedUnit.RevolutionPerMinute, "ru_RU") == "1,5 об/мин"
    assert speed.to_string(units.RotationalSpeedUnit.RevolutionPerMinute, "nb_NO") == "1,5 o/min"
    assert speed.to_string(units.RotationalSpeedUnit.RevolutionPerSecond, "nb_NO", 3) == "0,025 r/s"


def test_format_configured_defaults() -> None:
    set_config(UnitsConfig(significant_digits_after_radix=4))
    assert str(units.RotationalSpeed.from_revolutions_per_minute(100)) == "1.6667 r/s"

    set_config(UnitsConfig(default_locale="de_DE"))
    assert str(units.RotationalSpeed.from_revolutions_per_minute(100)) == "1,67 r/s"


def test_format_template() -> None:
    speed = units.RotationalSpeed.from_revolutions_per_second(1)

    assert speed.to_formatted_string(
        units.RotationalSpeedUnit.RevolutionPerMinute, "en_US", "{0:.1f} [{1}] {2}", "extra"
    ) == "60.0 [rpm] extra"
    assert speed.to_formatted_string(
        units.RotationalSpeedUnit.RevolutionPerSecond, "ru_RU", "{1}: {0}"
    ) == "об/с: 1"
    assert units.format_quantity_template(
        speed, units.RotationalSpeedUnit.RevolutionPerMinute, None, "{0:g}{1}"
    ) == "60rpm"


def test_format_template_locale() -> None:
    speed = units.RotationalSpeed.from_revolutions_per_minute(1.5)
    rpm = units.RotationalSpeedUnit.RevolutionPerMinute

    assert speed.to_formatted_string(rpm, "ru_RU", "{0} {1}") == "1,5 об/мин"
    assert speed.to_formatted_string(rpm, "nb_NO", "{0:.2f} {1}") == "1,50 o/min"
    assert speed.to_formatted_string(rpm, "en_US", "{0} {1}") == "1.5 rpm"
    assert units.Length.from_meters(1234.5).to_formatted_string(
        units.LengthUnit.Meter, "de_DE", "{0:,.1f} {1}"
    ) == "1.234,5 m"
    assert units.Length.from_meters(1234.5).to_formatted_string(
        units.LengthUnit.Meter, "de_DE", "{0}"
    ) == "1.234,5"


def test_localized_number() -> None:
    number = units.LocalizedNumber(0.1 + 0.2, "en_US")

    assert float(number) == 0.1 + 0.2
    assert str(number) == "0.30000000000000004"
    assert str(units.LocalizedNumber(-0.0, "en_US")) == "0"
    assert str(units.LocalizedNumber(math.nan, "ru_RU")) == "NaN"
    assert "{0:.3e}".format(units.LocalizedNumber(12000.0, "ru_RU")) == "1,200e+04"
    assert "{0:g}".format(units.LocalizedNumber(2.5, "de_DE")) == "2,5"


def test_format_spec() -> None:
    speed = units.RotationalSpeed.from_revolutions_per_second(1.234)

    assert "{:.2f}".format(speed) == "1.23 r/s"
    assert "{:+.1f}".format(-speed) == "-1.2 r/s"
    assert "{}".format(speed) == str(speed)
    assert "{:08.3f}".format(units.Length.from_feet(1)) == "0000.305 m"


@pytest.mark.parametrize("digits", [0, 1, 2, 3, 4])
def test_format_reproduces_rounded_value(digits: int) -> None:
    unit = units.RotationalSpeedUnit.RevolutionPerMinute
    for x in [0.0, 1.0, 1.005, -2.345, 1234.5678, 98765.4321, 1e-4]:
        speed = units.RotationalSpeed.from_revolutions_per_minute(x)
        text = units.format_quantity(speed, unit, "en_US", digits)
        number, abbreviation = text.rsplit(" ", 1)
        assert abbreviation == "rpm"
        assert Decimal(number.replace(",", "")) == units.round_half_away_from_zero(speed.in_unit(unit), digits)


def test_format_missing_abbreviation() -> None:
    source = units.InMemoryAbbreviationSource()
    source.register(GADGET, GadgetUnit.Gadget, "en_US", ["gd"])
    cache = units.AbbreviationCache(source)
    gadget = Gadget.from_doohickeys(1)

    assert units.format_quantity(gadget, cache=cache) == "2 gd"
    with pytest.raises(units.MissingAbbreviationError):
        units.format_quantity(gadget, GadgetUnit.Doohickey, cache=cache)
    with pytest.raises(units.MissingAbbreviationError):
        str(gadget)


def test_format_unsupported_unit() -> None:
    with pytest.raises(units.UnsupportedUnitError):
        units.Length.from_meters(1).to_string(units.LengthUnit.Undefined)
