"""Typed physical quantities stored in a canonical base unit.

Every quantity type covers one dimension and keeps its magnitude in that
dimension's base unit. Quantities are built from any unit of the dimension,
either with a named factory or dynamically with ``from_value``.

Examples:
    >>> speed = RotationalSpeed.from_revolutions_per_second(1)
    >>> speed.revolutions_per_minute
    60.0
    >>> RotationalSpeed.from_value(120, RotationalSpeedUnit.RevolutionPerMinute).value
    2.0
    >>> speed.in_unit(RotationalSpeedUnit.RevolutionPerMinute)
    60.0


Units that the dimension doesn't know are rejected immediately, never
converted as if they were the base unit.

Example:
    >>> RotationalSpeed.from_value(1.0, RotationalSpeedUnit.Undefined)
    Traceback (most recent call last):
        ...
    quantikit.units.errors.UnsupportedUnitError: Unit <RotationalSpeedUnit.Undefined: 0> is not supported by dimension RotationalSpeed


Quantities of the same dimension can be added, subtracted and compared.
Scaling by a number keeps the dimension, and dividing two quantities of the
same dimension gives a plain ratio.

Examples:
    >>> v = Acceleration.from_meter_per_second_squared(1)
    >>> (v + v).value
    2.0
    >>> (10 * v).value
    10.0
    >>> Acceleration.from_meter_per_second_squared(10) / Acceleration.from_meter_per_second_squared(5)
    2.0
    >>> v < Acceleration.from_standard_gravity(1)
    True
    >>> v == Acceleration.from_centimeter_per_second_squared(100)
    True


Division by zero follows floating point rules instead of raising.

Example:
    >>> (v / 0).value
    inf


Quantities render with a localized abbreviation, rounded half away from
zero to a number of digits after the radix.

Examples:
    >>> str(RotationalSpeed.from_revolutions_per_minute(100))
    '1.67 r/s'
    >>> RotationalSpeed.from_revolutions_per_second(1).to_string(RotationalSpeedUnit.RevolutionPerMinute)
    '60 rpm'
    >>> Length.from_meters(1.25).to_string(LengthUnit.Meter, "ru_RU", 1)
    '1,3 м'
    >>> "{:.3f}".format(Length.from_feet(1))
    '0.305 m'
"""

from .errors import (
    QuantityError, UnsupportedUnitError, MissingAbbreviationError,
    InvalidComparisonError, NullComparisonError, ComparisonTypeError,
)
from .dimension import (
    ConversionEntry, Dimension, base, linear, affine,
    register_dimension, get_dimension, dimensions,
)
from .abbreviations import (
    AbbreviationCache, AbbreviationSource, InMemoryAbbreviationSource,
    INVARIANT_LOCALE, default_cache, default_source, resolve_locale,
)
from .formatter import (
    LocalizedNumber, format_number, format_quantity, format_quantity_template, round_half_away_from_zero,
)
from .quantity import Quantity
from .unit import RotationalSpeedUnit, AccelerationUnit, LengthUnit, TemperatureUnit
from .catalog import (
    RotationalSpeed, Acceleration, Length, Temperature,
    ROTATIONAL_SPEED, ACCELERATION, LENGTH, TEMPERATURE,
)

__all__ = [
    'QuantityError', 'UnsupportedUnitError', 'MissingAbbreviationError',
    'InvalidComparisonError', 'NullComparisonError', 'ComparisonTypeError',
    'ConversionEntry', 'Dimension', 'base', 'linear', 'affine',
    'register_dimension', 'get_dimension', 'dimensions',
    'AbbreviationCache', 'AbbreviationSource', 'InMemoryAbbreviationSource',
    'INVARIANT_LOCALE', 'default_cache', 'default_source', 'resolve_locale',
    'LocalizedNumber', 'format_number', 'format_quantity', 'format_quantity_template',
    'round_half_away_from_zero',
    'Quantity',
    'RotationalSpeedUnit', 'AccelerationUnit', 'LengthUnit', 'TemperatureUnit',
    'RotationalSpeed', 'Acceleration', 'Length', 'Temperature',
    'ROTATIONAL_SPEED', 'ACCELERATION', 'LENGTH', 'TEMPERATURE',
]
