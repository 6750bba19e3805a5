"""Concrete quantity types.

Each type is a conversion table plus abbreviations; all behaviour comes from
``Quantity``.
"""

import math

from .abbreviations import default_source
from .dimension import ConversionEntry, Dimension, affine, base, linear, register_dimension
from .quantity import Quantity
from .unit import AccelerationUnit, LengthUnit, RotationalSpeedUnit, TemperatureUnit

ROTATIONAL_SPEED = register_dimension(Dimension(
    "RotationalSpeed",
    RotationalSpeedUnit,
    RotationalSpeedUnit.RevolutionPerSecond,
    (
        linear(RotationalSpeedUnit.DegreePerSecond, "degrees_per_second", 1 / 360),
        linear(RotationalSpeedUnit.RadianPerSecond, "radians_per_second", 1 / (2 * math.pi)),
        ConversionEntry(
            RotationalSpeedUnit.RevolutionPerMinute,
            "revolutions_per_minute",
            lambda value: value / 60,
            lambda value: value * 60,
        ),
        base(RotationalSpeedUnit.RevolutionPerSecond, "revolutions_per_second"),
    ),
))

ACCELERATION = register_dimension(Dimension(
    "Acceleration",
    AccelerationUnit,
    AccelerationUnit.MeterPerSecondSquared,
    (
        linear(AccelerationUnit.CentimeterPerSecondSquared, "centimeter_per_second_squared", 1e-2),
        linear(AccelerationUnit.FootPerSecondSquared, "foot_per_second_squared", 0.304800),
        linear(AccelerationUnit.InchPerSecondSquared, "inch_per_second_squared", 0.0254),
        linear(AccelerationUnit.KilometerPerSecondSquared, "kilometer_per_second_squared", 1e3),
        base(AccelerationUnit.MeterPerSecondSquared, "meter_per_second_squared"),
        linear(AccelerationUnit.MillimeterPerSecondSquared, "millimeter_per_second_squared", 1e-3),
        linear(AccelerationUnit.StandardGravity, "standard_gravity", 9.80665),
    ),
))

LENGTH = register_dimension(Dimension(
    "Length",
    LengthUnit,
    LengthUnit.Meter,
    (
        linear(LengthUnit.Centimeter, "centimeters", 1e-2),
        linear(LengthUnit.Foot, "feet", 0.3048),
        linear(LengthUnit.Inch, "inches", 0.0254),
        linear(LengthUnit.Kilometer, "kilometers", 1e3),
        base(LengthUnit.Meter, "meters"),
        linear(LengthUnit.Mile, "miles", 1609.344),
        linear(LengthUnit.Millimeter, "millimeters", 1e-3),
        linear(LengthUnit.Yard, "yards", 0.9144),
    ),
))

TEMPERATURE = register_dimension(Dimension(
    "Temperature",
    TemperatureUnit,
    TemperatureUnit.Kelvin,
    (
        affine(TemperatureUnit.DegreeCelsius, "degrees_celsius", 1.0, 273.15),
        ConversionEntry(
            TemperatureUnit.DegreeFahrenheit,
            "degrees_fahrenheit",
            lambda value: (value - 32) * 5 / 9 + 273.15,
            lambda value: (value - 273.15) * 9 / 5 + 32,
        ),
        linear(TemperatureUnit.DegreeRankine, "degrees_rankine", 5 / 9),
        base(TemperatureUnit.Kelvin, "kelvins"),
    ),
))


class RotationalSpeed(Quantity[RotationalSpeedUnit], dimension=ROTATIONAL_SPEED):
    """Number of complete rotations per unit of time. Base unit: revolutions per second."""


class Acceleration(Quantity[AccelerationUnit], dimension=ACCELERATION):
    """Rate of change of velocity. Base unit: meter per second squared."""


class Length(Quantity[LengthUnit], dimension=LENGTH):
    pass


class Temperature(Quantity[TemperatureUnit], dimension=TEMPERATURE):
    pass


default_source.register_all(ROTATIONAL_SPEED, {
    "en_US": {
        RotationalSpeedUnit.DegreePerSecond: ("°/s", "deg/s"),
        RotationalSpeedUnit.RadianPerSecond: ("rad/s",),
        RotationalSpeedUnit.RevolutionPerMinute: ("rpm", "r/min"),
        RotationalSpeedUnit.RevolutionPerSecond: ("r/s",),
    },
    "ru_RU": {
        RotationalSpeedUnit.DegreePerSecond: ("°/с",),
        RotationalSpeedUnit.RadianPerSecond: ("рад/с",),
        RotationalSpeedUnit.RevolutionPerMinute: ("об/мин",),
        RotationalSpeedUnit.RevolutionPerSecond: ("об/с",),
    },
    "nb_NO": {
        RotationalSpeedUnit.DegreePerSecond: ("°/s",),
        RotationalSpeedUnit.RadianPerSecond: ("rad/s",),
        RotationalSpeedUnit.RevolutionPerMinute: ("o/min", "omdr/min"),
    },
})

default_source.register_all(ACCELERATION, {
    "en_US": {
        AccelerationUnit.CentimeterPerSecondSquared: ("cm/s²",),
        AccelerationUnit.FootPerSecondSquared: ("ft/s²",),
        AccelerationUnit.InchPerSecondSquared: ("in/s²",),
        AccelerationUnit.KilometerPerSecondSquared: ("km/s²",),
        AccelerationUnit.MeterPerSecondSquared: ("m/s²",),
        AccelerationUnit.MillimeterPerSecondSquared: ("mm/s²",),
        AccelerationUnit.StandardGravity: ("g",),
    },
    "ru_RU": {
        AccelerationUnit.CentimeterPerSecondSquared: ("см/с²",),
        AccelerationUnit.KilometerPerSecondSquared: ("км/с²",),
        AccelerationUnit.MeterPerSecondSquared: ("м/с²",),
        AccelerationUnit.MillimeterPerSecondSquared: ("мм/с²",),
    },
})

default_source.register_all(LENGTH, {
    "en_US": {
        LengthUnit.Centimeter: ("cm",),
        LengthUnit.Foot: ("ft", "'"),
        LengthUnit.Inch: ("in", '"'),
        LengthUnit.Kilometer: ("km",),
        LengthUnit.Meter: ("m",),
        LengthUnit.Mile: ("mi",),
        LengthUnit.Millimeter: ("mm",),
        LengthUnit.Yard: ("yd",),
    },
    "ru": {
        LengthUnit.Centimeter: ("см",),
        LengthUnit.Kilometer: ("км",),
        LengthUnit.Meter: ("м",),
        LengthUnit.Millimeter: ("мм",),
    },
    "nb": {
        LengthUnit.Foot: ("fot",),
        LengthUnit.Inch: ("tomme",),
        LengthUnit.Mile: ("eng. mil",),
    },
})

default_source.register_all(TEMPERATURE, {
    "en_US": {
        TemperatureUnit.DegreeCelsius: ("°C",),
        TemperatureUnit.DegreeFahrenheit: ("°F",),
        TemperatureUnit.DegreeRankine: ("°R",),
        TemperatureUnit.Kelvin: ("K",),
    },
})
