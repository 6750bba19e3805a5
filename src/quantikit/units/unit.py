import enum


class RotationalSpeedUnit(enum.Enum):
    Undefined = 0
    DegreePerSecond = 1
    RadianPerSecond = 2
    RevolutionPerMinute = 3
    RevolutionPerSecond = 4


class AccelerationUnit(enum.Enum):
    Undefined = 0
    CentimeterPerSecondSquared = 1
    FootPerSecondSquared = 2
    InchPerSecondSquared = 3
    KilometerPerSecondSquared = 4
    MeterPerSecondSquared = 5
    MillimeterPerSecondSquared = 6
    StandardGravity = 7


class LengthUnit(enum.Enum):
    Undefined = 0
    Centimeter = 1
    Foot = 2
    Inch = 3
    Kilometer = 4
    Meter = 5
    Mile = 6
    Millimeter = 7
    Yard = 8


class TemperatureUnit(enum.Enum):
    Undefined = 0
    DegreeCelsius = 1
    DegreeFahrenheit = 2
    DegreeRankine = 3
    Kelvin = 4
