from typing import Any


class QuantityError(Exception):
    pass


class UnsupportedUnitError(QuantityError, ValueError):
    def __init__(self, unit: Any, dimension: Any) -> None:
        super().__init__(
            "Unit {!r} is not supported by dimension {}".format(unit, dimension)
        )
        self.unit = unit
        self.dimension = dimension


class MissingAbbreviationError(QuantityError, LookupError):
    def __init__(self, dimension: Any, unit: Any, locale: str) -> None:
        super().__init__(
            "No abbreviation for {!r} of dimension {} in locale {} or the default locale"
            .format(unit, dimension, locale)
        )
        self.dimension = dimension
        self.unit = unit
        self.locale = locale


class InvalidComparisonError(QuantityError, TypeError):
    pass


class NullComparisonError(InvalidComparisonError):
    def __init__(self, quantity_type: type) -> None:
        super().__init__(
            "Can't compare {} to None".format(quantity_type.__name__)
        )


class ComparisonTypeError(InvalidComparisonError):
    def __init__(self, quantity_type: type, other: Any) -> None:
        super().__init__(
            "Can't compare values: expected {}, got {}"
            .format(quantity_type.__name__, type(other).__name__)
        )
