from dataclasses import dataclass
import enum
import math
import numbers
from typing import Any, Callable, ClassVar, Generic, Optional, Tuple, Type, TypeVar

import numpy

from .abbreviations import AbbreviationCache, LocaleLike, default_cache
from .dimension import ConversionEntry, Dimension
from .errors import ComparisonTypeError, NullComparisonError
from .formatter import format_quantity, format_quantity_template

U = TypeVar("U", bound=enum.Enum)
Q = TypeVar("Q", bound="Quantity")


def _as_float(value: Any, quantity_type: type) -> float:
    if isinstance(value, Quantity) or not isinstance(value, numbers.Real):
        raise TypeError(
            "Can't construct {} from {}: expected a real number"
            .format(quantity_type.__name__, type(value).__name__)
        )
    return float(value)


def _divide(numerator: float, denominator: float) -> float:
    with numpy.errstate(all="ignore"):
        return float(numpy.true_divide(numpy.float64(numerator), numpy.float64(denominator)))


def _total_compare(a: float, b: float) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    # NaN sorts before every number and equal to itself
    if math.isnan(a):
        return 0 if math.isnan(b) else -1
    return 1


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, Quantity)


@dataclass(frozen=True, eq=False, order=False)
class Quantity(Generic[U]):
    """A magnitude of one physical dimension, stored in the dimension's base unit.

    Concrete quantities subclass this with a ``dimension`` keyword; each unit
    of the dimension then gets a ``from_<name>`` factory and a ``<name>``
    property.

    ``value`` is always in the base unit. Use a named factory or
    ``from_value`` to construct from any other unit.
    """
    value: float
    dimension: ClassVar[Dimension]

    def __init_subclass__(cls, dimension: Optional[Dimension] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if dimension is None:
            return
        cls.dimension = dimension
        for entry in dimension.entries:
            _install_unit(cls, entry)

    def __post_init__(self) -> None:
        if not hasattr(type(self), "dimension"):
            raise TypeError("Can't instantiate {} without a dimension".format(type(self).__name__))
        object.__setattr__(self, "value", _as_float(self.value, type(self)))

    @classmethod
    def zero(cls: Type[Q]) -> Q:
        return cls(0.0)

    @classmethod
    def from_value(cls: Type[Q], value: float, unit: U) -> Q:
        return cls(cls.dimension.to_base(unit, _as_float(value, cls)))

    @classmethod
    def get_abbreviation(cls, unit: U, locale: LocaleLike = None,
                         cache: Optional[AbbreviationCache] = None) -> str:
        return (default_cache if cache is None else cache).get_abbreviation(cls.dimension, unit, locale)

    @classmethod
    def units(cls) -> Tuple[enum.Enum, ...]:
        return cls.dimension.units

    def in_unit(self, unit: U) -> float:
        return self.dimension.from_base(unit, self.value)

    def _same_kind(self, other: Any) -> bool:
        return isinstance(other, Quantity) and other.dimension is self.dimension

    def __neg__(self: Q) -> Q:
        return type(self)(-self.value)

    def __add__(self: Q, other: Any) -> Q:
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __sub__(self: Q, other: Any) -> Q:
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(self.value - other.value)

    def __mul__(self: Q, other: Any) -> Q:
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(self.value * float(other))

    def __rmul__(self: Q, other: Any) -> Q:
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(float(other) * self.value)

    def __truediv__(self, other: Any) -> Any:
        if self._same_kind(other):
            return _divide(self.value, other.value)
        if _is_scalar(other):
            return type(self)(_divide(self.value, float(other)))
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.value >= other.value

    def __eq__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return False
        return self.value == other.value

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self.dimension.name, self.value))

    def equals(self, other: Any) -> bool:
        return self == other

    def compare_to(self, other: Any) -> int:
        """Order against ``other``: negative, zero or positive.

        Unlike the comparison operators this is a total order, with NaN
        sorting first. Raises for ``None`` or a value that is not a quantity
        of the same dimension.
        """
        if other is None:
            raise NullComparisonError(type(self))
        if not self._same_kind(other):
            raise ComparisonTypeError(type(self), other)
        return _total_compare(self.value, other.value)

    def to_string(self, unit: Optional[U] = None, locale: LocaleLike = None,
                  significant_digits_after_radix: Optional[int] = None) -> str:
        return format_quantity(self, unit, locale, significant_digits_after_radix)

    def to_formatted_string(self, unit: U, locale: LocaleLike, template: str, *args: Any) -> str:
        return format_quantity_template(self, unit, locale, template, *args)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_str: str) -> str:
        if not format_str:
            return str(self)
        return ("{:" + format_str + "} {}").format(
            self.value,
            self.get_abbreviation(self.dimension.base_unit),
        )

    __array_ufunc__ = None
    """Makes numpy scalars defer to ``__rmul__`` instead of wrapping the
    quantity in an object array."""


def _install_unit(cls: type, entry: ConversionEntry) -> None:
    factory_name = "from_" + entry.name
    for name in (factory_name, entry.name):
        if name in ("value", "dimension") or hasattr(Quantity, name):
            raise TypeError(
                "Can't add unit {!r} to {}: {} is reserved".format(entry.unit, cls.__name__, name)
            )
    setattr(cls, factory_name, classmethod(_factory(entry.unit, cls.__name__)))
    setattr(cls, entry.name, property(_accessor(entry.unit, cls.__name__)))


def _factory(unit: enum.Enum, type_name: str) -> Callable[..., Any]:
    def factory(cls: Type[Q], value: float) -> Q:
        return cls.from_value(value, unit)
    factory.__doc__ = "Get {} from {}.".format(type_name, unit.name)
    return factory


def _accessor(unit: enum.Enum, type_name: str) -> Callable[[Quantity], float]:
    def accessor(self: Quantity) -> float:
        return self.in_unit(unit)
    accessor.__doc__ = "Get {} in {}.".format(type_name, unit.name)
    return accessor
