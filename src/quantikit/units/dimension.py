from dataclasses import dataclass, field
import enum
import logging
import threading
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Tuple, Type

from .errors import UnsupportedUnitError

logger = logging.getLogger(__name__)

Conversion = Callable[[float], float]


def _identity(value: float) -> float:
    return value


@dataclass(frozen=True)
class ConversionEntry:
    unit: enum.Enum
    name: str
    to_base: Conversion = _identity
    from_base: Conversion = _identity

    @property
    def is_identity(self) -> bool:
        return self.to_base is _identity and self.from_base is _identity


def base(unit: enum.Enum, name: str) -> ConversionEntry:
    return ConversionEntry(unit, name)


def linear(unit: enum.Enum, name: str, factor: float) -> ConversionEntry:
    """Entry for a unit where one ``unit`` equals ``factor`` base units."""
    return ConversionEntry(
        unit,
        name,
        lambda value: value * factor,
        lambda value: value / factor,
    )


def affine(unit: enum.Enum, name: str, factor: float, offset: float) -> ConversionEntry:
    """Entry for a unit where ``base = value * factor + offset``."""
    return ConversionEntry(
        unit,
        name,
        lambda value: value * factor + offset,
        lambda value: (value - offset) / factor,
    )


@dataclass(frozen=True, eq=False)
class Dimension:
    """A physical quantity kind and its unit conversion table.

    Every unit of ``unit_type`` that should be usable must have exactly one
    entry. The entry for ``base_unit`` is the identity; all other entries
    convert to and from the base unit.

    Dimensions compare by identity: two tables with the same name are still
    distinct dimensions unless they are the same object.
    """
    name: str
    unit_type: Type[enum.Enum]
    base_unit: enum.Enum
    entries: Tuple[ConversionEntry, ...]
    _table: Mapping[enum.Enum, ConversionEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        table: Dict[enum.Enum, ConversionEntry] = {}
        for entry in self.entries:
            if not isinstance(entry.unit, self.unit_type):
                raise TypeError(
                    "Can't register {!r} in {}: expected a {} member"
                    .format(entry.unit, self.name, self.unit_type.__name__)
                )
            if entry.unit in table:
                raise ValueError(
                    "Duplicate conversion entry for {!r} in {}".format(entry.unit, self.name)
                )
            table[entry.unit] = entry
        if self.base_unit not in table:
            raise ValueError(
                "Base unit {!r} of {} has no conversion entry".format(self.base_unit, self.name)
            )
        if not table[self.base_unit].is_identity:
            raise ValueError(
                "Base unit {!r} of {} must convert by identity".format(self.base_unit, self.name)
            )
        object.__setattr__(self, "_table", MappingProxyType(table))

    def __str__(self) -> str:
        return self.name

    @property
    def units(self) -> Tuple[enum.Enum, ...]:
        return tuple(entry.unit for entry in self.entries)

    def supports(self, unit: object) -> bool:
        try:
            return unit in self._table
        except TypeError:
            return False

    def entry(self, unit: enum.Enum) -> ConversionEntry:
        try:
            return self._table[unit]
        except (KeyError, TypeError):
            raise UnsupportedUnitError(unit, self) from None

    def to_base(self, unit: enum.Enum, value: float) -> float:
        return self.entry(unit).to_base(value)

    def from_base(self, unit: enum.Enum, value: float) -> float:
        return self.entry(unit).from_base(value)


_registry: Dict[str, Dimension] = {}
_registry_lock = threading.Lock()


def register_dimension(dimension: Dimension) -> Dimension:
    with _registry_lock:
        existing = _registry.get(dimension.name)
        if existing is not None and existing is not dimension:
            raise ValueError(
                "Can't register dimension {}: name already taken".format(dimension.name)
            )
        _registry[dimension.name] = dimension
    logger.debug("Registered dimension %s with %d units", dimension.name, len(dimension.entries))
    return dimension


def get_dimension(name: str) -> Dimension:
    try:
        return _registry[name]
    except KeyError:
        raise ValueError("Unknown dimension: {}".format(name)) from None


def dimensions() -> Tuple[Dimension, ...]:
    with _registry_lock:
        return tuple(_registry.values())
