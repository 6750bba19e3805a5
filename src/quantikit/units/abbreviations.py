"""Localized unit abbreviations.

Abbreviations come from an ``AbbreviationSource`` and are cached per
(dimension, locale). The first lookup for a pair resolves every unit of the
dimension in one pass; the result is published as a read-only mapping and
never changes afterwards. Units without a translation for the requested
locale fall back to the bare language and then to ``INVARIANT_LOCALE``.
"""

import enum
import logging
import threading
from types import MappingProxyType
from typing import Dict, Mapping, MutableMapping, Protocol, Sequence, Tuple, Union

from babel import Locale

from ..config import get_config
from .dimension import Dimension
from .errors import MissingAbbreviationError, UnsupportedUnitError

logger = logging.getLogger(__name__)

INVARIANT_LOCALE = "en_US"

LocaleLike = Union[str, Locale, None]
Abbreviations = Mapping[enum.Enum, Tuple[str, ...]]


def resolve_locale(locale: LocaleLike = None) -> Locale:
    """Turn ``None``, ``"en-US"``, ``"en_US"`` or a ``babel.Locale`` into a ``Locale``.

    ``None`` resolves to the configured default locale.
    """
    if locale is None:
        locale = get_config().default_locale
    if isinstance(locale, Locale):
        return locale
    return Locale.parse(locale.replace("-", "_"))


def _fallback_chain(locale: Locale) -> Tuple[str, ...]:
    return tuple(dict.fromkeys([str(locale), locale.language, INVARIANT_LOCALE]))


class AbbreviationSource(Protocol):
    def abbreviations(self, dimension: Dimension, locale: str) -> Mapping[enum.Enum, Sequence[str]]: ...


class InMemoryAbbreviationSource:
    """Abbreviation data held in a dictionary keyed by dimension name and locale.

    Only exact locale matches are returned; fallback is the cache's job.
    """

    def __init__(self) -> None:
        self._data: Dict[Tuple[str, str], Dict[enum.Enum, Tuple[str, ...]]] = {}
        self._lock = threading.Lock()

    def register(self, dimension: Union[Dimension, str], unit: enum.Enum, locale: str,
                 abbreviations: Sequence[str]) -> None:
        if isinstance(abbreviations, str):
            raise TypeError("Expected a sequence of abbreviations, got a single string")
        if not abbreviations:
            raise ValueError("Can't register an empty abbreviation list for {!r}".format(unit))
        name = dimension.name if isinstance(dimension, Dimension) else dimension
        with self._lock:
            self._data.setdefault((name, locale), {})[unit] = tuple(abbreviations)

    def register_all(self, dimension: Union[Dimension, str],
                     table: Mapping[str, Mapping[enum.Enum, Sequence[str]]]) -> None:
        for locale, units in table.items():
            for unit, abbreviations in units.items():
                self.register(dimension, unit, locale, abbreviations)

    def abbreviations(self, dimension: Dimension, locale: str) -> Mapping[enum.Enum, Sequence[str]]:
        with self._lock:
            return dict(self._data.get((dimension.name, locale), {}))


class AbbreviationCache:
    def __init__(self, source: AbbreviationSource) -> None:
        self.source = source
        self._entries: MutableMapping[Tuple[Dimension, str], Abbreviations] = {}
        self._locks: Dict[Tuple[Dimension, str], threading.Lock] = {}
        self._guard = threading.Lock()
        self._populations = 0

    @property
    def populations(self) -> int:
        """Number of population passes run so far."""
        return self._populations

    def entry(self, dimension: Dimension, locale: LocaleLike = None) -> Abbreviations:
        resolved = resolve_locale(locale)
        key = (dimension, str(resolved))
        cached = self._entries.get(key)
        if cached is not None:
            return cached
        with self._key_lock(key):
            cached = self._entries.get(key)
            if cached is None:
                cached = self._populate(dimension, resolved)
                self._entries[key] = cached
        return cached

    def get_abbreviations(self, dimension: Dimension, unit: enum.Enum,
                          locale: LocaleLike = None) -> Tuple[str, ...]:
        if not dimension.supports(unit):
            raise UnsupportedUnitError(unit, dimension)
        resolved = resolve_locale(locale)
        try:
            return self.entry(dimension, resolved)[unit]
        except KeyError:
            raise MissingAbbreviationError(dimension, unit, str(resolved)) from None

    def get_abbreviation(self, dimension: Dimension, unit: enum.Enum, locale: LocaleLike = None) -> str:
        return self.get_abbreviations(dimension, unit, locale)[0]

    def clear(self) -> None:
        # key locks outlive clear so a pass still running keeps its key
        with self._guard:
            self._entries.clear()

    def _key_lock(self, key: Tuple[Dimension, str]) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(key, threading.Lock())

    def _populate(self, dimension: Dimension, locale: Locale) -> Abbreviations:
        chain = _fallback_chain(locale)
        tables = [(name, self.source.abbreviations(dimension, name)) for name in chain]
        resolved: Dict[enum.Enum, Tuple[str, ...]] = {}
        for unit in dimension.units:
            for name, table in tables:
                abbreviations = table.get(unit)
                if abbreviations:
                    resolved[unit] = tuple(abbreviations)
                    if name == INVARIANT_LOCALE and name != chain[0]:
                        logger.debug(
                            "No %s abbreviation for %s.%s, using %s",
                            locale, dimension, unit.name, INVARIANT_LOCALE,
                        )
                    break
        with self._guard:
            self._populations += 1
        logger.debug(
            "Populated abbreviations for %s in %s (%d of %d units)",
            dimension, locale, len(resolved), len(dimension.units),
        )
        return MappingProxyType(resolved)


default_source = InMemoryAbbreviationSource()
default_cache = AbbreviationCache(default_source)
