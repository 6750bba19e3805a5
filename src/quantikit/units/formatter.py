"""Rendering quantities as localized text.

Values are rounded half away from zero to a fixed number of digits after
the radix, then printed with the locale's separators, trailing zeros
trimmed.

Examples:
    >>> format_number(1234.565, 2, "en_US")
    '1,234.57'
    >>> format_number(-2.5, 0, "en_US")
    '-3'
    >>> format_number(0.1, 3, "en_US")
    '0.1'
"""

import decimal
import enum
import math
from typing import TYPE_CHECKING, Any, Optional, Tuple

from babel import Locale
from babel.numbers import format_decimal, get_decimal_symbol, get_group_symbol

from ..config import get_config
from .abbreviations import AbbreviationCache, LocaleLike, default_cache, resolve_locale
from .dimension import Dimension

if TYPE_CHECKING:
    from .quantity import Quantity

DEFAULT_TEMPLATE = "{0} {1}"


def round_half_away_from_zero(value: float, digits: int) -> decimal.Decimal:
    if digits < 0:
        raise ValueError("Can't round to {} digits after the radix".format(digits))
    # repr gives the shortest string that round-trips, so 2.675 rounds to 2.68
    exact = decimal.Decimal(repr(float(value)))
    with decimal.localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        rounded = exact.quantize(decimal.Decimal(1).scaleb(-digits), rounding=decimal.ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return rounded


def number_pattern(digits: int) -> str:
    if digits == 0:
        return "#,##0"
    return "#,##0." + "#" * digits


def _non_finite(value: float) -> Optional[str]:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    return None


def format_number(value: float, digits: int, locale: LocaleLike = None) -> str:
    special = _non_finite(value)
    if special is not None:
        return special
    return format_decimal(
        round_half_away_from_zero(value, digits),
        format=number_pattern(digits),
        locale=resolve_locale(locale),
    )


class LocalizedNumber:
    """A number that renders with a locale's separators inside ``str.format``.

    An empty format spec prints every significant digit of the value. Any
    other spec is applied as for a float, then ``,`` and ``.`` are swapped
    for the locale's group and decimal symbols.

        >>> "{0}".format(LocalizedNumber(1234.5, "de_DE"))
        '1.234,5'
        >>> "{0:.2f}".format(LocalizedNumber(1.5, "ru_RU"))
        '1,50'
    """

    __slots__ = ("value", "locale")

    def __init__(self, value: float, locale: LocaleLike = None) -> None:
        self.value = float(value)
        self.locale: Locale = resolve_locale(locale)

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return "LocalizedNumber({!r}, {!r})".format(self.value, str(self.locale))

    def __str__(self) -> str:
        return format(self, "")

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            special = _non_finite(self.value)
            if special is not None:
                return special
            exact = decimal.Decimal(repr(self.value))
            if exact.is_zero():
                exact = exact.copy_abs()
            return format_decimal(exact, format="#,##0.###", locale=self.locale, decimal_quantization=False)
        text = format(self.value, format_spec)
        return text.translate({
            ord(","): get_group_symbol(self.locale),
            ord("."): get_decimal_symbol(self.locale),
        })


def format_args(dimension: Dimension, unit: enum.Enum, value: Any, locale: LocaleLike,
                args: Tuple[Any, ...], cache: Optional[AbbreviationCache] = None) -> Tuple[Any, ...]:
    """Positional arguments for a template: value, abbreviation, then ``args``."""
    cache = default_cache if cache is None else cache
    return (value, cache.get_abbreviation(dimension, unit, locale)) + tuple(args)


def format_quantity(quantity: "Quantity", unit: Optional[enum.Enum] = None, locale: LocaleLike = None,
                    significant_digits_after_radix: Optional[int] = None,
                    cache: Optional[AbbreviationCache] = None) -> str:
    if unit is None:
        unit = quantity.dimension.base_unit
    if significant_digits_after_radix is None:
        significant_digits_after_radix = get_config().significant_digits_after_radix
    resolved = resolve_locale(locale)
    value = quantity.in_unit(unit)
    number = format_number(value, significant_digits_after_radix, resolved)
    _, abbreviation = format_args(quantity.dimension, unit, value, resolved, (), cache)
    return DEFAULT_TEMPLATE.format(number, abbreviation)


def format_quantity_template(quantity: "Quantity", unit: enum.Enum, locale: LocaleLike, template: str,
                             *args: Any, cache: Optional[AbbreviationCache] = None) -> str:
    """Fill ``template`` with the converted value, the abbreviation and ``args``.

    The value is a :class:`LocalizedNumber`, so float format specs such as
    ``{0:.1f}`` apply and the result uses the locale's separators.
    """
    resolved = resolve_locale(locale)
    value = LocalizedNumber(quantity.in_unit(unit), resolved)
    return template.format(*format_args(quantity.dimension, unit, value, resolved, args, cache))
