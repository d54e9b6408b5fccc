"""Decimal separator policy and number rendering for fallback chains.

One separator style is chosen for a whole chain, from the first preferred
locale Babel has CLDR data for. Every bundle in that chain then renders
numbers with it, including the reference-language bundle.

Rendering is deliberately simpler than CLDR number formatting: at most two
fraction digits, no grouping, trailing zeros trimmed.

Python 3.12+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from babel.core import UnknownLocaleError
from babel.numbers import get_decimal_symbol

from ftlchain.constants import MAX_FRACTION_DIGITS
from ftlchain.enums import DecimalSeparator
from ftlchain.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

    from ftlchain.localization.types import LocaleTag

__all__ = [
    "NumberFormatter",
    "decimal_separator_for",
    "format_number",
    "numeric_locale",
]

logger = logging.getLogger(__name__)


def numeric_locale(tag: LocaleTag) -> Locale | None:
    """Find CLDR number data for a locale.

    Tries language and region combined first, then the language alone.

    Args:
        tag: Parsed locale

    Returns:
        Babel Locale, or None when CLDR knows neither form
    """
    candidates = [f"{tag.language}_{tag.region}"] if tag.region else []
    candidates.append(tag.language)
    for code in candidates:
        try:
            return get_babel_locale(code)
        except (UnknownLocaleError, ValueError):
            continue
    return None


def decimal_separator_for(tags: Iterable[LocaleTag]) -> DecimalSeparator:
    """Choose the decimal separator for a whole chain.

    The first locale with CLDR data decides; later locales are not consulted.

    Args:
        tags: Chain locales in preference order

    Returns:
        COMMA if the deciding locale writes decimals with ",", else PERIOD.
        PERIOD when no locale has CLDR data.

    Example:
        >>> decimal_separator_for([LocaleTag("zz"), LocaleTag("pl", "PL")])
        <DecimalSeparator.COMMA: ','>
        >>> decimal_separator_for([])
        <DecimalSeparator.PERIOD: '.'>
    """
    for tag in tags:
        locale = numeric_locale(tag)
        if locale is None:
            continue
        symbol = get_decimal_symbol(locale)
        logger.debug("Decimal separator %r taken from %s", symbol, locale)
        return DecimalSeparator.COMMA if symbol == "," else DecimalSeparator.PERIOD
    return DecimalSeparator.PERIOD


def format_number(
    value: int | float | Decimal,
    *,
    separator: str = DecimalSeparator.PERIOD,
    minimum_fraction_digits: int | None = None,
) -> str:
    """Render a number with at most two fraction digits.

    Steps:
    1. Fixed precision of two fraction digits
    2. Trailing fraction zeros removed
    3. Zeros added back up to minimum_fraction_digits
    4. Dangling decimal point removed
    5. "." replaced by separator

    Args:
        value: Number to render
        separator: Decimal separator to emit
        minimum_fraction_digits: Fraction digits to keep even if zero

    Returns:
        Rendered number

    Example:
        >>> format_number(2.07, separator=",")
        '2,07'
        >>> format_number(3)
        '3'
        >>> format_number(1.5, minimum_fraction_digits=2)
        '1.50'
    """
    text = f"{value:.{MAX_FRACTION_DIGITS}f}"
    if "." not in text:
        # nan, inf
        return text

    text = text.rstrip("0")
    if minimum_fraction_digits:
        fraction_digits = len(text) - text.index(".") - 1
        if minimum_fraction_digits > fraction_digits:
            text += "0" * (minimum_fraction_digits - fraction_digits)

    text = text.rstrip(".")
    if separator != ".":
        text = text.replace(".", separator)
    return text


@dataclass(frozen=True, slots=True)
class NumberFormatter:
    """Value formatter attached to every bundle of one chain.

    Numeric values (int, float, Decimal and Fluent number types) are
    rendered with format_number; anything else returns None so the Fluent
    runtime applies its own default.

    Attributes:
        separator: Chain-wide decimal separator
    """

    separator: DecimalSeparator = DecimalSeparator.PERIOD

    @classmethod
    def for_locales(cls, tags: Iterable[LocaleTag]) -> NumberFormatter:
        """Build the formatter for a chain of locales."""
        return cls(decimal_separator_for(tags))

    def __call__(self, value: Any) -> str | None:
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            return None
        options = getattr(value, "options", None)
        minimum = getattr(options, "minimumFractionDigits", None)
        return format_number(
            value,
            separator=self.separator,
            minimum_fraction_digits=int(minimum) if minimum else None,
        )
