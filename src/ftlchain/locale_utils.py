"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.12+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from ftlchain.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    All locale handling normalizes at the system boundary using this function.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Numeric policy
    resolution asks for the same few locales on every Translator construction.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop every cached Babel Locale."""
    get_babel_locale.cache_clear()


def get_system_locale() -> str | None:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Returns:
        Detected locale code in POSIX format, or None when nothing usable is set.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale and system_locale not in ("C", "POSIX"):
        return normalize_locale(system_locale.split(".")[0])

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            locale_code = value.split(".")[0]
            if locale_code and locale_code not in ("C", "POSIX"):
                return normalize_locale(locale_code)

    return None
