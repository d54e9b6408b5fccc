"""Map a parsed locale to the catalog bundle set that serves it.

The catalog ships one set per supported language. Regional variants of a
macro-language are consolidated, a few languages only ship a regional set,
and default-region English goes straight to the reference templates.

Python 3.12+.
"""

from __future__ import annotations

from ftlchain.constants import REFERENCE_SET_NAME
from ftlchain.localization.types import BundleSetName, LocaleTag

__all__ = ["bundle_set_name"]


def bundle_set_name(tag: LocaleTag) -> BundleSetName:
    """Return the canonical bundle set name for a locale.

    Pure and total: unknown languages pass through as their own language
    subtag and the catalog reports them as missing later.

    Args:
        tag: Parsed locale

    Returns:
        Catalog set name

    Example:
        >>> bundle_set_name(LocaleTag("en", "AU"))
        'en-GB'
        >>> bundle_set_name(LocaleTag("en", "US"))
        'templates'
        >>> bundle_set_name(LocaleTag("zh", "HK"))
        'zh-TW'
        >>> bundle_set_name(LocaleTag("de", "AT"))
        'de'
    """
    match (tag.language, tag.region):
        case ("en", "GB" | "AU"):
            return "en-GB"
        case ("en", _):
            # no generic English set; the templates are standard English
            return REFERENCE_SET_NAME
        case ("zh", "TW" | "HK"):
            return "zh-TW"
        case ("zh", _):
            return "zh-CN"
        case ("pt", "PT"):
            return "pt-PT"
        case ("pt", _):
            return "pt-BR"
        case ("ga", _):
            return "ga-IE"
        case ("hy", _):
            return "hy-AM"
        case ("nb", _):
            return "nb-NO"
        case ("sv", _):
            return "sv-SE"
        case (language, _):
            return language
