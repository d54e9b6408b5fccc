"""Enumerations for ftlchain type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.12+.
"""

from enum import StrEnum


class DecimalSeparator(StrEnum):
    """Decimal separator style chosen once for a whole fallback chain.

    StrEnum provides automatic string conversion: str(DecimalSeparator.COMMA) == ","
    """

    PERIOD = "."
    """Period separator: 2.07"""

    COMMA = ","
    """Comma separator: 2,07"""


class BuildStatus(StrEnum):
    """Outcome of building one bundle from catalog text.

    StrEnum provides automatic string conversion: str(BuildStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Catalog text parsed and registered (override errors do not change this)"""

    PARSE_ERROR = "parse_error"
    """Catalog text contained unparseable entries"""

    DUPLICATE_KEY = "duplicate_key"
    """Catalog text defined the same message or term more than once"""


class LocaleStatus(StrEnum):
    """Outcome of resolving one preferred locale into a chain entry.

    StrEnum provides automatic string conversion: str(LocaleStatus.BUILT) == "built"
    """

    BUILT = "built"
    """Bundle built and added to the chain"""

    UNKNOWN_SET = "unknown_set"
    """Catalog has no bundle set for the normalized name"""

    FAILED = "failed"
    """Bundle set exists but its bundle could not be built"""


__all__ = [
    "BuildStatus",
    "DecimalSeparator",
    "LocaleStatus",
]
