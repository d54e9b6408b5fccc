"""Shared constants for ftlchain.

Placing constants here avoids circular imports between the localization
and runtime packages and provides a single source of truth.

Constants are grouped by domain:
- Reference language: the terminal, complete-coverage entry of every chain
- Numeric formatting: fixed precision used by the decimal policy
- Fallback strings: sentinels returned instead of raising
- Logging: truncation of resource content in log records

Python 3.12+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reference language
    "REFERENCE_SET_NAME",
    "REFERENCE_LOCALE",
    # Numeric formatting
    "MAX_FRACTION_DIGITS",
    "LEGACY_MODULE_STRIDE",
    # Fallback strings
    "INVALID_LEGACY_KEY",
    # Logging
    "LOG_TRUNCATE_WARNING",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# REFERENCE LANGUAGE
# ============================================================================

# Catalog set holding the source-language templates. Every key exists here,
# so no separate generic-English set is shipped.
REFERENCE_SET_NAME: str = "templates"

# Locale tag recorded for the terminal chain entry.
REFERENCE_LOCALE: str = "en-US"

# ============================================================================
# NUMERIC FORMATTING
# ============================================================================

# Numbers are rendered with this fixed precision before trailing zeros are trimmed.
MAX_FRACTION_DIGITS: int = 2

# Legacy integer keys are module_index * 1000 + local_index.
LEGACY_MODULE_STRIDE: int = 1000

# Babel Locale objects cached by locale_utils.get_babel_locale.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned by the legacy key table for out-of-range indices.
INVALID_LEGACY_KEY: str = "invalid-module-or-translation-index"

# ============================================================================
# LOGGING
# ============================================================================

# Resource content quoted in warnings is cut to this many characters.
LOG_TRUNCATE_WARNING: int = 100
