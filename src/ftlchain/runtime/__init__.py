"""Bundle runtime: chain bundles and the numeric formatting policy.

Builds on fluent.runtime for pattern resolution and Babel for CLDR
decimal separators.

Python 3.12+.
"""

from .bundle import BundleBuildResult, ChainBundle, build_bundle, parse_resource
from .numbers import NumberFormatter, decimal_separator_for, format_number, numeric_locale

__all__ = [
    "BundleBuildResult",
    "ChainBundle",
    "NumberFormatter",
    "build_bundle",
    "decimal_separator_for",
    "format_number",
    "numeric_locale",
    "parse_resource",
]
