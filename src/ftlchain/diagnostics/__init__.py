"""Error types for bundle construction and the translator.

Python 3.12+. Zero external dependencies.
"""

from .errors import (
    DuplicateKeyError,
    ReferenceBundleError,
    ResourceParseError,
    TranslationError,
)

__all__ = [
    "DuplicateKeyError",
    "ReferenceBundleError",
    "ResourceParseError",
    "TranslationError",
]
