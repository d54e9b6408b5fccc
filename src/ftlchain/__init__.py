"""ftlchain - locale fallback chains for Fluent (FTL) translations.

Maps a user's preferred locales to bundled translation sets, builds a
fallback chain that always ends in the complete reference language, and
formats messages with one decimal-separator policy for the whole chain.

Public API:
    Translator - Fallback chain orchestration (lookup, tr, trn, export)
    TranslatorConfig - Reference language and isolation settings
    MappingCatalog - In-memory catalog of bundle sets
    PathCatalog - Directory-per-set catalog of .ftl modules
    LocaleTag - Parsed locale identifier
    LegacyKeyTable - Integer key to string key table
    ExportedResources - Payload for a secondary Fluent runtime

Exceptions:
    TranslationError - Base exception class
    ReferenceBundleError - The reference bundle could not be built (fatal)
    ResourceParseError - FTL text contained unparseable entries
    DuplicateKeyError - A bundle set defined a key twice

Submodules:
    ftlchain.localization - Locale handling, catalogs and the Translator
    ftlchain.runtime - Chain bundles and numeric formatting policy
    ftlchain.diagnostics - Error types
"""

from .diagnostics import (
    DuplicateKeyError,
    ReferenceBundleError,
    ResourceParseError,
    TranslationError,
)
from .enums import DecimalSeparator
from .localization import (
    ExportedResources,
    LegacyKeyTable,
    LocaleTag,
    MappingCatalog,
    PathCatalog,
    Translator,
    TranslatorConfig,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("ftlchain")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DecimalSeparator",
    "DuplicateKeyError",
    "ExportedResources",
    "LegacyKeyTable",
    "LocaleTag",
    "MappingCatalog",
    "PathCatalog",
    "ReferenceBundleError",
    "ResourceParseError",
    "TranslationError",
    "Translator",
    "TranslatorConfig",
    "__version__",
]
