"""Locale resolution and the fallback-chain translator.

Provides the full localization stack: type aliases, locale-to-bundle-set
mapping, catalog access, legacy key lookup, and the Translator orchestrator.

Submodules:
    types      - Type aliases (MessageKey, LocaleCode, BundleSetName, FTLSource) and LocaleTag
    normalizer - bundle_set_name (region remapping, macro-language consolidation)
    loading    - Catalog protocol, MappingCatalog, PathCatalog, LocaleBuildResult, BuildSummary
    legacy     - LegacyKeyTable (integer keys -> string keys)
    config     - TranslatorConfig
    export     - ExportedResources (payload for a secondary Fluent runtime)
    translator - Translator (fallback chain orchestration)

Python 3.12+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from ftlchain.enums import LocaleStatus
from ftlchain.localization.config import TranslatorConfig
from ftlchain.localization.export import ExportedResources
from ftlchain.localization.legacy import LegacyKeyTable
from ftlchain.localization.loading import (
    BuildSummary,
    Catalog,
    LocaleBuildResult,
    MappingCatalog,
    PathCatalog,
    catalog_text,
)
from ftlchain.localization.normalizer import bundle_set_name
from ftlchain.localization.translator import Translator
from ftlchain.localization.types import (
    BundleSetName,
    FTLSource,
    LocaleCode,
    LocaleTag,
    MessageKey,
    ModuleName,
)

__all__ = [
    # Main orchestrator
    "Translator",
    "TranslatorConfig",
    # Catalog protocol and implementations
    "Catalog",
    "MappingCatalog",
    "PathCatalog",
    "catalog_text",
    # Locale handling
    "LocaleTag",
    "bundle_set_name",
    # Construction tracking
    "LocaleStatus",
    "LocaleBuildResult",
    "BuildSummary",
    # Secondary consumers
    "ExportedResources",
    "LegacyKeyTable",
    # Type aliases for user code type annotations
    "BundleSetName",
    "FTLSource",
    "LocaleCode",
    "MessageKey",
    "ModuleName",
]
