"""Catalog access and chain-construction bookkeeping for Translator.

Provides the protocol for translation catalogs, an in-memory and a
filesystem implementation, and result/summary data structures recording
what happened to each preferred locale during construction.

Components:
    Catalog - Protocol for reading module texts of one bundle set
    MappingCatalog - Immutable in-memory catalog (compiled string tables)
    PathCatalog - Disk-based catalog with path-traversal prevention
    catalog_text - Concatenate a set's module texts in declaration order
    LocaleBuildResult - Immutable record of one preferred locale's outcome
    BuildSummary - Immutable aggregate of all outcomes from construction

Python 3.12+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from ftlchain.enums import LocaleStatus
from ftlchain.localization.types import BundleSetName, FTLSource, LocaleTag, ModuleName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "Catalog",
    # Concrete catalogs
    "MappingCatalog",
    "PathCatalog",
    "catalog_text",
    # Construction results
    "LocaleBuildResult",
    "BuildSummary",
]


class Catalog(Protocol):
    """Protocol for the compiled translation catalog.

    A catalog is a read-only, process-wide data source keyed by bundle set
    name. Each set is an ordered mapping of module name to FTL text; the
    order matters because later modules are concatenated after earlier ones.

    Example:
        >>> class StaticCatalog:
        ...     def get_module_texts(self, set_name):
        ...         return STRINGS.get(set_name)
        ...
        >>> translator = Translator(["de"], StaticCatalog())
    """

    def get_module_texts(
        self, set_name: BundleSetName
    ) -> Mapping[ModuleName, FTLSource] | None:
        """Return module texts for a bundle set.

        Args:
            set_name: Canonical bundle set name (e.g., 'zh-CN', 'templates')

        Returns:
            Ordered mapping of module name to FTL text, or None when the
            catalog has no such set
        """


def catalog_text(catalog: Catalog, set_name: BundleSetName) -> FTLSource | None:
    """Concatenate every module text of a bundle set.

    Args:
        catalog: Catalog to read from
        set_name: Canonical bundle set name

    Returns:
        Module texts joined in mapping order, or None for unknown sets
    """
    modules = catalog.get_module_texts(set_name)
    if modules is None:
        return None
    return "".join(modules.values())


@dataclass(frozen=True, slots=True)
class MappingCatalog:
    """In-memory catalog built from nested mappings.

    The input is copied and frozen at construction, so the catalog can be
    shared between any number of Translator instances without locking.

    Example:
        >>> catalog = MappingCatalog({
        ...     "templates": {"core": "hello = Hello\\n"},
        ...     "de": {"core": "hello = Hallo\\n"},
        ... })
        >>> catalog.get_module_texts("de")["core"]
        'hello = Hallo\\n'
        >>> catalog.get_module_texts("fr") is None
        True

    Attributes:
        sets: Bundle set name -> (module name -> FTL text)
    """

    sets: Mapping[BundleSetName, Mapping[ModuleName, FTLSource]]

    def __post_init__(self) -> None:
        """Freeze the nested mappings."""
        frozen = {
            name: MappingProxyType(dict(modules)) for name, modules in self.sets.items()
        }
        object.__setattr__(self, "sets", MappingProxyType(frozen))

    def get_module_texts(
        self, set_name: BundleSetName
    ) -> Mapping[ModuleName, FTLSource] | None:
        """Return module texts for a bundle set, or None if absent."""
        return self.sets.get(set_name)

    @property
    def set_names(self) -> tuple[BundleSetName, ...]:
        """All bundle set names in declaration order."""
        return tuple(self.sets)


@dataclass(frozen=True, slots=True)
class PathCatalog:
    """File system catalog: one directory per bundle set, one .ftl file per module.

    Layout::

        <root>/templates/core.ftl
        <root>/templates/scheduling.ftl
        <root>/de/core.ftl

    Modules are ordered by file name. A missing set directory means the
    catalog has no such set.

    Security:
        Set names containing path separators or ".." are rejected, and every
        resolved path is validated against the root directory.

    Attributes:
        root: Directory holding one sub-directory per bundle set
    """

    root: str | Path
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root).resolve())

    @staticmethod
    def _validate_set_name(set_name: BundleSetName) -> None:
        """Validate a set name for path traversal attacks.

        Raises:
            ValueError: If set_name is empty or contains unsafe path components
        """
        if not set_name:
            msg = "Bundle set name cannot be empty"
            raise ValueError(msg)
        if ".." in set_name:
            msg = f"Path traversal sequences not allowed in set name: '{set_name}'"
            raise ValueError(msg)
        if "/" in set_name or "\\" in set_name:
            msg = f"Path separators not allowed in set name: '{set_name}'"
            raise ValueError(msg)

    @staticmethod
    def _is_safe_path(base_dir: Path, full_path: Path) -> bool:
        """Check if full_path is within base_dir after resolving both."""
        try:
            full_path.resolve().relative_to(base_dir.resolve())
            return True
        except ValueError:
            return False

    def get_module_texts(
        self, set_name: BundleSetName
    ) -> Mapping[ModuleName, FTLSource] | None:
        """Read every module of a bundle set from disk.

        Args:
            set_name: Canonical bundle set name

        Returns:
            Module stem -> FTL text ordered by file name, or None if the
            set directory does not exist

        Raises:
            ValueError: If set_name is unsafe
            OSError: If a module file cannot be read
        """
        self._validate_set_name(set_name)
        set_dir = self._resolved_root / set_name
        if not self._is_safe_path(self._resolved_root, set_dir):
            msg = f"Path traversal detected: set name '{set_name}' escapes catalog root"
            raise ValueError(msg)
        if not set_dir.is_dir():
            return None
        return {
            path.stem: path.read_text(encoding="utf-8")
            for path in sorted(set_dir.glob("*.ftl"))
        }


@dataclass(frozen=True, slots=True)
class LocaleBuildResult:
    """What happened to one preferred locale during chain construction.

    Attributes:
        tag: Parsed locale as requested
        set_name: Bundle set the locale normalized to
        status: Built, unknown set, or failed
        error: Build error if status is FAILED, None otherwise
        override_error: Override parse error; the locale was still built
    """

    tag: LocaleTag
    set_name: BundleSetName
    status: LocaleStatus
    error: Exception | None = None
    override_error: Exception | None = None

    @property
    def is_built(self) -> bool:
        """Check if the locale contributed a bundle."""
        return self.status == LocaleStatus.BUILT

    @property
    def is_unknown_set(self) -> bool:
        """Check if the catalog had no set for this locale."""
        return self.status == LocaleStatus.UNKNOWN_SET

    @property
    def is_failed(self) -> bool:
        """Check if the bundle set existed but could not be built."""
        return self.status == LocaleStatus.FAILED


@dataclass(frozen=True, slots=True)
class BuildSummary:
    """Immutable aggregate of preferred-locale outcomes from Translator construction.

    The terminal reference entry is not included: it either builds or
    construction fails.

    Attributes:
        results: One result per preferred locale that survived parsing and
            truncation, in preference order
        dropped: Locale strings discarded as unparseable
    """

    results: tuple[LocaleBuildResult, ...]
    dropped: tuple[str, ...] = ()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"BuildSummary(total={self.total_attempted}, "
            f"built={self.built}, "
            f"unknown={self.unknown}, "
            f"failed={self.failed}, "
            f"dropped={len(self.dropped)})"
        )

    @property
    def total_attempted(self) -> int:
        """Number of preferred locales considered."""
        return len(self.results)

    @property
    def built(self) -> int:
        """Number of locales that contributed a bundle."""
        return sum(1 for r in self.results if r.is_built)

    @property
    def unknown(self) -> int:
        """Number of locales with no catalog set."""
        return sum(1 for r in self.results if r.is_unknown_set)

    @property
    def failed(self) -> int:
        """Number of locales whose bundle could not be built."""
        return sum(1 for r in self.results if r.is_failed)

    def get_failed(self) -> tuple[LocaleBuildResult, ...]:
        """Get all results whose bundle could not be built."""
        return tuple(r for r in self.results if r.is_failed)

    def get_built(self) -> tuple[LocaleBuildResult, ...]:
        """Get all results that contributed a bundle."""
        return tuple(r for r in self.results if r.is_built)

    @property
    def has_failures(self) -> bool:
        """Check if any existing bundle set failed to build."""
        return self.failed > 0
