"""Translator: preferred locales in, translated text out.

Builds one bundle per usable preferred locale plus a terminal bundle for
the reference language, then answers lookups by walking that chain.

Key architectural decisions:
- Eager construction: every bundle is built before the first lookup
- Immutable chain: nothing is added or removed after construction
- Total lookups: the reference bundle always exists, and a key missing
  everywhere comes back as the key itself
- One decimal separator per chain, chosen from the first preferred locale
  with CLDR number data

Python 3.12+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from ftlchain.diagnostics import ReferenceBundleError
from ftlchain.enums import DecimalSeparator, LocaleStatus
from ftlchain.locale_utils import get_system_locale
from ftlchain.localization.config import TranslatorConfig
from ftlchain.localization.export import ExportedResources
from ftlchain.localization.legacy import LegacyKeyTable
from ftlchain.localization.loading import (
    BuildSummary,
    Catalog,
    LocaleBuildResult,
    catalog_text,
)
from ftlchain.localization.normalizer import bundle_set_name
from ftlchain.localization.types import (
    BundleSetName,
    FTLSource,
    LocaleCode,
    LocaleTag,
    MessageKey,
)
from ftlchain.runtime.bundle import ChainBundle, build_bundle
from ftlchain.runtime.numbers import NumberFormatter

__all__ = ["Translator"]

logger = logging.getLogger(__name__)


class _Chain:
    """Bundle chain shared by a Translator and all of its clones."""

    __slots__ = (
        "bundles",
        "formatter",
        "languages",
        "lock",
        "resource_text",
        "summary",
        "use_isolating",
    )

    def __init__(
        self,
        languages: tuple[LocaleTag, ...],
        bundles: tuple[ChainBundle, ...],
        resource_text: tuple[FTLSource, ...],
        formatter: NumberFormatter,
        use_isolating: bool,
        summary: BuildSummary,
    ) -> None:
        self.languages = languages
        self.bundles = bundles
        self.resource_text = resource_text
        self.formatter = formatter
        self.use_isolating = use_isolating
        self.summary = summary
        self.lock = threading.Lock()


class Translator:
    """Translated, formatted strings for an ordered list of preferred locales.

    Each preferred locale is parsed, normalized to a catalog bundle set and
    built into a bundle; failures only drop that locale. The reference
    language is always appended last, and its failure is fatal.

    Thread Safety:
        Lookups are serialized by one lock per chain. clone() returns a
        handle sharing the same chain and lock.

    Example:
        >>> translator = Translator(["ja-JP"], catalog, use_isolating=False)
        >>> translator.tr("valid-key")
        'キー'
        >>> translator.tr("only-in-english")
        'not translated'
        >>> translator.trn("two-args-key", {"one": 1, "two": "2"})
        '1と2'
        >>> translator.tr("no-such-key")
        'no-such-key'

    Attributes:
        languages: Chain locale display strings, reference language last
    """

    __slots__ = ("_chain", "_legacy_keys")

    def __init__(
        self,
        locales: Iterable[LocaleCode],
        catalog: Catalog,
        *,
        config: TranslatorConfig | None = None,
        overrides: Mapping[BundleSetName, FTLSource] | None = None,
        use_isolating: bool | None = None,
        legacy_keys: LegacyKeyTable | None = None,
    ) -> None:
        """Build the fallback chain.

        Args:
            locales: Preferred locale strings, most preferred first. Invalid
                strings are ignored.
            catalog: Source of bundle set texts
            config: Reference language and isolation settings
            overrides: Bundle set name -> FTL text whose keys replace catalog
                keys. Parse errors in override text are logged and ignored.
            use_isolating: Overrides config.use_isolating when not None
            legacy_keys: Table for tr_legacy(); defaults to an empty table

        Raises:
            ReferenceBundleError: If the reference bundle cannot be built
        """
        config = config or TranslatorConfig()
        overrides = dict(overrides or {})
        codes = list(locales)
        reference_tag = config.reference_tag

        tags, dropped = self._preferred_tags(codes, reference_tag.language)

        languages: list[LocaleTag] = []
        bundles: list[ChainBundle] = []
        resource_text: list[FTLSource] = []
        results: list[LocaleBuildResult] = []

        for tag in tags:
            set_name = bundle_set_name(tag)
            try:
                text = catalog_text(catalog, set_name)
            except OSError as e:
                logger.warning("Unable to read bundle set '%s' for %s: %s", set_name, tag, e)
                results.append(LocaleBuildResult(tag, set_name, LocaleStatus.FAILED, error=e))
                continue
            if text is None:
                logger.debug("No bundle set '%s' for %s", set_name, tag)
                results.append(LocaleBuildResult(tag, set_name, LocaleStatus.UNKNOWN_SET))
                continue

            result = build_bundle(
                text,
                overrides.get(set_name, ""),
                [str(tag), config.reference_locale],
                source=set_name,
            )
            if result.bundle is None:
                logger.warning("Failed to create bundle for %s", tag)
                results.append(
                    LocaleBuildResult(tag, set_name, LocaleStatus.FAILED, error=result.error)
                )
                continue

            languages.append(tag)
            bundles.append(result.bundle)
            resource_text.append(text)
            results.append(
                LocaleBuildResult(
                    tag, set_name, LocaleStatus.BUILT, override_error=result.override_error
                )
            )

        formatter = NumberFormatter.for_locales(languages)

        reference_bundle, reference_text = self._build_reference(catalog, config, overrides)
        languages.append(reference_tag)
        bundles.append(reference_bundle)
        resource_text.append(reference_text)

        if use_isolating is None:
            use_isolating = config.use_isolating
        if use_isolating is None:
            # no explicit locale requested: plain output
            use_isolating = bool(codes)
        for bundle in bundles:
            bundle.set_formatter(formatter)
            bundle.set_use_isolating(use_isolating)

        self._chain = _Chain(
            languages=tuple(languages),
            bundles=tuple(bundles),
            resource_text=tuple(resource_text),
            formatter=formatter,
            use_isolating=use_isolating,
            summary=BuildSummary(results=tuple(results), dropped=tuple(dropped)),
        )
        self._legacy_keys = legacy_keys if legacy_keys is not None else LegacyKeyTable()

        logger.info(
            "Translator ready: languages=%s, decimal separator %r, isolating=%s",
            ", ".join(self.languages),
            str(formatter.separator),
            use_isolating,
        )

    @staticmethod
    def _preferred_tags(
        codes: list[LocaleCode], reference_language: str
    ) -> tuple[list[LocaleTag], list[str]]:
        """Parse preferences, stopping after the first reference-language entry.

        The reference bundle covers every key, so preferences after it
        could never be reached.
        """
        tags: list[LocaleTag] = []
        dropped: list[str] = []
        for code in codes:
            tag = LocaleTag.parse(code)
            if tag is None:
                logger.debug("Ignoring invalid locale %r", code)
                dropped.append(str(code))
                continue
            tags.append(tag)
            if tag.language == reference_language:
                logger.debug("'%s' requested; later preferences are unreachable", code)
                break
        return tags, dropped

    @staticmethod
    def _build_reference(
        catalog: Catalog,
        config: TranslatorConfig,
        overrides: Mapping[BundleSetName, FTLSource],
    ) -> tuple[ChainBundle, FTLSource]:
        set_name = config.reference_set
        try:
            text = catalog_text(catalog, set_name)
        except (OSError, ValueError) as e:
            raise ReferenceBundleError(set_name, f"unreadable ({e})") from e
        if text is None:
            raise ReferenceBundleError(set_name, "not present in catalog")

        result = build_bundle(
            text, overrides.get(set_name, ""), [config.reference_locale], source=set_name
        )
        if result.bundle is None:
            raise ReferenceBundleError(set_name, str(result.error)) from result.error
        return result.bundle, text

    @classmethod
    def template_only(cls, catalog: Catalog, **kwargs: Any) -> Translator:
        """Translator with no preferred locales: reference language only."""
        return cls((), catalog, **kwargs)

    @classmethod
    def for_system_locale(cls, catalog: Catalog, **kwargs: Any) -> Translator:
        """Translator preferring the locale detected from the OS environment.

        Falls back to template_only() when no locale can be detected.
        """
        detected = get_system_locale()
        return cls([detected] if detected else (), catalog, **kwargs)

    def clone(self) -> Translator:
        """Return a handle sharing this translator's chain and lock."""
        clone = object.__new__(type(self))
        clone._chain = self._chain
        clone._legacy_keys = self._legacy_keys
        return clone

    def __copy__(self) -> Translator:
        return self.clone()

    def __repr__(self) -> str:
        return f"Translator(languages={list(self.languages)!r})"

    @property
    def languages(self) -> tuple[str, ...]:
        """Chain locale display strings in lookup order, reference last."""
        return tuple(str(tag) for tag in self._chain.languages)

    @property
    def decimal_separator(self) -> DecimalSeparator:
        return self._chain.formatter.separator

    @property
    def use_isolating(self) -> bool:
        return self._chain.use_isolating

    @property
    def legacy_keys(self) -> LegacyKeyTable:
        return self._legacy_keys

    def get_build_summary(self) -> BuildSummary:
        """Outcome of every preferred locale considered at construction."""
        return self._chain.summary

    def lookup(self, key: MessageKey, args: Mapping[str, Any] | None = None) -> str:
        """Translate a key, falling back along the chain.

        The first bundle holding a message with a value pattern formats it
        and its text is returned, even if formatting reported errors (those
        are logged). Keys found nowhere are returned unchanged.

        Args:
            key: Message key
            args: Named arguments substituted into the pattern

        Returns:
            Formatted text, or key itself when no bundle has it
        """
        chain = self._chain
        with chain.lock:
            for index, bundle in enumerate(chain.bundles):
                pattern = bundle.find_pattern(key)
                if pattern is None:
                    continue
                if index:
                    logger.debug("'%s' resolved by fallback %s", key, chain.languages[index])
                text, errors = bundle.format_pattern(pattern, args)
                if errors:
                    logger.warning(
                        "Error(s) in translation '%s': %d error(s)", key, len(errors)
                    )
                    for err in errors:
                        logger.debug("  - %s: %s", type(err).__name__, err)
                return str(text)

        logger.debug("Missing translation '%s'", key)
        return key

    def tr(self, key: MessageKey) -> str:
        """Translate a key with no arguments."""
        return self.lookup(key)

    def trn(self, key: MessageKey, args: Mapping[str, Any]) -> str:
        """Translate a key with one or more arguments."""
        return self.lookup(key, args)

    def tr_legacy(self, value: int, args: Mapping[str, Any] | None = None) -> str:
        """Translate a legacy integer key (module_index * 1000 + local_index)."""
        return self.lookup(self._legacy_keys.resolve_legacy(value), args)

    def has_key(self, key: MessageKey) -> bool:
        """Check if any bundle in the chain can translate key."""
        chain = self._chain
        with chain.lock:
            return any(bundle.find_pattern(key) is not None for bundle in chain.bundles)

    def export_for_secondary_consumer(self) -> ExportedResources:
        """Languages and raw resource texts for a runtime that builds its own chain."""
        chain = self._chain
        with chain.lock:
            return ExportedResources(
                languages=tuple(str(tag) for tag in chain.languages),
                resources=chain.resource_text,
            )
