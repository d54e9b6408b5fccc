"""Type aliases and the LocaleTag value type for the localization domain.

Python 3.12+.
"""

from __future__ import annotations

from dataclasses import dataclass

from babel.core import parse_locale

from ftlchain.locale_utils import normalize_locale

__all__ = [
    "BundleSetName",
    "FTLSource",
    "LocaleCode",
    "LocaleTag",
    "MessageKey",
    "ModuleName",
]

type MessageKey = str
"""Stable message identifier (e.g., 'valid-key', 'card-stats-due')."""

type LocaleCode = str
"""User-supplied locale string (e.g., 'en', 'pt-BR', 'ja_JP')."""

type BundleSetName = str
"""Canonical catalog key of one language's texts (e.g., 'zh-CN', 'templates')."""

type ModuleName = str
"""Catalog module identifier within one bundle set (e.g., 'scheduling')."""

type FTLSource = str
"""Raw FTL source text as a Python string."""


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Parsed language identifier: language plus optional script, region, variant.

    Parsing is purely syntactic. "zz" is a valid tag even though no CLDR
    data exists for it; catalog lookup later decides whether it is useful.

    Attributes:
        language: Lowercase language subtag (2-3 or 5-8 letters)
        region: Uppercase region subtag or None
        script: Title-case script subtag or None
        variant: Variant subtag or None

    Example:
        >>> tag = LocaleTag.parse("pt-br")
        >>> tag.language, tag.region
        ('pt', 'BR')
        >>> str(tag)
        'pt-BR'
        >>> LocaleTag.parse("en-!!") is None
        True
    """

    language: str
    region: str | None = None
    script: str | None = None
    variant: str | None = None

    @classmethod
    def parse(cls, code: LocaleCode) -> LocaleTag | None:
        """Parse a BCP-47 or POSIX locale string.

        Args:
            code: Locale string using "-" or "_" separators

        Returns:
            LocaleTag, or None when the string is not a syntactically valid tag
        """
        if not isinstance(code, str):
            return None
        try:
            parts = parse_locale(normalize_locale(code))
        except ValueError:
            return None
        language, region, script, variant = parts[:4]
        if not (2 <= len(language) <= 3 or 5 <= len(language) <= 8):
            return None
        return cls(language=language, region=region, script=script, variant=variant)

    def __str__(self) -> str:
        return "-".join(
            part for part in (self.language, self.script, self.region, self.variant) if part
        )

    @property
    def posix(self) -> str:
        """Babel-compatible identifier (e.g., 'zh_Hant_TW')."""
        return "_".join(
            part for part in (self.language, self.script, self.region, self.variant) if part
        )
