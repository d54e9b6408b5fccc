"""Translator configuration.

Provides a single frozen dataclass for the settings that shape a chain.

Python 3.12+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ftlchain.constants import REFERENCE_LOCALE, REFERENCE_SET_NAME
from ftlchain.localization.types import LocaleTag

__all__ = ["TranslatorConfig"]


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable configuration for Translator.

    All fields have defaults; ``TranslatorConfig()`` describes the standard
    setup with the "templates" set as the terminal en-US entry.

    Attributes:
        reference_set: Catalog set holding the complete reference texts.
        reference_locale: Locale recorded for the terminal entry.
        use_isolating: Force bidi isolation marks on (True) or off (False)
            for every bundle. None (default) disables them only when no
            preferred locale was given.

    Example:
        >>> config = TranslatorConfig(use_isolating=False)
        >>> translator = Translator(["pl-PL"], catalog, config=config)
        >>> translator.use_isolating
        False
    """

    reference_set: str = REFERENCE_SET_NAME
    reference_locale: str = REFERENCE_LOCALE
    use_isolating: bool | None = None
    _reference_tag: LocaleTag = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If reference_set is empty or reference_locale is not
                a valid locale tag.
        """
        if not self.reference_set:
            msg = "reference_set must not be empty"
            raise ValueError(msg)
        tag = LocaleTag.parse(self.reference_locale)
        if tag is None:
            msg = f"reference_locale is not a valid locale tag: '{self.reference_locale}'"
            raise ValueError(msg)
        object.__setattr__(self, "_reference_tag", tag)

    @property
    def reference_tag(self) -> LocaleTag:
        """Parsed reference locale."""
        return self._reference_tag
