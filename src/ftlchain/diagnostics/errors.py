"""Translation exception hierarchy.

Only ReferenceBundleError ever escapes to callers: every other condition is
logged and reported through result objects so that lookups keep degrading
toward "show something" instead of halting.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "DuplicateKeyError",
    "ReferenceBundleError",
    "ResourceParseError",
    "TranslationError",
]


class TranslationError(Exception):
    """Base exception for all ftlchain errors."""


class ResourceParseError(TranslationError):
    """Resource text contained entries the Fluent parser could not read.

    Attributes:
        source: Human-readable description of the text (set name, "override")
        annotations: (code, message) pairs reported by the parser
        junk: Raw content of each unparseable entry
    """

    def __init__(
        self,
        source: str,
        annotations: Iterable[tuple[str, str]],
        junk: Iterable[str] = (),
    ) -> None:
        """Initialize ResourceParseError.

        Args:
            source: Description of the parsed text
            annotations: Parser (code, message) pairs
            junk: Unparseable content fragments
        """
        self.source = source
        self.annotations: tuple[tuple[str, str], ...] = tuple(annotations)
        self.junk: tuple[str, ...] = tuple(junk)
        details = "; ".join(f"{code}: {message}" for code, message in self.annotations)
        super().__init__(
            f"Unable to parse translations in {source}: "
            f"{len(self.junk)} invalid entries ({details or 'no details'})"
        )


class DuplicateKeyError(TranslationError):
    """The same message or term was defined more than once in one bundle set.

    Attributes:
        source: Human-readable description of the text
        keys: Duplicated identifiers, terms prefixed with "-"
    """

    def __init__(self, source: str, keys: Iterable[str]) -> None:
        """Initialize DuplicateKeyError.

        Args:
            source: Description of the parsed text
            keys: Duplicated identifiers in first-seen order
        """
        self.source = source
        self.keys: tuple[str, ...] = tuple(keys)
        super().__init__(
            f"Duplicate key detected in translations for {source}: {', '.join(self.keys)}"
        )


class ReferenceBundleError(TranslationError):
    """The terminal reference-language bundle could not be created.

    Fatal: every lookup relies on this bundle being present, so Translator
    construction fails instead of producing a partial chain.

    Attributes:
        set_name: Catalog set name of the reference language
    """

    def __init__(self, set_name: str, reason: str) -> None:
        """Initialize ReferenceBundleError.

        Args:
            set_name: Reference set name
            reason: Short description of the failure
        """
        self.set_name = set_name
        super().__init__(f"Reference bundle '{set_name}' unavailable: {reason}")
