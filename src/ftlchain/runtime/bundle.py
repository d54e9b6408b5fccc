"""ChainBundle and bundle construction for one chain entry.

A chain entry's bundle is a fluent.runtime FluentBundle that renders
numbers through the chain's NumberFormatter. build_bundle() parses the
catalog text, rejects duplicate keys, applies optional override text, and
reports the outcome as a BundleBuildResult instead of raising.

Python 3.12+. External dependencies: fluent.runtime, fluent.syntax.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from fluent.runtime import FluentBundle
from fluent.runtime.resolver import CurrentEnvironment, ResolverEnvironment
from fluent.runtime.types import (
    FluentDecimal,
    FluentFloat,
    FluentInt,
    fluent_number,
)
from fluent.runtime.utils import native_to_fluent
from fluent.syntax import FluentParser
from fluent.syntax import ast as FTL

from ftlchain.constants import LOG_TRUNCATE_WARNING
from ftlchain.diagnostics import DuplicateKeyError, ResourceParseError
from ftlchain.enums import BuildStatus
from ftlchain.runtime.numbers import NumberFormatter

__all__ = [
    "BundleBuildResult",
    "ChainBundle",
    "build_bundle",
    "parse_resource",
]

logger = logging.getLogger(__name__)


class _PolicyNumber:
    """Fluent number rendered by the owning bundle's NumberFormatter."""

    formatter: NumberFormatter | None = None

    def format(self, locale: Any) -> str:
        if self.formatter is not None:
            text = self.formatter(self)
            if text is not None:
                return text
        return super().format(locale)  # type: ignore[misc]


class _PolicyInt(_PolicyNumber, FluentInt):
    pass


class _PolicyFloat(_PolicyNumber, FluentFloat):
    pass


class _PolicyDecimal(_PolicyNumber, FluentDecimal):
    pass


class ChainBundle(FluentBundle):
    """FluentBundle whose numbers follow a chain-wide NumberFormatter.

    Numeric arguments, and results of NUMBER() inside patterns, are wrapped
    so that rendering goes through the formatter while plural selection
    still sees the original numeric value. Until set_formatter() is called
    numbers render with Babel's defaults.

    Thread Safety:
        Not thread-safe on its own. Translator serializes access.

    Example:
        >>> bundle = ChainBundle(["pl-PL", "en-US"], use_isolating=False)
        >>> bundle.add_resource(parse_resource("n = { $n }", "demo"))
        >>> bundle.set_formatter(NumberFormatter(DecimalSeparator.COMMA))
        >>> bundle.format_pattern(bundle.find_pattern("n"), {"n": 2.07})
        ('2,07', [])
    """

    def __init__(self, locales: Iterable[str], *, use_isolating: bool = True) -> None:
        super().__init__(
            list(locales),
            functions={"NUMBER": self._number},
            use_isolating=use_isolating,
        )
        self._formatter: NumberFormatter | None = None

    @property
    def formatter(self) -> NumberFormatter | None:
        return self._formatter

    def set_formatter(self, formatter: NumberFormatter | None) -> None:
        self._formatter = formatter

    def set_use_isolating(self, use_isolating: bool) -> None:
        self.use_isolating = use_isolating

    def find_pattern(self, key: str) -> Any | None:
        """Return the value pattern of a message, or None.

        Messages that only carry attributes have no value pattern and are
        reported as None, same as missing messages.
        """
        if not self.has_message(key):
            return None
        return self.get_message(key).value

    def format_pattern(
        self, pattern: Any, args: Mapping[str, Any] | None = None
    ) -> tuple[str, list[Exception]]:
        """Format a pattern with numeric arguments rendered by the chain formatter.

        FluentBundle.format_pattern converts every argument with
        native_to_fluent, which rebuilds number subclasses as plain Fluent
        numbers, so the resolver environment is set up here instead.
        """
        fluent_args = {name: self._wrap(value) for name, value in (args or {}).items()}
        errors: list[Exception] = []
        env = ResolverEnvironment(
            context=self, current=CurrentEnvironment(args=fluent_args), errors=errors
        )
        try:
            result = pattern(env)
        except ValueError as e:
            errors.append(e)
            result = "{???}"
        return result, errors

    def _wrap(self, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            return native_to_fluent(value)
        number = fluent_number(value)
        if isinstance(number, int):
            wrapped: _PolicyNumber = _PolicyInt(number)
        elif isinstance(number, float):
            wrapped = _PolicyFloat(number)
        else:
            wrapped = _PolicyDecimal(number)
        wrapped.formatter = self._formatter
        return wrapped

    def _number(self, number: Any, **kwargs: Any) -> Any:
        # NUMBER() builtin replacement; options such as minimumFractionDigits survive the wrap
        return self._wrap(fluent_number(number, **kwargs))


@dataclass(frozen=True, slots=True)
class BundleBuildResult:
    """Result of building one bundle.

    Attributes:
        status: SUCCESS, PARSE_ERROR or DUPLICATE_KEY
        bundle: The bundle when status is SUCCESS, None otherwise
        error: Catalog error when construction failed
        override_error: Override parse error; the bundle is still usable
    """

    status: BuildStatus
    bundle: ChainBundle | None = None
    error: ResourceParseError | DuplicateKeyError | None = None
    override_error: ResourceParseError | None = None

    @property
    def is_success(self) -> bool:
        """Check if a bundle was produced."""
        return self.status == BuildStatus.SUCCESS


def parse_resource(text: str, source: str) -> FTL.Resource:
    """Parse FTL text, failing if any entry is unparseable.

    Args:
        text: FTL source
        source: Description used in the error message

    Returns:
        Parsed resource

    Raises:
        ResourceParseError: If the parser produced Junk entries
    """
    resource = FluentParser().parse(text)
    junk = [entry for entry in resource.body if isinstance(entry, FTL.Junk)]
    if junk:
        annotations = [
            (annotation.code, annotation.message)
            for entry in junk
            for annotation in entry.annotations
        ]
        raise ResourceParseError(source, annotations, (entry.content for entry in junk))
    return resource


def _duplicate_keys(resource: FTL.Resource) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for entry in resource.body:
        match entry:
            case FTL.Message():
                key = entry.id.name
            case FTL.Term():
                key = f"-{entry.id.name}"
            case _:
                continue
        if key in seen and key not in duplicates:
            duplicates.append(key)
        seen.add(key)
    return duplicates


def _log_parse_error(error: ResourceParseError) -> None:
    logger.warning("%s", error)
    for content in error.junk:
        logger.debug("  - %s", repr(content[:LOG_TRUNCATE_WARNING]))


def build_bundle(
    text: str,
    override_text: str,
    locales: Iterable[str],
    *,
    source: str = "<catalog>",
    formatter: NumberFormatter | None = None,
    use_isolating: bool = True,
) -> BundleBuildResult:
    """Build one chain bundle from catalog text and optional override text.

    Catalog errors abort this bundle only. Override text is best effort:
    its keys replace catalog keys, and if it fails to parse the catalog
    bundle is returned unchanged.

    Args:
        text: Concatenated catalog module texts
        override_text: Runtime-supplied FTL overriding catalog keys ("" for none)
        locales: Locale codes for the bundle, preferred locale first
        source: Description used in log messages and errors
        formatter: Number formatter to attach (may be attached later)
        use_isolating: Wrap placeables in Unicode bidi isolation marks

    Returns:
        BundleBuildResult describing the outcome

    Logging:
        Parse errors and duplicate keys are logged at WARNING level.
    """
    try:
        resource = parse_resource(text, source)
    except ResourceParseError as e:
        _log_parse_error(e)
        return BundleBuildResult(BuildStatus.PARSE_ERROR, error=e)

    duplicates = _duplicate_keys(resource)
    if duplicates:
        error = DuplicateKeyError(source, duplicates)
        logger.warning("%s", error)
        return BundleBuildResult(BuildStatus.DUPLICATE_KEY, error=error)

    bundle = ChainBundle(locales, use_isolating=use_isolating)
    bundle.add_resource(resource)

    override_error = None
    if override_text:
        try:
            bundle.add_resource(
                parse_resource(override_text, f"{source} (override)"), allow_overrides=True
            )
        except ResourceParseError as e:
            _log_parse_error(e)
            override_error = e

    bundle.set_formatter(formatter)
    return BundleBuildResult(BuildStatus.SUCCESS, bundle=bundle, override_error=override_error)
