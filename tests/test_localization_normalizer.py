"""Tests for bundle_set_name region remapping and macro-language consolidation."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlchain.localization.normalizer import bundle_set_name
from ftlchain.localization.types import LocaleTag


class TestEnglish:
    """English maps to the British set or straight to the templates."""

    @pytest.mark.parametrize("region", ["GB", "AU"])
    def test_british_and_australian(self, region: str) -> None:
        """en-GB and en-AU share one bundle set."""
        assert bundle_set_name(LocaleTag("en", region)) == "en-GB"

    @pytest.mark.parametrize("region", [None, "US", "CA", "IE", "NZ"])
    def test_other_english_uses_templates(self, region: str | None) -> None:
        """Every other English variant goes directly to the reference set."""
        assert bundle_set_name(LocaleTag("en", region)) == "templates"


class TestMacroLanguages:
    """Chinese and Portuguese regional variants are consolidated."""

    @pytest.mark.parametrize(
        ("region", "expected"),
        [("TW", "zh-TW"), ("HK", "zh-TW"), ("CN", "zh-CN"), ("SG", "zh-CN"), (None, "zh-CN")],
    )
    def test_chinese(self, region: str | None, expected: str) -> None:
        """Taiwan and Hong Kong get Traditional script, everything else Simplified."""
        assert bundle_set_name(LocaleTag("zh", region)) == expected

    @pytest.mark.parametrize(
        ("region", "expected"),
        [("PT", "pt-PT"), ("BR", "pt-BR"), ("AO", "pt-BR"), (None, "pt-BR")],
    )
    def test_portuguese(self, region: str | None, expected: str) -> None:
        """Only Portugal gets European Portuguese."""
        assert bundle_set_name(LocaleTag("pt", region)) == expected


class TestSingleRegionLanguages:
    """Languages shipped only as one regional set."""

    @pytest.mark.parametrize(
        ("language", "expected"),
        [("ga", "ga-IE"), ("hy", "hy-AM"), ("nb", "nb-NO"), ("sv", "sv-SE")],
    )
    def test_remapped_without_region(self, language: str, expected: str) -> None:
        """The bare language maps to its only regional set."""
        assert bundle_set_name(LocaleTag(language)) == expected

    def test_remapped_regardless_of_region(self) -> None:
        """A different region still maps to the shipped set."""
        assert bundle_set_name(LocaleTag("sv", "FI")) == "sv-SE"


class TestPassThrough:
    """All other languages use the bare language subtag."""

    def test_region_ignored(self) -> None:
        """de-AT uses the 'de' set."""
        assert bundle_set_name(LocaleTag("de", "AT")) == "de"

    def test_case_sensitive_language(self) -> None:
        """Language matching is case-sensitive; parse() already lowercases."""
        assert bundle_set_name(LocaleTag("EN", "GB")) == "EN"

    @given(
        st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=2, max_size=8).filter(
            lambda s: s not in {"en", "zh", "pt", "ga", "hy", "nb", "sv"}
        ),
        st.one_of(st.none(), st.sampled_from(["US", "GB", "DE", "BR", "TW"])),
    )
    def test_total_and_pure(self, language: str, region: str | None) -> None:
        """Unknown languages pass through unchanged and never raise."""
        tag = LocaleTag(language, region)
        assert bundle_set_name(tag) == language
        assert bundle_set_name(tag) == bundle_set_name(tag)
