"""Tests for naming convention helpers."""

from tokengraph.core.naming import case_variants, split_prefix_suffix, to_camel, to_kebab


class TestCaseConversion:
    def test_to_kebab(self) -> None:
        assert to_kebab("primaryForeground") == "primary-foreground"
        assert to_kebab("ghostBorder") == "ghost-border"
        assert to_kebab("background") == "background"

    def test_to_camel(self) -> None:
        assert to_camel("primary-foreground") == "primaryForeground"
        assert to_camel("button-ghost-background") == "buttonGhostBackground"
        assert to_camel("border") == "border"

    def test_case_variants_exclude_input(self) -> None:
        assert case_variants("primaryForeground") == ["primary-foreground"]
        assert case_variants("primary-foreground") == ["primaryForeground"]
        assert case_variants("border") == []


class TestSplitPrefixSuffix:
    def test_splits_on_last_separator(self) -> None:
        assert split_prefix_suffix("gray-50") == ("gray", "50")
        assert split_prefix_suffix("button-ghost-background") == ("button-ghost", "background")

    def test_no_separator(self) -> None:
        assert split_prefix_suffix("gray") is None

    def test_empty_sides(self) -> None:
        assert split_prefix_suffix("-gray") is None
        assert split_prefix_suffix("gray-") is None
