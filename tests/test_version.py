"""Tests for the Version value type."""

import pytest

from update_checker.version import (
    InvalidVersionFormat,
    Version,
    VersionKind,
    parse_kind,
    strip_prefix,
)


class TestParseKind:
    @pytest.mark.parametrize(
        "raw, numeric, kind",
        [
            ("1.2.3", "1.2.3", VersionKind.RELEASE),
            ("7", "7", VersionKind.RELEASE),
            ("1.0-snapshot", "1.0", VersionKind.SNAPSHOT),
            ("1.0.0-SNAPSHOT", "1.0.0", VersionKind.SNAPSHOT),
            ("2.1-dev", "2.1", VersionKind.DEV),
            ("2.1.DEV", "2.1", VersionKind.DEV),
            ("3.0dev", "3.0", VersionKind.DEV),
        ],
    )
    def test_suffix_table(self, raw, numeric, kind):
        assert parse_kind(raw) == (numeric, kind)

    def test_forced_prerelease_is_dev(self):
        assert parse_kind("2.0.0", force_prerelease=True) == ("2.0.0", VersionKind.DEV)

    def test_snapshot_wins_over_forced_prerelease(self):
        assert parse_kind("2.0.0-snapshot", force_prerelease=True) == (
            "2.0.0",
            VersionKind.SNAPSHOT,
        )

    def test_forced_prerelease_drops_label(self):
        assert parse_kind("1.0.0-beta.1", force_prerelease=True) == ("1.0.0", VersionKind.DEV)


class TestConstruct:
    @pytest.mark.parametrize(
        "raw",
        [
            "", "abc", "1.a", "1..2", "1.2.", ".1", "v1.2", "1.2 ", "dev", "-snapshot", "1.2-rc",
            "1.0-dev\n", "1.0.0\n", "\u0661.\u0662",
        ],
    )
    def test_invalid_format(self, raw):
        with pytest.raises(InvalidVersionFormat):
            Version(raw)

    def test_invalid_format_is_value_error(self):
        with pytest.raises(ValueError):
            Version("one.two")

    def test_prerelease_label_rejects_trailing_newline(self):
        with pytest.raises(InvalidVersionFormat):
            Version("1.0.0-rc\n", force_prerelease=True)

    def test_unknown_label_needs_prerelease_flag(self):
        version = Version("1.0.0-rc", force_prerelease=True)
        assert version.kind == VersionKind.DEV
        assert version.numeric == "1.0.0"

    def test_accessors(self):
        version = Version("1.4.0-Snapshot")
        assert version.raw == "1.4.0-Snapshot"
        assert version.numeric == "1.4.0"
        assert version.kind == VersionKind.SNAPSHOT
        assert version.parts == (1, 4, 0)
        assert str(version) == "1.4.0-Snapshot"

    def test_immutable(self):
        version = Version("1.0")
        with pytest.raises(AttributeError):
            version.raw = "2.0"


class TestCompare:
    def test_missing_components_are_zero(self):
        assert Version("1.2").compare(Version("1.2.0")) == 0

    def test_components_compare_as_integers(self):
        assert Version("1.10").compare(Version("1.9")) == 1

    def test_suffix_ignored(self):
        assert Version("1.0.0-dev").compare(Version("1.0.1")) == -1
        assert Version("1.0.1-snapshot").compare(Version("1.0.0")) == 1

    def test_first_difference_decides(self):
        assert Version("2.0").compare(Version("1.99.99")) == 1
        assert Version("1.2.3.4").compare(Version("1.2.3.5")) == -1

    def test_rich_comparisons(self):
        assert Version("1.9") < Version("1.10")
        assert Version("2.0") >= Version("2")
        assert sorted([Version("1.10"), Version("1.2"), Version("1.9")]) == [
            Version("1.2"),
            Version("1.9"),
            Version("1.10"),
        ]


class TestEquality:
    def test_equality_ignores_suffix(self):
        assert Version("1.0-snapshot") == Version("1.0")

    def test_equality_ignores_trailing_zeros(self):
        assert Version("1.0") == Version("1.0.0.0")

    def test_not_equal_to_string(self):
        assert Version("1.0") != "1.0"

    def test_hash_matches_equality(self):
        assert len({Version("1.0"), Version("1.0.0"), Version("1.0-dev")}) == 1


class TestStripPrefix:
    def test_strips_v(self):
        assert strip_prefix("v1.2.0") == "1.2.0"

    def test_only_first(self):
        assert strip_prefix("vv1") == "v1"

    def test_no_prefix(self):
        assert strip_prefix("1.2.0") == "1.2.0"
