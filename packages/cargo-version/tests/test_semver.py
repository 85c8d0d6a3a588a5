# SPDX-License-Identifier: MIT
"""Unit tests for version parsing, display and ordering."""

import pytest

from cargo_version import (
    InvalidVersionError,
    Version,
    parse_version,
)


class TestParseVersion:
    """Tests for parse_version function."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = parse_version("1.2.3")
        assert v == Version(1, 2, 3)
        assert v.pre == ""
        assert v.build == ""

    def test_version_with_zeros(self):
        """Test parsing version with zero components."""
        v = parse_version("0.0.0")
        assert (v.major, v.minor, v.patch) == (0, 0, 0)

    def test_large_version_numbers(self):
        """Test parsing numbers up to the unsigned 64-bit maximum."""
        v = parse_version("18446744073709551615.888.777")
        assert v.major == 2**64 - 1
        assert v.minor == 888
        assert v.patch == 777

    def test_prerelease(self):
        """Test parsing a pre-release."""
        v = parse_version("1.2.3-alpha1")
        assert v == Version(1, 2, 3, "alpha1")
        assert v.is_prerelease is True

    def test_build_metadata(self):
        """Test parsing build metadata."""
        assert parse_version("1.2.3+build5") == Version(1, 2, 3, "", "build5")
        assert parse_version("1.2.3+5build") == Version(1, 2, 3, "", "5build")

    def test_prerelease_and_build(self):
        """Test parsing both pre-release and build metadata."""
        v = parse_version("1.2.3-alpha1+build5")
        assert v == Version(1, 2, 3, "alpha1", "build5")
        assert v.is_prerelease is True

    def test_complex_identifiers(self):
        """Test parsing multi-segment identifiers."""
        v = parse_version("1.2.3-1.alpha1.9+build5.7.3aedf")
        assert v == Version(1, 2, 3, "1.alpha1.9", "build5.7.3aedf")

    def test_leading_zero_allowed_in_alphanumeric_and_build(self):
        """Test that leading zeros are fine in alphanumeric pre-release and in build."""
        v = parse_version("1.2.3-0a.alpha1.9+05build.7.3aedf")
        assert v == Version(1, 2, 3, "0a.alpha1.9", "05build.7.3aedf")

        v = parse_version("0.4.0-beta.1+0851523")
        assert v == Version(0, 4, 0, "beta.1", "0851523")

    def test_hyphen_in_prerelease(self):
        """Test pre-release identifiers containing hyphens."""
        assert parse_version("1.1.0-beta-10") == Version(1, 1, 0, "beta-10")

    def test_zero_prerelease_segment(self):
        """Test that a lone zero is a valid numeric pre-release segment."""
        assert parse_version("1.0.0-0.3.7").pre == "0.3.7"

    def test_version_classmethod(self):
        """Test Version.parse delegates to the parser."""
        assert Version.parse("1.2.3-rc.1") == parse_version("1.2.3-rc.1")

    def test_base_version(self):
        """Test base_version property."""
        assert parse_version("1.2.3-alpha.1+build").base_version == "1.2.3"


class TestInvalidVersions:
    """Tests for invalid version strings."""

    @pytest.mark.parametrize(
        "text, message",
        [
            ("", "unexpected end of input while parsing major version number"),
            ("  ", "unexpected character ' ' while parsing major version number"),
            ("1", "unexpected end of input while parsing major version number"),
            ("1.2", "unexpected end of input while parsing minor version number"),
            ("1.2.3-", "empty identifier segment in pre-release identifier"),
            ("1.2.3+", "empty identifier segment in build metadata"),
            ("a.b.c", "unexpected character 'a' while parsing major version number"),
            ("1.2.3 abc", "unexpected character ' ' after patch version number"),
            ("1.2.3-01", "invalid leading zero in pre-release identifier"),
            ("01.0.0", "invalid leading zero in major version number"),
            ("1.00.0", "invalid leading zero in minor version number"),
            ("1.2.3.4", "unexpected character '.' after patch version number"),
            ("1.2.3-alpha_1", "unexpected character '_' after pre-release identifier"),
            ("1.2.3+build!", "unexpected character '!' after build metadata"),
            ("1.2.3-alpha..1", "empty identifier segment in pre-release identifier"),
            ("1.2.3-alpha.", "empty identifier segment in pre-release identifier"),
            ("1.2.3+.build", "empty identifier segment in build metadata"),
            ("1,2.3", "unexpected character ',' after major version number"),
            ("-1.0.0", "unexpected character '-' while parsing major version number"),
        ],
    )
    def test_error_messages(self, text, message):
        """Test exact error messages for malformed versions."""
        with pytest.raises(InvalidVersionError) as excinfo:
            parse_version(text)
        assert str(excinfo.value) == message

    def test_overflow(self):
        """Test that numbers above the unsigned 64-bit maximum are rejected."""
        with pytest.raises(InvalidVersionError, match="exceeds maximum value"):
            parse_version("18446744073709551616.0.0")
        with pytest.raises(InvalidVersionError, match="patch version number"):
            parse_version("1.0.23456789999999999999")

    def test_errors_are_value_errors(self):
        """Test that parse errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_version("1.0")


class TestVersionDisplay:
    """Tests for Version string representation."""

    @pytest.mark.parametrize(
        "text",
        ["1.2.3", "1.2.3-alpha1", "1.2.3+build.42", "1.2.3-alpha1+42", "0.0.0-0+00"],
    )
    def test_display(self, text):
        """Test that display reproduces the parsed text."""
        assert str(parse_version(text)) == text

    def test_display_constructed(self):
        """Test display of a directly constructed version."""
        assert str(Version(1, 0, 0, "rc.1", "sha.5114f85")) == "1.0.0-rc.1+sha.5114f85"


class TestVersionEquality:
    """Tests for Version equality and hashing."""

    def test_equal_versions(self):
        """Test that equal versions are equal."""
        assert parse_version("1.2.3") == parse_version("1.2.3")
        assert parse_version("1.2.3-alpha1") == parse_version("1.2.3-alpha1")
        assert parse_version("1.2.3+build.42") == parse_version("1.2.3+build.42")
        assert parse_version("1.2.3-alpha1+42") == parse_version("1.2.3-alpha1+42")

    def test_different_versions(self):
        """Test that different versions are not equal."""
        assert parse_version("0.0.0") != parse_version("0.0.1")
        assert parse_version("0.0.0") != parse_version("0.1.0")
        assert parse_version("0.0.0") != parse_version("1.0.0")
        assert parse_version("1.2.3-alpha") != parse_version("1.2.3-beta")
        assert parse_version("1.2.3+23") != parse_version("1.2.3+42")

    def test_hashable(self):
        """Test that versions are hashable."""
        v = parse_version("1.0.0")
        assert v in {v}

    def test_frozen(self):
        """Test that Version is immutable."""
        v = parse_version("1.0.0")
        with pytest.raises(AttributeError):
            v.major = 2  # type: ignore


class TestVersionOrdering:
    """Tests for Version rich comparisons."""

    def test_lt(self):
        assert parse_version("0.0.0") < parse_version("1.2.3-alpha2")
        assert parse_version("1.0.0") < parse_version("1.2.3-alpha2")
        assert parse_version("1.2.0") < parse_version("1.2.3-alpha2")
        assert parse_version("1.2.3-alpha1") < parse_version("1.2.3")
        assert parse_version("1.2.3-alpha1") < parse_version("1.2.3-alpha2")
        assert not parse_version("1.2.3-alpha2") < parse_version("1.2.3-alpha2")

    def test_le(self):
        assert parse_version("0.0.0") <= parse_version("1.2.3-alpha2")
        assert parse_version("1.2.3-alpha1") <= parse_version("1.2.3-alpha2")
        assert parse_version("1.2.3-alpha2") <= parse_version("1.2.3-alpha2")

    def test_gt(self):
        assert parse_version("1.2.3-alpha2") > parse_version("0.0.0")
        assert parse_version("1.2.3-alpha2") > parse_version("1.2.0")
        assert parse_version("1.2.3") > parse_version("1.2.3-alpha2")
        assert not parse_version("1.2.3-alpha2") > parse_version("1.2.3-alpha2")

    def test_ge(self):
        assert parse_version("1.2.3-alpha2") >= parse_version("1.0.0")
        assert parse_version("1.2.3-alpha2") >= parse_version("1.2.3-alpha1")
        assert parse_version("1.2.3-alpha2") >= parse_version("1.2.3-alpha2")

    def test_numeric_not_lexical(self):
        """Test that 1.5.0 < 1.19.0 even though "1.19.0" < "1.5.0" as strings."""
        assert parse_version("1.5.0") < parse_version("1.19.0")

    def test_build_metadata_breaks_ties(self):
        """Test that build metadata orders versions of equal precedence."""
        a = parse_version("1.2.3+23")
        b = parse_version("1.2.3+42")
        assert a < b and a <= b
        assert b > a and b >= a
        assert not (a <= b and a >= b)
        assert a.cmp_precedence(b) == 0

    def test_build_metadata_below_higher_precedence(self):
        """Test that build metadata never outranks precedence."""
        assert parse_version("1.2.3-rc.1+99") < parse_version("1.2.3+1")
        assert parse_version("1.2.3+zzz") < parse_version("1.2.4")
        assert parse_version("1.2.3+build") < parse_version("1.2.3")

    def test_spec_order(self):
        """Test the precedence chain from semver.org."""
        chain = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        versions = [parse_version(text) for text in chain]
        for lower, higher in zip(versions, versions[1:]):
            assert lower < higher, f"{lower} should be < {higher}"

    def test_sorted(self):
        """Test that versions sort with the builtin sorted()."""
        versions = [parse_version(t) for t in ["1.0.0", "1.0.0-rc.1", "0.9.0", "1.0.0-alpha"]]
        assert [str(v) for v in sorted(versions)] == ["0.9.0", "1.0.0-alpha", "1.0.0-rc.1", "1.0.0"]

    def test_compare_with_other_type(self):
        """Test that comparing against a non-Version is a TypeError."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < "1.0.0"  # noqa: B015
