# SPDX-License-Identifier: MIT
"""Property-based tests for parsing, comparison and matching.

These tests verify that:
- X.Y strings parse with patch, stability and release defaulted
- Stability tags keep their case
- compare_versions is reflexive and antisymmetric on like releases
- Different stability tags are never ordered
- The ordered operators agree with compare_versions on stable versions
"""

from __future__ import annotations

from dataclasses import replace

from hypothesis import assume, given, settings, strategies as st

from semver_match import (
    ComparisonResult,
    Expression,
    Mismatch,
    Operator,
    Version,
    compare_versions,
    match_version,
    parse_version,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

# Small numbers so that equal fields come up often
numbers = st.integers(min_value=0, max_value=5)

large_numbers = st.integers(min_value=0, max_value=10**9)

stability_tags = st.from_regex(r"[A-Za-z][A-Za-z0-9_]{0,11}", fullmatch=True)


@st.composite
def stable_versions(draw, field=numbers):
    """Generate a stable Version."""
    return Version(major=draw(field), minor=draw(field), patch=draw(field))


@st.composite
def unstable_versions(draw, field=numbers, stability=None):
    """Generate an unstable Version, optionally with a fixed tag."""
    return Version(
        major=draw(field),
        minor=draw(field),
        patch=draw(field),
        stability=stability if stability else draw(stability_tags),
        release=draw(field),
    )


any_versions = st.one_of(stable_versions(), unstable_versions())


class TestParsingProperties:
    """Property-based tests for parse_version."""

    @given(major=large_numbers, minor=large_numbers)
    @settings(max_examples=100)
    def test_major_minor_defaults(self, major, minor):
        """*For any* X.Y string, patch and release are 0 and the version is stable."""
        assert parse_version(f"{major}.{minor}") == Version(major, minor, 0, "", 0)

    @given(version=unstable_versions(field=large_numbers))
    @settings(max_examples=100)
    def test_stability_case_preserved(self, version):
        """*For any* X.Y.Z-S-R string, the tag is returned exactly as written."""
        raw = f"{version.major}.{version.minor}.{version.patch}-{version.stability}-{version.release}"
        parsed = parse_version(raw)
        assert parsed.stability == version.stability
        assert parsed == version


class TestComparisonProperties:
    """Property-based tests for compare_versions."""

    @given(version=any_versions)
    @settings(max_examples=100)
    def test_reflexive(self, version):
        assert compare_versions(version, version) is ComparisonResult.EQUAL

    @given(a=stable_versions(), b=stable_versions())
    @settings(max_examples=200)
    def test_antisymmetric_stable(self, a, b):
        forward = compare_versions(a, b)
        backward = compare_versions(b, a)
        assert (forward is ComparisonResult.LARGER) == (backward is ComparisonResult.SMALLER)
        assert (forward is ComparisonResult.EQUAL) == (backward is ComparisonResult.EQUAL)

    @given(data=st.data(), tag=stability_tags)
    @settings(max_examples=200)
    def test_antisymmetric_unstable(self, data, tag):
        a = data.draw(unstable_versions(stability=tag))
        b = data.draw(unstable_versions(stability=tag))
        forward = compare_versions(a, b)
        backward = compare_versions(b, a)
        assert (forward is ComparisonResult.LARGER) == (backward is ComparisonResult.SMALLER)
        assert (forward is ComparisonResult.INCOMPARABLE) == (
            backward is ComparisonResult.INCOMPARABLE
        )

    @given(a=any_versions, b=any_versions)
    @settings(max_examples=200)
    def test_different_tags_incomparable(self, a, b):
        """*For any* two versions with different tags, no order exists."""
        assume(a.stability != b.stability)
        assert compare_versions(a, b) is ComparisonResult.INCOMPARABLE

    @given(data=st.data(), tag=stability_tags)
    @settings(max_examples=200)
    def test_unstable_needs_same_base_version(self, data, tag):
        a = data.draw(unstable_versions(stability=tag))
        b = data.draw(unstable_versions(stability=tag))
        assume(a.base_version != b.base_version)
        assert compare_versions(a, b) is ComparisonResult.INCOMPARABLE


class TestMatchingProperties:
    """Property-based tests for match_version."""

    @given(version=any_versions)
    @settings(max_examples=100)
    def test_equals_matches_itself(self, version):
        assert match_version(Expression(Operator.EQUALS, version), version)

    @given(lhs=stable_versions(), rhs=stable_versions())
    @settings(max_examples=200)
    def test_greater_or_equal_agrees_with_compare(self, lhs, rhs):
        result = match_version(Expression(Operator.GREATER_OR_EQUAL, lhs), rhs)
        expected = compare_versions(lhs, rhs) in (ComparisonResult.LARGER, ComparisonResult.EQUAL)
        assert result.matched == expected
        if not result:
            assert result.reason in (
                Mismatch.MAJOR_VERSION_TOO_SMALL,
                Mismatch.MINOR_VERSION_TOO_SMALL,
                Mismatch.PATCH_LEVEL_TOO_SMALL,
            )

    @given(lhs=stable_versions(), rhs=stable_versions())
    @settings(max_examples=200)
    def test_less_or_equal_agrees_with_compare(self, lhs, rhs):
        result = match_version(Expression(Operator.LESS_OR_EQUAL, lhs), rhs)
        expected = compare_versions(lhs, rhs) in (ComparisonResult.SMALLER, ComparisonResult.EQUAL)
        assert result.matched == expected
        if not result:
            assert result.reason in (
                Mismatch.MAJOR_VERSION_TOO_LARGE,
                Mismatch.MINOR_VERSION_TOO_LARGE,
                Mismatch.PATCH_LEVEL_TOO_LARGE,
            )

    @given(lhs=stable_versions(), rhs=stable_versions())
    @settings(max_examples=200)
    def test_tilde_is_same_major_and_not_older(self, lhs, rhs):
        result = match_version(Expression(Operator.TILDE, lhs), rhs)
        not_older = compare_versions(lhs, rhs) in (ComparisonResult.LARGER, ComparisonResult.EQUAL)
        assert result.matched == (lhs.major == rhs.major and not_older)

    @given(data=st.data(), lhs=any_versions)
    @settings(max_examples=200)
    def test_ordered_operators_reject_other_tags(self, data, lhs):
        """*For any* pair with different tags and the same major version, >=, <= and ~ fail on stability."""
        if lhs.is_stable:
            other = unstable_versions()
        else:
            other = st.one_of(stable_versions(), unstable_versions())
        rhs = replace(data.draw(other), major=lhs.major)
        assume(lhs.stability != rhs.stability)
        for operator in (Operator.GREATER_OR_EQUAL, Operator.LESS_OR_EQUAL, Operator.TILDE):
            result = match_version(Expression(operator, lhs), rhs)
            assert result.reason is Mismatch.DIFFERENT_STABILITY_LEVELS
