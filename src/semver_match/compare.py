# SPDX-License-Identifier: MIT
"""Comparison of two versions.

Only like releases can be ordered:

- stable releases against other stable releases
- unstable releases against releases with the same stability tag AND the
  same ``X.Y.Z``, where only the release number decides

Everything else is incomparable.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .config import DEFAULT_OPTIONS, MatchOptions
from .parser import parse_version
from .version import Version


class ComparisonResult(Enum):
    """How the right-hand version relates to the left-hand one."""

    SMALLER = "smaller"
    EQUAL = "equal"
    LARGER = "larger"
    INCOMPARABLE = "incomparable"


def _order(lhs: int, rhs: int) -> ComparisonResult:
    if rhs < lhs:
        return ComparisonResult.SMALLER
    if rhs > lhs:
        return ComparisonResult.LARGER
    return ComparisonResult.EQUAL


def compare_versions(
    lhs: Version, rhs: Version, options: Optional[MatchOptions] = None
) -> ComparisonResult:
    """Report how ``rhs`` relates to ``lhs``.

    Returns:
        ComparisonResult.LARGER if rhs is newer than lhs, SMALLER if it is
        older, EQUAL if they are the same release, and INCOMPARABLE if the two
        cannot be ordered

    Examples:
        >>> compare_versions(parse_version("1.0"), parse_version("1.1"))
        <ComparisonResult.LARGER: 'larger'>
        >>> compare_versions(parse_version("0.0.1-alpha-1"), parse_version("0.0.1-beta-1"))
        <ComparisonResult.INCOMPARABLE: 'incomparable'>
    """
    options = options or DEFAULT_OPTIONS

    if not options.same_stability(lhs.stability, rhs.stability):
        return ComparisonResult.INCOMPARABLE

    if lhs.is_stable:
        for attr in ("major", "minor", "patch"):
            result = _order(getattr(lhs, attr), getattr(rhs, attr))
            if result is not ComparisonResult.EQUAL:
                return result
        return ComparisonResult.EQUAL

    # unstable releases are only ordered within the same X.Y.Z
    if (lhs.major, lhs.minor, lhs.patch) != (rhs.major, rhs.minor, rhs.patch):
        return ComparisonResult.INCOMPARABLE
    return _order(lhs.release, rhs.release)


def compare_version_strings(
    lhs: Union[str, Version],
    rhs: Union[str, Version],
    options: Optional[MatchOptions] = None,
) -> ComparisonResult:
    """Parse two version strings and compare them.

    Either argument may already be a Version.

    Raises:
        VersionParseError: If either string is not a version

    Examples:
        >>> compare_version_strings("1.1.0", "1.11.0")
        <ComparisonResult.LARGER: 'larger'>
        >>> compare_version_strings("0.0.1-alpha-1", "0.0.2-alpha-1")
        <ComparisonResult.INCOMPARABLE: 'incomparable'>
    """
    v1 = parse_version(lhs) if isinstance(lhs, str) else lhs
    v2 = parse_version(rhs) if isinstance(rhs, str) else rhs
    return compare_versions(v1, v2, options)
