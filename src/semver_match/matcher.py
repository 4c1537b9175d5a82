# SPDX-License-Identifier: MIT
"""Matching of versions against parsed expressions.

Operators:

    =  : exact match
    >= : any version greater than or equal to
    <= : any version less than or equal to
    ~  : any version greater than or equal to, with the same major version

For example ``>=1.3`` matches ``1.3``, ``1.3.1``, ``1.4.0`` and ``2.0.0``, while
``<=1.3.0-alpha-2`` matches only ``1.3.0-alpha-1`` and ``1.3.0-alpha-2``.

Fields are checked in the order major, minor, patch, stability, release, and
the first one that fails decides the reported :class:`Mismatch`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .config import DEFAULT_OPTIONS, MatchOptions
from .parser import Operator
from .version import Version

if TYPE_CHECKING:
    from .parser import Expression

logger = logging.getLogger(__name__)


class Mismatch(Enum):
    """Why a version does not satisfy an expression."""

    DIFFERENT_MAJOR_VERSIONS = "major version numbers are different"
    DIFFERENT_MINOR_VERSIONS = "minor version numbers are different"
    DIFFERENT_PATCH_LEVEL = "patchlevels are different"
    DIFFERENT_STABILITY_LEVELS = "stability levels are different"
    DIFFERENT_RELEASE_NUMBERS = "release numbers are different"
    INCOMPARABLE = "LHS and RHS are incomparable"
    UNKNOWN_OPERATOR = "unknown operator; cannot compare"
    MAJOR_VERSION_TOO_SMALL = "major version number is too small"
    MINOR_VERSION_TOO_SMALL = "minor version number is too small"
    PATCH_LEVEL_TOO_SMALL = "patchlevel is too small"
    RELEASE_NUMBER_TOO_SMALL = "release number is too small"
    MAJOR_VERSION_TOO_LARGE = "major version number is too large"
    MINOR_VERSION_TOO_LARGE = "minor version number is too large"
    PATCH_LEVEL_TOO_LARGE = "patchlevel is too large"
    RELEASE_NUMBER_TOO_LARGE = "release number is too large"
    UNSTABLE_VERSION = "unexpected unstable version received"
    STABLE_VERSION = "unexpected stable version received"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of matching a version against an expression.

    Truthy when the version matched. On a mismatch ``reason`` names the first
    field that failed.
    """

    matched: bool
    reason: Optional[Mismatch] = None

    def __bool__(self) -> bool:
        return self.matched

    @property
    def message(self) -> str:
        """Return a human-readable description of the outcome."""
        return "matched" if self.reason is None else self.reason.value


MATCHED = MatchResult(True)


def _fail(reason: Mismatch) -> MatchResult:
    return MatchResult(False, reason)


# attribute -> (different, too small, too large)
_FIELD_REASONS: dict[str, tuple[Mismatch, Mismatch, Mismatch]] = {
    "major": (
        Mismatch.DIFFERENT_MAJOR_VERSIONS,
        Mismatch.MAJOR_VERSION_TOO_SMALL,
        Mismatch.MAJOR_VERSION_TOO_LARGE,
    ),
    "minor": (
        Mismatch.DIFFERENT_MINOR_VERSIONS,
        Mismatch.MINOR_VERSION_TOO_SMALL,
        Mismatch.MINOR_VERSION_TOO_LARGE,
    ),
    "patch": (
        Mismatch.DIFFERENT_PATCH_LEVEL,
        Mismatch.PATCH_LEVEL_TOO_SMALL,
        Mismatch.PATCH_LEVEL_TOO_LARGE,
    ),
    "release": (
        Mismatch.DIFFERENT_RELEASE_NUMBERS,
        Mismatch.RELEASE_NUMBER_TOO_SMALL,
        Mismatch.RELEASE_NUMBER_TOO_LARGE,
    ),
}


def _require_equal(lhs: Version, rhs: Version, *attrs: str) -> Optional[Mismatch]:
    """Return the reason for the first attribute that differs, if any."""
    for attr in attrs:
        if getattr(lhs, attr) != getattr(rhs, attr):
            return _FIELD_REASONS[attr][0]
    return None


def _at_least(lhs: Version, rhs: Version, *attrs: str) -> MatchResult:
    """Walk ``attrs`` in order: smaller fails, larger wins, equal moves on."""
    for attr in attrs:
        expected, actual = getattr(lhs, attr), getattr(rhs, attr)
        if actual < expected:
            return _fail(_FIELD_REASONS[attr][1])
        if actual > expected:
            return MATCHED
    return MATCHED


def _at_most(lhs: Version, rhs: Version, *attrs: str) -> MatchResult:
    """Walk ``attrs`` in order: larger fails, smaller wins, equal moves on."""
    for attr in attrs:
        expected, actual = getattr(lhs, attr), getattr(rhs, attr)
        if actual > expected:
            return _fail(_FIELD_REASONS[attr][2])
        if actual < expected:
            return MATCHED
    return MATCHED


def _stability_class(lhs: Version, rhs: Version, options: MatchOptions) -> Optional[Mismatch]:
    """Both sides must carry the same tag, and be of the operand's class."""
    if not options.same_stability(lhs.stability, rhs.stability):
        return Mismatch.DIFFERENT_STABILITY_LEVELS
    if lhs.is_stable and not rhs.is_stable:
        return Mismatch.UNSTABLE_VERSION
    if not lhs.is_stable and rhs.is_stable:
        return Mismatch.STABLE_VERSION
    return None


def _match_equals(lhs: Version, rhs: Version, options: MatchOptions) -> MatchResult:
    reason = _require_equal(lhs, rhs, "major", "minor", "patch")
    if reason is not None:
        return _fail(reason)
    if not options.same_stability(lhs.stability, rhs.stability, for_equals=True):
        return _fail(Mismatch.DIFFERENT_STABILITY_LEVELS)
    reason = _require_equal(lhs, rhs, "release")
    if reason is not None:
        return _fail(reason)
    return MATCHED


def _match_unstable(
    lhs: Version, rhs: Version, options: MatchOptions, ordered: Callable[..., MatchResult]
) -> MatchResult:
    """Same tag and same X.Y.Z are required; only the release number is ranged."""
    reason = _stability_class(lhs, rhs, options)
    if reason is None:
        reason = _require_equal(lhs, rhs, "major", "minor", "patch")
    if reason is not None:
        return _fail(reason)
    return ordered(lhs, rhs, "release")


def _match_greater_or_equal(lhs: Version, rhs: Version, options: MatchOptions) -> MatchResult:
    if not lhs.is_stable:
        return _match_unstable(lhs, rhs, options, _at_least)

    reason = _stability_class(lhs, rhs, options)
    if reason is not None:
        return _fail(reason)
    return _at_least(lhs, rhs, "major", "minor", "patch")


def _match_less_or_equal(lhs: Version, rhs: Version, options: MatchOptions) -> MatchResult:
    if not lhs.is_stable:
        return _match_unstable(lhs, rhs, options, _at_most)

    reason = _stability_class(lhs, rhs, options)
    if reason is not None:
        return _fail(reason)
    return _at_most(lhs, rhs, "major", "minor", "patch")


def _match_compatible_with(lhs: Version, rhs: Version, options: MatchOptions) -> MatchResult:
    if not lhs.is_stable:
        return _match_unstable(lhs, rhs, options, _at_least)

    # the major version is checked before the stability tag for "~"
    reason = _require_equal(lhs, rhs, "major") or _stability_class(lhs, rhs, options)
    if reason is not None:
        return _fail(reason)
    return _at_least(lhs, rhs, "minor", "patch")


_MATCHERS: dict[Operator, Callable[[Version, Version, MatchOptions], MatchResult]] = {
    Operator.EQUALS: _match_equals,
    Operator.GREATER_OR_EQUAL: _match_greater_or_equal,
    Operator.LESS_OR_EQUAL: _match_less_or_equal,
    Operator.TILDE: _match_compatible_with,
}


def match_version(
    expression: Expression, version: Version, options: Optional[MatchOptions] = None
) -> MatchResult:
    """Check whether ``version`` satisfies ``expression``.

    Args:
        expression: The parsed expression (the left-hand side)
        version: The candidate version (the right-hand side)
        options: How stability tags are compared, defaults to DEFAULT_OPTIONS

    Returns:
        MATCHED, or a failed MatchResult carrying the first Mismatch found.
        Operators without a matcher (``@``, ``!=``) report
        Mismatch.UNKNOWN_OPERATOR.

    Examples:
        >>> from semver_match import parse_expression, parse_version
        >>> match_version(parse_expression("~1.3"), parse_version("1.9.99"))
        MatchResult(matched=True, reason=None)
        >>> match_version(parse_expression("<=1.3"), parse_version("1.4")).reason
        <Mismatch.MINOR_VERSION_TOO_LARGE: 'minor version number is too large'>
    """
    matcher = _MATCHERS.get(expression.operator)
    if matcher is None:
        result = _fail(Mismatch.UNKNOWN_OPERATOR)
    else:
        result = matcher(expression.version, version, options or DEFAULT_OPTIONS)

    if not result:
        logger.debug("%s does not match %s: %s", version, expression, result.reason)
    return result
