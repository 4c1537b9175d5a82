# SPDX-License-Identifier: MIT
"""Parsing of version strings and version expressions.

Accepted version strings::

    X.Y
    X.Y.Z
    X.Y-<stability>-R
    X.Y.Z-<stability>-R

Accepted expressions are a single operator followed by a version string,
for example ``>=1.3``, ``~1.3.0`` or ``=1.1.0-SNAPSHOT-20141013``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .errors import UnknownOperatorError, VersionParseError
from .version import Version

if TYPE_CHECKING:
    from .config import MatchOptions
    from .matcher import MatchResult

logger = logging.getLogger(__name__)

# Tried in order, first match wins. Only the X.Y pattern is anchored.
VERSION_PATTERNS: tuple[re.Pattern[str], ...] = (
    # X.Y.Z-<stability>-R
    re.compile(
        r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)"
        r"-(?P<stability>[^-]+)-(?P<release>[0-9]+)"
    ),
    # X.Y.Z
    re.compile(r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)"),
    # X.Y-<stability>-R
    re.compile(
        r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)"
        r"-(?P<stability>[^-]+)-(?P<release>[0-9]+)"
    ),
    # X.Y
    re.compile(r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\Z"),
)


class Operator(Enum):
    """Expression operators, valued by their token."""

    EQUALS = "="
    GREATER_OR_EQUAL = ">="
    LESS_OR_EQUAL = "<="
    TILDE = "~"
    # Reserved for non-version references such as a commit id or branch.
    AT = "@"
    NOT_EQUALS = "!="

    def __str__(self) -> str:
        return self.value


# Tried in order against the start of an expression.
OPERATOR_TOKENS: tuple[Operator, ...] = (
    Operator.EQUALS,
    Operator.GREATER_OR_EQUAL,
    Operator.LESS_OR_EQUAL,
    Operator.TILDE,
    Operator.AT,
    Operator.NOT_EQUALS,
)


@dataclass(frozen=True, slots=True)
class Expression:
    """A parsed version expression: an operator applied to a version.

    Create one with :func:`parse_expression`. An expression holds no state
    besides its fields and can be matched against any number of versions.
    """

    operator: Operator
    version: Version

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"

    def matches(self, raw: str, options: Optional[MatchOptions] = None) -> MatchResult:
        """Check whether the version string ``raw`` satisfies this expression.

        Raises:
            VersionParseError: If ``raw`` is not a version string
        """
        return self.matches_version(parse_version(raw), options)

    def matches_version(
        self, version: Version, options: Optional[MatchOptions] = None
    ) -> MatchResult:
        """Check whether ``version`` satisfies this expression."""
        from .matcher import match_version

        return match_version(self, version, options)


def _parse_version_from(raw: str, offset: int) -> Version:
    candidate = raw[offset:]
    for pattern in VERSION_PATTERNS:
        match = pattern.search(candidate)
        if match is None:
            continue

        fields = match.groupdict()
        return Version(
            major=int(fields["major"]),
            minor=int(fields["minor"]),
            patch=int(fields.get("patch") or 0),
            stability=fields.get("stability") or "",
            release=int(fields.get("release") or 0),
        )

    logger.debug("no version pattern matches %r", candidate)
    raise VersionParseError(raw)


def parse_version(raw: str) -> Version:
    """Parse a version string into a Version.

    Args:
        raw: A version string such as ``1.3``, ``1.3.6`` or ``1.3.0-alpha-1``

    Returns:
        The parsed Version

    Raises:
        VersionParseError: If the string matches none of the version patterns

    Examples:
        >>> parse_version("1.3")
        Version(major=1, minor=3, patch=0, stability='', release=0)

        >>> parse_version("1.1.0-SNAPSHOT-20141013")
        Version(major=1, minor=1, patch=0, stability='SNAPSHOT', release=20141013)
    """
    if not isinstance(raw, str):
        raise VersionParseError(
            raw, f"Version must be a string, got {type(raw).__name__}"
        )
    return _parse_version_from(raw, 0)


def _split_operator(raw: str) -> tuple[Operator, int]:
    for operator in OPERATOR_TOKENS:
        if raw.startswith(operator.value):
            return operator, len(operator.value)

    logger.debug("no operator prefix on %r", raw)
    raise UnknownOperatorError(raw)


def parse_expression(raw: str) -> Expression:
    """Parse an ``<operator><version>`` string into an Expression.

    Raises:
        UnknownOperatorError: If the string does not start with a known operator
        VersionParseError: If the text after the operator is not a version

    Examples:
        >>> parse_expression(">=1.3")
        Expression(operator=<Operator.GREATER_OR_EQUAL: '>='>, version=Version(major=1, minor=3, patch=0, stability='', release=0))
    """
    if not isinstance(raw, str):
        raise UnknownOperatorError(
            raw, f"Expression must be a string, got {type(raw).__name__}"
        )

    operator, offset = _split_operator(raw)
    return Expression(operator, _parse_version_from(raw, offset))


def is_valid_version(raw: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.0-alpha-1")
        True
        >>> is_valid_version("1")
        False
    """
    if not isinstance(raw, str):
        return False
    return any(pattern.search(raw) for pattern in VERSION_PATTERNS)
