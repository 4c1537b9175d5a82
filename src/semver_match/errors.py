# SPDX-License-Identifier: MIT
"""Exception classes.

Only structural failures are raised: strings that cannot be parsed and
invalid configuration. A version that fails to satisfy an expression is not
an error; see :class:`semver_match.matcher.Mismatch`.
"""

from __future__ import annotations


class SemverError(Exception):
    """Base class for all errors raised by this package."""

    pass


class ParseError(SemverError):
    """Raised when a string cannot be parsed.

    Attributes:
        raw: The string that failed to parse
        message: Human-readable description of the failure
    """

    default_message = "cannot parse string"

    def __init__(self, raw: object, message: str = ""):
        self.raw = raw
        self.message = message or f"{self.default_message}: {raw!r}"
        super().__init__(self.message)


class VersionParseError(ParseError):
    """Raised when a string matches none of the version patterns."""

    default_message = "cannot interpret version string"


class UnknownOperatorError(ParseError):
    """Raised when an expression does not start with a known operator."""

    default_message = "unrecognised operator"


class ConfigError(SemverError):
    """Raised when match options are invalid."""

    pass
