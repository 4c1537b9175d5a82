# SPDX-License-Identifier: MIT
"""Version string parsing and range matching with explainable mismatches.

Versions take the form ``X.Y[.Z][-<stability>-R]`` and expressions a single
operator followed by a version (``=``, ``>=``, ``<=`` or ``~``). When a
version does not satisfy an expression, the result says exactly why.

Example:
    >>> from semver_match import parse_expression, compare_version_strings
    >>>
    >>> expression = parse_expression("~1.3")
    >>> bool(expression.matches("1.9.99"))
    True
    >>> expression.matches("2.0").reason
    <Mismatch.DIFFERENT_MAJOR_VERSIONS: 'major version numbers are different'>
    >>>
    >>> compare_version_strings("1.0", "1.1")
    <ComparisonResult.LARGER: 'larger'>
"""

import logging

__version__ = "0.1.0"

from .version import Version
from .errors import (
    SemverError,
    ParseError,
    VersionParseError,
    UnknownOperatorError,
    ConfigError,
)
from .config import (
    MatchOptions,
    DEFAULT_OPTIONS,
)
from .parser import (
    Operator,
    Expression,
    parse_version,
    parse_expression,
    is_valid_version,
    VERSION_PATTERNS,
)
from .compare import (
    ComparisonResult,
    compare_versions,
    compare_version_strings,
)
from .matcher import (
    Mismatch,
    MatchResult,
    MATCHED,
    match_version,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version model
    "Version",
    # Parsing
    "Operator",
    "Expression",
    "parse_version",
    "parse_expression",
    "is_valid_version",
    "VERSION_PATTERNS",
    # Comparison
    "ComparisonResult",
    "compare_versions",
    "compare_version_strings",
    # Matching
    "Mismatch",
    "MatchResult",
    "MATCHED",
    "match_version",
    # Options
    "MatchOptions",
    "DEFAULT_OPTIONS",
    # Errors
    "SemverError",
    "ParseError",
    "VersionParseError",
    "UnknownOperatorError",
    "ConfigError",
]
