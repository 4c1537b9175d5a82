# SPDX-License-Identifier: MIT
"""The parsed version value type.

A version has the shape ``X.Y.Z-<stability>-R``:

- ``X`` is the major version number
- ``Y`` is the minor version number
- ``Z`` is the patch level (defaults to 0 when missing)
- ``<stability>`` marks an unstable release such as ``alpha`` or ``SNAPSHOT``
- ``R`` is the release number of an unstable release

A version without a stability tag is stable, and its release number is 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .compare import ComparisonResult
    from .config import MatchOptions


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch level
        stability: Stability tag, empty for stable versions (case preserved)
        release: Release number, only meaningful for unstable versions
    """

    major: int
    minor: int
    patch: int = 0
    stability: str = ""
    release: int = 0

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        if self.stability:
            return f"{self.base_version}-{self.stability}-{self.release}"
        return self.base_version

    @property
    def is_stable(self) -> bool:
        """Return True if this version carries no stability tag."""
        return self.stability == ""

    @property
    def base_version(self) -> str:
        """Return ``X.Y.Z`` without the stability tag or release number."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def compare(
        self, other: Version, options: Optional[MatchOptions] = None
    ) -> ComparisonResult:
        """Report how ``other`` relates to this version.

        See :func:`semver_match.compare.compare_versions`.
        """
        from .compare import compare_versions

        return compare_versions(self, other, options)
