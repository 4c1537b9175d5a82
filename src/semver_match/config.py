# SPDX-License-Identifier: MIT
"""Options that tune how stability tags are compared.

Projects can set them in ``pyproject.toml``::

    [tool.semver-match]
    equals_ignores_stability_case = true
    compare_ignores_stability_case = false
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from collections.abc import Mapping
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError

logger = logging.getLogger(__name__)

TOOL_TABLE = "semver-match"


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """How stability tags are compared.

    Attributes:
        equals_ignores_stability_case: The ``=`` operator treats ``ALPHA`` and
            ``alpha`` as the same tag
        compare_ignores_stability_case: :func:`compare_versions` and the
            ordered operators (``>=``, ``<=``, ``~``) treat tags differing only
            in case as the same tag
    """

    equals_ignores_stability_case: bool = True
    compare_ignores_stability_case: bool = False

    def same_stability(self, lhs: str, rhs: str, *, for_equals: bool = False) -> bool:
        """Return True if two stability tags count as the same tag."""
        ignore_case = (
            self.equals_ignores_stability_case
            if for_equals
            else self.compare_ignores_stability_case
        )
        if ignore_case:
            return lhs.lower() == rhs.lower()
        return lhs == rhs

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MatchOptions":
        """Create MatchOptions from a ``[tool.semver-match]`` table.

        Raises:
            ConfigError: If a key is unknown or a value is not a boolean
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown option(s) in [tool.{TOOL_TABLE}]: {', '.join(unknown)}")

        for key, value in data.items():
            if not isinstance(value, bool):
                raise ConfigError(
                    f"[tool.{TOOL_TABLE}].{key} must be a boolean, got {type(value).__name__}"
                )

        return cls(**data)

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "MatchOptions":
        """Load MatchOptions from a pyproject.toml file.

        A file without a ``[tool.semver-match]`` table yields the defaults.

        Raises:
            ConfigError: If the file is not valid TOML or the table is invalid
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")

        table = tool.get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        options = cls.from_dict(table)
        logger.debug("loaded %r from %s", options, path)
        return options


DEFAULT_OPTIONS = MatchOptions()
