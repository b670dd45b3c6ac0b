# SPDX-License-Identifier: MIT
"""Strict Semantic Versioning 2.0.0 parsing, rendering and ordering.

This package provides a validated, immutable Version value that follows the
SemVer 2.0.0 grammar and precedence rules exactly.

Example:
    >>> from strict_semver import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.0.0-beta.2+20170904.001")
    >>> version.major
    1
    >>> version.prerelease
    'beta.2'
    >>> version.build
    '20170904.001'
    >>>
    >>> Version(1, 0, 0, "rc.1") < Version(1, 0, 0)
    True
    >>>
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    InvalidIdentifierError,
    InvalidVersionError,
)
from .identifier import (
    Identifier,
    join_identifiers,
    parse_identifier,
    parse_identifiers,
)
from .precedence import (
    compare_identifiers,
    compare_prerelease,
    prerelease_key,
)
from .semver import (
    SEMVER_PATTERN,
    Version,
    is_valid_semver,
    parse_version,
)
from .compare import (
    compare_versions,
    max_version,
    min_version,
    sort_versions,
    version_key,
)

__all__ = [
    # Errors
    "InvalidVersionError",
    "InvalidIdentifierError",
    # Identifiers
    "Identifier",
    "parse_identifier",
    "parse_identifiers",
    "join_identifiers",
    # Precedence
    "compare_identifiers",
    "compare_prerelease",
    "prerelease_key",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
    "min_version",
]
