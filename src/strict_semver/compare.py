# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Iterable, Union

from .precedence import prerelease_key
from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _as_version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    return _as_version(version1).compare(_as_version(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)
    return (v.major, v.minor, v.patch, prerelease_key(v.prerelease_identifiers))


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    Versions of equal precedence keep their input order.
    """
    return sorted((_as_version(v) for v in versions), key=version_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    parsed = [_as_version(v) for v in versions]
    if not parsed:
        raise ValueError("max_version() arg is an empty iterable")
    return max(parsed, key=version_key)


def min_version(versions: Iterable[VersionLike]) -> Version:
    """Return the version with the lowest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    parsed = [_as_version(v) for v in versions]
    if not parsed:
        raise ValueError("min_version() arg is an empty iterable")
    return min(parsed, key=version_key)
