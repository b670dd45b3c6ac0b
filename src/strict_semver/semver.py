# SPDX-License-Identifier: MIT
"""Semantic version parsing and rendering.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -x-y-z.--
- Build metadata: +001, +20130313144700, +exp.sha.5114f85
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Iterable, Optional, Union

from .errors import InvalidIdentifierError, InvalidVersionError
from .identifier import Identifier, join_identifiers, parse_identifier, parse_identifiers
from .precedence import compare_prerelease

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?\Z"
)

CORE_NUMBER_PATTERN = re.compile(r"0|[1-9][0-9]*")

IdentifiersInput = Union[None, str, Iterable[Identifier]]

_FIELDS = ("major", "minor", "patch", "prerelease", "build")


def _coerce_identifiers(
    value: IdentifiersInput, allow_leading_zeros: bool
) -> tuple[Identifier, ...]:
    if value is None or isinstance(value, str):
        return parse_identifiers(value, allow_leading_zeros)

    identifiers = []
    for item in value:
        if not isinstance(item, Identifier):
            raise InvalidIdentifierError(
                item, f"Expected an Identifier, got {type(item).__name__}"
            )
        # "01" is a valid build identifier but not a valid pre-release one
        identifiers.append(parse_identifier(str(item), allow_leading_zeros))
    return tuple(identifiers)


@total_ordering
@dataclass(frozen=True, slots=True, init=False, repr=False)
class Version:
    """Represents a parsed semantic version.

    Versions are immutable. Use :meth:`replace` to derive a modified copy;
    the copy is validated in full before it is returned.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease_identifiers: Pre-release identifiers, empty for a release
        build_identifiers: Build metadata identifiers; never part of
            equality, hashing or ordering
    """

    major: int
    minor: int
    patch: int
    prerelease_identifiers: tuple[Identifier, ...]
    build_identifiers: tuple[Identifier, ...] = field(compare=False)

    def __init__(
        self,
        major: int,
        minor: int,
        patch: int,
        prerelease: IdentifiersInput = None,
        build: IdentifiersInput = None,
    ) -> None:
        """Create a version from its parts.

        Args:
            major: Non-negative major version number
            minor: Non-negative minor version number
            patch: Non-negative patch version number
            prerelease: Dot-separated pre-release string (e.g. "beta.2") or
                a sequence of Identifier objects
            build: Dot-separated build metadata string (e.g. "001.sha-1f2")
                or a sequence of Identifier objects

        Raises:
            InvalidVersionError: If any part is invalid. Invalid pre-release
                or build metadata is rejected, never silently dropped.
        """
        for name, number in (("major", major), ("minor", minor), ("patch", patch)):
            if isinstance(number, bool) or not isinstance(number, int):
                raise InvalidVersionError(
                    number,
                    f"{name.capitalize()} version must be an int, got {type(number).__name__}",
                )
            if number < 0:
                raise InvalidVersionError(
                    number, f"{name.capitalize()} version must be non-negative: {number}"
                )
            object.__setattr__(self, name, number)

        object.__setattr__(
            self, "prerelease_identifiers", _coerce_identifiers(prerelease, False)
        )
        object.__setattr__(self, "build_identifiers", _coerce_identifiers(build, True))

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a semantic version string. See :func:`parse_version`."""
        return parse_version(version_string)

    @property
    def prerelease(self) -> Optional[str]:
        """Pre-release identifiers joined with dots, or None for a release."""
        return join_identifiers(self.prerelease_identifiers)

    @property
    def build(self) -> Optional[str]:
        """Build metadata identifiers joined with dots, or None."""
        return join_identifiers(self.build_identifiers)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_identifiers)

    @property
    def core(self) -> tuple[int, int, int]:
        """Return the (major, minor, patch) triple."""
        return (self.major, self.minor, self.patch)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def replace(self, **changes: Any) -> Version:
        """Return a copy of this version with the given parts replaced.

        Accepts ``major``, ``minor``, ``patch``, ``prerelease`` and ``build``.
        Passing ``prerelease=None`` or ``build=None`` clears that field.

        Raises:
            TypeError: If an unknown part is named
            InvalidVersionError: If a replacement part is invalid; this
                version is left untouched

        Examples:
            >>> Version(1, 0, 0, "rc.1").replace(prerelease=None)
            Version('1.0.0')
            >>> Version(1, 0, 0).replace(minor=4, build="exp.sha.5114f85")
            Version('1.4.0+exp.sha.5114f85')
        """
        unknown = sorted(set(changes) - set(_FIELDS))
        if unknown:
            raise TypeError(f"Unknown version part(s): {', '.join(unknown)}")

        parts: dict[str, Any] = {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": self.prerelease_identifiers,
            "build": self.build_identifiers,
        }
        parts.update(changes)
        return Version(**parts)

    def compare(self, other: Version) -> int:
        """Compare precedence with another version, ignoring build metadata.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other
        """
        if self.core != other.core:
            return -1 if self.core < other.core else 1
        return compare_prerelease(self.prerelease_identifiers, other.prerelease_identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease_identifiers:
            version += f"-{self.prerelease}"
        if self.build_identifiers:
            version += f"+{self.build}"
        return version

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"


def _reject(version_string: str, message: str) -> InvalidVersionError:
    logger.debug("Rejected version %r: %s", version_string, message)
    return InvalidVersionError(
        version_string, f"Invalid semantic version {version_string!r}: {message}"
    )


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Only the first ``+`` and the first ``-`` before it split the string;
    pre-release and build fields may contain further hyphens.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version('1.2.3')

        >>> parse_version("1.0.0-alpha.1").prerelease_identifiers
        (Identifier(value='alpha'), Identifier(value=1))

        >>> parse_version("2.0.0-rc.1+build.456").build
        'build.456'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            version_string, f"Version must be a string, got {type(version_string).__name__}"
        )
    if not version_string:
        raise _reject(version_string, "version string cannot be empty")

    remainder, plus, build = version_string.partition("+")
    core, dash, prerelease = remainder.partition("-")
    if plus and not build:
        raise _reject(version_string, "build metadata cannot be empty")
    if dash and not prerelease:
        raise _reject(version_string, "pre-release cannot be empty")

    tokens = core.split(".")
    if len(tokens) != 3:
        raise _reject(
            version_string, f"expected MAJOR.MINOR.PATCH, got {len(tokens)} component(s)"
        )
    for name, token in zip(("major", "minor", "patch"), tokens):
        if not CORE_NUMBER_PATTERN.fullmatch(token):
            raise _reject(
                version_string,
                f"{name} version {token!r} must be a number without leading zeros",
            )

    major, minor, patch = (int(token) for token in tokens)
    try:
        return Version(major, minor, patch, prerelease or None, build or None)
    except InvalidIdentifierError as exc:
        raise _reject(version_string, exc.message) from exc


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-01")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
