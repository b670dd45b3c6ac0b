# SPDX-License-Identifier: MIT
"""Pre-release precedence following SemVer 2.0.0 item 11.

Identifiers are compared pairwise from left to right:
- numeric identifiers compare numerically
- textual identifiers compare lexically in ASCII order
- numeric identifiers have lower precedence than textual ones
- a larger set of fields wins when all preceding fields are equal

A version without pre-release fields outranks any pre-release of the same
core version: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0.
"""

from __future__ import annotations

from typing import Sequence

from .identifier import Identifier


def compare_identifiers(left: Identifier, right: Identifier) -> int:
    """Compare two identifiers.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right
    """
    if left == right:
        return 0
    return -1 if left < right else 1


def compare_prerelease(
    left: Sequence[Identifier], right: Sequence[Identifier]
) -> int:
    """Compare two pre-release identifier sequences.

    An empty sequence stands for a normal release, which has higher
    precedence than any pre-release.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right
    """
    if not left and not right:
        return 0
    if not left:
        return 1  # Release > pre-release
    if not right:
        return -1  # Pre-release < release

    for lhs, rhs in zip(left, right):
        result = compare_identifiers(lhs, rhs)
        if result:
            return result

    # All compared identifiers equal - longer pre-release has higher precedence
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    return 0


def prerelease_key(identifiers: Sequence[Identifier]) -> tuple:
    """Return a sort key ordering identifier sequences like compare_prerelease."""
    # Releases become (1,) to sort after every (0, ...) pre-release
    if not identifiers:
        return (1,)
    return (0, tuple(identifier.sort_key() for identifier in identifiers))
