# SPDX-License-Identifier: MIT
"""Exceptions raised for malformed semantic versions."""

from __future__ import annotations

from typing import Any


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: Any, message: str = ""):
        self.version = str(version)
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


class InvalidIdentifierError(InvalidVersionError):
    """Raised when a pre-release or build identifier is malformed."""

    def __init__(self, identifier: Any, message: str = ""):
        self.identifier = identifier
        super().__init__(
            identifier, message or f"Invalid version identifier: {identifier!r}"
        )
