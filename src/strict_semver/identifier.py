# SPDX-License-Identifier: MIT
"""Dot-separated identifiers of pre-release and build metadata fields.

An identifier is either numeric (a non-negative integer written without
leading zeros) or textual (a non-empty string over ``[0-9A-Za-z-]``):

- Pre-release: ``alpha``, ``1``, ``x-y-z``, ``0`` (``01`` is rejected)
- Build metadata: ``001``, ``exp``, ``sha-5114f85`` (leading zeros allowed)

Numeric identifiers always have lower precedence than textual ones.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Optional, Union

from .errors import InvalidIdentifierError

logger = logging.getLogger(__name__)

# ASCII only: str.isdigit() would accept characters such as "²" or "٣"
NUMERIC_PATTERN = re.compile(r"[0-9]+")
ALPHANUMERIC_PATTERN = re.compile(r"[0-9A-Za-z-]+")


def _is_canonical_number(token: str) -> bool:
    return token == "0" or token[0] != "0"


@total_ordering
@dataclass(frozen=True, slots=True)
class Identifier:
    """A single pre-release or build metadata identifier.

    The type of ``value`` tags the variant: ``int`` for numeric identifiers,
    ``str`` for textual ones.

    Attributes:
        value: Integer value of a numeric identifier, or the literal text
            of a textual identifier
    """

    value: Union[int, str]

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool):
            raise InvalidIdentifierError(value, "Identifier must be an int or str, got bool")
        if isinstance(value, int):
            if value < 0:
                raise InvalidIdentifierError(
                    value, f"Numeric identifier must be non-negative: {value}"
                )
        elif isinstance(value, str):
            if not ALPHANUMERIC_PATTERN.fullmatch(value):
                raise InvalidIdentifierError(value)
            if NUMERIC_PATTERN.fullmatch(value) and _is_canonical_number(value):
                raise InvalidIdentifierError(
                    value, f"Numeric identifier {value!r} must be given as an int"
                )
        else:
            raise InvalidIdentifierError(
                value, f"Identifier must be an int or str, got {type(value).__name__}"
            )

    @property
    def is_numeric(self) -> bool:
        """Return True if this identifier is compared numerically."""
        return isinstance(self.value, int)

    def sort_key(self) -> tuple:
        return (0, self.value) if self.is_numeric else (1, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return str(self.value)


def parse_identifier(token: str, allow_leading_zeros: bool = False) -> Identifier:
    """Classify a single identifier token.

    Args:
        token: The identifier text, without surrounding dots
        allow_leading_zeros: Accept digits-only tokens such as ``"01"`` as
            textual identifiers (build metadata) instead of rejecting them
            (pre-release)

    Returns:
        A numeric or textual Identifier

    Raises:
        InvalidIdentifierError: If the token is empty, contains a character
            outside ``[0-9A-Za-z-]``, or has a disallowed leading zero

    Examples:
        >>> parse_identifier("11")
        Identifier(value=11)
        >>> parse_identifier("beta")
        Identifier(value='beta')
        >>> parse_identifier("007", allow_leading_zeros=True)
        Identifier(value='007')
    """
    if not token:
        raise InvalidIdentifierError(token, "Identifier cannot be empty")

    if NUMERIC_PATTERN.fullmatch(token):
        if _is_canonical_number(token):
            return Identifier(int(token))
        if not allow_leading_zeros:
            raise InvalidIdentifierError(
                token, f"Numeric identifier {token!r} must not have leading zeros"
            )

    if not ALPHANUMERIC_PATTERN.fullmatch(token):
        raise InvalidIdentifierError(
            token, f"Identifier {token!r} may only contain [0-9A-Za-z-]"
        )
    return Identifier(token)


def parse_identifiers(
    text: Optional[str], allow_leading_zeros: bool = False
) -> tuple[Identifier, ...]:
    """Parse a dot-separated identifier field.

    ``None`` and ``""`` both mean "no identifiers" and yield an empty tuple.
    Any malformed token rejects the whole field.

    Raises:
        InvalidIdentifierError: If any token fails classification
    """
    if text is None or text == "":
        return ()
    if not isinstance(text, str):
        raise InvalidIdentifierError(
            text, f"Identifiers must be a string, got {type(text).__name__}"
        )

    try:
        return tuple(
            parse_identifier(token, allow_leading_zeros) for token in text.split(".")
        )
    except InvalidIdentifierError as exc:
        logger.debug("Rejected identifier field %r: %s", text, exc.message)
        raise


def join_identifiers(identifiers: Iterable[Identifier]) -> Optional[str]:
    """Render identifiers joined with dots, or None when there are none."""
    rendered = ".".join(str(identifier) for identifier in identifiers)
    return rendered or None
