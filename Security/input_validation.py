"""
INPUT VALIDATION
================
Two validation policies for untrusted form text.
"""

# FLOW:
# - validate_permissive() only refuses empty input.
# - validate_strict() refuses empty, oversized and non-alphanumeric input.
# WHY:
# - Contrasts an unsafe pass-through policy with a strict allowlist.
# HOW:
# - Checks run in a fixed order (empty -> length -> charset) and return a tagged outcome.

from __future__ import annotations

import enum
import logging
import string
from dataclasses import dataclass
from typing import Union

MAX_INPUT_LENGTH = 255
ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits)

logger = logging.getLogger("security.validation")


class ErrorKind(enum.Enum):
    EMPTY_INPUT = "empty_input"
    TOO_LONG = "too_long"
    INVALID_CHARACTER = "invalid_character"


@dataclass(frozen=True)
class Accepted:
    text: str


@dataclass(frozen=True)
class Rejected:
    reason: ErrorKind
    max_length: int | None = None
    character: str | None = None
    position: int | None = None


ValidationOutcome = Union[Accepted, Rejected]


_MESSAGES = {
    ErrorKind.EMPTY_INPUT: "input cannot be empty",
    ErrorKind.TOO_LONG: "input exceeds maximum length of {max_length} characters",
    ErrorKind.INVALID_CHARACTER: "input must be alphanumeric",
}


def human_readable(rejection: Rejected) -> str:
    """Message shown to the user for a rejected submission."""
    template = _MESSAGES[rejection.reason]
    return template.format(max_length=rejection.max_length or MAX_INPUT_LENGTH)


def _reject(policy: str, rejection: Rejected) -> Rejected:
    logger.warning("policy=%s rejected=%s", policy, rejection.reason.value)
    return rejection


def validate_permissive(value: str) -> ValidationOutcome:
    """Accept anything non-empty, verbatim. Unsafe on purpose."""
    if value == "":
        return _reject("permissive", Rejected(ErrorKind.EMPTY_INPUT))
    return Accepted(value)


def validate_strict(value: str) -> ValidationOutcome:
    """
    Accept only 1..MAX_INPUT_LENGTH ASCII letters and digits.

    Length is counted in code points. When several rules fail the first
    check in order wins, so an oversized input with markup reports TOO_LONG.
    """
    if value == "":
        return _reject("strict", Rejected(ErrorKind.EMPTY_INPUT))
    if len(value) > MAX_INPUT_LENGTH:
        return _reject("strict", Rejected(ErrorKind.TOO_LONG, max_length=MAX_INPUT_LENGTH))
    for position, char in enumerate(value):
        if char not in ALLOWED_CHARACTERS:
            return _reject(
                "strict",
                Rejected(ErrorKind.INVALID_CHARACTER, character=char, position=position),
            )
    return Accepted(value)
