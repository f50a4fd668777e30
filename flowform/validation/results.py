"""Validation outcome: a two-variant sum type."""

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class Valid:
    """The value passed validation."""

    valid: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class Invalid:
    """The value failed validation with a human-readable reason."""

    error: str
    valid: Literal[False] = field(default=False, init=False)


ValidationResult = Valid | Invalid

VALID = Valid()
