"""Field-specific validators.

Each validator is total: bad input produces an :class:`Invalid` result, never
an exception.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone

from flowform.validation.results import VALID, Invalid, ValidationResult

# localpart@domain.tld
EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# digits, whitespace, +, -, parentheses
PHONE_REGEX = re.compile(r"^[\d\s+\-()]+$")

MIN_PHONE_DIGITS = 10

ISO_DATE_PREFIX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")

# Written forms tried when a string is not ISO-8601.
FALLBACK_DATE_FORMATS = (
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)

INVALID_EMAIL = "Invalid email format"
INVALID_PHONE = "Invalid phone format"
INVALID_DATE = "Invalid date format"


def validate_email(value: str) -> ValidationResult:
    if not value or not value.strip():
        return Invalid(INVALID_EMAIL)
    if not EMAIL_REGEX.match(value.strip()):
        return Invalid(INVALID_EMAIL)
    return VALID


def validate_phone(value: str) -> ValidationResult:
    """Accepts formats like +1-555-123-4567, 5551234567, (555) 123 4567."""
    if not value or not value.strip():
        return Invalid(INVALID_PHONE)

    digits = re.sub(r"\D", "", value)
    if len(digits) < MIN_PHONE_DIGITS:
        return Invalid(INVALID_PHONE)

    if not PHONE_REGEX.match(value):
        return Invalid(INVALID_PHONE)

    return VALID


def validate_number(
    value: int | float,
    min: int | float | None = None,
    max: int | float | None = None,
) -> ValidationResult:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return Invalid("Value must be a number")
    # ints of any size compare exactly; only floats can be nan or inf
    if isinstance(value, float) and not math.isfinite(value):
        return Invalid("Value must be a number")
    if min is not None and value < min:
        return Invalid(f"Number must be at least {min}")
    if max is not None and value > max:
        return Invalid(f"Number must be at most {max}")
    return VALID


def parse_date(value: str) -> datetime | None:
    """Parse ``value`` into a UTC datetime, or None when it is not a date."""
    text = value.strip()
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        for fmt in FALLBACK_DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    try:
        return _as_utc(parsed)
    except OverflowError:
        # the offset moves the instant outside datetime.min..datetime.max
        return None


def _as_utc(value: datetime) -> datetime:
    # Naive values are read as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _iso_parts_match(text: str, parsed: datetime) -> bool:
    """Compare the YYYY-MM-DD written in ``text`` with the parsed UTC date.

    Catches overflow such as 2024-02-30 and offsets that shift the instant to
    another UTC calendar day.
    """
    match = ISO_DATE_PREFIX.match(text)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    return (parsed.year, parsed.month, parsed.day) == (year, month, day)


def validate_date(value: date | datetime | str) -> ValidationResult:
    if isinstance(value, (date, datetime)):
        return VALID
    if not isinstance(value, str) or not value.strip():
        return Invalid(INVALID_DATE)

    parsed = parse_date(value)
    if parsed is None:
        return Invalid(INVALID_DATE)

    text = value.strip()
    if ISO_DATE_PREFIX.match(text) and not _iso_parts_match(text, parsed):
        return Invalid(INVALID_DATE)

    return VALID


def validate_enum(value: str, options: list[str] | tuple[str, ...]) -> ValidationResult:
    if value not in options:
        return Invalid(f"Value must be one of: {', '.join(options)}")
    return VALID
