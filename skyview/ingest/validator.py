"""Place-name validation: rejects input locally before any request is made."""

import re

from skyview.models.errors import ValidationReason
from skyview.models.validation import ValidationResult

MIN_LENGTH = 2
MAX_LENGTH = 100

# Letters (ASCII and Latin-1 accented), whitespace, hyphens, apostrophes,
# periods and commas.
_ALLOWED = re.compile(r"^[a-zA-ZÀ-ÿ\s\-'.,]+$")

_MESSAGES = {
    ValidationReason.EMPTY: "Please enter a city name.",
    ValidationReason.TOO_SHORT: f"City name must be at least {MIN_LENGTH} characters.",
    ValidationReason.TOO_LONG: "City name is too long.",
    ValidationReason.INVALID_CHARACTERS: (
        "City name can only contain letters, spaces, hyphens, and apostrophes."
    ),
}


def validate_place_name(raw: str) -> ValidationResult:
    trimmed = raw.strip()

    if not trimmed:
        return _reject(ValidationReason.EMPTY, "")
    if len(trimmed) < MIN_LENGTH:
        return _reject(ValidationReason.TOO_SHORT, trimmed)
    if len(trimmed) > MAX_LENGTH:
        return _reject(ValidationReason.TOO_LONG, trimmed)
    if not _ALLOWED.match(trimmed):
        return _reject(ValidationReason.INVALID_CHARACTERS, trimmed)

    return ValidationResult(valid=True, value=trimmed)


def _reject(reason: ValidationReason, value: str) -> ValidationResult:
    return ValidationResult(
        valid=False, value=value, reason=reason, message=_MESSAGES[reason]
    )
