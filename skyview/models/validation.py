"""Input validation result model."""

from dataclasses import dataclass

from skyview.models.errors import QueryValidationError, ValidationReason


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    value: str
    reason: ValidationReason | None = None
    message: str = ""

    def raise_for_invalid(self) -> str:
        """Return the accepted value or raise QueryValidationError."""
        if not self.valid:
            assert self.reason is not None
            raise QueryValidationError(self.reason, self.message)
        return self.value
