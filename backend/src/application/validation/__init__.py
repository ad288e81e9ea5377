"""Input validation for patient payloads."""

from .patient_validator import (
    PatientValidator,
    PatientValidationError,
    ValidationFailure,
    NAME_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    DOCUMENT_MAX_LENGTH,
)

__all__ = [
    "PatientValidator",
    "PatientValidationError",
    "ValidationFailure",
    "NAME_MAX_LENGTH",
    "EMAIL_MAX_LENGTH",
    "DOCUMENT_MAX_LENGTH",
]
