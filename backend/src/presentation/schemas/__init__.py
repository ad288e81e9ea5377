"""Pydantic schemas for request/response validation."""

from .health_schemas import HealthResponse
from .patient_schemas import (
    PatientRequest,
    PatientResponse,
    FieldError,
    ValidationErrorResponse,
    ErrorResponse,
)

__all__ = [
    "HealthResponse",
    "PatientRequest",
    "PatientResponse",
    "FieldError",
    "ValidationErrorResponse",
    "ErrorResponse",
]
