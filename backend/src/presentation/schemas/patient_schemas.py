"""Patient-related Pydantic schemas."""

from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from application.dtos import PatientInputDTO


class PatientRequest(BaseModel):
    """
    Request schema for creating or updating a patient.
    
    Only structure and types are checked here; field rules are applied by
    PatientValidator so that every violation is reported together.
    """
    
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Contact email address")
    date_of_birth: date = Field(..., description="Date of birth (ISO 8601)")
    document: str = Field(..., description="Identity document number")
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Jane Doe",
                    "email": "jane@example.com",
                    "dateOfBirth": "1990-01-01",
                    "document": "123456"
                }
            ]
        },
    )
    
    def to_dto(self) -> PatientInputDTO:
        """Map the request onto the application input DTO."""
        return PatientInputDTO(
            name=self.name,
            email=self.email,
            date_of_birth=self.date_of_birth,
            document=self.document,
        )


class PatientResponse(BaseModel):
    """Response schema for a patient record."""
    
    id: UUID = Field(..., description="Patient identifier")
    name: str
    email: str
    date_of_birth: date
    document: str
    created_at: datetime = Field(..., description="Creation time (UTC)")
    updated_at: Optional[datetime] = Field(None, description="Last update time (UTC)")
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
    
    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, value: Optional[datetime]) -> Optional[datetime]:
        """Stored timestamps are naive UTC; mark them so clients see the offset."""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class FieldError(BaseModel):
    """A single rule violation on a field."""
    
    code: str = Field(..., description="Violated rule, e.g. Required or TooLong")
    message: str


class ValidationErrorResponse(BaseModel):
    """Response schema for rejected payloads."""
    
    title: str = "One or more validation errors occurred."
    status: int = 400
    errors: dict[str, list[FieldError]]


class ErrorResponse(BaseModel):
    """Generic error response schema."""
    
    detail: str
