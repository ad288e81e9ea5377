"""Input and output shapes of the patient use cases."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from domain.entities import Patient


@dataclass(frozen=True)
class PatientInputDTO:
    """
    Business fields of a create or update request.
    
    Attributes:
        name: Full name
        email: Contact email address
        date_of_birth: Calendar date of birth
        document: Free-form identifier (national ID, passport, ...)
    """

    name: str
    email: str
    date_of_birth: date
    document: str


@dataclass(frozen=True)
class PatientResponseDTO:
    """Externally visible representation of a patient."""

    id: UUID
    name: str
    email: str
    date_of_birth: date
    document: str
    created_at: datetime
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, patient: Patient) -> "PatientResponseDTO":
        """Convert a domain entity to its response representation."""
        return cls(
            id=patient.id,
            name=patient.name,
            email=patient.email,
            date_of_birth=patient.date_of_birth,
            document=patient.document,
            created_at=patient.created_at,
            updated_at=patient.updated_at,
        )
