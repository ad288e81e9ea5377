"""Patient entity representing a registered patient record."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


def utcnow() -> datetime:
    """Current UTC time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class Patient:
    """
    Entity representing a patient.
    
    Identity (id) and creation time are assigned at construction and never
    change afterwards. updated_at stays None until the first update.
    """

    name: str
    email: str
    date_of_birth: date
    document: str  # national ID, passport number, etc.
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None
    
    def update_details(
        self,
        name: str,
        email: str,
        date_of_birth: date,
        document: str,
    ) -> None:
        """
        Overwrite the business fields.
        
        updated_at is stamped on every call, even when the values are
        identical to the stored ones.
        """
        self.name = name
        self.email = email
        self.date_of_birth = date_of_birth
        self.document = document
        self._mark_updated()
    
    def _mark_updated(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = utcnow()
    
    def __str__(self) -> str:
        return f"Patient(id={self.id}, name={self.name})"
