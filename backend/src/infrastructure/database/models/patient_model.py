"""Patient SQLAlchemy model."""

from datetime import date, datetime
from uuid import UUID, uuid4
from sqlalchemy import Date, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class PatientModel(Base):
    """SQLAlchemy model for patients."""
    
    __tablename__ = "patients"
    
    # Primary key
    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4
    )
    
    # Patient information
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(200), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    document: Mapped[str] = mapped_column(String(50), nullable=False)
    
    # Timestamps (naive UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    
    def __repr__(self) -> str:
        return f"<PatientModel(id={self.id}, name={self.name})>"
