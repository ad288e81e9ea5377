"""SQLAlchemy ORM models."""

from .patient_model import PatientModel

__all__ = ["PatientModel"]
