"""Repository implementations."""

from .sqlalchemy_patient_repository import SQLAlchemyPatientRepository

__all__ = ["SQLAlchemyPatientRepository"]
