"""Domain Repository Interfaces - Abstract definitions."""

from .patient_repository import IPatientRepository

__all__ = ["IPatientRepository"]
