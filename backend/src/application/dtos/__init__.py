"""Data transfer objects crossing the application boundary."""

from .patient_dtos import PatientInputDTO, PatientResponseDTO

__all__ = ["PatientInputDTO", "PatientResponseDTO"]
