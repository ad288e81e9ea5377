"""Use Case for fetching a single patient."""

from typing import Optional
from uuid import UUID

from application.dtos import PatientResponseDTO
from domain.repositories import IPatientRepository
from infrastructure.config import get_logger


class GetPatientUseCase:
    """Fetch a patient by ID."""
    
    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, patient_id: UUID) -> Optional[PatientResponseDTO]:
        """
        Get a patient.
        
        Args:
            patient_id: Patient UUID
            
        Returns:
            The patient, or None if no record has this ID
        """
        patient = await self.patient_repo.get_by_id(patient_id)
        if patient is None:
            self.logger.warning(f"Patient not found: {patient_id}")
            return None
        
        return PatientResponseDTO.from_entity(patient)
