"""Use Case for updating an existing patient."""

from typing import Optional
from uuid import UUID

from application.dtos import PatientInputDTO, PatientResponseDTO
from domain.repositories import IPatientRepository
from infrastructure.config import get_logger


class UpdatePatientUseCase:
    """Overwrite the business fields of an existing patient."""
    
    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(
        self,
        patient_id: UUID,
        payload: PatientInputDTO,
    ) -> Optional[PatientResponseDTO]:
        """
        Update a patient.
        
        updated_at is refreshed even when no field actually changed.
        
        Args:
            patient_id: Patient UUID
            payload: Validated business fields
            
        Returns:
            The updated patient, or None if no record has this ID
        """
        patient = await self.patient_repo.get_by_id(patient_id)
        if patient is None:
            self.logger.warning(f"Cannot update, patient not found: {patient_id}")
            return None
        
        patient.update_details(
            name=payload.name,
            email=payload.email,
            date_of_birth=payload.date_of_birth,
            document=payload.document,
        )
        
        await self.patient_repo.update(patient)
        self.logger.info(f"Patient updated: {patient.id}")
        
        return PatientResponseDTO.from_entity(patient)
