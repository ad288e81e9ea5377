"""Use Case for removing a patient."""

from uuid import UUID

from domain.repositories import IPatientRepository
from infrastructure.config import get_logger


class DeletePatientUseCase:
    """Permanently remove a single patient."""
    
    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, patient_id: UUID) -> bool:
        """
        Delete a patient.
        
        Args:
            patient_id: Patient UUID
            
        Returns:
            True if deleted, False if not found
        """
        patient = await self.patient_repo.get_by_id(patient_id)
        if patient is None:
            self.logger.warning(f"Cannot delete, patient not found: {patient_id}")
            return False
        
        await self.patient_repo.delete(patient)
        self.logger.info(f"Patient deleted: {patient_id}")
        return True
