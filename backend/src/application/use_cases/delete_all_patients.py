"""Use Case for removing every patient."""

from domain.repositories import IPatientRepository
from infrastructure.config import get_logger


class DeleteAllPatientsUseCase:
    """Remove all patients. Idempotent: an empty collection is still a success."""
    
    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self) -> bool:
        await self.patient_repo.delete_all()
        self.logger.info("All patients deleted")
        return True
