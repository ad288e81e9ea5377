"""Use Case for listing every patient."""

from application.dtos import PatientResponseDTO
from domain.repositories import IPatientRepository
from infrastructure.config import get_logger


class ListPatientsUseCase:
    """Return all persisted patients in storage order."""
    
    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self) -> list[PatientResponseDTO]:
        patients = await self.patient_repo.list_all()
        self.logger.info(f"Listed {len(patients)} patients")
        return [PatientResponseDTO.from_entity(p) for p in patients]
