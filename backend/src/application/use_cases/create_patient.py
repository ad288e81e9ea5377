"""Use Case for registering a new patient."""

from application.dtos import PatientInputDTO, PatientResponseDTO
from domain.entities import Patient
from domain.repositories import IPatientRepository
from infrastructure.config import get_logger


class CreatePatientUseCase:
    """
    Register a new patient.
    
    The payload must already have passed PatientValidator; it is not
    re-validated here.
    """
    
    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, payload: PatientInputDTO) -> PatientResponseDTO:
        """
        Create and persist a patient.
        
        Args:
            payload: Validated business fields
            
        Returns:
            The created patient with its generated ID and creation time
            
        Raises:
            RepositoryError: If the store rejects the insert
        """
        # id and created_at are assigned by the entity itself
        patient = Patient(
            name=payload.name,
            email=payload.email,
            date_of_birth=payload.date_of_birth,
            document=payload.document,
        )
        
        await self.patient_repo.add(patient)
        self.logger.info(f"Patient created: {patient.id}")
        
        return PatientResponseDTO.from_entity(patient)
