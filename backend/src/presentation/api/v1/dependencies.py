"""FastAPI dependency injection setup."""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database import session_scope
from infrastructure.database.repositories import SQLAlchemyPatientRepository
from application.dtos import PatientInputDTO
from application.use_cases import (
    ListPatientsUseCase,
    GetPatientUseCase,
    CreatePatientUseCase,
    UpdatePatientUseCase,
    DeletePatientUseCase,
    DeleteAllPatientsUseCase,
)
from application.validation import PatientValidator
from domain.repositories import IPatientRepository
from presentation.schemas import PatientRequest


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency, released when the request ends."""
    async with session_scope() as session:
        yield session


# Repository dependency
def get_patient_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IPatientRepository:
    """Get patient repository dependency."""
    return SQLAlchemyPatientRepository(session)


# Validation dependencies
def get_patient_validator() -> PatientValidator:
    """Get patient validator dependency."""
    return PatientValidator()


def get_validated_payload(
    body: PatientRequest,
    validator: PatientValidator = Depends(get_patient_validator),
) -> PatientInputDTO:
    """
    Parse and validate a create/update body.
    
    Raises PatientValidationError before any use case is built.
    """
    return validator.validate_or_raise(body.to_dto())


# Use case dependencies
def get_list_patients_use_case(
    repository: IPatientRepository = Depends(get_patient_repository),
) -> ListPatientsUseCase:
    return ListPatientsUseCase(repository)


def get_get_patient_use_case(
    repository: IPatientRepository = Depends(get_patient_repository),
) -> GetPatientUseCase:
    return GetPatientUseCase(repository)


def get_create_patient_use_case(
    repository: IPatientRepository = Depends(get_patient_repository),
) -> CreatePatientUseCase:
    return CreatePatientUseCase(repository)


def get_update_patient_use_case(
    repository: IPatientRepository = Depends(get_patient_repository),
) -> UpdatePatientUseCase:
    return UpdatePatientUseCase(repository)


def get_delete_patient_use_case(
    repository: IPatientRepository = Depends(get_patient_repository),
) -> DeletePatientUseCase:
    return DeletePatientUseCase(repository)


def get_delete_all_patients_use_case(
    repository: IPatientRepository = Depends(get_patient_repository),
) -> DeleteAllPatientsUseCase:
    return DeleteAllPatientsUseCase(repository)
