"""SQLAlchemy implementation of patient repository."""

from typing import NoReturn, Optional
from uuid import UUID
from sqlalchemy import delete, exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Patient
from domain.exceptions import RepositoryError
from domain.repositories import IPatientRepository
from infrastructure.config import get_logger
from infrastructure.database.models import PatientModel


class SQLAlchemyPatientRepository(IPatientRepository):
    """
    Concrete implementation of IPatientRepository using SQLAlchemy.
    
    Every write commits its own transaction before returning. Store errors
    are rolled back and re-raised as RepositoryError.
    """
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
        self.logger = get_logger(self.__class__.__name__)
    
    async def list_all(self) -> list[Patient]:
        """Retrieve every patient."""
        try:
            result = await self.session.execute(select(PatientModel))
            return [self._model_to_entity(m) for m in result.scalars().all()]
        except SQLAlchemyError as e:
            await self._fail("list patients", e)
    
    async def get_by_id(self, patient_id: UUID) -> Optional[Patient]:
        """Retrieve a patient by ID."""
        try:
            stmt = select(PatientModel).where(PatientModel.id == patient_id)
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self._fail(f"load patient {patient_id}", e)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def add(self, patient: Patient) -> None:
        """Insert a new patient."""
        try:
            self.session.add(self._entity_to_model(patient))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail(f"insert patient {patient.id}", e)
    
    async def update(self, patient: Patient) -> None:
        """Update an existing patient."""
        try:
            stmt = select(PatientModel).where(PatientModel.id == patient.id)
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self._fail(f"load patient {patient.id}", e)
        
        if model is None:
            raise RepositoryError(f"Patient {patient.id} not found")
        
        try:
            self._update_model_from_entity(model, patient)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail(f"update patient {patient.id}", e)
    
    async def delete(self, patient: Patient) -> None:
        """Delete a patient."""
        try:
            stmt = delete(PatientModel).where(PatientModel.id == patient.id)
            await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail(f"delete patient {patient.id}", e)
    
    async def exists_by_id(self, patient_id: UUID) -> bool:
        """Check whether a patient exists."""
        try:
            stmt = select(exists().where(PatientModel.id == patient_id))
            result = await self.session.execute(stmt)
            return bool(result.scalar())
        except SQLAlchemyError as e:
            await self._fail(f"check patient {patient_id}", e)
    
    async def delete_all(self) -> None:
        """Delete every patient with a single statement."""
        try:
            await self.session.execute(delete(PatientModel))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail("delete all patients", e)
    
    async def _fail(self, action: str, error: SQLAlchemyError) -> NoReturn:
        """Roll back, log and translate a store error."""
        self.logger.error(f"Failed to {action}: {error}", exc_info=True)
        await self.session.rollback()
        raise RepositoryError(f"Failed to {action}") from error
    
    def _entity_to_model(self, entity: Patient) -> PatientModel:
        """Convert domain entity to ORM model."""
        return PatientModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            date_of_birth=entity.date_of_birth,
            document=entity.document,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
    
    def _update_model_from_entity(self, model: PatientModel, entity: Patient) -> None:
        """Update ORM model from domain entity."""
        model.name = entity.name
        model.email = entity.email
        model.date_of_birth = entity.date_of_birth
        model.document = entity.document
        model.updated_at = entity.updated_at
    
    def _model_to_entity(self, model: PatientModel) -> Patient:
        """Convert ORM model to domain entity."""
        return Patient(
            id=model.id,
            name=model.name,
            email=model.email,
            date_of_birth=model.date_of_birth,
            document=model.document,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
