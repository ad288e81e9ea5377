"""Patient repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Patient


class IPatientRepository(ABC):
    """
    Abstract repository interface for Patient entity.
    
    This interface defines the contract for patient persistence.
    Concrete implementations will be in the infrastructure layer.
    Every operation may raise RepositoryError when the store fails.
    """
    
    @abstractmethod
    async def list_all(self) -> list[Patient]:
        """
        Retrieve every patient.
        
        Returns:
            List of patients, in storage order
        """
        pass
    
    @abstractmethod
    async def get_by_id(self, patient_id: UUID) -> Optional[Patient]:
        """
        Retrieve a patient by ID.
        
        Args:
            patient_id: Patient UUID
            
        Returns:
            Patient if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def add(self, patient: Patient) -> None:
        """
        Insert a new, fully formed patient.
        
        Args:
            patient: Patient entity to persist
        """
        pass
    
    @abstractmethod
    async def update(self, patient: Patient) -> None:
        """
        Overwrite the stored patient with the entity's mutable fields.
        
        Args:
            patient: Patient entity with updated data
        """
        pass
    
    @abstractmethod
    async def delete(self, patient: Patient) -> None:
        """
        Remove a patient.
        
        Args:
            patient: Patient entity to remove
        """
        pass
    
    @abstractmethod
    async def exists_by_id(self, patient_id: UUID) -> bool:
        """
        Check whether a patient exists without loading it.
        
        Args:
            patient_id: Patient UUID
            
        Returns:
            True if a record with this ID exists
        """
        pass
    
    @abstractmethod
    async def delete_all(self) -> None:
        """Remove every patient in a single operation."""
        pass
