"""Pytest configuration and shared fixtures."""

import os
import tempfile
from dataclasses import replace
from datetime import date
from typing import Optional
from uuid import UUID

# Settings are read once and the engine is built at import time,
# so the test database must be configured before any project import.
_TEST_DB_DIR = tempfile.mkdtemp(prefix="patients-api-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/patients.db"
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest

from application.dtos import PatientInputDTO
from domain.entities import Patient
from domain.repositories import IPatientRepository


class InMemoryPatientRepository(IPatientRepository):
    """Dict-backed repository for exercising use cases without a database."""
    
    def __init__(self):
        self.records: dict[UUID, Patient] = {}
    
    async def list_all(self) -> list[Patient]:
        return [replace(p) for p in self.records.values()]
    
    async def get_by_id(self, patient_id: UUID) -> Optional[Patient]:
        patient = self.records.get(patient_id)
        return replace(patient) if patient else None
    
    async def add(self, patient: Patient) -> None:
        if patient.id in self.records:
            raise AssertionError(f"duplicate id {patient.id}")
        self.records[patient.id] = replace(patient)
    
    async def update(self, patient: Patient) -> None:
        self.records[patient.id] = replace(patient)
    
    async def delete(self, patient: Patient) -> None:
        self.records.pop(patient.id, None)
    
    async def exists_by_id(self, patient_id: UUID) -> bool:
        return patient_id in self.records
    
    async def delete_all(self) -> None:
        self.records.clear()


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def fake_repository():
    """Fixture for an empty in-memory patient repository."""
    return InMemoryPatientRepository()


@pytest.fixture
def jane_payload():
    """Fixture for a valid create payload."""
    return PatientInputDTO(
        name="Jane Doe",
        email="jane@example.com",
        date_of_birth=date(1990, 1, 1),
        document="123456",
    )


@pytest.fixture
def john_payload():
    """Fixture for a second valid payload, used as update data."""
    return PatientInputDTO(
        name="John Smith",
        email="john.smith@example.org",
        date_of_birth=date(1985, 6, 15),
        document="AB-998877",
    )


@pytest.fixture
def jane_json():
    """Fixture for a valid create request body."""
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "dateOfBirth": "1990-01-01",
        "document": "123456",
    }
