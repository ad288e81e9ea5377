"""Patient use cases - one class per operation."""

from .list_patients import ListPatientsUseCase
from .get_patient import GetPatientUseCase
from .create_patient import CreatePatientUseCase
from .update_patient import UpdatePatientUseCase
from .delete_patient import DeletePatientUseCase
from .delete_all_patients import DeleteAllPatientsUseCase

__all__ = [
    "ListPatientsUseCase",
    "GetPatientUseCase",
    "CreatePatientUseCase",
    "UpdatePatientUseCase",
    "DeletePatientUseCase",
    "DeleteAllPatientsUseCase",
]
