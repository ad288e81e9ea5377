"""Patient CRUD endpoints."""

from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from application.dtos import PatientInputDTO, PatientResponseDTO
from application.use_cases import (
    ListPatientsUseCase,
    GetPatientUseCase,
    CreatePatientUseCase,
    UpdatePatientUseCase,
    DeletePatientUseCase,
    DeleteAllPatientsUseCase,
)
from presentation.schemas import PatientResponse, ValidationErrorResponse, ErrorResponse
from presentation.api.v1.dependencies import (
    get_validated_payload,
    get_list_patients_use_case,
    get_get_patient_use_case,
    get_create_patient_use_case,
    get_update_patient_use_case,
    get_delete_patient_use_case,
    get_delete_all_patients_use_case,
)

router = APIRouter(prefix="/patients", tags=["patients"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Patient not found"}}
INVALID = {400: {"model": ValidationErrorResponse, "description": "Invalid payload"}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Patient not found")


def _to_response(dto: PatientResponseDTO) -> PatientResponse:
    return PatientResponse.model_validate(dto)


@router.get("", response_model=list[PatientResponse])
async def list_patients(
    use_case: ListPatientsUseCase = Depends(get_list_patients_use_case),
) -> list[PatientResponse]:
    """List every patient."""
    patients = await use_case.execute()
    return [_to_response(p) for p in patients]


@router.get("/{patient_id}", response_model=PatientResponse, responses=NOT_FOUND)
async def get_patient(
    patient_id: UUID,
    use_case: GetPatientUseCase = Depends(get_get_patient_use_case),
) -> PatientResponse:
    """Get a patient by ID."""
    patient = await use_case.execute(patient_id)
    if patient is None:
        raise _not_found()
    return _to_response(patient)


@router.post(
    "",
    response_model=PatientResponse,
    status_code=status.HTTP_201_CREATED,
    responses=INVALID,
)
async def create_patient(
    request: Request,
    response: Response,
    payload: PatientInputDTO = Depends(get_validated_payload),
    use_case: CreatePatientUseCase = Depends(get_create_patient_use_case),
) -> PatientResponse:
    """
    Register a new patient.
    
    The Location header points at the created record.
    """
    created = await use_case.execute(payload)
    response.headers["Location"] = str(request.url_for("get_patient", patient_id=created.id))
    return _to_response(created)


@router.put(
    "/{patient_id}",
    response_model=PatientResponse,
    responses={**INVALID, **NOT_FOUND},
)
async def update_patient(
    patient_id: UUID,
    payload: PatientInputDTO = Depends(get_validated_payload),
    use_case: UpdatePatientUseCase = Depends(get_update_patient_use_case),
) -> PatientResponse:
    """Replace the business fields of an existing patient."""
    updated = await use_case.execute(patient_id, payload)
    if updated is None:
        raise _not_found()
    return _to_response(updated)


@router.delete(
    "/{patient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_patient(
    patient_id: UUID,
    use_case: DeletePatientUseCase = Depends(get_delete_patient_use_case),
) -> Response:
    """Delete a patient."""
    deleted = await use_case.execute(patient_id)
    if not deleted:
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_all_patients(
    use_case: DeleteAllPatientsUseCase = Depends(get_delete_all_patients_use_case),
) -> Response:
    """Delete every patient."""
    await use_case.execute()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
