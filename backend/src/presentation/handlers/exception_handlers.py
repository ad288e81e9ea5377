"""Map validation, not-found and infrastructure errors onto HTTP responses."""

from collections import defaultdict
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from application.validation import PatientValidationError
from domain.enums import ValidationRule
from domain.exceptions import RepositoryError
from infrastructure.config import get_logger
from presentation.schemas import FieldError, ValidationErrorResponse

logger = get_logger(__name__)


def _validation_response(errors: dict[str, list[FieldError]]) -> JSONResponse:
    body = ValidationErrorResponse(errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


async def patient_validation_error_handler(
    request: Request,
    exc: PatientValidationError,
) -> JSONResponse:
    """Render field rule violations as a 400 response."""
    errors: dict[str, list[FieldError]] = defaultdict(list)
    for failure in exc.failures:
        errors[failure.field].append(
            FieldError(code=failure.rule.value, message=failure.message)
        )
    logger.info(f"Rejected payload on {request.url.path}: {sorted(errors)}")
    return _validation_response(dict(errors))


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Render request parsing errors.
    
    A malformed ID in the path can never match a record, so it is reported
    as 404; body errors use the same shape as field rule violations.
    """
    raw_errors = exc.errors()
    if any((err.get("loc") or ("",))[0] == "path" for err in raw_errors):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Patient not found"},
        )
    
    errors: dict[str, list[FieldError]] = defaultdict(list)
    for err in raw_errors:
        if err.get("type") == "json_invalid":
            field = "body"
        else:
            loc = [str(part) for part in err.get("loc", ()) if part != "body"]
            field = ".".join(loc) or "body"
        # JSON null counts as an absent value
        if err.get("type") == "missing" or err.get("input", "") is None:
            rule = ValidationRule.REQUIRED
        else:
            rule = ValidationRule.INVALID_FORMAT
        errors[field].append(FieldError(code=rule.value, message=err.get("msg", "")))
    
    return _validation_response(dict(errors))


async def repository_error_handler(
    request: Request,
    exc: RepositoryError,
) -> JSONResponse:
    """Report store failures generically, without internal detail."""
    logger.error(
        f"Storage failure on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all exception handlers on the application."""
    app.add_exception_handler(PatientValidationError, patient_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
