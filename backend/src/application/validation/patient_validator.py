"""Field rules applied to patient create/update payloads."""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from email_validator import SPECIAL_USE_DOMAIN_NAMES, EmailNotValidError, validate_email

from application.dtos import PatientInputDTO
from domain.enums import ValidationRule


NAME_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 200
DOCUMENT_MAX_LENGTH = 50


@dataclass(frozen=True)
class ValidationFailure:
    """
    A single violated rule.
    
    Attributes:
        field: External (camelCase) name of the offending field
        rule: Violated rule identifier
        message: Human readable description
    """

    field: str
    rule: ValidationRule
    message: str


class PatientValidationError(Exception):
    """Raised when a payload violates one or more field rules."""
    
    def __init__(self, failures: list[ValidationFailure]):
        self.failures = failures
        fields = ", ".join(sorted({f.field for f in failures}))
        super().__init__(f"Invalid patient payload: {fields}")


class PatientValidator:
    """
    Validate patient payloads.
    
    Every rule is evaluated so that all violations are reported together.
    The same rule set serves create and update requests.
    """
    
    def __init__(self, today: Optional[Callable[[], date]] = None):
        """
        Initialize validator.
        
        Args:
            today: Provider of the current date (defaults to date.today)
        """
        self._today = today or date.today
    
    def validate(self, payload: PatientInputDTO) -> list[ValidationFailure]:
        """
        Check a payload against all field rules.
        
        Args:
            payload: Incoming create/update payload
            
        Returns:
            List of failures, empty when the payload is valid
        """
        failures: list[ValidationFailure] = []
        
        if _is_blank(payload.name):
            failures.append(_failure("name", ValidationRule.REQUIRED, "Name is required."))
        if len(payload.name) > NAME_MAX_LENGTH:
            failures.append(_failure(
                "name",
                ValidationRule.TOO_LONG,
                f"Name must be at most {NAME_MAX_LENGTH} characters.",
            ))
        
        if _is_blank(payload.email):
            failures.append(_failure("email", ValidationRule.REQUIRED, "Email is required."))
        if not _is_valid_email(payload.email):
            failures.append(_failure("email", ValidationRule.INVALID_FORMAT, "Email is invalid."))
        if len(payload.email) > EMAIL_MAX_LENGTH:
            failures.append(_failure(
                "email",
                ValidationRule.TOO_LONG,
                f"Email must be at most {EMAIL_MAX_LENGTH} characters.",
            ))
        
        if _is_blank(payload.document):
            failures.append(_failure("document", ValidationRule.REQUIRED, "Document is required."))
        if len(payload.document) > DOCUMENT_MAX_LENGTH:
            failures.append(_failure(
                "document",
                ValidationRule.TOO_LONG,
                f"Document must be at most {DOCUMENT_MAX_LENGTH} characters.",
            ))
        
        if payload.date_of_birth >= self._today():
            failures.append(_failure(
                "dateOfBirth",
                ValidationRule.NOT_IN_PAST,
                "Date of birth must be in the past.",
            ))
        
        return failures
    
    def validate_or_raise(self, payload: PatientInputDTO) -> PatientInputDTO:
        """
        Validate and return the payload unchanged.
        
        Raises:
            PatientValidationError: If any rule is violated
        """
        failures = self.validate(payload)
        if failures:
            raise PatientValidationError(failures)
        return payload


def _failure(field: str, rule: ValidationRule, message: str) -> ValidationFailure:
    return ValidationFailure(field=field, rule=rule, message=message)


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def _is_valid_email(value: str) -> bool:
    """Syntax-only check; reserved and dotless domains are accepted."""
    try:
        validate_email(
            _without_special_use_domain(value),
            check_deliverability=False,
            globally_deliverable=False,
        )
    except EmailNotValidError:
        return False
    return True


def _without_special_use_domain(value: str) -> str:
    """
    Swap a reserved domain suffix (local, localhost, test, ...) for a neutral
    one, since email-validator rejects those names unconditionally.
    """
    local, at, domain = value.rpartition("@")
    if not at:
        return value
    lowered = domain.lower()
    for name in SPECIAL_USE_DOMAIN_NAMES:
        if lowered == name or lowered.endswith(f".{name}"):
            return f"{local}@{domain[:len(domain) - len(name)]}example"
    return value
