"""Identifiers of the field rules enforced on patient payloads."""

from enum import Enum


class ValidationRule(str, Enum):
    """Rule violated by a field of an incoming payload."""

    REQUIRED = "Required"
    TOO_LONG = "TooLong"
    INVALID_FORMAT = "InvalidFormat"
    NOT_IN_PAST = "NotInPast"

    def __str__(self) -> str:
        return self.value
