"""Domain Entities - Objects with identity."""

from .patient import Patient, utcnow

__all__ = ["Patient", "utcnow"]
