"""Domain Enums - Constant values used across the domain."""

from .validation_rule import ValidationRule

__all__ = ["ValidationRule"]
