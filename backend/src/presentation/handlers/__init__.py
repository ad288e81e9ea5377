"""Exception handlers translating application outcomes to HTTP responses."""

from .exception_handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
