"""Database infrastructure module."""

from .session import Base, engine, AsyncSessionLocal, session_scope, init_db, close_db
from .models import PatientModel

__all__ = [
    "Base",
    "engine",
    "AsyncSessionLocal",
    "session_scope",
    "init_db",
    "close_db",
    "PatientModel",
]
