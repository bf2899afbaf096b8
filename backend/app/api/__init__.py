# backend/app/api/__init__.py
from .deps import db_session, capacity_service, instructions_service

__all__ = ["db_session", "capacity_service", "instructions_service"]
