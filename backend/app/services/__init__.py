# backend/app/services/__init__.py
"""
Services package for the application.

Business logic between the API endpoints and the database layer; the
capacity and instructions computations themselves live in supervision_engine.
"""

from .data_retrieval import SupervisionData
from .capacity_service import CapacityService
from .instructions_service import InstructionsService

__all__ = [
    # Data Retrieval
    "SupervisionData",
    # Supervision
    "CapacityService",
    "InstructionsService",
]
