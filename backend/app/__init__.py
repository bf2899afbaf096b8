# backend/app/__init__.py

"""Main application package for the Exam Supervision Planner."""

# Core
from .core import (
    AppError,
    NotFoundError,
    DataRetrievalError,
)

# Services
from .services import (
    CapacityService,
    InstructionsService,
    SupervisionData,
    data_retrieval,
)

__all__ = [
    # Core
    "AppError",
    "NotFoundError",
    "DataRetrievalError",
    # Services
    "CapacityService",
    "InstructionsService",
    "SupervisionData",
    "data_retrieval",
]
