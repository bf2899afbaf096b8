# backend/app/schemas/__init__.py
"""Expose schema modules and primary Pydantic models for convenient imports."""

from . import capacity, instructions, health

from .capacity import (
    SlotRead,
    SlotWithStatsRead,
    SessionCapacitySummaryRead,
    SessionCapacityResponse,
    SupervisorAvailabilityRow,
    AvailabilityMatrix,
)
from .instructions import ResolvedInstructionsRead, ExamInstructionsResponse
from .health import HealthResponse

__all__ = [
    "capacity",
    "instructions",
    "health",
    "SlotRead",
    "SlotWithStatsRead",
    "SessionCapacitySummaryRead",
    "SessionCapacityResponse",
    "SupervisorAvailabilityRow",
    "AvailabilityMatrix",
    "ResolvedInstructionsRead",
    "ExamInstructionsResponse",
    "HealthResponse",
]
