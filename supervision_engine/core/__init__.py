# supervision_engine/core/__init__.py

"""
Core module for supervision engine data structures and computations
"""

from .models import (
    Slot,
    SlotTypeEnum,
    AvailabilityEntry,
    Submission,
    FillStatus,
    SlotWithStats,
    SessionCapacitySummary,
    ExamInstructions,
    CourseInstructions,
    SecretariatInstructions,
    InstructionsSource,
    ResolvedInstructions,
    INSTRUCTIONS_PENDING,
)
from .capacity import (
    build_availability_map,
    availability_for,
    count_available_slots,
    classify_fill_ratio,
    compute_slot_stats,
    compute_session_summary,
)
from .instructions import (
    PENDING_MESSAGE,
    find_secretariat_default,
    resolve_instructions,
    format_instructions,
)

__all__ = [
    # Data model
    "Slot",
    "SlotTypeEnum",
    "AvailabilityEntry",
    "Submission",
    "FillStatus",
    "SlotWithStats",
    "SessionCapacitySummary",
    "ExamInstructions",
    "CourseInstructions",
    "SecretariatInstructions",
    "InstructionsSource",
    "ResolvedInstructions",
    "INSTRUCTIONS_PENDING",
    # Capacity aggregation
    "build_availability_map",
    "availability_for",
    "count_available_slots",
    "classify_fill_ratio",
    "compute_slot_stats",
    "compute_session_summary",
    # Instructions cascade
    "PENDING_MESSAGE",
    "find_secretariat_default",
    "resolve_instructions",
    "format_instructions",
]
