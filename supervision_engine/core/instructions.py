# supervision_engine/core/instructions.py

"""
Instructions ("consignes") resolution for exams.

Exactly one source applies to an exam, picked in this order:
exam-specific > course > pending (secretariat assigns rooms) > secretariat default.
"""

from typing import Iterable, List, Optional

from .models import (
    CourseInstructions,
    ExamInstructions,
    InstructionsSource,
    INSTRUCTIONS_PENDING,
    ResolvedInstructions,
    SecretariatInstructions,
)
from ..config import get_logger

logger = get_logger("instructions")

PENDING_MESSAGE = (
    "Les consignes détaillées (arrivée, mise en place, auditoires) seront "
    "communiquées ultérieurement par le pool, le secrétariat ou le responsable de cours."
)


def find_secretariat_default(
    code: Optional[str], defaults: Iterable[SecretariatInstructions]
) -> Optional[SecretariatInstructions]:
    """Return the active default instructions of the given secretariat, if any."""
    if not code:
        return None
    wanted = code.strip().upper()
    for default in defaults:
        if default.is_active and default.code.strip().upper() == wanted:
            return default
    return None


def resolve_instructions(
    exam: ExamInstructions,
    course: Optional[CourseInstructions],
    secretariat_default: Optional[SecretariatInstructions],
    secretariat_assignment_mode: bool = False,
) -> Optional[ResolvedInstructions]:
    """
    Select the single instructions source that applies to ``exam``.

    Returns None when no tier has anything to show.
    """
    if exam.use_specific:
        # All-or-nothing: empty specific fields never fall back to another tier
        resolved = ResolvedInstructions(
            source=InstructionsSource.EXAM_SPECIFIC,
            arrival_text=exam.arrival_text,
            setup_text=exam.setup_text,
            general_text=exam.general_text,
        )
    elif course is not None and course.general_text:
        resolved = ResolvedInstructions(
            source=InstructionsSource.COURSE,
            general_text=course.general_text,
        )
    elif secretariat_assignment_mode:
        resolved = INSTRUCTIONS_PENDING
    elif secretariat_default is not None:
        resolved = ResolvedInstructions(
            source=InstructionsSource.SECRETARIAT,
            arrival_text=secretariat_default.arrival_text,
            setup_text=secretariat_default.setup_text,
            general_text=secretariat_default.general_text,
        )
    else:
        resolved = None

    logger.debug(
        f"Exam {exam.id}: instructions source "
        f"{resolved.source.value if resolved else 'none'}"
    )
    return resolved


def format_instructions(resolved: Optional[ResolvedInstructions]) -> str:
    """Render resolved instructions as a single line of text."""
    if resolved is None:
        return ""
    if resolved.is_pending:
        return PENDING_MESSAGE

    parts: List[str] = []
    if resolved.source is InstructionsSource.COURSE:
        parts.append(f"Consignes du cours: {resolved.general_text}")
    else:
        if resolved.arrival_text:
            parts.append(f"Arrivée: {resolved.arrival_text}")
        if resolved.setup_text:
            parts.append(f"Mise en place: {resolved.setup_text}")
        if resolved.general_text:
            parts.append(f"Consignes générales: {resolved.general_text}")
    return " | ".join(parts)
