# backend/app/services/instructions_service.py
"""Resolves which instructions apply to an exam."""

import logging
from typing import Any, Dict
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from supervision_engine.core import (
    CourseInstructions,
    ExamInstructions,
    SecretariatInstructions,
    find_secretariat_default,
    format_instructions,
    resolve_instructions,
)

from ..core.exceptions import NotFoundError
from .data_retrieval import SupervisionData

logger = logging.getLogger(__name__)


class InstructionsService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.data = SupervisionData(session)

    async def get_exam_instructions(self, exam_id: UUID) -> Dict[str, Any]:
        """
        Fetch the exam, its course and the secretariat defaults, then run the
        precedence cascade. ``instructions`` is None when no source applies.
        """
        exam_row = await self.data.get_exam(exam_id)
        if exam_row is None:
            raise NotFoundError("Exam", exam_id)
        exam = ExamInstructions.from_backend_data(exam_row)

        course = None
        if exam.course_id:
            course_row = await self.data.get_course(exam_row["cours_id"])
            if course_row is not None:
                course = CourseInstructions.from_backend_data(course_row)
            else:
                logger.warning(f"Exam {exam_id} references missing course {exam.course_id}")

        defaults = [
            SecretariatInstructions.from_backend_data(row)
            for row in await self.data.get_secretariat_defaults()
        ]
        secretariat_default = find_secretariat_default(exam.secretariat_code, defaults)

        resolved = resolve_instructions(
            exam,
            course,
            secretariat_default,
            secretariat_assignment_mode=exam.secretariat_assignment_mode,
        )
        return {
            "exam_id": str(exam_id),
            "exam_code": exam.code,
            "instructions": resolved.to_dict() if resolved else None,
            "text": format_instructions(resolved),
        }
