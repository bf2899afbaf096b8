# backend/app/api/v1/routes/instructions.py
"""API endpoints for exam instructions."""

from uuid import UUID
from fastapi import APIRouter, Depends

from ....api.deps import instructions_service
from ....schemas.instructions import ExamInstructionsResponse
from ....services import InstructionsService

router = APIRouter()


@router.get("/{exam_id}/instructions", response_model=ExamInstructionsResponse)
async def get_exam_instructions(
    exam_id: UUID,
    service: InstructionsService = Depends(instructions_service),
):
    """The single instructions source that applies to the exam, if any."""
    return await service.get_exam_instructions(exam_id)
