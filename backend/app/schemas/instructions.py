# backend/app/schemas/instructions.py
"""Pydantic schemas for exam instructions."""

from pydantic import BaseModel
from typing import Optional


class ResolvedInstructionsRead(BaseModel):
    source: str
    arrival_text: str = ""
    setup_text: str = ""
    general_text: str = ""
    is_pending: bool = False


class ExamInstructionsResponse(BaseModel):
    exam_id: str
    exam_code: str = ""
    instructions: Optional[ResolvedInstructionsRead] = None
    text: str = ""
