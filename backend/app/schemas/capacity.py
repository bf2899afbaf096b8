# backend/app/schemas/capacity.py
"""Pydantic schemas for slot capacity and availability data."""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class SlotRead(BaseModel):
    id: str
    session_id: Optional[str] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    slot_type: str
    required_count: Optional[int] = None


class SlotWithStatsRead(SlotRead):
    """A slot with its fill statistics."""

    available_count: int
    fill_ratio: Optional[float] = Field(
        None, description="Percent of the required count covered; null when undefined"
    )
    status: str
    status_label: str
    capacity_defined: bool


class SessionCapacitySummaryRead(BaseModel):
    slots_with_capacity_defined: int
    critical_count: int
    alert_count: int
    ok_count: int
    average_fill_ratio: float
    has_issues: bool


class SessionCapacityResponse(BaseModel):
    session_id: str
    slots: List[SlotWithStatsRead]
    summary: SessionCapacitySummaryRead


class SupervisorAvailabilityRow(BaseModel):
    """One supervisor's answers keyed by slot id; null means no answer."""

    identity: str
    display_name: str
    email: str
    available_count: int
    cells: Dict[str, Optional[bool]]


class AvailabilityMatrix(BaseModel):
    session_id: str
    slots: List[SlotRead]
    supervisors: List[SupervisorAvailabilityRow]
