# backend/app/api/v1/routes/capacity.py
"""API endpoints for supervision slot capacity."""

from uuid import UUID
from fastapi import APIRouter, Depends

from ....api.deps import capacity_service
from ....schemas.capacity import AvailabilityMatrix, SessionCapacityResponse
from ....services import CapacityService

router = APIRouter()


# Declared before the parameterised route so "active" is not parsed as a UUID
@router.get("/active/capacity", response_model=SessionCapacityResponse)
async def get_active_session_capacity(
    service: CapacityService = Depends(capacity_service),
):
    """Fill statistics for the currently active session."""
    return await service.get_active_session_capacity()


@router.get("/{session_id}/capacity", response_model=SessionCapacityResponse)
async def get_session_capacity(
    session_id: UUID,
    service: CapacityService = Depends(capacity_service),
):
    """Per-slot availability counts, fill ratios and the session summary."""
    return await service.get_session_capacity(session_id)


@router.get("/{session_id}/availability-matrix", response_model=AvailabilityMatrix)
async def get_availability_matrix(
    session_id: UUID,
    service: CapacityService = Depends(capacity_service),
):
    return await service.get_availability_matrix(session_id)
