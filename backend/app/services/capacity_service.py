# backend/app/services/capacity_service.py
"""
Session fill-rate reporting.

Loads slots and availability submissions for a session, hands them to the
supervision engine and shapes the result for the API.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from supervision_engine.config import CapacityConfig
from supervision_engine.core import (
    Slot,
    Submission,
    availability_for,
    build_availability_map,
    compute_session_summary,
    compute_slot_stats,
)

from ..core.exceptions import NotFoundError
from .data_retrieval import SupervisionData

logger = logging.getLogger(__name__)


class CapacityService:
    """Computes per-slot capacity statistics and the availability matrix."""

    def __init__(
        self, session: AsyncSession, capacity_config: Optional[CapacityConfig] = None
    ):
        self.session = session
        self.capacity_config = capacity_config or CapacityConfig()
        self.data = SupervisionData(session)

    async def _require_session(self, session_id: UUID) -> Dict[str, Any]:
        session_row = await self.data.get_session(session_id)
        if session_row is None:
            raise NotFoundError("Session", session_id)
        return session_row

    async def _load(self, session_id: UUID):
        slot_rows = await self.data.get_slots(session_id)
        submission_rows = await self.data.get_submissions(session_id)
        slots = sorted(
            (Slot.from_backend_data(row) for row in slot_rows),
            key=lambda s: s.sort_key,
        )
        submissions = [Submission.from_backend_data(row) for row in submission_rows]
        return slots, submissions

    async def get_session_capacity(self, session_id: UUID) -> Dict[str, Any]:
        """Per-slot stats plus the session summary."""
        await self._require_session(session_id)
        slots, submissions = await self._load(session_id)

        stats = compute_slot_stats(slots, submissions, self.capacity_config)
        summary = compute_session_summary(stats)

        logger.info(
            f"Capacity for session {session_id}: {len(stats)} slots, "
            f"{summary.critical_count} critical, {summary.alert_count} alert"
        )
        return {
            "session_id": str(session_id),
            "slots": [s.to_dict() for s in stats],
            "summary": summary.to_dict(),
        }

    async def get_active_session_capacity(self) -> Dict[str, Any]:
        active = await self.data.get_active_session()
        if active is None:
            raise NotFoundError("Active session")
        return await self.get_session_capacity(active["id"])

    async def get_availability_matrix(self, session_id: UUID) -> Dict[str, Any]:
        """
        Supervisors x slots grid.

        Each cell is True (available), False (explicitly unavailable) or
        None (no answer for that slot).
        """
        await self._require_session(session_id)
        slots, submissions = await self._load(session_id)
        availability = build_availability_map(submissions)

        # One row per identity; the latest submission supplies name and email
        latest: Dict[str, Submission] = {}
        for submission in submissions:
            latest[submission.supervisor_identity] = submission

        supervisors: List[Dict[str, Any]] = []
        for identity, submission in latest.items():
            cells = {
                slot.id: availability_for(availability, identity, slot.id)
                for slot in slots
            }
            supervisors.append(
                {
                    "identity": identity,
                    "display_name": submission.display_name,
                    "email": submission.email,
                    "available_count": sum(1 for v in cells.values() if v),
                    "cells": cells,
                }
            )
        supervisors.sort(key=lambda row: row["display_name"].lower())

        logger.debug(
            f"Availability matrix for session {session_id}: "
            f"{len(supervisors)} supervisors x {len(slots)} slots"
        )
        return {
            "session_id": str(session_id),
            "slots": [slot.to_dict() for slot in slots],
            "supervisors": supervisors,
        }
