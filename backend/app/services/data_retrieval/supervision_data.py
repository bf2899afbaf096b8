# backend/app/services/data_retrieval/supervision_data.py
"""Read-only access to the supervision tables, returned as plain row dicts."""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.exceptions import DataRetrievalError
from ...models import (
    ConsigneSecretariat,
    Cours,
    Creneau,
    Examen,
    SoumissionDisponibilite,
    SupervisionSession,
)
from .helpers import model_to_dict, models_to_dicts

logger = logging.getLogger(__name__)


class SupervisionData:
    """Service for retrieving the rows the supervision engine works on"""

    def __init__(self, session: AsyncSession):
        self.session = session
        logger.debug("SupervisionData service initialized with session")

    async def _fetch_all(self, stmt, table: str) -> List[Dict[str, Any]]:
        try:
            result = await self.session.execute(stmt)
            return models_to_dicts(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error reading {table}: {e}")
            raise DataRetrievalError.from_exception(
                e, f"Failed to read {table}"
            ).with_context(table=table) from e

    async def _fetch_one(self, stmt, table: str) -> Optional[Dict[str, Any]]:
        try:
            result = await self.session.execute(stmt)
            obj = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Error reading {table}: {e}")
            raise DataRetrievalError.from_exception(
                e, f"Failed to read {table}"
            ).with_context(table=table) from e
        return model_to_dict(obj) if obj is not None else None

    async def get_session(self, session_id: UUID) -> Optional[Dict[str, Any]]:
        logger.debug(f"Retrieving session {session_id}")
        stmt = select(SupervisionSession).where(SupervisionSession.id == session_id)
        return await self._fetch_one(stmt, "sessions")

    async def get_active_session(self) -> Optional[Dict[str, Any]]:
        """Most recent active session, or None when no session is open."""
        stmt = (
            select(SupervisionSession)
            .where(SupervisionSession.is_active.is_(True))
            .order_by(SupervisionSession.year.desc(), SupervisionSession.period.desc())
            .limit(1)
        )
        return await self._fetch_one(stmt, "sessions")

    async def get_slots(self, session_id: UUID) -> List[Dict[str, Any]]:
        """Slots of a session ordered by date then start time"""
        stmt = (
            select(Creneau)
            .where(Creneau.session_id == session_id)
            .order_by(Creneau.date_surveillance, Creneau.heure_debut_surveillance)
        )
        slots = await self._fetch_all(stmt, "creneaux")
        logger.info(f"Retrieved {len(slots)} slots for session {session_id}")
        return slots

    async def get_submissions(self, session_id: UUID) -> List[Dict[str, Any]]:
        """Availability submissions of a session, soft-deleted rows excluded"""
        stmt = select(SoumissionDisponibilite).where(
            SoumissionDisponibilite.session_id == session_id,
            SoumissionDisponibilite.deleted_at.is_(None),
        )
        submissions = await self._fetch_all(stmt, "soumissions_disponibilites")
        logger.info(
            f"Retrieved {len(submissions)} submissions for session {session_id}"
        )
        return submissions

    async def get_exam(self, exam_id: UUID) -> Optional[Dict[str, Any]]:
        stmt = select(Examen).where(Examen.id == exam_id)
        return await self._fetch_one(stmt, "examens")

    async def get_course(self, course_id: UUID) -> Optional[Dict[str, Any]]:
        stmt = select(Cours).where(Cours.id == course_id)
        return await self._fetch_one(stmt, "cours")

    async def get_secretariat_defaults(self) -> List[Dict[str, Any]]:
        """Active secretariat default instructions"""
        stmt = select(ConsigneSecretariat).where(
            ConsigneSecretariat.is_active.is_(True)
        )
        return await self._fetch_all(stmt, "consignes_secretariat")
