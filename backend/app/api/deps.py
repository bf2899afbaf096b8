# backend/app/api/deps.py
import logging
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from supervision_engine.config import CapacityConfig

from ..config import Settings, get_settings
from ..database import get_db
from ..services import CapacityService, InstructionsService

# Configure logging
logger = logging.getLogger(__name__)


async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get a database session."""
    async for session in get_db():
        yield session


def settings_dep() -> Settings:
    return get_settings()


def capacity_config(settings: Settings = Depends(settings_dep)) -> CapacityConfig:
    """Fill-rate thresholds from the application settings."""
    return settings.capacity_config()


def capacity_service(
    db: AsyncSession = Depends(db_session),
    config: CapacityConfig = Depends(capacity_config),
) -> CapacityService:
    return CapacityService(db, config)


def instructions_service(
    db: AsyncSession = Depends(db_session),
) -> InstructionsService:
    return InstructionsService(db)
