# backend/__init__.py

"""
Backend package for the Exam Supervision Planner.
Exposes the core modules and components.
"""

from .app import (
    AppError,
    NotFoundError,
    DataRetrievalError,
    CapacityService,
    InstructionsService,
    SupervisionData,
    data_retrieval,
)

from .app.database import (
    Base,
    DatabaseManager,
    db_manager,
    get_db,
    init_db,
    check_db_health,
)

from .app.config import (
    Settings,
    get_settings,
    validate_settings,
    setup_logging,
    DevelopmentSettings,
    ProductionSettings,
    TestingSettings,
)

__all__ = [
    # Exceptions
    "AppError",
    "NotFoundError",
    "DataRetrievalError",
    # Services
    "CapacityService",
    "InstructionsService",
    "SupervisionData",
    "data_retrieval",
    # Database
    "Base",
    "DatabaseManager",
    "db_manager",
    "get_db",
    "init_db",
    "check_db_health",
    # Configuration
    "Settings",
    "get_settings",
    "validate_settings",
    "setup_logging",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
]
