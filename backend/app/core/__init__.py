# backend/app/core/__init__.py

from ..config import get_settings
from .exceptions import (
    AppError,
    NotFoundError,
    DataRetrievalError,
)


__all__ = [
    "get_settings",  # Export the function, not a settings instance
    "AppError",
    "NotFoundError",
    "DataRetrievalError",
]
