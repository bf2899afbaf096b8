# backend/app/schemas/health.py
from pydantic import BaseModel
from typing import Any, Dict


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    environment: str
    database: Dict[str, Any]
