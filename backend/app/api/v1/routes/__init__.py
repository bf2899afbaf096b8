# backend/app/api/v1/routes/__init__.py
from fastapi import APIRouter
from .capacity import router as capacity_router
from .instructions import router as instructions_router

# Create a main router that includes all sub-routers
router = APIRouter()

router.include_router(capacity_router, prefix="/sessions", tags=["Slot Capacity"])
router.include_router(
    instructions_router, prefix="/exams", tags=["Exam Instructions"]
)
