# backend/app/main.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn
import logging

from .api.v1.api import api_router
from .config import get_settings, setup_logging, validate_settings
from .core.exceptions import AppError
from .database import init_db, db_manager, check_db_health
from .logging_config import build_logging_config
from .schemas.health import HealthResponse

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown."""
    setup_logging(settings)
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    for issue in validate_settings(settings):
        logger.warning(f"Configuration issue: {issue}")

    try:
        await init_db(database_url=settings.DATABASE_URL, **settings.database_config)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise

    yield

    logger.info("Shutting down the application...")
    await db_manager.close()


app = FastAPI(
    title=settings.APP_NAME,
    description="Supervision slot capacity and exam instructions API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render structured application errors with their own status code."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch any unhandled exceptions and log them with a full traceback.
    Returns a generic 500 error to the client to avoid leaking details.
    """
    logger.error(
        f"Unhandled exception for request {request.method} {request.url}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal server error occurred."},
    )


app.include_router(api_router, prefix="/api/v1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint providing basic API information."""
    return {
        "message": f"Welcome to the {settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "status": "active",
    }


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint to verify service and database connectivity."""
    db_health = await check_db_health()
    return {
        "status": "healthy" if db_health["status"] == "healthy" else "unhealthy",
        "service": "backend",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": db_health,
    }


if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_config=build_logging_config(settings.LOG_LEVEL, settings.LOG_FILE),
    )
