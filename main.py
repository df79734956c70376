import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.exceptions import AppError
from app.core.logging_config import setup_logging
from app.api.endpoints import applications, health, jobs
from app.schemas.job import MISSING_FIELD_MESSAGES

setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS, service_name=settings.PROJECT_NAME)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up Job Board API...")
    init_db()
    logger.info("Models registered")

    yield

    logger.info("Shutting down Job Board API...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=VERSION,
    description="Job postings and job applications API",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def first_validation_message(exc: RequestValidationError) -> str:
    """Turn the first request validation error into a single readable message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    # Presence is checked before types and ranges
    missing = [e for e in errors if e.get("type") == "missing"]
    error = (missing or errors)[0]
    field = ".".join(
        str(part) for part in error.get("loc", ())
        if part not in ("body", "path", "query", "header")
    )

    # Messages raised by our own validators
    cause = (error.get("ctx") or {}).get("error")
    if cause is not None:
        return str(cause)

    if error.get("type") == "missing":
        if field in MISSING_FIELD_MESSAGES:
            return MISSING_FIELD_MESSAGES[field]
        return f"{field} is required" if field else "Request body is required"

    return f"{field}: {error['msg']}" if field else error["msg"]


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = first_validation_message(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"message": message})


app.include_router(health.router)
app.include_router(jobs.router, prefix=settings.API_V1_STR)
app.include_router(applications.router, prefix=settings.API_V1_STR)


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "message": settings.PROJECT_NAME,
        "version": VERSION,
        "status": "healthy"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
