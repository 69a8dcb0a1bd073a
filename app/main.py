"""
Learning style assessment API
Quiz sessions, learning style classification, study materials, tasks and
recommendations
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time

from app.config import settings
from app.database import init_db
from app.api import assessment, profiles, materials, tasks
from app.services.exceptions import (
    ProfileNotFoundError,
    SessionNotFoundError,
    TaskNotFoundError,
    QuizSessionError,
    InvalidScheduleError,
    PersistenceError,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Domain error -> (status code, error code)
DOMAIN_ERRORS = {
    ProfileNotFoundError: (404, "not_found"),
    SessionNotFoundError: (404, "not_found"),
    TaskNotFoundError: (404, "not_found"),
    QuizSessionError: (409, "invalid_session_state"),
    InvalidScheduleError: (422, "invalid_schedule"),
    PersistenceError: (503, "persistence_unavailable"),
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables before serving requests"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    init_db()
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Learning style classification quiz with style-aware study recommendations",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and duration"""
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Duration: {duration:.3f}s"
    )
    return response


def _error_response(status_code: int, error: str, message, detail=None) -> JSONResponse:
    content = {"error": error, "message": message, "status_code": status_code}
    if detail is not None:
        content["detail"] = detail
    return JSONResponse(status_code=status_code, content=content)


async def domain_exception_handler(request: Request, exc: Exception):
    """Translate service-layer errors into their HTTP status"""
    status_code, error = next(
        DOMAIN_ERRORS[cls] for cls in type(exc).__mro__ if cls in DOMAIN_ERRORS
    )
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {str(exc)}")
    return _error_response(status_code, error, str(exc))


for error_class in DOMAIN_ERRORS:
    app.add_exception_handler(error_class, domain_exception_handler)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return _error_response(exc.status_code, "http_error", exc.detail)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Unexpected errors become a 500; details are only exposed in debug mode"""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return _error_response(
        500,
        "internal_server_error",
        "An unexpected error occurred. Please try again later.",
        detail=str(exc) if settings.DEBUG else None,
    )


@app.get("/health")
async def health_check():
    """Service status for monitoring"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": time.time()
    }


@app.get("/")
async def root():
    return {
        "message": "Learning Style Assessment API",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health"
    }


app.include_router(profiles.router)
app.include_router(assessment.router)
app.include_router(materials.router)
app.include_router(tasks.router)
