"""
FastAPI application factory and main app configuration.
"""

import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.errors import APIError, status_for_domain_error
from .api.routers import analytics, appointments, auth, doctors, health, otp, queries
from .api.schemas.common import ErrorResponse
from .core.config import get_settings
from .core.exceptions import DatabaseError
from .core.structured_logger import configure_logging
from .domain.errors import DomainError
from .middleware.performance_middleware import PerformanceMiddleware
from .middleware.request_id_middleware import RequestIDMiddleware

logger = logging.getLogger("careconnect")


async def init_database(settings) -> None:
    """Connect Motor and register the Beanie document models."""
    import certifi
    from beanie import init_beanie
    from motor.motor_asyncio import AsyncIOMotorClient

    from .adapters.db.mongo.models import DOCUMENT_MODELS

    mongo_uri = settings.database.uri

    # Enable TLS only for Atlas SRV URIs
    if mongo_uri.startswith("mongodb+srv://"):
        client = AsyncIOMotorClient(
            mongo_uri,
            serverSelectionTimeoutMS=15000,
            tls=True,
            tlsCAFile=certifi.where(),
            tlsAllowInvalidCertificates=False,
        )
    else:
        client = AsyncIOMotorClient(mongo_uri, serverSelectionTimeoutMS=15000)

    try:
        await init_beanie(database=client[settings.database.db_name], document_models=DOCUMENT_MODELS)
    except Exception as e:
        raise DatabaseError(
            f"Could not initialise MongoDB: {type(e).__name__}: {e}",
            {"db_name": settings.database.db_name},
        ) from e


async def bootstrap_defaults() -> None:
    """Ensure default accounts and the doctor roster exist."""
    from .api.deps import get_doctor_repository, get_user_repository
    from .application.use_cases.ensure_defaults import EnsureDefaultRecordsUseCase

    users_created, doctors_created = await EnsureDefaultRecordsUseCase(
        get_user_repository(), get_doctor_repository()
    ).execute()
    logger.info(f"Default records ensured (accounts={users_created}, doctors={doctors_created})")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_env} | Debug mode: {settings.debug}")

    try:
        await init_database(settings)
        logger.info("Database connection established")
        if settings.bootstrap.seed_defaults:
            await bootstrap_defaults()
    except DatabaseError as e:
        logger.error(f"Database connection failed: {e.message}")
        logger.error(f"Traceback:\n{traceback.format_exc()}")
    except Exception as e:
        logger.error(f"Startup bootstrap failed: {type(e).__name__}: {e}")
        logger.error(f"Traceback:\n{traceback.format_exc()}")

    yield

    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    configure_logging(settings.logging.level, settings.logging.format)

    app = FastAPI(
        title=settings.app_name,
        description="Patient queries, appointment booking and rule-based doctor triage",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    # Add performance tracking middleware
    app.add_middleware(PerformanceMiddleware)

    # Registered last so it wraps everything and the id is bound first
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(queries.router)
    app.include_router(appointments.router)
    app.include_router(doctors.router)
    app.include_router(analytics.router)
    app.include_router(otp.router)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        req_id = getattr(request.state, "request_id", None)
        status_code = status_for_domain_error(exc)
        logger.info(f"DomainError: {exc.error_code} ({status_code}) {exc.message} | request_id={req_id}")
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=exc.error_code or "DOMAIN_ERROR",
                message=exc.message,
                request_id=req_id or "",
                details=exc.details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        req_id = getattr(request.state, "request_id", None)
        logger.error(f"APIError: {exc.code} ({exc.http_status}) {exc.message} | request_id={req_id}")
        return JSONResponse(
            status_code=exc.http_status,
            content=ErrorResponse(
                error=exc.code,
                message=exc.message,
                request_id=req_id or "",
                details=exc.details or {},
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def pydantic_error_handler(request: Request, exc: RequestValidationError):
        req_id = getattr(request.state, "request_id", None)
        error_details = exc.errors()
        logger.error(f"ValidationError on {request.method} {request.url.path}: {error_details} | request_id={req_id}")

        error_messages = []
        for error in error_details:
            loc = " -> ".join(str(x) for x in error.get("loc", []))
            msg = error.get("msg", "Validation error")
            error_messages.append(f"{loc}: {msg}")

        fields = [str(error.get("loc", [])[-1]) for error in error_details if error.get("loc")]
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="INVALID_INPUT",
                message=f"Input validation failed: {'; '.join(error_messages)}",
                request_id=req_id or "",
                details={"fields": fields, "path": request.url.path},
            ).model_dump(mode="json"),
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        req_id = getattr(request.state, "request_id", None)
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="VALIDATION_ERROR",
                message=str(exc),
                request_id=req_id or "",
                details={},
            ).model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logger.error(f"Unhandled error: {type(exc).__name__}: {exc} | request_id={req_id}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="INTERNAL_ERROR",
                message="An unexpected error has occurred. Please try again later.",
                request_id=req_id or "",
            ).model_dump(mode="json"),
        )

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.app_env,
            "status": "running",
            "docs": "/docs",
            "endpoints": {
                "health": "/health",
                "signup": "POST /auth/signup",
                "login": "POST /auth/login",
                "submit_query": "POST /queries/",
                "book_appointment": "POST /appointments/",
                "doctors": "GET /doctors/",
                "analytics": "GET /analytics/summary",
                "send_otp": "POST /api/send-otp",
                "verify_otp": "POST /api/verify-otp",
            },
        }

    return app


# Create the app instance
app = create_app()
