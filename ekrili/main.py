"""
Ekrili API - Main Application
FastAPI application with CORS, error handling, request logging and an
in-memory storage created once per application
"""
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional
import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from ekrili.api.routes import (
    auth_router,
    users_router,
    properties_router,
    search_router,
    bookings_router,
    reviews_router,
    messages_router,
    favorites_router,
    stats_router,
    dashboard_router,
)
from ekrili.core.config import Settings, settings as default_settings
from ekrili.services.seed import seed_demo_data
from ekrili.services.storage import MemoryStorage


# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(storage: Optional[MemoryStorage] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around `storage`. Without one, a fresh storage is created
    and, when SEED_DEMO_DATA is set, loaded with the demo listings.
    """
    settings = settings or default_settings

    if storage is None:
        storage = MemoryStorage()
        if settings.SEED_DEMO_DATA:
            seed_demo_data(storage)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 70)
        logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
        logger.info(f"Environment: {'Production' if not settings.DEBUG else 'Development'}")
        logger.info("=" * 70)
        yield
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.PROJECT_DESCRIPTION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.storage = storage
    app.state.settings = settings

    # ==================== MIDDLEWARE ====================

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(dict.fromkeys([settings.FRONTEND_URL, *settings.ALLOWED_ORIGINS])),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        max_age=3600,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all incoming requests"""
        # Skip logging for health checks
        if request.url.path == "/health":
            return await call_next(request)

        start_time = datetime.utcnow()
        client = request.client.host if request.client else "-"
        logger.info(f">> {request.method} {request.url.path} - {client}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration = (datetime.utcnow() - start_time).total_seconds()
            logger.error(f"[ERROR] {request.method} {request.url.path} - Error: {str(e)} ({duration:.2f}s)")
            raise

        duration = (datetime.utcnow() - start_time).total_seconds()
        logger.info(f"<< {request.method} {request.url.path} - {response.status_code} ({duration:.2f}s)")
        return response

    # ==================== ROUTERS ====================

    app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(users_router, prefix="/api/users", tags=["Users"])
    app.include_router(properties_router, prefix="/api/properties", tags=["Properties"])
    app.include_router(search_router, prefix="/api/search", tags=["Search"])
    app.include_router(bookings_router, prefix="/api/bookings", tags=["Bookings"])
    app.include_router(reviews_router, prefix="/api/reviews", tags=["Reviews"])
    app.include_router(messages_router, prefix="/api/messages", tags=["Messages"])
    app.include_router(favorites_router, prefix="/api/favorites", tags=["Favorites"])
    app.include_router(stats_router, prefix="/api/stats", tags=["Stats"])
    app.include_router(dashboard_router, prefix="/api/dashboard", tags=["Dashboard"])

    # ==================== ERROR HANDLERS ====================

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with detailed response"""
        logger.warning(f"Validation error on {request.url}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "success": False,
                "detail": "Validation error",
                "errors": jsonable_errors(exc),
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all unhandled exceptions"""
        logger.error(f"Unhandled exception: {exc}\n{traceback.format_exc()}")

        # Don't expose internal errors in production
        error_message = str(exc) if settings.DEBUG else "Internal server error"

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "detail": error_message,
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    # ==================== HEALTH & STATUS ENDPOINTS ====================

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint - API information"""
        return {
            "success": True,
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.VERSION,
            "docs": "/api/docs",
            "status": "operational",
            "environment": "production" if not settings.DEBUG else "development"
        }

    @app.get("/health", tags=["System"])
    async def health_check():
        """Health check endpoint for monitoring"""
        return {
            "success": True,
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
        }

    @app.get("/api/version", tags=["System"])
    async def get_version():
        """Get API version information"""
        return {
            "success": True,
            "api_version": settings.VERSION,
            "app_name": settings.PROJECT_NAME,
        }

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors without the raw exception objects pydantic puts in `ctx`"""
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(error)
    return errors


app = create_app()
