"""FastAPI application factory."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import get_settings, setup_logger, get_logger
from infrastructure.database import init_db, close_db
from presentation.api.v1.endpoints import health, patients
from presentation.handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    
    # Setup logging
    setup_logger(
        level=settings.log_level,
        log_format=settings.log_format,
    )
    
    # Initialize database
    get_logger(__name__).info(f"Starting {settings.app_name} ({settings.environment})")
    await init_db()
    
    yield
    
    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Build the FastAPI application from current settings."""
    settings = get_settings()
    
    # Interactive docs are only published outside production-like environments
    docs_enabled = settings.is_development
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(app)
    
    # Include routers
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(patients.router, prefix=settings.api_prefix)
    
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }
    
    return app
