# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_error_handlers
from .api.v1 import user_router
from .core.config import get_settings
from .core.logging import configure_logging
from .di.container import get_container
from .infrastructure.db.mongo_connection import MongoStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Connects the MongoDB store held by the DI container on startup and
    closes it on shutdown.
    """
    store = get_container().get(MongoStore)
    await store.connect()
    logger.info("Application startup complete")
    
    yield
    
    await store.disconnect()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error handlers and API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    configure_logging(settings.log_level)
    
    # Create FastAPI app
    application = FastAPI(
        title="User Management API",
        version="1.0.0",
        description="API documentation for the User Management API",
        docs_url="/api-docs",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(application)
    
    # Register API routers
    application.include_router(user_router, prefix="/api/users")
    
    @application.get("/health", include_in_schema=False)
    async def health() -> dict:
        return {"status": "ok"}
    
    return application


# Create application instance
app = create_application()
