# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from . import __version__
from .api.v1 import device_router
from .core.config import get_settings
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    The MongoDB client is opened lazily on first use and closed here on shutdown.
    """
    settings = get_settings()
    logger.info(f"Device Manager starting (store backend: {settings.device_store_backend})")
    
    yield
    
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    
    # Create FastAPI app
    application = FastAPI(
        title="Device Manager API",
        version=__version__,
        description="Clean Architecture device inventory service",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Register API routers
    application.include_router(device_router, prefix="/api/v1/devices")
    
    @application.get("/")
    async def root():
        return {"service": "device-manager", "version": __version__, "status": "running"}
    
    @application.get("/health")
    async def health():
        return {"status": "ok"}
    
    return application


# Create application instance
app = create_application()
