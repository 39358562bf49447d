"""
Gym Super-Admin FastAPI Application

Main entry point for the super-admin API.
Uses the generic common/ library for infrastructure and app/ for business logic.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

# Common library imports
from common.database import MongoDB
from common.utils import success_response, register_exception_handlers

# App-specific imports
from app.config import settings
from app.dependencies import init_settings_services
from app.routers import settings_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Database Instance
# =============================================================================
main_db = MongoDB()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown tasks like database connections
    and service initialization.
    """
    # Startup
    logger.info(f"Starting {settings.APP_NAME}...")
    settings.validate_required()

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
    )

    init_settings_services(
        app,
        db=main_db.db,
        collection_name=settings.SETTINGS_COLLECTION,
    )
    logger.info(f"{settings.APP_NAME} started successfully!")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")
    await main_db.disconnect()
    logger.info(f"{settings.APP_NAME} shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title=settings.APP_NAME,
    description="Global pricing configuration for the gym platform",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

register_exception_handlers(app)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# =============================================================================
# Include Routers
# =============================================================================
API_PREFIX = "/api"

app.include_router(settings_router, prefix=API_PREFIX, tags=["Settings"])


# =============================================================================
# Status Endpoints
# =============================================================================
@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root():
    return "API is running..."


@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and database connection.
    """
    return success_response({
        "status": "ok",
        "version": settings.APP_VERSION,
        "database": main_db.is_connected,
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
