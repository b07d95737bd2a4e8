"""
Waktunya Puasa FastAPI Application

Main entry point for the Waktunya Puasa check-in API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Common library imports
from common.database import MongoDB, set_main_database
from common.utils import success_response

# App-specific imports
from puasa.config import settings
from puasa.checkin.models import FastCheckinDocument
from puasa.ramadan.models import RamadanDayDocument

# Import routers
from puasa.routers import (
    checkin_router,
    progress_router,
    ramadan_router,
)

# Import service initialization
from puasa.dependencies import build_checkin_store, init_all_services


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("waktunya_puasa")


# =============================================================================
# Database Instance
# =============================================================================
# Only connected when STORAGE_BACKEND=mongodb
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
    logger.info("Starting Waktunya Puasa API...")
    settings.validate_required()

    db = None
    if settings.uses_mongodb():
        await main_db.connect(
            uri=settings.MONGODB_URI,
            database_name=settings.MONGODB_DATABASE,
            document_models=[FastCheckinDocument, RamadanDayDocument],
        )
        set_main_database(main_db)
        db = main_db.db

    store = build_checkin_store(settings, db=db)
    init_all_services(settings, store)
    logger.info("Waktunya Puasa API started successfully!")

    yield

    # Shutdown
    logger.info("Shutting down Waktunya Puasa API...")
    if main_db.is_connected:
        await main_db.disconnect()
    logger.info("Waktunya Puasa API shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Waktunya Puasa API",
    description="Ramadan fasting check-ins and progress",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Include Routers (all under /api/v1 prefix)
# =============================================================================
API_PREFIX = "/api/v1"

app.include_router(checkin_router, prefix=API_PREFIX, tags=["Check-in"])
app.include_router(progress_router, prefix=API_PREFIX, tags=["Progress"])
app.include_router(ramadan_router, prefix=API_PREFIX, tags=["Ramadan"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and the active storage backend.
    """
    return success_response({
        "status": "ok",
        "version": "1.0.0",
        "storage": settings.STORAGE_BACKEND,
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
