"""
SkillUp FastAPI Application

Main entry point for the SkillUp API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Common library imports
from common.database import MongoDB
from common.utils import success_response

# App-specific imports
from skillup.config import settings

# Import routers
from skillup.routers import (
    auth_router,
    roadmap_router,
    progress_router,
    profile_router,
)

# Import service initialization
from skillup.dependencies import init_all_services

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


# =============================================================================
# Database Instance
# =============================================================================
# One document per user; roadmap progress lives in the users collection
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
    print("Starting SkillUp API...")

    try:
        settings.validate_required()
    except ValueError as e:
        logger.warning(str(e))

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
    )
    print(f"Connected to main database: {settings.MONGODB_DATABASE}")

    init_all_services(
        db=main_db.db,
        firebase_credentials_path=settings.FIREBASE_CREDENTIALS_PATH,
    )
    print("All services initialized successfully!")

    print("SkillUp API started successfully!")

    yield

    # Shutdown
    print("Shutting down SkillUp API...")
    await main_db.disconnect()
    print("SkillUp API shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="SkillUp API",
    description="AI-generated learning roadmaps with saved progress",
    version=API_VERSION,
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
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(auth_router, prefix=API_PREFIX, tags=["Authentication"])
app.include_router(roadmap_router, prefix=API_PREFIX, tags=["Roadmap"])
app.include_router(progress_router, prefix=API_PREFIX, tags=["Progress"])
app.include_router(profile_router, prefix=API_PREFIX, tags=["Profile"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
@app.get(f"{API_PREFIX}/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and database connection.
    """
    return success_response({
        "status": "ok",
        "version": API_VERSION,
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
