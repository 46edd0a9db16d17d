"""FastAPI application entry point."""

import os
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Must run before anything reads the environment.
load_dotenv()

from api.dependencies import get_settings
from api.errors import register_exception_handlers
from api.routes import appointments, auth, health, profile, providers
from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.indexes import ensure_all_indexes
from utils.logging import setup_structured_logging

setup_structured_logging(os.getenv("LOG_LEVEL", "INFO").upper())

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = Path(__file__).parent.parent.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "GoBarber API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: validate settings and ensure MongoDB indexes."""
    settings = get_settings()

    client = get_mongodb_client(settings.mongo_url)
    if client:
        if ensure_all_indexes(client[settings.database_name]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Appointment booking between customers and service providers",
    version=VERSION,
    lifespan=lifespan,
)

# Browsers reject credentials with a wildcard origin.
cors_origins_env = os.getenv("CORS_ORIGINS", "*")
if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
    logger.warning(
        "CORS configured with wildcard origin ('*'). "
        "For production, set CORS_ORIGINS to specific domains (e.g., 'https://app.example.com')"
    )
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(appointments.router)
app.include_router(providers.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port, access_log=False)
