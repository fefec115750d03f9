"""
VIN Check FastAPI application entry point.
"""

import logging

from fastapi import FastAPI

from vincheck.api.routes import vin
from vincheck.config import settings

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    debug=settings.debug,
)

# Include routers
app.include_router(vin.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "VIN Check API",
        "version": settings.api_version,
        "endpoints": {
            "validate": "/vin/validate?vin=...",
            "validate_batch": "/vin/validate/batch",
            "decode": "/vin/decode?vin=...",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
