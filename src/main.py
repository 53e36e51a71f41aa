"""
HTTP application exposing archive entry scanning.
"""

import logging

from fastapi import FastAPI

from src.api.routers import router as api_router
from src.config.settings import configure_logging

# Create FastAPI app
app = FastAPI(title="Archive Entry Scanner API")
app.include_router(api_router)

# Configure logging
configure_logging()

# Get logger for this module
logger = logging.getLogger(__name__)
