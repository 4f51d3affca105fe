"""
FastAPI application exposing the current-page entity resolution.
"""

import logging

from fastapi import FastAPI

from page_context.api.routers import router as api_router
from page_context.config.settings import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level_number,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create FastAPI app
app = FastAPI(title="Page Context API")
app.include_router(api_router)
