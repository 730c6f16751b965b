"""
HTTP host for the deep-link protocol handler.
"""

import logging

from fastapi import FastAPI

from deeplink.api.routers import router as api_router

# Create FastAPI app
app = FastAPI(title="Emulator Deep Link API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
