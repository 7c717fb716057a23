"""
FastAPI application initialization and configuration.
"""
import logging
from fastapi import FastAPI

from .middleware import log_requests_middleware
from .endpoints import (
    health_router,
    refresh_router,
    frontend_router,
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(title="Roblox Cookie Refresher", version="1.0.0")

# Add middleware
app.middleware("http")(log_requests_middleware)

# Register routers; the frontend catch-all must stay last
app.include_router(health_router)
app.include_router(refresh_router)
app.include_router(frontend_router)

logger.debug("FastAPI application initialized with all routers and middleware")
