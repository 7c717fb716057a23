"""
Endpoint handlers for the refresher server.
"""
from .health import router as health_router
from .refresh import router as refresh_router
from .frontend import router as frontend_router

__all__ = [
    'health_router',
    'refresh_router',
    'frontend_router',
]
