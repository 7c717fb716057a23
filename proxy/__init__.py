"""
Roblox Cookie Refresher - HTTP server package.

Exposes POST /refresh, health checks and the static frontend.
"""
from .server import ProxyServer
from .app import app

__version__ = "1.0.0"

__all__ = [
    'ProxyServer',
    'app',
]
