"""CLI package for the Roblox Cookie Refresher

Runs the HTTP server or refreshes a single cookie from the command line.
"""

from cli.main import main

__all__ = [
    "main",
]
