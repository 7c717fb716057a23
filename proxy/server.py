"""
ProxyServer class for CLI control of the FastAPI application.
"""
import logging
import os
from typing import Optional

import uvicorn

from settings import PORT, LOG_LEVEL, BIND_ADDRESS
from .app import app

logger = logging.getLogger(__name__)


class ProxyServer:
    """Refresher server wrapper for CLI control"""

    def __init__(self, debug: bool = False, bind_address: Optional[str] = None, port: Optional[int] = None):
        self.server = None
        self.config = None
        self.debug = debug
        self.bind_address = bind_address or BIND_ADDRESS
        self.port = port or PORT

        if debug:
            self._setup_debug_logging()

    def _setup_debug_logging(self):
        """Setup debug logging to the console and refresher_debug.log"""
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        # Clear existing handlers to avoid duplicates
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        log_file = os.path.abspath('refresher_debug.log')
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        # httpx logs every request line at INFO; keep it at WARNING even in debug
        logging.getLogger("httpx").setLevel(logging.WARNING)

        logger.info(f"Debug logging enabled - appending to {log_file}")

    def run(self):
        """Run the server (blocking)"""
        logger.info(f"Starting Roblox Cookie Refresher on http://{self.bind_address}:{self.port}")
        logger.info("Available endpoints: POST /refresh, GET /health")
        self.config = uvicorn.Config(
            app,
            host=self.bind_address,
            port=self.port,
            log_level="debug" if self.debug else LOG_LEVEL,
            access_log=False
        )
        self.server = uvicorn.Server(self.config)
        self.server.run()

    def stop(self):
        """Stop the server"""
        if self.server:
            self.server.should_exit = True
