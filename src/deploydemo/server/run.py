"""
Run the API server in-process with uvicorn.
"""

from __future__ import annotations

import socket
from typing import Optional

import uvicorn

from ..config import ServerSettings, get_server_settings
from ..logging_config import get_logger
from .app import create_app

logger = get_logger(__name__)


class PortUnavailableError(RuntimeError):
    """
    Raised when the listen address cannot be bound. Fatal for the process.
    """

    def __init__(self, host: str, port: int, reason: str) -> None:
        super().__init__(f"Cannot bind {host}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason


def ensure_port_available(host: str, port: int) -> None:
    """
    Try to bind host:port once so a taken port fails fast with a clear error.

    Raises:
        PortUnavailableError: if the bind fails.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    with socket.socket(family, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError as e:
            raise PortUnavailableError(host, port, e.strerror or str(e)) from e


def serve(
    settings: Optional[ServerSettings] = None,
    *,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> None:
    """
    Start uvicorn and block until it stops.

    Raises:
        PortUnavailableError: if the listen port is taken.
    """
    settings = settings or get_server_settings()
    host = host or settings.host
    port = port or settings.port

    ensure_port_available(host, port)

    app = create_app(settings)
    logger.info("Backend server running on http://%s:%d", host, port)
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
        server_header=False,
    )
