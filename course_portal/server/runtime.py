"""Content server runtime: explicit port binding followed by uvicorn serving.

The listening socket is bound by this module before uvicorn starts, so an
occupied port surfaces as a typed `ServerBindError` instead of a log line
inside the event loop.
"""

from __future__ import annotations

import enum
import logging
import os
import socket

import uvicorn
from fastapi import FastAPI

from course_portal.errors import CoursePortalError

logger = logging.getLogger(__name__)

DEFAULT_BACKLOG = 2048


class ServerBindError(CoursePortalError, RuntimeError):
    """Raised when the configured host and port cannot be bound."""


class ServerState(str, enum.Enum):
    """Lifecycle states of the content server process."""

    STARTING = "starting"
    SERVING = "serving"


def server_bind_socket(host: str, port: int, backlog: int = DEFAULT_BACKLOG) -> socket.socket:
    """Bind and listen on a TCP socket.

    Address reuse is enabled on POSIX only, which permits rebinding over
    TIME_WAIT but never over an active listener.

    Args:
        host: Interface address.
        port: TCP port, `0` picks an ephemeral port.
        backlog: Listen backlog.

    Returns:
        socket.socket: Listening socket.

    Raises:
        ServerBindError: Raised when the address cannot be bound.
    """

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    listener = socket.socket(family, socket.SOCK_STREAM)
    try:
        if os.name == "posix":
            listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        listener.listen(backlog)
    except OSError as error:
        listener.close()
        raise ServerBindError(f"could not bind {host}:{port}: {error.strerror or error}") from error
    listener.set_inheritable(True)
    return listener


class ContentServer:
    """Serve one FastAPI application on one bound socket."""

    def __init__(self, application: FastAPI, host: str, port: int, log_level: str = "INFO"):
        """Initialize server runtime in the starting state.

        Args:
            application: Fully built application.
            host: Interface address to bind.
            port: TCP port to bind.
            log_level: Log level name forwarded to uvicorn.

        Raises:
            ValueError: Raised when application is None.
        """

        if application is None:
            raise ValueError("application must not be None")
        self._application = application
        self._host = host
        self._port = port
        self._log_level = log_level.lower()
        self._socket: socket.socket | None = None
        self._uvicorn_server: uvicorn.Server | None = None
        self.state = ServerState.STARTING

    def server_bind(self) -> socket.socket:
        """Bind the listening socket and move to the serving state.

        Returns:
            socket.socket: Listening socket.

        Raises:
            ServerBindError: Raised when the port is unavailable.
        """

        if self._socket is None:
            self._socket = server_bind_socket(self._host, self._port)
            self.state = ServerState.SERVING
            bound_host, bound_port = self._socket.getsockname()[:2]
            logger.info("Serving on http://%s:%s", bound_host, bound_port)
        return self._socket

    def server_run(self) -> None:
        """Bind the socket and block serving requests until the process stops.

        Raises:
            ServerBindError: Raised when the port is unavailable.
        """

        listener = self.server_bind()
        try:
            config = uvicorn.Config(self._application, log_level=self._log_level)
            self._uvicorn_server = uvicorn.Server(config)
            self._uvicorn_server.run(sockets=[listener])
        finally:
            listener.close()

    def server_stop(self) -> None:
        """Ask a running `server_run` loop to exit after in-flight requests."""

        if self._uvicorn_server is not None:
            self._uvicorn_server.should_exit = True
