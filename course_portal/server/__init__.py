"""Server runtime package for socket binding and uvicorn serving."""

from .runtime import ContentServer, ServerBindError, ServerState, server_bind_socket

__all__ = ["ContentServer", "ServerBindError", "ServerState", "server_bind_socket"]
