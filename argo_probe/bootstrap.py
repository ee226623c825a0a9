"""Application bootstrap wiring for startup validation and listener binding."""

import socket

from fastapi import FastAPI

from argo_probe.api import create_api_application
from argo_probe.config import AppSettings


class ListenerBindError(RuntimeError):
    """Raised when the HTTP listener socket cannot be bound."""


def bootstrap_create_application(settings: AppSettings) -> FastAPI:
    """Assemble the runtime application from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        ValueError: Raised when settings is None.
    """

    return create_api_application(settings=settings)


def bootstrap_bind_listener(host: str, port: int) -> socket.socket:
    """Bind the TCP listener socket handed to the HTTP server.

    Binding happens before the server starts so that a failure surfaces as a
    typed error the entrypoint can log before exiting.

    Args:
        host: Interface address to bind.
        port: TCP port to bind.

    Returns:
        socket.socket: Bound, not yet listening, stream socket.

    Raises:
        ListenerBindError: Raised when the address cannot be bound.
    """

    address_family = socket.AF_INET6 if ":" in host else socket.AF_INET
    listener = socket.socket(address_family, socket.SOCK_STREAM)
    try:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
    except OSError as error:
        listener.close()
        raise ListenerBindError(f"failed to bind listener on {host}:{port}: {error}") from error
    listener.set_inheritable(True)
    return listener
