"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import logging

import uvicorn

from argo_probe.bootstrap import ListenerBindError, bootstrap_bind_listener, bootstrap_create_application
from argo_probe.config import config_load_settings
from argo_probe.observability import observability_configure_logging

logger = logging.getLogger("argo_probe.main")


def main() -> None:
    """Serve the probe endpoints until the process is terminated.

    Returns:
        None: This function does not return while the server runs.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when the listener cannot be bound.
    """

    settings = config_load_settings()
    observability_configure_logging(level=settings.log_level)
    application = bootstrap_create_application(settings=settings)

    try:
        listener = bootstrap_bind_listener(host=settings.host, port=settings.port)
    except ListenerBindError as error:
        logger.error("listener startup failed", exc_info=error)
        raise SystemExit(1) from error

    logger.info(
        "starting argo-probe environment=%s address=%s:%s",
        settings.environment_name,
        settings.host,
        settings.port,
    )
    server = uvicorn.Server(
        uvicorn.Config(
            application,
            host=settings.host,
            port=settings.port,
            log_config=None,
        )
    )
    server.run(sockets=[listener])


if __name__ == "__main__":
    main()
