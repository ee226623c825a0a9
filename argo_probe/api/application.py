"""FastAPI application factory for the probe service.

This module defines API application composition used by the runtime.
"""

from fastapi import FastAPI

from argo_probe.config import AppSettings

from .routers import Clock, api_create_health_router, api_create_pipeline_router, api_utc_now


def create_api_application(settings: AppSettings, clock: Clock | None = None) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        clock: Optional time source for the pipeline check endpoint.

    Returns:
        FastAPI: Framework application instance with both probe routers.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title="Argo Probe", description=f"environment: {settings.environment_name}")
    application.include_router(api_create_health_router())
    application.include_router(api_create_pipeline_router(clock=clock or api_utc_now))
    return application
