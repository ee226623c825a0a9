"""API router package for endpoint composition."""

from .health import api_create_health_router
from .pipeline import Clock, api_create_pipeline_router, api_utc_now

__all__ = ["Clock", "api_create_health_router", "api_create_pipeline_router", "api_utc_now"]
