"""Domain models used across application layer boundaries."""

from .models import (
    HealthPayload,
    PipelineCheckPayload,
    domain_build_health_payload,
    domain_build_pipeline_check_payload,
)

__all__ = [
    "HealthPayload",
    "PipelineCheckPayload",
    "domain_build_health_payload",
    "domain_build_pipeline_check_payload",
]
