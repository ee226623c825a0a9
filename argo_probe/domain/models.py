"""Typed response contracts for the probe endpoints.

Payloads are built fresh per request and carry no identity or lifecycle.
The `success` field is the string "true" rather than a JSON boolean.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Final

HEALTH_MESSAGE: Final[str] = "api is working"
PIPELINE_CHECK_MESSAGE: Final[str] = "our CI/CD pipeline is working"


@dataclass(frozen=True)
class HealthPayload:
    """Liveness probe response contract.

    Attributes:
        success: Success flag rendered as text.
        message: Human-readable status message.
    """

    success: str
    message: str

    def as_dict(self) -> dict[str, str]:
        """Render the payload as a JSON-ready mapping.

        Returns:
            dict[str, str]: Response body fields.
        """

        return {"success": self.success, "message": self.message}


@dataclass(frozen=True)
class PipelineCheckPayload:
    """Pipeline verification response contract.

    Attributes:
        success: Success flag rendered as text.
        message: Human-readable status message.
        timestamp: Server wall-clock time at request handling.
    """

    success: str
    message: str
    timestamp: datetime

    def as_dict(self) -> dict[str, str]:
        """Render the payload with an ISO-8601 timestamp.

        Returns:
            dict[str, str]: Response body fields.
        """

        return {
            "success": self.success,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }


def domain_build_health_payload() -> HealthPayload:
    """Build the fixed liveness payload.

    Returns:
        HealthPayload: Static health response.
    """

    return HealthPayload(success="true", message=HEALTH_MESSAGE)


def domain_build_pipeline_check_payload(checked_at: datetime) -> PipelineCheckPayload:
    """Build the pipeline verification payload for one request.

    Args:
        checked_at: Timezone-aware time the request was handled.

    Returns:
        PipelineCheckPayload: Pipeline check response stamped with `checked_at`.

    Raises:
        ValueError: Raised when checked_at is naive.
    """

    if checked_at.tzinfo is None:
        raise ValueError("checked_at must be timezone-aware")
    return PipelineCheckPayload(success="true", message=PIPELINE_CHECK_MESSAGE, timestamp=checked_at)
