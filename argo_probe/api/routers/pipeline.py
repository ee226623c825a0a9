"""Pipeline verification router used by CI/CD redeploy checks."""

from collections.abc import Callable
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from argo_probe.domain import domain_build_pipeline_check_payload

Clock = Callable[[], datetime]


def api_utc_now() -> datetime:
    """Return the current wall-clock time in UTC."""

    return datetime.now(timezone.utc)


def api_create_pipeline_router(clock: Clock = api_utc_now) -> APIRouter:
    """Create the pipeline verification router.

    Args:
        clock: Callable returning the timezone-aware current time.

    Returns:
        APIRouter: Router exposing `/argo` endpoint.

    Raises:
        ValueError: Raised when clock is None.
    """

    if clock is None:
        raise ValueError("clock must not be None")

    router = APIRouter(tags=["pipeline"])

    @router.get("/argo")
    def api_pipeline_status() -> JSONResponse:
        """Return the pipeline check payload stamped with the handling time.

        Returns:
            JSONResponse: Pipeline check payload with HTTP 200.
        """

        payload = domain_build_pipeline_check_payload(checked_at=clock())
        return JSONResponse(content=payload.as_dict(), status_code=status.HTTP_200_OK)

    return router
