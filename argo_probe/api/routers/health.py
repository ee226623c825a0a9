"""Health endpoint router for liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from argo_probe.domain import domain_build_health_payload


def api_create_health_router() -> APIRouter:
    """Create the liveness router.

    Returns:
        APIRouter: Router exposing `/health` endpoint.
    """

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return the static liveness payload.

        Returns:
            JSONResponse: Health payload with HTTP 200.
        """

        payload = domain_build_health_payload()
        return JSONResponse(content=payload.as_dict(), status_code=status.HTTP_200_OK)

    return router
