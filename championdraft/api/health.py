"""
Health check endpoints.

Provides liveness and readiness probes with catalog availability checks.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from championdraft.models.failure import CatalogUnavailableError
from championdraft.services.catalog import CatalogProvider, get_catalog_provider

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    catalog: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    provider: Annotated[CatalogProvider, Depends(get_catalog_provider)],
) -> HealthResponse:
    """
    Readiness probe.

    Returns ready if the service can handle requests.
    Checks that champion data can be loaded. Returns 503 otherwise.
    """
    try:
        snapshot = await provider.get_snapshot()
    except CatalogUnavailableError:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", catalog="unavailable")
    return HealthResponse(status="ready", catalog=snapshot.version)
