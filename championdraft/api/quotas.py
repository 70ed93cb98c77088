"""
Quota API endpoints.

Scales class tag counts to a pool size, or applies a manual override.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from championdraft.api.errors import http_error, load_snapshot
from championdraft.models.failure import InputError
from championdraft.services.apportionment import apportion, count_categories, override_quota
from championdraft.services.catalog import CatalogProvider, get_catalog_provider

router = APIRouter(prefix="/quotas", tags=["quotas"])


class QuotaRequest(BaseModel):
    """Request model for scaling quotas to a pool size."""

    pool_size: int = Field(..., ge=0, description="Total number of champions to draft")


class QuotaOverrideRequest(BaseModel):
    """Request model for setting one category's quota by hand."""

    quotas: dict[str, int] = Field(
        ...,
        description="Current quotas",
        examples=[{"Fighter": 4, "Mage": 3, "Tank": 2}],
    )
    category: str
    count: int


class QuotaResponse(BaseModel):
    """Response model for quotas."""

    pool_size: int
    quotas: dict[str, int] = Field(default_factory=dict)


@router.post("", response_model=QuotaResponse)
async def scale_quotas(
    request: QuotaRequest,
    provider: Annotated[CatalogProvider, Depends(get_catalog_provider)],
) -> QuotaResponse:
    """
    Scale the catalog's class distribution to a pool size.

    Quotas always add up to exactly pool_size.
    """
    snapshot = await load_snapshot(provider)
    try:
        quotas = apportion(count_categories(snapshot.catalog), request.pool_size)
    except InputError as e:
        raise http_error(e) from e
    return QuotaResponse(pool_size=request.pool_size, quotas=quotas)


@router.post("/override", response_model=QuotaResponse)
async def override_category_quota(request: QuotaOverrideRequest) -> QuotaResponse:
    """
    Set one category's quota.

    The pool size becomes the sum of all quotas.
    """
    try:
        pool_size, quotas = override_quota(request.quotas, request.category, request.count)
    except InputError as e:
        raise http_error(e) from e
    return QuotaResponse(pool_size=pool_size, quotas=quotas)
