"""
Catalog API endpoints.

Exposes the current patch and its class tag distribution.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from championdraft.api.errors import load_snapshot
from championdraft.services.apportionment import count_categories
from championdraft.services.catalog import CatalogProvider, get_catalog_provider

router = APIRouter(prefix="/catalog", tags=["catalog"])


class CatalogResponse(BaseModel):
    """Response model for catalog summary."""

    version: str
    champion_count: int
    categories: dict[str, int] = Field(
        default_factory=dict,
        description="Number of champions carrying each class tag",
    )


@router.get("", response_model=CatalogResponse)
async def get_catalog(
    provider: Annotated[CatalogProvider, Depends(get_catalog_provider)],
) -> CatalogResponse:
    """Get the current patch version and natural category counts."""
    snapshot = await load_snapshot(provider)
    return CatalogResponse(
        version=snapshot.version,
        champion_count=len(snapshot.catalog),
        categories=count_categories(snapshot.catalog),
    )
