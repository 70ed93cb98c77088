"""Conversion of known failures into HTTP errors."""

from fastapi import HTTPException

from championdraft.models.failure import KnownError
from championdraft.services.catalog import CatalogProvider, CatalogSnapshot


def http_error(error: KnownError) -> HTTPException:
    """HTTPException carrying the error's status code and FailureDetail."""
    return HTTPException(
        status_code=error.status_code,
        detail=error.to_detail().model_dump(mode="json"),
    )


async def load_snapshot(provider: CatalogProvider) -> CatalogSnapshot:
    """Get the current catalog snapshot or fail with 503."""
    try:
        return await provider.get_snapshot()
    except KnownError as e:
        raise http_error(e) from e
