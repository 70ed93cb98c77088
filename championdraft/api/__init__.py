from championdraft.api.catalog import router as catalog_router
from championdraft.api.drafts import router as drafts_router
from championdraft.api.health import router as health_router
from championdraft.api.quotas import router as quotas_router

__all__ = [
    "catalog_router",
    "drafts_router",
    "health_router",
    "quotas_router",
]
