from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from championdraft.api import (
    catalog_router,
    drafts_router,
    health_router,
    quotas_router,
)
from championdraft.config import settings

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("championdraft"),
    debug=settings.debug,
)

app.include_router(catalog_router)
app.include_router(drafts_router)
app.include_router(health_router)
app.include_router(quotas_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
