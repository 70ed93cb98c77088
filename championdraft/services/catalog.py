"""
Champion catalog provider.

Fetches the latest patch version and that patch's champion data from
Data Dragon, with in-memory caching:
- latest version: cached for settings.version_cache_seconds (1 hour)
- champion data per version: cached for settings.catalog_cache_seconds (2 weeks)

The draft core only needs a stable read-only snapshot for one call;
this provider supplies it.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import httpx

from championdraft.config import settings
from championdraft.models.champion import Champion, ChampionCatalog
from championdraft.models.failure import CatalogUnavailableError
from championdraft.parsers.ddragon import parse_champion_payload, parse_versions

logger = logging.getLogger(__name__)

USER_AGENT = "ChampionDraft/1.0"


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """A catalog together with the patch version it came from."""

    version: str
    catalog: ChampionCatalog


@dataclass
class _CacheEntry:
    value: Any
    expires_at: float


def image_url(version: str, champion: Champion, base_url: str | None = None) -> str:
    """Square portrait URL for a champion at a given patch."""
    base = (base_url or settings.ddragon_url).rstrip("/")
    return f"{base}/cdn/{version}/img/champion/{champion.image_ref}"


class CatalogProvider:
    """
    Cached access to Data Dragon champion data.

    Args:
        base_url: Data Dragon root URL
        locale: Data locale (e.g., "en_US")
        version_ttl: Seconds to cache the latest version
        catalog_ttl: Seconds to cache each version's catalog
        clock: Monotonic time source (injectable for tests)
    """

    def __init__(
        self,
        base_url: str | None = None,
        locale: str | None = None,
        version_ttl: float | None = None,
        catalog_ttl: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.base_url = (base_url or settings.ddragon_url).rstrip("/")
        self.locale = locale or settings.ddragon_locale
        self.version_ttl = settings.version_cache_seconds if version_ttl is None else version_ttl
        self.catalog_ttl = settings.catalog_cache_seconds if catalog_ttl is None else catalog_ttl
        self._clock = clock
        self._version: _CacheEntry | None = None
        self._catalogs: dict[str, _CacheEntry] = {}

    def clear(self) -> None:
        """Drop all cached data."""
        self._version = None
        self._catalogs.clear()

    async def _get_json(self, client: httpx.AsyncClient, url: str) -> Any:
        try:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise CatalogUnavailableError(
                f"HTTP {e.response.status_code} from {url}"
            ) from e
        except httpx.RequestError as e:
            raise CatalogUnavailableError(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise CatalogUnavailableError(f"Invalid JSON from {url}") from e

    async def _fetch_latest_version(self, client: httpx.AsyncClient) -> str:
        now = self._clock()
        if self._version is not None and self._version.expires_at > now:
            return str(self._version.value)

        payload = await self._get_json(client, f"{self.base_url}/api/versions.json")
        try:
            version = parse_versions(payload)
        except ValueError as e:
            raise CatalogUnavailableError(str(e)) from e

        self._version = _CacheEntry(value=version, expires_at=now + self.version_ttl)
        logger.info("Latest Data Dragon version: %s", version)
        return version

    async def _fetch_catalog(self, client: httpx.AsyncClient, version: str) -> ChampionCatalog:
        now = self._clock()
        cached = self._catalogs.get(version)
        if cached is not None and cached.expires_at > now:
            catalog: ChampionCatalog = cached.value
            return catalog

        url = f"{self.base_url}/cdn/{version}/data/{self.locale}/champion.json"
        payload = await self._get_json(client, url)
        try:
            catalog = parse_champion_payload(payload)
        except ValueError as e:
            raise CatalogUnavailableError(str(e)) from e

        for stale in [v for v, entry in self._catalogs.items() if entry.expires_at <= now]:
            del self._catalogs[stale]
        self._catalogs[version] = _CacheEntry(value=catalog, expires_at=now + self.catalog_ttl)
        logger.info("Loaded %d champions for patch %s", len(catalog), version)
        return catalog

    async def get_snapshot(self) -> CatalogSnapshot:
        """
        Get the current catalog snapshot.

        Raises:
            CatalogUnavailableError: If Data Dragon cannot be reached or
                returns unusable data
        """
        async with httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            timeout=settings.request_timeout,
        ) as client:
            version = await self._fetch_latest_version(client)
            catalog = await self._fetch_catalog(client, version)

        return CatalogSnapshot(version=version, catalog=catalog)


@lru_cache(maxsize=1)
def get_catalog_provider() -> CatalogProvider:
    """
    Get the process-wide catalog provider.

    Usage in FastAPI:
        @app.get("/items")
        async def get_items(provider: CatalogProvider = Depends(get_catalog_provider)):
            ...
    """
    return CatalogProvider()
