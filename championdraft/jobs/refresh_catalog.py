"""
Refresh the champion catalog.

Fetches the latest patch from Data Dragon and reports its class tag
distribution and the default quotas. Run it to check Data Dragon is
reachable and the payload still parses.
"""

import asyncio
import logging

from championdraft.services.apportionment import count_categories, initial_quotas
from championdraft.services.catalog import CatalogSnapshot, get_catalog_provider

logger = logging.getLogger(__name__)


async def run_refresh() -> CatalogSnapshot:
    """Fetch the current catalog and log its category summary."""
    logger.info("Fetching champion catalog...")

    provider = get_catalog_provider()
    provider.clear()
    try:
        snapshot = await provider.get_snapshot()
    except Exception as e:
        logger.error("Failed to fetch champion catalog: %s", e)
        raise

    counts = count_categories(snapshot.catalog)
    pool_size, quotas = initial_quotas(counts)

    logger.info("Patch %s: %d champions", snapshot.version, len(snapshot.catalog))
    for category, count in counts.items():
        logger.info("  %-10s %3d champions, default quota %d", category, count, quotas[category])
    logger.info("Default pool size: %d", pool_size)

    return snapshot


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_refresh())


if __name__ == "__main__":
    main()
