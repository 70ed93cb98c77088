"""
Initial draft state for a page load.

Combines the catalog's natural category counts, an optional shared draft
token, and apportionment into the values a client starts from.
"""

import logging
from dataclasses import dataclass, field

from championdraft.models.champion import CategoryCounts, Champion, ChampionCatalog
from championdraft.models.failure import DecodeError
from championdraft.services.apportionment import count_categories, initial_quotas
from championdraft.services.draft_codec import decode_draft

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DraftState:
    """
    Starting point for drafting.

    Attributes:
        natural_counts: Champions per class tag in the catalog
        pool_size: Total pool size the quotas add up to
        quotas: Per-category quotas scaled to pool_size
        drafted: Champions from a shared token (None where a key did not
            resolve); empty without a token
        label: Draft name from the token, or ""
        decode_failed: True if a token was given but could not be decoded
    """

    natural_counts: CategoryCounts
    pool_size: int
    quotas: CategoryCounts
    drafted: tuple[Champion | None, ...] = field(default_factory=tuple)
    label: str = ""
    decode_failed: bool = False


def load_draft_state(catalog: ChampionCatalog, token: str | None = None) -> DraftState:
    """
    Build the initial draft state, optionally from a shared token.

    With a token, the pool size is the number of slots in the token
    (unresolved slots included) and quotas are scaled to it. A malformed
    token is logged and ignored.

    Raises:
        InputError: If the catalog has no tagged champions
    """
    natural = count_categories(catalog)

    if token:
        try:
            decoded = decode_draft(token, catalog)
        except DecodeError as e:
            logger.warning("Ignoring malformed draft token: %s", e.reason)
        else:
            if decoded.missing_count:
                logger.info(
                    "%d drafted champions not found in current catalog",
                    decoded.missing_count,
                )
            pool_size, quotas = initial_quotas(natural, len(decoded.items))
            return DraftState(
                natural_counts=natural,
                pool_size=pool_size,
                quotas=quotas,
                drafted=decoded.items,
                label=decoded.label,
            )

        pool_size, quotas = initial_quotas(natural)
        return DraftState(
            natural_counts=natural,
            pool_size=pool_size,
            quotas=quotas,
            decode_failed=True,
        )

    pool_size, quotas = initial_quotas(natural)
    return DraftState(natural_counts=natural, pool_size=pool_size, quotas=quotas)
