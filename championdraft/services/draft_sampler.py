"""
Draft Sampler: random champion pools against category quotas.

INVARIANTS:
- Sampling is without replacement: no champion key appears twice
- A champion drafted for one category is not eligible for another,
  even when it carries both tags
- len(result.items) == sum(quotas) - sum(w.missing for w in result.warnings)
- Shortfalls are reported as warnings, never raised
- Output is sorted by name

Randomness comes from an injectable RandomIndex so tests can seed it.
"""

import logging
import random
import unicodedata
from collections.abc import Callable, Sequence

from championdraft.models.champion import CategoryCounts, Champion, ChampionCatalog
from championdraft.models.draft import DraftResult, ShortfallWarning
from championdraft.models.failure import InputError

logger = logging.getLogger(__name__)

# Uniform random index in [0, n)
RandomIndex = Callable[[int], int]


def name_sort_key(name: str) -> tuple[str, str]:
    """
    Locale-aware ordering key for champion names.

    Accents and case are ignored at the first level ("Kog'Maw" sorts with
    "kog'maw", "Nunu" before "nunu" only as a final tie-break).
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name


def _sorted_by_name(champions: Sequence[Champion]) -> tuple[Champion, ...]:
    return tuple(sorted(champions, key=lambda c: name_sort_key(c.name)))


def _random_index(size: int, rand_index: RandomIndex) -> int:
    index = rand_index(size)
    if not 0 <= index < size:
        raise ValueError(f"Random index {index} out of range for {size} candidates")
    return index


def draft(
    catalog: ChampionCatalog,
    quotas: CategoryCounts,
    rand_index: RandomIndex | None = None,
) -> DraftResult:
    """
    Draft champions category by category, honoring each quota.

    Categories are processed in the order of `quotas`. Eligible candidates
    are recomputed before every pick so a champion drafted under one tag
    is never drafted again under another.

    Args:
        catalog: Champions to draft from
        quotas: Category -> number of champions to draft
        rand_index: Uniform index generator (defaults to random.randrange)

    Returns:
        DraftResult with champions sorted by name and one ShortfallWarning
        per category that ran out of candidates

    Raises:
        InputError: If any quota is negative
    """
    negative = [c for c, n in quotas.items() if n < 0]
    if negative:
        raise InputError(
            "Category quotas cannot be negative.",
            detail=f"negative quotas for: {', '.join(negative)}",
        )

    rand_index = rand_index or random.randrange

    drafted: list[Champion] = []
    drafted_keys: set[str] = set()
    warnings: list[ShortfallWarning] = []

    for category, quota in quotas.items():
        tagged = catalog.by_category(category)
        picked = 0

        while picked < quota:
            candidates = [c for c in tagged if c.key not in drafted_keys]
            if not candidates:
                break
            champion = candidates[_random_index(len(candidates), rand_index)]
            drafted_keys.add(champion.key)
            drafted.append(champion)
            picked += 1

        if picked < quota:
            warning = ShortfallWarning(category=category, requested=quota, obtained=picked)
            warnings.append(warning)
            logger.warning(
                "Not enough %s champions: requested %d, drafted %d",
                category,
                quota,
                picked,
            )

    logger.info(
        "draft_completed",
        extra={
            "requested": sum(quotas.values()),
            "drafted": len(drafted),
            "shortfalls": len(warnings),
        },
    )

    return DraftResult(items=_sorted_by_name(drafted), warnings=tuple(warnings))


def draft_unconstrained(
    catalog: ChampionCatalog,
    total: int,
    rand_index: RandomIndex | None = None,
) -> DraftResult:
    """
    Draft champions ignoring class tags.

    Draws min(total, len(catalog)) champions uniformly without replacement.
    Never produces warnings.

    Raises:
        InputError: If total is negative
    """
    if total < 0:
        raise InputError(
            "Pool size cannot be negative.",
            detail=f"total={total}",
        )

    rand_index = rand_index or random.randrange

    available = list(catalog)
    drafted: list[Champion] = []
    for _ in range(min(total, len(available))):
        index = _random_index(len(available), rand_index)
        drafted.append(available.pop(index))

    logger.info(
        "draft_completed",
        extra={"requested": total, "drafted": len(drafted), "shortfalls": 0},
    )

    return DraftResult(items=_sorted_by_name(drafted))
