"""
Category Apportionment: scale class tag counts to a pool size.

Turns the catalog's natural class distribution into integer per-category
quotas that sum exactly to the requested pool size (largest remainder,
a.k.a. Hamilton apportionment).

INVARIANTS:
- sum(apportion(counts, n).values()) == n
- Every quota is within 1 of its exact proportional share
- Inputs are never mutated; every call returns a fresh mapping

Rounding rule: preliminary quotas round half UP. Shares are exact
fractions, so a share of exactly x.5 always rounds to x + 1.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from championdraft.config import RECOGNIZED_CATEGORIES, settings
from championdraft.models.champion import CategoryCounts, ChampionCatalog
from championdraft.models.failure import InputError

logger = logging.getLogger(__name__)

_HALF = Fraction(1, 2)


class Rounding(str, Enum):
    """Direction a preliminary quota moved relative to its exact share."""

    DOWN = "down"
    UP = "up"
    EXACT = "exact"


@dataclass(frozen=True, slots=True)
class _Share:
    """Per-category rounding bookkeeping."""

    category: str
    exact: Fraction
    quota: int
    rounding: Rounding

    @property
    def remainder(self) -> Fraction:
        """
        Signed rounding remainder.

        Positive for categories rounded down (they deserve a unit first),
        zero or negative for categories rounded up (they give a unit back first).
        """
        if self.rounding is Rounding.DOWN:
            return self.exact - math.floor(self.exact)
        return self.exact - math.ceil(self.exact)


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + _HALF)


def _make_share(category: str, exact: Fraction) -> _Share:
    quota = _round_half_up(exact)
    if quota < exact:
        rounding = Rounding.DOWN
    elif quota > exact:
        rounding = Rounding.UP
    else:
        rounding = Rounding.EXACT
    return _Share(category=category, exact=exact, quota=quota, rounding=rounding)


def count_categories(catalog: ChampionCatalog) -> CategoryCounts:
    """
    Count how many champions carry each class tag.

    Recognized tags come first in their standard order; any other tag
    follows in the order it is first seen in the catalog. Tags with no
    champions are omitted.
    """
    seen: dict[str, int] = {}
    for champion in catalog:
        for category in sorted(champion.categories):
            seen[category] = seen.get(category, 0) + 1

    counts: CategoryCounts = {c: seen[c] for c in RECOGNIZED_CATEGORIES if c in seen}
    for category, count in seen.items():
        if category not in counts:
            counts[category] = count
    return counts


def apportion(natural_counts: CategoryCounts, total_pool_size: int) -> CategoryCounts:
    """
    Scale natural category counts to integer quotas summing to a pool size.

    Args:
        natural_counts: Category -> natural frequency (insertion order is
            the tie-break order)
        total_pool_size: Desired pool size, >= 0

    Returns:
        New mapping with the same keys and order, values summing exactly
        to total_pool_size

    Raises:
        InputError: If the pool size or any count is negative, or if all
            counts are zero (shares are undefined)
    """
    if total_pool_size < 0:
        raise InputError(
            "Pool size cannot be negative.",
            detail=f"total_pool_size={total_pool_size}",
        )

    negative = [c for c, n in natural_counts.items() if n < 0]
    if negative:
        raise InputError(
            "Category counts cannot be negative.",
            detail=f"negative counts for: {', '.join(negative)}",
        )

    total_natural = sum(natural_counts.values())
    if total_natural == 0:
        raise InputError(
            "No champions have a class tag to scale from.",
            detail="sum of natural category counts is 0",
        )

    shares = [
        _make_share(category, Fraction(count * total_pool_size, total_natural))
        for category, count in natural_counts.items()
    ]

    quotas: CategoryCounts = {s.category: s.quota for s in shares}
    residual = total_pool_size - sum(quotas.values())

    if residual == 0:
        return quotas

    # sorted() is stable, so equal remainders keep insertion order
    if residual > 0:
        ordered = sorted(shares, key=lambda s: s.remainder, reverse=True)
    else:
        ordered = sorted(shares, key=lambda s: s.remainder)

    step = 1 if residual > 0 else -1
    for share in ordered[: abs(residual)]:
        quotas[share.category] += step

    logger.debug(
        "quotas_adjusted",
        extra={
            "pool_size": total_pool_size,
            "residual": residual,
            "adjusted": [s.category for s in ordered[: abs(residual)]],
        },
    )

    return quotas


def initial_quotas(
    natural_counts: CategoryCounts,
    drafted_count: int | None = None,
) -> tuple[int, CategoryCounts]:
    """
    Quotas for a freshly loaded draft.

    The pool size is the size of a previously drafted set when there is
    one, otherwise the configured default.

    Returns:
        (pool_size, quotas)
    """
    pool_size = drafted_count if drafted_count else settings.default_pool_size
    return pool_size, apportion(natural_counts, pool_size)


def override_quota(
    quotas: CategoryCounts,
    category: str,
    count: int,
) -> tuple[int, CategoryCounts]:
    """
    Set one category's quota by hand.

    Other categories keep their quotas; the pool size becomes the new sum.

    Returns:
        (pool_size, quotas) where quotas is a new mapping

    Raises:
        InputError: If count is negative
    """
    if count < 0:
        raise InputError(
            f"Quota for {category} cannot be negative.",
            detail=f"{category}={count}",
        )

    updated = dict(quotas)
    updated[category] = count
    return sum(updated.values()), updated
