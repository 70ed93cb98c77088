"""
Draft result models.

INVARIANTS:
- A DraftResult never contains the same champion key twice
- DraftResult.items is sorted by name
- DecodedDraft keeps one slot per encoded key, None where unresolved
"""

import uuid
from dataclasses import dataclass, field

from championdraft.models.champion import Champion


def _new_warning_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class ShortfallWarning:
    """
    A category ran out of eligible champions before its quota was met.

    This is a reported condition, not an error. Warnings are created per
    draft call and never persisted.
    """

    category: str
    requested: int
    obtained: int
    id: str = field(default_factory=_new_warning_id)

    @property
    def missing(self) -> int:
        """How many champions the category fell short by."""
        return self.requested - self.obtained

    def message(self) -> str:
        return (
            f"Only {self.obtained} of {self.requested} {self.category} "
            "champions could be drafted."
        )


@dataclass(frozen=True, slots=True)
class DraftResult:
    """Drafted champions (sorted by name) and any shortfall warnings."""

    items: tuple[Champion, ...] = ()
    warnings: tuple[ShortfallWarning, ...] = ()

    def keys(self) -> list[str]:
        return [c.key for c in self.items]

    def names(self) -> list[str]:
        return [c.name for c in self.items]


@dataclass(frozen=True, slots=True)
class DecodedDraft:
    """
    A draft token resolved against a catalog.

    Attributes:
        items: One slot per encoded key, in token order. None means the
            key is not in the catalog used for decoding.
        label: The draft name stored in the token
    """

    items: tuple[Champion | None, ...] = ()
    label: str = ""

    def resolved(self) -> list[Champion]:
        """Champions that resolved, in token order."""
        return [c for c in self.items if c is not None]

    @property
    def missing_count(self) -> int:
        return sum(1 for c in self.items if c is None)
