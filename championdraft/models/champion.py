from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Per-category counts: natural frequencies or target quotas.
# Insertion order matters: it is the tie-break order for apportionment
# and the processing order for drafting.
CategoryCounts = dict[str, int]


@dataclass(frozen=True, slots=True)
class Champion:
    """
    A champion from the Data Dragon catalog.

    Attributes:
        key: Stable numeric identifier as text (e.g., "266")
        name: Display name (e.g., "Aatrox")
        categories: Class tags (e.g., {"Fighter", "Tank"})
        image_ref: Image file name within the patch (e.g., "Aatrox.png")
        champion_id: Data Dragon slug (e.g., "MonkeyKing" for Wukong)
        title: Flavor title (e.g., "the Darkin Blade")
    """

    key: str
    name: str
    categories: frozenset[str]
    image_ref: str
    champion_id: str = ""
    title: str = ""


class ChampionCatalog:
    """
    Read-only, ordered collection of champions keyed by `key`.

    The catalog is a snapshot: drafting and decoding only read from it.
    """

    __slots__ = ("_champions", "_by_key")

    def __init__(self, champions: Iterable[Champion] = ()):
        self._champions: tuple[Champion, ...] = tuple(champions)
        self._by_key: dict[str, Champion] = {}
        for champion in self._champions:
            if champion.key in self._by_key:
                raise ValueError(f"Duplicate champion key in catalog: {champion.key}")
            self._by_key[champion.key] = champion

    def __len__(self) -> int:
        return len(self._champions)

    def __iter__(self) -> Iterator[Champion]:
        return iter(self._champions)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __repr__(self) -> str:
        return f"ChampionCatalog({len(self._champions)} champions)"

    def get(self, key: str) -> Champion | None:
        """Look up a champion by key, or None if absent."""
        return self._by_key.get(key)

    def by_category(self, category: str) -> tuple[Champion, ...]:
        """All champions tagged with `category`, in catalog order."""
        return tuple(c for c in self._champions if category in c.categories)

    def keys(self) -> list[str]:
        """Champion keys in catalog order."""
        return [c.key for c in self._champions]
