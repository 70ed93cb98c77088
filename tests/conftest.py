import pytest

from championdraft.models.champion import ChampionCatalog
from championdraft.parsers.ddragon import parse_champion_payload
from championdraft.services.catalog import CatalogSnapshot, get_catalog_provider

PATCH_VERSION = "14.1.1"


def _entry(champion_id: str, key: str, name: str, tags: list[str], title: str = "") -> dict:
    return {
        "version": PATCH_VERSION,
        "id": champion_id,
        "key": key,
        "name": name,
        "title": title,
        "tags": tags,
        "image": {"full": f"{champion_id}.png", "sprite": "champion0.png", "group": "champion"},
    }


@pytest.fixture
def champion_payload() -> dict:
    """Sample Data Dragon champion.json payload."""
    entries = [
        _entry("Aatrox", "266", "Aatrox", ["Fighter", "Tank"], "the Darkin Blade"),
        _entry("Ahri", "103", "Ahri", ["Mage", "Assassin"], "the Nine-Tailed Fox"),
        _entry("Akali", "84", "Akali", ["Assassin"], "the Rogue Assassin"),
        _entry("Alistar", "12", "Alistar", ["Tank", "Support"], "the Minotaur"),
        _entry("Ashe", "22", "Ashe", ["Marksman", "Support"], "the Frost Archer"),
        _entry("AurelionSol", "136", "Aurelion Sol", ["Mage"], "The Star Forger"),
        _entry("Blitzcrank", "53", "Blitzcrank", ["Tank", "Fighter"], "the Great Steam Golem"),
        _entry("Brand", "63", "Brand", ["Mage"], "the Burning Vengeance"),
        _entry("Caitlyn", "51", "Caitlyn", ["Marksman"], "the Sheriff of Piltover"),
        _entry("KogMaw", "96", "Kog'Maw", ["Marksman", "Mage"], "the Mouth of the Abyss"),
        _entry("MonkeyKing", "62", "Wukong", ["Fighter", "Tank"], "the Monkey King"),
        _entry("Nunu", "20", "Nunu & Willump", ["Tank", "Mage"], "the Boy and His Yeti"),
        _entry("Nami", "267", "Nami", ["Support", "Mage"], "the Tidecaller"),
    ]
    return {
        "type": "champion",
        "format": "standAloneComplex",
        "version": PATCH_VERSION,
        "data": {e["id"]: e for e in entries},
    }


@pytest.fixture
def catalog(champion_payload: dict) -> ChampionCatalog:
    """Thirteen-champion catalog built from the sample payload."""
    return parse_champion_payload(champion_payload)


class StaticCatalogProvider:
    """Catalog provider that always returns the same snapshot."""

    def __init__(self, snapshot: CatalogSnapshot):
        self.snapshot = snapshot
        self.calls = 0

    async def get_snapshot(self) -> CatalogSnapshot:
        self.calls += 1
        return self.snapshot

    def clear(self) -> None:
        pass


@pytest.fixture
def static_provider(catalog: ChampionCatalog) -> StaticCatalogProvider:
    return StaticCatalogProvider(CatalogSnapshot(version=PATCH_VERSION, catalog=catalog))


@pytest.fixture(autouse=True)
def reset_catalog_provider():
    """Drop the cached process-wide provider between tests."""
    get_catalog_provider.cache_clear()
    yield
    get_catalog_provider.cache_clear()
