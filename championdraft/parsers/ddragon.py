"""
Data Dragon payload parsing.

Converts Riot's static data files into catalog models:
- versions.json: list of patch versions, newest first
- champion.json: {"data": {champion_id: {...}}} for one patch and locale

Docs: https://developer.riotgames.com/docs/lol#data-dragon
"""

from typing import Any, TypedDict

from championdraft.models.champion import Champion, ChampionCatalog


class ChampionImage(TypedDict, total=False):
    full: str


class ChampionData(TypedDict, total=False):
    """Subset of a champion.json entry we read."""

    id: str
    key: str
    name: str
    title: str
    tags: list[str]
    image: ChampionImage


def parse_versions(payload: Any) -> str:
    """
    Get the latest patch version from versions.json.

    Raises:
        ValueError: If the payload is not a non-empty list of strings
    """
    if not isinstance(payload, list) or not payload or not isinstance(payload[0], str):
        raise ValueError("versions.json did not contain a version list")
    return payload[0]


def parse_champion(entry: ChampionData) -> Champion | None:
    """
    Convert one champion.json entry to a Champion.

    Returns None for entries without a key.
    """
    key = entry.get("key")
    if not key:
        return None

    champion_id = entry.get("id", "")
    return Champion(
        key=str(key),
        name=entry.get("name") or champion_id,
        categories=frozenset(entry.get("tags") or ()),
        image_ref=(entry.get("image") or {}).get("full", ""),
        champion_id=champion_id,
        title=entry.get("title", ""),
    )


def parse_champion_payload(payload: Any) -> ChampionCatalog:
    """
    Build a catalog from champion.json, keeping payload order.

    Raises:
        ValueError: If the payload has no "data" mapping, an entry is not
            an object, or it contains duplicate champion keys
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise ValueError("champion.json did not contain a data mapping")

    champions: list[Champion] = []
    for champion_id, entry in payload["data"].items():
        if not isinstance(entry, dict):
            raise ValueError(f"champion.json entry {champion_id!r} is not an object")
        champion = parse_champion(entry)
        if champion is not None:
            champions.append(champion)

    return ChampionCatalog(champions)
