from championdraft.parsers.ddragon import (
    ChampionData,
    parse_champion,
    parse_champion_payload,
    parse_versions,
)

__all__ = [
    "ChampionData",
    "parse_champion",
    "parse_champion_payload",
    "parse_versions",
]
