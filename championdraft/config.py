from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "ChampionDraft"
    debug: bool = False

    ddragon_url: str = "https://ddragon.leagueoflegends.com"
    ddragon_locale: str = "en_US"

    # Patch version changes rarely; champion data for a given patch never does
    version_cache_seconds: float = 60 * 60
    catalog_cache_seconds: float = 14 * 24 * 60 * 60

    request_timeout: float = 30.0

    default_pool_size: int = 15

    # Shareable draft links are built on top of this URL (?data=<token>)
    share_base_url: str = "http://localhost:3000/"


settings = Settings()


# =============================================================================
# CHAMPION CLASS TAGS
# =============================================================================

# Class tags Data Dragon assigns to champions. Category counts are derived from
# the catalog itself; this list fixes the display order for known tags.
RECOGNIZED_CATEGORIES: tuple[str, ...] = (
    "Assassin",
    "Fighter",
    "Mage",
    "Marksman",
    "Support",
    "Tank",
)
