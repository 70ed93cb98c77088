from championdraft.models.champion import CategoryCounts, Champion, ChampionCatalog
from championdraft.models.draft import DecodedDraft, DraftResult, ShortfallWarning
from championdraft.models.failure import (
    CatalogUnavailableError,
    DecodeError,
    FailureDetail,
    FailureKind,
    InputError,
    KnownError,
)

__all__ = [
    "CatalogUnavailableError",
    "CategoryCounts",
    "Champion",
    "ChampionCatalog",
    "DecodeError",
    "DecodedDraft",
    "DraftResult",
    "FailureDetail",
    "FailureKind",
    "InputError",
    "KnownError",
    "ShortfallWarning",
]
