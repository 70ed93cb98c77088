"""
ChampionDraft services.

Quota apportionment, drafting, draft tokens and catalog access.
"""

from championdraft.services.apportionment import (
    apportion,
    count_categories,
    initial_quotas,
    override_quota,
)
from championdraft.services.catalog import (
    CatalogProvider,
    CatalogSnapshot,
    get_catalog_provider,
    image_url,
)
from championdraft.services.draft_codec import decode_draft, encode_draft, encode_keys
from championdraft.services.draft_sampler import (
    RandomIndex,
    draft,
    draft_unconstrained,
    name_sort_key,
)
from championdraft.services.draft_state import DraftState, load_draft_state
from championdraft.services.draft_summary import (
    build_share_url,
    extract_token,
    summarize_names,
)

__all__ = [
    # Apportionment
    "apportion",
    "count_categories",
    "initial_quotas",
    "override_quota",
    # Catalog
    "CatalogProvider",
    "CatalogSnapshot",
    "get_catalog_provider",
    "image_url",
    # Draft tokens
    "decode_draft",
    "encode_draft",
    "encode_keys",
    # Drafting
    "RandomIndex",
    "draft",
    "draft_unconstrained",
    "name_sort_key",
    # Page-load state
    "DraftState",
    "load_draft_state",
    # Sharing
    "build_share_url",
    "extract_token",
    "summarize_names",
]
