"""Plain-text output for sharing a draft: name lists and share URLs."""

from collections.abc import Iterable

import httpx

from championdraft.config import settings
from championdraft.models.champion import Champion

TOKEN_PARAM = "data"


def summarize_names(items: Iterable[Champion | None]) -> str:
    """Comma-separated champion names, skipping unresolved slots."""
    return ", ".join(c.name for c in items if c is not None)


def build_share_url(token: str, base_url: str | None = None) -> str:
    """
    Shareable URL carrying a draft token in the `data` query parameter.

    Existing query parameters on the base URL are kept.
    """
    url = httpx.URL(base_url or settings.share_base_url)
    return str(url.copy_set_param(TOKEN_PARAM, token))


def extract_token(url: str) -> str | None:
    """Read the draft token back out of a share URL."""
    return httpx.URL(url).params.get(TOKEN_PARAM)
