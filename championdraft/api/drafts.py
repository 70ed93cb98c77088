"""
Draft API endpoints.

Drafts champion pools, and encodes/decodes shareable draft tokens.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from championdraft.api.errors import http_error, load_snapshot
from championdraft.config import settings
from championdraft.models.champion import Champion
from championdraft.models.draft import ShortfallWarning
from championdraft.models.failure import FailureKind, KnownError
from championdraft.services.apportionment import apportion, count_categories
from championdraft.services.catalog import CatalogProvider, get_catalog_provider, image_url
from championdraft.services.draft_codec import decode_draft, encode_draft, encode_keys
from championdraft.services.draft_sampler import draft, draft_unconstrained
from championdraft.services.draft_state import load_draft_state
from championdraft.services.draft_summary import build_share_url, summarize_names

router = APIRouter(prefix="/drafts", tags=["drafts"])


class ChampionResponse(BaseModel):
    """Response model for a single champion."""

    key: str
    name: str
    title: str = ""
    champion_id: str = ""
    categories: list[str] = Field(default_factory=list)
    image_url: str

    @classmethod
    def from_champion(cls, champion: Champion, version: str) -> "ChampionResponse":
        return cls(
            key=champion.key,
            name=champion.name,
            title=champion.title,
            champion_id=champion.champion_id,
            categories=sorted(champion.categories),
            image_url=image_url(version, champion),
        )


class WarningResponse(BaseModel):
    """Response model for a category shortfall."""

    id: str
    category: str
    requested: int
    obtained: int
    message: str

    @classmethod
    def from_warning(cls, warning: ShortfallWarning) -> "WarningResponse":
        return cls(
            id=warning.id,
            category=warning.category,
            requested=warning.requested,
            obtained=warning.obtained,
            message=warning.message(),
        )


class DraftRequest(BaseModel):
    """Request model for drafting a champion pool."""

    pool_size: int | None = Field(
        default=None,
        ge=0,
        description="Total pool size. Used when quotas are not given.",
    )
    quotas: dict[str, int] | None = Field(
        default=None,
        description="Per-category quotas (constrained drafts only)",
        examples=[{"Fighter": 4, "Mage": 3, "Tank": 2}],
    )
    constrained: bool = Field(
        default=True,
        description="Honor class quotas. False drafts from the whole catalog.",
    )
    label: str = Field(default="", description="Draft name")


class DraftResponse(BaseModel):
    """Response model for a drafted pool."""

    version: str
    label: str
    champions: list[ChampionResponse]
    warnings: list[WarningResponse] = Field(default_factory=list)
    summary: str
    token: str
    share_url: str


class EncodeRequest(BaseModel):
    """Request model for encoding a draft into a token."""

    keys: list[str] = Field(..., examples=[["266", "103"]])
    label: str = ""


class TokenResponse(BaseModel):
    """Response model for an encoded draft."""

    token: str
    share_url: str


class DecodedDraftResponse(BaseModel):
    """Response model for a decoded draft token."""

    version: str
    label: str
    champions: list[ChampionResponse | None] = Field(
        default_factory=list,
        description="One entry per encoded key; null if not in the current catalog",
    )
    missing: int = 0


class DraftStateResponse(BaseModel):
    """Response model for the initial draft state."""

    version: str
    natural_counts: dict[str, int]
    pool_size: int
    quotas: dict[str, int]
    drafted: list[ChampionResponse | None] = Field(default_factory=list)
    label: str = ""
    decode_failed: bool = False


@router.post("", response_model=DraftResponse)
async def create_draft(
    request: DraftRequest,
    provider: Annotated[CatalogProvider, Depends(get_catalog_provider)],
) -> DraftResponse:
    """
    Draft a random champion pool.

    Constrained drafts honor per-category quotas; when none are given they
    are scaled from the catalog to pool_size (default 15). Categories that
    run out of champions are reported in `warnings`.
    """
    snapshot = await load_snapshot(provider)
    catalog = snapshot.catalog

    try:
        if request.constrained:
            quotas = request.quotas
            if quotas is None:
                pool_size = (
                    request.pool_size
                    if request.pool_size is not None
                    else settings.default_pool_size
                )
                quotas = apportion(count_categories(catalog), pool_size)
            result = draft(catalog, quotas)
        else:
            if request.pool_size is not None:
                total = request.pool_size
            elif request.quotas is not None:
                total = sum(request.quotas.values())
            else:
                total = settings.default_pool_size
            result = draft_unconstrained(catalog, total)
        token = encode_draft(result.items, request.label)
    except KnownError as e:
        raise http_error(e) from e

    return DraftResponse(
        version=snapshot.version,
        label=request.label,
        champions=[ChampionResponse.from_champion(c, snapshot.version) for c in result.items],
        warnings=[WarningResponse.from_warning(w) for w in result.warnings],
        summary=summarize_names(result.items),
        token=token,
        share_url=build_share_url(token),
    )


@router.post("/encode", response_model=TokenResponse)
async def encode_draft_keys(
    request: EncodeRequest,
    provider: Annotated[CatalogProvider, Depends(get_catalog_provider)],
) -> TokenResponse:
    """
    Encode champion keys and a draft name into a shareable token.

    Returns 400 if any key is not in the current catalog.
    """
    snapshot = await load_snapshot(provider)

    unknown = [k for k in request.keys if k not in snapshot.catalog]
    if unknown:
        raise http_error(
            KnownError(
                kind=FailureKind.UNKNOWN_CHAMPION,
                message="Some champions are not in the current catalog.",
                detail=f"Unknown keys: {', '.join(unknown)}",
                suggestion="Draft again with the current champion list.",
            )
        )

    try:
        token = encode_keys(request.keys, request.label)
    except KnownError as e:
        raise http_error(e) from e

    return TokenResponse(token=token, share_url=build_share_url(token))


@router.get("/state", response_model=DraftStateResponse)
async def get_draft_state(
    provider: Annotated[CatalogProvider, Depends(get_catalog_provider)],
    data: Annotated[str | None, Query(description="Shared draft token")] = None,
) -> DraftStateResponse:
    """
    Get the initial draft state, optionally restored from a shared token.

    A malformed token does not fail the request; `decode_failed` is set
    and the default state is returned.
    """
    snapshot = await load_snapshot(provider)

    try:
        state = load_draft_state(snapshot.catalog, data)
    except KnownError as e:
        raise http_error(e) from e

    return DraftStateResponse(
        version=snapshot.version,
        natural_counts=state.natural_counts,
        pool_size=state.pool_size,
        quotas=state.quotas,
        drafted=[
            ChampionResponse.from_champion(c, snapshot.version) if c is not None else None
            for c in state.drafted
        ],
        label=state.label,
        decode_failed=state.decode_failed,
    )


@router.get("/{token}", response_model=DecodedDraftResponse)
async def get_draft(
    token: str,
    provider: Annotated[CatalogProvider, Depends(get_catalog_provider)],
) -> DecodedDraftResponse:
    """
    Decode a shared draft token.

    Returns 400 if the token is malformed. Champions no longer in the
    catalog come back as null entries.
    """
    snapshot = await load_snapshot(provider)

    try:
        decoded = decode_draft(token, snapshot.catalog)
    except KnownError as e:
        raise http_error(e) from e

    return DecodedDraftResponse(
        version=snapshot.version,
        label=decoded.label,
        champions=[
            ChampionResponse.from_champion(c, snapshot.version) if c is not None else None
            for c in decoded.items
        ],
        missing=decoded.missing_count,
    )
