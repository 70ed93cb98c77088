"""
Draft token codec.

A token carries the drafted champion keys and the draft name:

    {"keys": [266, 103], "draftName": "Friday ARAM"}
      -> compact JSON -> UTF-8 bytes -> URL-safe base64, padding stripped

Catalog keys are text ("266"); tokens store them as integers. Both sides
are compared as integers, so "0266" in the catalog matches 266 in a token.

Decoding fails (DecodeError) only when the token itself is malformed.
Keys missing from the catalog decode to None in their slot.
"""

import base64
import binascii
import json
from collections.abc import Iterable
from typing import Any

from championdraft.models.champion import Champion, ChampionCatalog
from championdraft.models.draft import DecodedDraft
from championdraft.models.failure import DecodeError, InputError

KEYS_FIELD = "keys"
LABEL_FIELD = "draftName"


def _key_to_int(key: str) -> int:
    try:
        return int(key)
    except (TypeError, ValueError) as e:
        raise InputError(
            "Champion key cannot be encoded.",
            detail=f"key {key!r} is not an integer",
        ) from e


def _token_key_to_int(value: Any) -> int:
    """Normalize a token key (int, or integer-like text) to an int."""
    # bool is an int subclass but never a champion key
    if isinstance(value, bool):
        raise DecodeError(f"invalid key {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            raise DecodeError(f"invalid key {value!r}") from None
    raise DecodeError(f"invalid key {value!r}")


def _index_by_int_key(catalog: ChampionCatalog) -> dict[int, Champion]:
    """Catalog champions keyed by integer key; non-integer keys are skipped."""
    index: dict[int, Champion] = {}
    for champion in catalog:
        try:
            index.setdefault(int(champion.key), champion)
        except ValueError:
            continue
    return index


def encode_keys(keys: Iterable[str], label: str) -> str:
    """
    Encode champion keys and a draft name into a URL-safe token.

    Raises:
        InputError: If a key is not integer-like
    """
    record = {KEYS_FIELD: [_key_to_int(k) for k in keys], LABEL_FIELD: label}
    text = json.dumps(record, separators=(",", ":"), ensure_ascii=False)
    encoded = base64.urlsafe_b64encode(text.encode("utf-8"))
    return encoded.decode("ascii").rstrip("=")


def encode_draft(items: Iterable[Champion], label: str) -> str:
    """Encode drafted champions (in order) and a draft name into a token."""
    return encode_keys((c.key for c in items), label)


def _parse_token(token: str) -> dict[str, Any]:
    """Undo base64, UTF-8 and JSON. Raises DecodeError on any failure."""
    if not isinstance(token, str) or not token.strip():
        raise DecodeError("empty token")

    # Accept the standard alphabet too; tokens may arrive percent-decoded
    normalized = token.strip().replace("+", "-").replace("/", "_")
    padded = normalized + "=" * (-len(normalized) % 4)

    try:
        raw = base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"invalid base64: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("token is not UTF-8 text") from e

    try:
        record = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"invalid JSON: {e.msg}") from e
    except (ValueError, RecursionError) as e:
        # Oversized integer literals and deeply nested arrays
        raise DecodeError(f"invalid JSON: {type(e).__name__}") from e

    if not isinstance(record, dict):
        raise DecodeError("token record is not an object")

    return record


def decode_draft(token: str, catalog: ChampionCatalog) -> DecodedDraft:
    """
    Decode a token and resolve its keys against a catalog.

    Args:
        token: Token produced by encode_draft
        catalog: Catalog snapshot to resolve keys against

    Returns:
        DecodedDraft with one slot per encoded key (None if not in catalog)
        and the draft name

    Raises:
        DecodeError: If the token is not valid base64/UTF-8/JSON, or the
            record does not have a list of integer keys
    """
    record = _parse_token(token)

    keys = record.get(KEYS_FIELD)
    if not isinstance(keys, list):
        raise DecodeError(f"missing or invalid '{KEYS_FIELD}' list")

    label = record.get(LABEL_FIELD, "")
    if label is None:
        label = ""
    if not isinstance(label, str):
        raise DecodeError(f"invalid '{LABEL_FIELD}' value")

    token_keys = [_token_key_to_int(k) for k in keys]
    by_int_key = _index_by_int_key(catalog)
    return DecodedDraft(
        items=tuple(by_int_key.get(k) for k in token_keys),
        label=label,
    )
