"""
Tests for draft token encoding and decoding.

INVARIANTS:
- decode(encode(items, label), catalog) restores keys (in order) and label
- Keys missing from the catalog decode to None, not an error
- Only malformed tokens raise DecodeError
"""

import base64
import re

import pytest

from championdraft.models.champion import Champion, ChampionCatalog
from championdraft.models.failure import DecodeError, FailureKind, InputError
from championdraft.services.draft_codec import decode_draft, encode_draft, encode_keys

URL_SAFE = re.compile(r"^[A-Za-z0-9_-]*$")


def _raw_token(text: str) -> str:
    """Encode arbitrary JSON text the way draft tokens are encoded."""
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def _pick(catalog: ChampionCatalog, *keys: str) -> list[Champion]:
    champions = [catalog.get(k) for k in keys]
    assert all(c is not None for c in champions)
    return [c for c in champions if c is not None]


class TestEncodeDraft:
    def test_known_token(self) -> None:
        """Compact JSON, UTF-8, URL-safe base64 without padding."""
        token = encode_keys(["266", "103"], "Friday")

        assert token == "eyJrZXlzIjpbMjY2LDEwM10sImRyYWZ0TmFtZSI6IkZyaWRheSJ9"

    def test_token_is_url_safe(self, catalog: ChampionCatalog) -> None:
        token = encode_draft(list(catalog), "ARAM night? #1 / überdraft")

        assert URL_SAFE.match(token)
        assert "=" not in token

    def test_non_integer_key_rejected(self) -> None:
        champion = Champion(key="abc", name="Nobody", categories=frozenset(), image_ref="")

        with pytest.raises(InputError):
            encode_draft([champion], "")


class TestRoundTrip:
    def test_keys_and_label_restored(self, catalog: ChampionCatalog) -> None:
        items = _pick(catalog, "266", "103", "62")

        decoded = decode_draft(encode_draft(items, "Friday ARAM"), catalog)

        assert [c.key for c in decoded.resolved()] == ["266", "103", "62"]
        assert decoded.label == "Friday ARAM"
        assert decoded.missing_count == 0

    def test_order_preserved(self, catalog: ChampionCatalog) -> None:
        """Keys come back in encoded order, not catalog or name order."""
        items = _pick(catalog, "267", "12", "96", "266")

        decoded = decode_draft(encode_draft(items, ""), catalog)

        assert [c.key for c in decoded.items if c] == ["267", "12", "96", "266"]

    def test_non_canonical_numeric_key(self) -> None:
        """A zero-padded catalog key still round-trips through its integer form."""
        champion = Champion(key="0266", name="Aatrox", categories=frozenset(), image_ref="")
        catalog = ChampionCatalog([champion])

        decoded = decode_draft(encode_draft([champion], "x"), catalog)

        assert decoded.items == (champion,)

    def test_resolves_to_catalog_champions(self, catalog: ChampionCatalog) -> None:
        items = _pick(catalog, "84")

        decoded = decode_draft(encode_draft(items, ""), catalog)

        assert decoded.items[0] is catalog.get("84")

    def test_unicode_label(self, catalog: ChampionCatalog) -> None:
        label = "Пятничный драфт 🎲 – ñ"

        decoded = decode_draft(encode_draft(_pick(catalog, "20"), label), catalog)

        assert decoded.label == label

    def test_empty_draft(self, catalog: ChampionCatalog) -> None:
        decoded = decode_draft(encode_draft([], ""), catalog)

        assert decoded.items == ()
        assert decoded.label == ""

    def test_whole_catalog(self, catalog: ChampionCatalog) -> None:
        decoded = decode_draft(encode_draft(list(catalog), "all"), catalog)

        assert [c.key for c in decoded.resolved()] == catalog.keys()


class TestPartialCatalog:
    def test_missing_key_is_none_slot(self, catalog: ChampionCatalog) -> None:
        """A champion removed from the catalog leaves a None in its slot."""
        token = encode_draft(_pick(catalog, "266", "103", "84"), "old patch")
        smaller = ChampionCatalog(c for c in catalog if c.key != "103")

        decoded = decode_draft(token, smaller)

        assert len(decoded.items) == 3
        assert decoded.items[0] is not None and decoded.items[0].key == "266"
        assert decoded.items[1] is None
        assert decoded.items[2] is not None and decoded.items[2].key == "84"
        assert decoded.missing_count == 1
        assert decoded.label == "old patch"

    def test_empty_catalog(self, catalog: ChampionCatalog) -> None:
        token = encode_draft(_pick(catalog, "266", "103"), "")

        decoded = decode_draft(token, ChampionCatalog())

        assert decoded.items == (None, None)
        assert decoded.resolved() == []


class TestLegacyTokens:
    def test_string_keys_and_standard_padding(self, catalog: ChampionCatalog) -> None:
        """Tokens with text keys and padded standard base64 still decode."""
        # {"keys":["266","103"],"draftName":"ARAM night"}
        token = "eyJrZXlzIjpbIjI2NiIsIjEwMyJdLCJkcmFmdE5hbWUiOiJBUkFNIG5pZ2h0In0="

        decoded = decode_draft(token, catalog)

        assert [c.key for c in decoded.resolved()] == ["266", "103"]
        assert decoded.label == "ARAM night"

    def test_missing_label_defaults_to_empty(self, catalog: ChampionCatalog) -> None:
        # {"keys":[266,84]}
        decoded = decode_draft("eyJrZXlzIjpbMjY2LDg0XX0=", catalog)

        assert decoded.label == ""
        assert [c.key for c in decoded.resolved()] == ["266", "84"]

    def test_surrounding_whitespace_ignored(self, catalog: ChampionCatalog) -> None:
        token = encode_draft(_pick(catalog, "22"), "x")

        assert decode_draft(f"  {token}\n", catalog).label == "x"


class TestMalformedTokens:
    @pytest.mark.parametrize(
        "token",
        [
            "",
            "   ",
            "not base64!!",
            "abcde",  # impossible base64 length
            "__79",  # valid base64, bytes are not UTF-8
            "bm90IGpzb24",  # "not json"
            "eyJrZXlzIjpbMjY2LA==",  # truncated JSON
            "WzEsMl0=",  # [1,2]: not an object
            "eyJkcmFmdE5hbWUiOiJ4In0=",  # no keys
            "eyJrZXlzIjpbImFiYyJdLCJkcmFmdE5hbWUiOiJ4In0=",  # non-numeric key
            "eyJrZXlzIjpbMjY2XSwiZHJhZnROYW1lIjo1fQ==",  # numeric label
        ],
    )
    def test_raises_decode_error(self, token: str, catalog: ChampionCatalog) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_draft(token, catalog)

        assert exc_info.value.kind == FailureKind.MALFORMED_TOKEN
        assert exc_info.value.status_code == 400

    def test_oversized_integer_key(self, catalog: ChampionCatalog) -> None:
        """Integer literals past the int conversion limit are malformed, not a crash."""
        token = _raw_token('{"keys":[' + "9" * 5000 + "]}")

        with pytest.raises(DecodeError):
            decode_draft(token, catalog)

    def test_oversized_integer_text_key(self, catalog: ChampionCatalog) -> None:
        token = _raw_token('{"keys":["' + "9" * 5000 + '"]}')

        with pytest.raises(DecodeError):
            decode_draft(token, catalog)

    def test_deeply_nested_keys(self, catalog: ChampionCatalog) -> None:
        token = _raw_token('{"keys":' + "[" * 100_000 + "]" * 100_000 + "}")

        with pytest.raises(DecodeError):
            decode_draft(token, catalog)

    def test_truncated_token(self, catalog: ChampionCatalog) -> None:
        token = encode_draft(_pick(catalog, "266", "103", "84"), "Friday")

        with pytest.raises(DecodeError):
            decode_draft(token[: len(token) // 2], catalog)

    def test_corrupted_token(self, catalog: ChampionCatalog) -> None:
        token = encode_draft(_pick(catalog, "266"), "Friday")

        with pytest.raises(DecodeError):
            decode_draft("!" + token[1:], catalog)
