"""
Tests for the token cache backends and the CachedToken model.

Run:
    python -m pytest tests/test_token_store.py -v
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from webnic_sdk.api.models import CachedToken
from webnic_sdk.api.token_store import FileTokenStore, MemoryTokenStore


OTE_URL = "https://oteapi.webnic.cc"
PROD_URL = "https://api.webnic.cc"
NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def _token(value="tok-1", base_url=OTE_URL, expires_at=NOW + timedelta(minutes=50)):
    return CachedToken(token=value, expires_at=expires_at, base_url=base_url)


# ===========================================================================
# 1. CachedToken
# ===========================================================================

class TestCachedToken:

    def test_parses_cache_file_time_format_as_utc(self):
        token = CachedToken(token="t", expires_at="2026-03-01 12:50:00", base_url=OTE_URL)
        assert token.expires_at == datetime(2026, 3, 1, 12, 50, tzinfo=timezone.utc)

    def test_serializes_expires_at_in_cache_file_format(self):
        dumped = _token().model_dump(mode="json")
        assert dumped == {
            "token": "tok-1",
            "expires_at": "2026-03-01 12:50:00",
            "base_url": OTE_URL,
        }

    def test_usable_before_expiry_for_same_backend(self):
        assert _token().is_usable(OTE_URL, NOW)

    def test_not_usable_at_or_after_expiry(self):
        token = _token()
        assert not token.is_usable(OTE_URL, NOW + timedelta(minutes=50))
        assert not token.is_usable(OTE_URL, NOW + timedelta(hours=1))

    def test_not_usable_for_another_backend(self):
        assert not _token().is_usable(PROD_URL, NOW)


# ===========================================================================
# 2. FileTokenStore
# ===========================================================================

class TestFileTokenStore:

    def test_load_missing_file_returns_none(self, tmp_path):
        store = FileTokenStore(tmp_path / "missing.json")
        assert store.load() is None

    def test_save_then_load(self, tmp_path):
        store = FileTokenStore(tmp_path / "nested" / "token.json")
        store.save(_token())

        loaded = store.load()
        assert loaded == _token()

    def test_saved_file_has_expected_fields(self, tmp_path):
        path = tmp_path / "token.json"
        FileTokenStore(path).save(_token())

        data = json.loads(path.read_text(encoding="utf-8"))
        assert set(data) == {"token", "expires_at", "base_url"}
        assert data["expires_at"] == "2026-03-01 12:50:00"

    def test_save_leaves_no_temp_files(self, tmp_path):
        store = FileTokenStore(tmp_path / "token.json")
        store.save(_token("a"))
        store.save(_token("b"))

        assert [p.name for p in tmp_path.iterdir()] == ["token.json"]

    def test_save_replaces_token_for_other_backend(self, tmp_path):
        """Only one token is kept; a new backend's token evicts the old one."""
        store = FileTokenStore(tmp_path / "token.json")
        store.save(_token("ote-token", OTE_URL))
        store.save(_token("prod-token", PROD_URL))

        loaded = store.load()
        assert loaded.token == "prod-token"
        assert loaded.base_url == PROD_URL

    @pytest.mark.parametrize("content", [
        "",
        "   ",
        "{not json",
        "[1, 2, 3]",
        '{"token": "", "expires_at": "2026-03-01 12:50:00", "base_url": "x"}',
        '{"token": "t", "base_url": "x"}',
        '{"token": "t", "expires_at": "not a date", "base_url": "x"}',
        '{"token": "t", "expires_at": "2026-03-01 12:50:00"}',
    ])
    def test_unusable_file_content_is_a_cache_miss(self, tmp_path, content):
        path = tmp_path / "token.json"
        path.write_text(content, encoding="utf-8")

        assert FileTokenStore(path).load() is None

    def test_non_utf8_file_is_a_cache_miss(self, tmp_path):
        path = tmp_path / "token.json"
        path.write_bytes(b'{"token": "\xff\xfe", "expires_at": "2099-01-01 00:00:00"}')

        assert FileTokenStore(path).load() is None

    def test_save_overwrites_corrupt_file(self, tmp_path):
        path = tmp_path / "token.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        store = FileTokenStore(path)

        store.save(_token())

        assert store.load() == _token()

    def test_invalidate_removes_file(self, tmp_path):
        path = tmp_path / "token.json"
        store = FileTokenStore(path)
        store.save(_token())

        store.invalidate()

        assert not path.exists()
        assert store.load() is None

    def test_invalidate_without_file_is_a_no_op(self, tmp_path):
        FileTokenStore(tmp_path / "token.json").invalidate()


# ===========================================================================
# 3. MemoryTokenStore
# ===========================================================================

class TestMemoryTokenStore:

    def test_starts_empty(self):
        assert MemoryTokenStore().load() is None

    def test_save_load_invalidate(self):
        store = MemoryTokenStore()
        store.save(_token())
        assert store.load().token == "tok-1"

        store.invalidate()
        assert store.load() is None
