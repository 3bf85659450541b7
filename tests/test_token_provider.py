"""
Tests for TokenProvider: cache hits, expiry, backend switches and failed
credential exchanges.

Run:
    python -m pytest tests/test_token_provider.py -v
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import requests

from conftest import CLIENT_ID, CLIENT_SECRET, OTE_URL, make_response, token_response
from webnic_sdk.api.models import CachedToken
from webnic_sdk.api.token_provider import DEFAULT_TOKEN_LIFETIME, TokenProvider
from webnic_sdk.api.token_store import MemoryTokenStore


START = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Settable clock"""

    def __init__(self, now=START):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


def _provider(credentials, session, store=None, clock=None):
    return TokenProvider(
        credentials,
        store if store is not None else MemoryTokenStore(),
        session=session,
        clock=clock or FakeClock(),
    )


# ===========================================================================
# 1. Cache behaviour
# ===========================================================================

class TestTokenCaching:

    def test_exchanges_credentials_on_empty_cache(self, credentials, session):
        store = MemoryTokenStore()
        result = _provider(credentials, session, store).get_token()

        assert result.ok
        assert result.code == "1000"
        assert result.token == "tok-1"
        session.post.assert_called_once()

        cached = store.load()
        assert cached.token == "tok-1"
        assert cached.base_url == OTE_URL
        assert cached.expires_at == START + DEFAULT_TOKEN_LIFETIME

    def test_posts_username_and_password(self, credentials, session):
        _provider(credentials, session).get_token()

        args, kwargs = session.post.call_args
        assert args[0] == credentials.token_endpoint
        assert kwargs["json"] == {"username": CLIENT_ID, "password": CLIENT_SECRET}

    def test_reuses_cached_token_within_lifetime(self, credentials, session):
        clock = FakeClock()
        provider = _provider(credentials, session, clock=clock)

        first = provider.get_token()
        clock.advance(minutes=49, seconds=59)
        second = provider.get_token()

        assert first.token == second.token
        assert session.post.call_count == 1

    def test_refreshes_after_expiry(self, credentials, session):
        clock = FakeClock()
        provider = _provider(credentials, session, clock=clock)
        session.post.side_effect = [token_response("old"), token_response("new")]

        assert provider.get_token().token == "old"
        clock.advance(minutes=50)
        assert provider.get_token().token == "new"
        assert session.post.call_count == 2

    def test_token_for_other_backend_is_not_reused(self, credentials, session):
        store = MemoryTokenStore(CachedToken(
            token="prod-token",
            expires_at=START + timedelta(hours=1),
            base_url="https://api.webnic.cc",
        ))

        result = _provider(credentials, session, store).get_token()

        assert result.token == "tok-1"
        assert store.load().base_url == OTE_URL

    def test_invalidate_forces_new_exchange(self, credentials, session):
        provider = _provider(credentials, session)
        provider.get_token()
        provider.invalidate()
        provider.get_token()

        assert session.post.call_count == 2

    def test_store_write_failure_still_returns_token(self, credentials, session):
        store = MagicMock()
        store.load.return_value = None
        store.save.side_effect = OSError("read-only file system")

        result = _provider(credentials, session, store).get_token()

        assert result.ok
        assert result.token == "tok-1"


# ===========================================================================
# 2. Failed exchanges
# ===========================================================================

class TestTokenFailures:

    def test_network_error(self, credentials, session):
        session.post.side_effect = requests.exceptions.ConnectionError("connection refused")

        result = _provider(credentials, session).get_token()

        assert not result.ok
        assert result.code == "2400"
        assert result.message.startswith("Access Token retrieval Error:")
        assert "connection refused" in result.message

    def test_backend_error_message_is_reported(self, credentials, session):
        session.post.return_value = make_response(
            {"code": "2400", "error": {"message": "Invalid username or password"}},
            status_code=401,
        )

        result = _provider(credentials, session).get_token()

        assert result.code == "2400"
        assert result.message == "Access Token retrieval Error: Invalid username or password"

    def test_response_without_access_token(self, credentials, session):
        session.post.return_value = make_response({"code": "1000", "data": {}})

        result = _provider(credentials, session).get_token()

        assert result.code == "2400"
        assert "access_token" in result.message

    def test_undecodable_response(self, credentials, session):
        session.post.return_value = make_response(status_code=502, text="<html>Bad Gateway</html>")

        result = _provider(credentials, session).get_token()

        assert result.code == "2400"
        assert "Bad Gateway" in result.message

    def test_failure_is_not_cached(self, credentials, session):
        store = MemoryTokenStore()
        session.post.return_value = make_response({"code": "2400", "error": {"message": "nope"}})

        _provider(credentials, session, store).get_token()

        assert store.load() is None
