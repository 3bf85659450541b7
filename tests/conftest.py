"""
Shared fixtures for the WebNIC SDK tests.
No test talks to the real API: every HTTP call goes through a mocked
requests session.
"""

from unittest.mock import MagicMock

import pytest

from webnic_sdk.api.models import Credentials
from webnic_sdk.utils.config import Settings


CLIENT_ID = "reseller-user"
CLIENT_SECRET = "reseller-secret"
OTE_URL = "https://oteapi.webnic.cc"


def make_response(json_data=None, status_code=200, text=""):
    """Fake requests.Response. Without json_data, .json() raises like an empty body."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = json_data
    return response


def token_response(token="tok-1"):
    return make_response({"code": "1000", "data": {"access_token": token}})


@pytest.fixture
def credentials():
    return Credentials(client_id=CLIENT_ID, client_secret=CLIENT_SECRET)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        client_id=CLIENT_ID,
        client_secret=CLIENT_SECRET,
        base_url=OTE_URL,
        token_cache_file=tmp_path / "cache" / "webnic_token.json",
    )


@pytest.fixture
def session():
    """Mock session: token exchange succeeds, every API call answers code 1000."""
    mock_session = MagicMock()
    mock_session.post.return_value = token_response()
    mock_session.request.return_value = make_response({"code": "1000", "data": {}})
    return mock_session
