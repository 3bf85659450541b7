"""
Bearer token acquisition for the WebNIC API
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

import requests

from webnic_sdk.api.models import CachedToken, Credentials, TokenResult, SUCCESS_CODE, FAILURE_CODE
from webnic_sdk.api.token_store import TokenStore
from webnic_sdk.utils.logger import get_logger


logger = get_logger(__name__)

# Kept below the backend's own token lifetime
DEFAULT_TOKEN_LIFETIME = timedelta(minutes=50)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenProvider:
    """
    Returns a usable bearer token, exchanging credentials only on a cache miss.
    """

    def __init__(
        self,
        credentials: Credentials,
        store: TokenStore,
        session: Optional[requests.Session] = None,
        timeout: Any = (10, 30),
        token_lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        clock: Callable[[], datetime] = utc_now
    ):
        """
        Args:
            credentials: API user credentials and endpoints
            store: Where the token is cached between calls and runs
            session: Optional requests session for the credential exchange
            timeout: requests timeout for the credential exchange
            token_lifetime: How long a freshly issued token is trusted
            clock: Returns the current aware datetime (injectable for tests)
        """
        self.credentials = credentials
        self.store = store
        self.session = session or requests.Session()
        self.timeout = timeout
        self.token_lifetime = token_lifetime
        self.clock = clock

    def get_token(self) -> TokenResult:
        """
        Get a valid bearer token.

        Returns:
            TokenResult with code "1000" and the token, or code "2400" and a
            message explaining why no token could be obtained
        """
        cached = self.store.load()
        if cached is not None and cached.is_usable(self.credentials.base_url, self.clock()):
            return TokenResult(code=SUCCESS_CODE, token=cached.token)

        if cached is not None:
            logger.debug("Cached token expired or issued for another backend, re-authenticating")

        return self._exchange_credentials()

    def invalidate(self) -> None:
        """Drop the cached token so the next get_token() re-authenticates"""
        self.store.invalidate()

    def _exchange_credentials(self) -> TokenResult:
        logger.info(f"Requesting access token from {self.credentials.token_endpoint}")

        try:
            response = self.session.post(
                self.credentials.token_endpoint,
                json={
                    "username": self.credentials.client_id,
                    "password": self.credentials.client_secret,
                },
                headers={"Content-Type": "application/json", "Accept": "application/json"},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            return self._failure(str(e))

        try:
            response_data = response.json()
        except ValueError:
            return self._failure(response.text or f"HTTP {response.status_code} with empty body")

        access_token = None
        if isinstance(response_data, dict) and isinstance(response_data.get("data"), dict):
            access_token = response_data["data"].get("access_token")

        if not access_token or not isinstance(access_token, str):
            return self._failure(self._extract_error_message(response_data))

        expires_at = self.clock() + self.token_lifetime
        try:
            self.store.save(CachedToken(
                token=access_token,
                expires_at=expires_at,
                base_url=self.credentials.base_url,
            ))
        except OSError as e:
            # Token is still returned, just not cached
            logger.warning(f"Could not persist access token: {e}")

        logger.info("Access token obtained")
        return TokenResult(code=SUCCESS_CODE, token=access_token)

    @staticmethod
    def _extract_error_message(response_data: Any) -> str:
        if isinstance(response_data, dict):
            error = response_data.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str) and error:
                return error
        return "access_token missing from response"

    @staticmethod
    def _failure(detail: str) -> TokenResult:
        message = f"Access Token retrieval Error: {detail}"
        logger.error(message)
        return TokenResult(code=FAILURE_CODE, message=message)
