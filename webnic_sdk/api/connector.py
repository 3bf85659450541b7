"""
WebNIC API Connector
Authenticated request dispatch (single and concurrent batch) with
normalized results
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import timedelta
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode

import requests
from requests.adapters import HTTPAdapter

from webnic_sdk.api.models import (
    ApiResult,
    BatchRequestSpec,
    Credentials,
    ErrorKind,
    SUCCESS_CODE,
)
from webnic_sdk.api.token_provider import TokenProvider
from webnic_sdk.api.token_store import FileTokenStore, TokenStore
from webnic_sdk.utils.config import Settings, get_settings
from webnic_sdk.utils.logger import get_logger


logger = get_logger(__name__)

# Backend message for a token it no longer accepts, e.g.
# "Invalid or expired token. Reason: Provided token isn't active"
TOKEN_REJECTED_PREFIX = "Invalid or expired token"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def encode_query(query: Optional[Mapping[str, Any]]) -> str:
    """
    Encode query parameters the way the WebNIC API expects.

    List values repeat the key (``ids=a&ids=b``), None values are dropped and
    everything is percent-encoded.

    Args:
        query: Mapping of parameter name to scalar or list value

    Returns:
        Encoded query string without the leading '?'
    """
    if not query:
        return ""

    pairs = []
    for key, value in query.items():
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                continue
            pairs.append((str(key), _query_value(item)))

    return urlencode(pairs)


def is_token_rejected(payload: Mapping[str, Any]) -> bool:
    """Check whether a decoded response says the bearer token is no longer accepted"""
    error = payload.get("error")
    if not isinstance(error, dict):
        return False
    message = error.get("message")
    return isinstance(message, str) and message.startswith(TOKEN_REJECTED_PREFIX)


class ApiConnector:
    """
    Connector for the WebNIC reseller API.

    Expected failures (authentication, transport, undecodable responses) are
    returned as ApiResult values; nothing here raises for them.
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        token_store: Optional[TokenStore] = None,
        config: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
        token_provider: Optional[TokenProvider] = None
    ):
        """
        Initialize the connector.

        Args:
            credentials: API credentials. If None, built from config
            token_store: Token cache. If None, a FileTokenStore at config.token_cache_file
            config: Optional Settings object. If None, loads from get_settings()
            session: Optional requests session to reuse
            token_provider: Optional pre-built TokenProvider (overrides token_store)
        """
        self.config = config or get_settings()
        self.credentials = credentials or self.config.to_credentials()
        self.base_url = self.credentials.base_url
        self.timeout = self.config.timeout
        self.session = session or self._build_session()

        if token_provider is None:
            token_provider = TokenProvider(
                self.credentials,
                token_store or FileTokenStore(self.config.token_cache_file),
                session=self.session,
                timeout=self.timeout,
                token_lifetime=timedelta(minutes=self.config.token_lifetime_minutes)
            )
        self.token_provider = token_provider

        logger.info(f"WebNIC connector initialized - Environment: {self.get_environment()}")
        logger.debug(f"Base URL: {self.base_url}")

    def _build_session(self) -> requests.Session:
        session = requests.Session()
        session.max_redirects = self.config.max_redirects
        adapter = HTTPAdapter(
            pool_connections=self.config.pool_maxsize,
            pool_maxsize=self.config.pool_maxsize
        )
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def get_environment(self) -> str:
        """Get current environment (OTE or PRODUCTION)"""
        return "OTE" if "oteapi." in self.base_url else "PRODUCTION"

    def build_url(
        self,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        service_path: str = ""
    ) -> str:
        """
        Build the full request URL: base URL + service path + path + query.

        Args:
            path: Endpoint path (e.g. '/query')
            query: Optional query parameters
            service_path: Service prefix (e.g. '/domain/v2')

        Returns:
            Absolute URL
        """
        url = f"{self.base_url}{service_path}{path}"
        query_string = encode_query(query)
        if query_string:
            url = f"{url}?{query_string}"
        return url

    def send(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Any] = None,
        service_path: str = "",
        files: Optional[Mapping[str, Any]] = None
    ) -> ApiResult:
        """
        Make one authenticated request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Endpoint path relative to the service path
            query: Query parameters
            body: JSON body, sent only when non-empty
            service_path: Service prefix between base URL and path
            files: Multipart files; when given, body is sent as form fields

        Returns:
            ApiResult (never raises for auth, transport or decode failures)
        """
        url = self.build_url(path, query, service_path)

        token_result = self.token_provider.get_token()
        if not token_result.ok:
            return ApiResult.failure(ErrorKind.AUTH, token_result.message, request_url=url)

        return self._execute(method.upper(), url, token_result.token, body, files)

    def send_batch(
        self,
        specs: Mapping[Any, Union[BatchRequestSpec, Dict[str, Any]]],
        max_workers: Optional[int] = None
    ) -> Dict[Any, ApiResult]:
        """
        Send several independent requests concurrently.

        One token is fetched up front and shared by every request. All requests
        run to completion; a failure in one never affects the others.

        Args:
            specs: Mapping of caller-chosen key to BatchRequestSpec (or a dict
                with the same fields)
            max_workers: Concurrency cap. Defaults to config.batch_max_workers,
                or one worker per request when that is unset

        Returns:
            Dict with exactly one ApiResult per key, in input order

        Raises:
            pydantic.ValidationError: If a spec is malformed
        """
        prepared = {key: self._prepare_spec(key, spec) for key, spec in specs.items()}
        if not prepared:
            return {}

        urls = {
            key: self.build_url(spec.path, spec.query, spec.service_path)
            for key, spec in prepared.items()
        }

        token_result = self.token_provider.get_token()
        if not token_result.ok:
            return {
                key: ApiResult.failure(ErrorKind.AUTH, token_result.message, request_url=urls[key])
                for key in prepared
            }

        workers = max_workers or self.config.batch_max_workers or len(prepared)
        logger.info(f"Sending batch of {len(prepared)} requests ({workers} workers)")

        results: Dict[Any, ApiResult] = {}
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="webnic-batch") as executor:
            futures = {
                executor.submit(
                    self._execute, spec.method, urls[key], token_result.token, spec.body, None
                ): key
                for key, spec in prepared.items()
            }
            for future in as_completed(futures):
                key = futures[future]
                try:
                    results[key] = future.result()
                except Exception as e:
                    logger.exception(f"Batch request {key!r} failed unexpectedly")
                    results[key] = ApiResult.failure(ErrorKind.TRANSPORT, str(e), request_url=urls[key])

        failed = sum(1 for result in results.values() if result.error_kind is not None)
        if failed:
            logger.warning(f"Batch finished with {failed}/{len(results)} failed requests")

        return {key: results[key] for key in prepared}

    @staticmethod
    def _prepare_spec(key: Any, spec: Union[BatchRequestSpec, Dict[str, Any]]) -> BatchRequestSpec:
        if not isinstance(spec, BatchRequestSpec):
            spec = BatchRequestSpec.model_validate({"key": key, **spec})
        if spec.key is None:
            spec = spec.model_copy(update={"key": key})
        return spec

    def _execute(
        self,
        method: str,
        url: str,
        token: str,
        body: Optional[Any],
        files: Optional[Mapping[str, Any]]
    ) -> ApiResult:
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json"
        }
        request_kwargs: Dict[str, Any] = {}
        if files:
            request_kwargs["files"] = files
            if body:
                request_kwargs["data"] = dict(body)
        else:
            headers["Content-Type"] = "application/json"
            if body:
                request_kwargs["json"] = body

        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=True,
                **request_kwargs
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"{method} {url} timed out: {e}")
            return ApiResult.failure(ErrorKind.TRANSPORT, f"Request timed out: {e}", request_url=url)
        except requests.exceptions.ConnectionError as e:
            logger.error(f"{method} {url} connection error: {e}")
            return ApiResult.failure(ErrorKind.TRANSPORT, f"Connection error: {e}", request_url=url)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            return ApiResult.failure(ErrorKind.TRANSPORT, f"Network error: {e}", request_url=url)

        return self._normalize_response(response, url)

    def _normalize_response(self, response: requests.Response, url: str) -> ApiResult:
        try:
            decoded = response.json()
        except ValueError:
            logger.warning(f"Undecodable response from {url} (HTTP {response.status_code})")
            return ApiResult.failure(
                ErrorKind.DECODE,
                response.text or f"Empty response body (HTTP {response.status_code})",
                request_url=url,
                http_status_code=response.status_code
            )

        if not isinstance(decoded, dict):
            decoded = {"data": decoded}

        decoded["url_request"] = url
        decoded["http_status_code"] = response.status_code

        if is_token_rejected(decoded):
            logger.warning("Backend rejected the access token, clearing the token cache")
            self.token_provider.invalidate()

        return ApiResult(
            status_code=SUCCESS_CODE,
            payload=decoded,
            http_status_code=response.status_code,
            request_url=url
        )

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self.session.close()

    def __enter__(self) -> "ApiConnector":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
