"""
API Layer - connector, token handling and result models
"""

from webnic_sdk.api.models import (
    ApiResult,
    BatchRequestSpec,
    CachedToken,
    Credentials,
    ErrorKind,
    TokenResult,
    SUCCESS_CODE,
    FAILURE_CODE,
)
from webnic_sdk.api.token_store import TokenStore, FileTokenStore, MemoryTokenStore
from webnic_sdk.api.token_provider import TokenProvider
from webnic_sdk.api.connector import ApiConnector, encode_query

from webnic_sdk.api.exceptions import (
    APIError,
    AuthenticationError,
    NetworkError,
    ResponseDecodeError,
    ApplicationError,
    InvalidRequestError,
)

__all__ = [
    # Models
    "ApiResult",
    "BatchRequestSpec",
    "CachedToken",
    "Credentials",
    "ErrorKind",
    "TokenResult",
    "SUCCESS_CODE",
    "FAILURE_CODE",

    # Token handling
    "TokenStore",
    "FileTokenStore",
    "MemoryTokenStore",
    "TokenProvider",

    # Connector
    "ApiConnector",
    "encode_query",

    # Exceptions
    "APIError",
    "AuthenticationError",
    "NetworkError",
    "ResponseDecodeError",
    "ApplicationError",
    "InvalidRequestError",
]
