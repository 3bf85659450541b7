"""
WebNIC reseller API SDK
Domain registration and DNS hosting client
"""

from webnic_sdk.sdk import WebnicSDK
from webnic_sdk.api import (
    ApiConnector,
    ApiResult,
    BatchRequestSpec,
    CachedToken,
    Credentials,
    ErrorKind,
    FileTokenStore,
    MemoryTokenStore,
    TokenProvider,
    TokenStore,
    APIError,
    AuthenticationError,
    NetworkError,
    ResponseDecodeError,
    ApplicationError,
    InvalidRequestError,
)
from webnic_sdk.utils.config import Settings, get_settings

__version__ = "1.0.0"

__all__ = [
    "WebnicSDK",
    "ApiConnector",
    "ApiResult",
    "BatchRequestSpec",
    "CachedToken",
    "Credentials",
    "ErrorKind",
    "FileTokenStore",
    "MemoryTokenStore",
    "TokenProvider",
    "TokenStore",
    "APIError",
    "AuthenticationError",
    "NetworkError",
    "ResponseDecodeError",
    "ApplicationError",
    "InvalidRequestError",
    "Settings",
    "get_settings",
]
