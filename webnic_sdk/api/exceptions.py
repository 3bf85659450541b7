"""
Exceptions for WebNIC API operations

The connector itself returns failures as ApiResult values. These exceptions
are raised by ApiResult.raise_for_error() and for invalid caller input.
"""

from webnic_sdk.api.models import ErrorKind


class APIError(Exception):
    """Base exception for all API errors"""

    def __init__(self, message: str, status_code: int = None, response_data: dict = None):
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        super().__init__(self.message)

    def __str__(self):
        if self.status_code:
            return f"{self.__class__.__name__} (HTTP {self.status_code}): {self.message}"
        return f"{self.__class__.__name__}: {self.message}"


class AuthenticationError(APIError):
    """Raised when the credential exchange fails"""
    pass


class NetworkError(APIError):
    """Raised when the HTTP call could not complete (DNS, TCP, TLS, timeout)"""
    pass


class ResponseDecodeError(APIError):
    """Raised when the response body is not valid JSON"""
    pass


class ApplicationError(APIError):
    """Raised when the backend answered with a non-success application code"""

    @property
    def code(self):
        return self.response_data.get("code")


class InvalidRequestError(APIError):
    """Raised when a request cannot be built from the given arguments"""
    pass


def error_for_result(result) -> APIError:
    """
    Map a failed ApiResult onto the matching exception.

    Args:
        result: ApiResult that is not ok

    Returns:
        APIError subclass instance (not raised)
    """
    message = result.error_message or "Unknown error"
    error_classes = {
        ErrorKind.AUTH: AuthenticationError,
        ErrorKind.TRANSPORT: NetworkError,
        ErrorKind.DECODE: ResponseDecodeError,
    }
    error_class = error_classes.get(result.error_kind, ApplicationError)

    return error_class(
        message,
        status_code=result.http_status_code,
        response_data=result.payload
    )
