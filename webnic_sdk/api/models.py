"""
Data models shared by the connector layer
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from webnic_sdk.utils.config import DEFAULT_BASE_URL, DEFAULT_TOKEN_ENDPOINT, DEFAULT_API_VERSION


# WebNIC application codes
SUCCESS_CODE = "1000"
FAILURE_CODE = "2400"

# Format used for expires_at in the token cache file
TOKEN_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


class ErrorKind(str, Enum):
    """Why a result failed before the backend could answer"""
    AUTH = "auth"
    TRANSPORT = "transport"
    DECODE = "decode"


class Credentials(BaseModel):
    """API user credentials and endpoints for one connector"""

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str = Field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    token_endpoint: str = DEFAULT_TOKEN_ENDPOINT
    api_version: str = DEFAULT_API_VERSION

    @field_validator("base_url")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        return v.rstrip("/")


class CachedToken(BaseModel):
    """
    A bearer token persisted between runs.

    The token is usable only while it has not expired and was issued for the
    backend identified by ``base_url``.
    """

    token: str
    expires_at: datetime
    base_url: str

    @field_validator("expires_at", mode="before")
    @classmethod
    def parse_expires_at(cls, v: Any) -> Any:
        if isinstance(v, str):
            try:
                v = datetime.strptime(v, TOKEN_TIME_FORMAT)
            except ValueError:
                v = datetime.fromisoformat(v)
        if isinstance(v, datetime) and v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v

    @field_serializer("expires_at")
    def serialize_expires_at(self, v: datetime) -> str:
        return v.astimezone(timezone.utc).strftime(TOKEN_TIME_FORMAT)

    def is_usable(self, base_url: str, now: datetime) -> bool:
        """Check expiry and that the token belongs to the given backend"""
        return now < self.expires_at and self.base_url == base_url


class TokenResult(BaseModel):
    """Outcome of a token lookup: a token on success, a message otherwise"""

    code: str
    token: str = Field(default="", repr=False)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE and bool(self.token)


class ApiResult(BaseModel):
    """
    Normalized outcome of one API call.

    ``status_code`` reports whether the SDK got a decodable answer; the
    backend's own application code lives in ``payload["code"]``. An HTTP 200
    with a decoded body is still a success here even when the backend says the
    operation failed, so callers should check ``ok`` rather than the HTTP code.
    """

    status_code: str
    payload: Dict[str, Any] = Field(default_factory=dict)
    http_status_code: Optional[int] = None
    request_url: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        request_url: Optional[str] = None,
        http_status_code: Optional[int] = None,
    ) -> "ApiResult":
        """Build a failed result with the WebNIC error envelope as payload"""
        return cls(
            status_code=FAILURE_CODE,
            payload={"code": FAILURE_CODE, "error": {"message": message}},
            http_status_code=http_status_code,
            request_url=request_url,
            error_kind=kind,
        )

    @property
    def application_code(self) -> Optional[str]:
        """The backend's code from the payload, if it sent one"""
        code = self.payload.get("code")
        return str(code) if code is not None else None

    @property
    def ok(self) -> bool:
        """True when the call completed and the backend did not report an error"""
        if self.status_code != SUCCESS_CODE:
            return False
        return self.application_code in (None, SUCCESS_CODE)

    @property
    def error_message(self) -> Optional[str]:
        error = self.payload.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            return str(message) if message is not None else None
        if isinstance(error, str):
            return error
        return None

    @property
    def data(self) -> Any:
        return self.payload.get("data")

    def to_dict(self) -> Dict[str, Any]:
        """
        The dict form returned by service methods. Decoded responses already
        carry ``http_status_code`` and ``url_request`` in the payload.
        """
        return dict(self.payload)

    def raise_for_error(self) -> "ApiResult":
        """
        Raise the matching APIError subclass if this result is not ok.

        Returns:
            self, so calls can be chained

        Raises:
            AuthenticationError, NetworkError, ResponseDecodeError or ApplicationError
        """
        from webnic_sdk.api.exceptions import error_for_result

        if not self.ok:
            raise error_for_result(self)
        return self


class BatchRequestSpec(BaseModel):
    """One request inside a batch"""

    model_config = ConfigDict(extra="forbid")

    key: Optional[Any] = None
    method: HttpMethod
    path: str
    query: Dict[str, Any] = Field(default_factory=dict)
    body: Union[Dict[str, Any], List[Any]] = Field(default_factory=dict)
    service_path: str = ""

    @field_validator("method", mode="before")
    @classmethod
    def upper_method(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v
