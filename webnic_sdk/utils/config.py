"""
Configuration management using Pydantic Settings
Loads and validates WEBNIC_* environment variables (optionally from a .env file)
"""

from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://oteapi.webnic.cc"
DEFAULT_TOKEN_ENDPOINT = "https://oteapi.webnic.cc/reseller/v2/api-user/token"
DEFAULT_API_VERSION = "/v2"


class Settings(BaseSettings):
    """
    SDK settings loaded from environment variables.
    Defaults target the WebNIC OTE (test) environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="WEBNIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # WebNIC API credentials
    client_id: str = Field(
        default="",
        description="WebNIC API username"
    )
    client_secret: str = Field(
        default="",
        description="WebNIC API secret"
    )

    # Endpoints
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="WebNIC API base URL (OTE or production)"
    )
    token_endpoint: str = Field(
        default=DEFAULT_TOKEN_ENDPOINT,
        description="Credential exchange endpoint"
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        description="API version prefix inserted into service paths"
    )

    # Token cache
    token_cache_file: Path = Field(
        default=Path(".webnic") / "webnic_token.json",
        description="File used to persist the bearer token between runs"
    )
    token_lifetime_minutes: int = Field(
        default=50,
        gt=0,
        description="How long a fetched token is trusted before re-authenticating"
    )

    # HTTP transport
    connect_timeout: float = Field(default=10.0, gt=0)
    read_timeout: float = Field(default=30.0, gt=0)
    max_redirects: int = Field(default=10, ge=0)
    pool_maxsize: int = Field(default=20, gt=0)
    batch_max_workers: Optional[int] = Field(
        default=None,
        gt=0,
        description="Cap on concurrent batch requests; unset runs every request at once"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_console: bool = Field(
        default=True,
        description="Write SDK logs to stdout with colors"
    )
    log_dir: Optional[Path] = Field(
        default=None,
        description="Directory for daily log files; unset disables file logging"
    )
    log_propagate: Optional[bool] = Field(
        default=None,
        description="Pass SDK log records to the root logger (default: only when log_console is off)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("base_url")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def normalize_api_version(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @property
    def timeout(self) -> tuple:
        """(connect, read) timeout tuple as accepted by requests"""
        return (self.connect_timeout, self.read_timeout)

    def is_production(self) -> bool:
        """Check if pointed at the production API rather than OTE"""
        return "oteapi." not in self.base_url

    def to_credentials(self):
        """
        Build the immutable credentials used by the connector.

        Returns:
            Credentials instance

        Raises:
            ValueError: If client_id or client_secret is missing
        """
        from webnic_sdk.api.models import Credentials

        if not self.client_id or not self.client_secret:
            raise ValueError(
                "WebNIC credentials are not configured. Set WEBNIC_CLIENT_ID and "
                "WEBNIC_CLIENT_SECRET in the environment or in a .env file."
            )
        return Credentials(
            client_id=self.client_id,
            client_secret=self.client_secret,
            base_url=self.base_url,
            token_endpoint=self.token_endpoint,
            api_version=self.api_version,
        )


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton instance.
    Reads the environment (and .env if present) on first call.

    Returns:
        Settings instance

    Raises:
        ValidationError: If environment variables are invalid
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings():
    """
    Reset the settings singleton (useful for testing)
    """
    global _settings
    _settings = None
