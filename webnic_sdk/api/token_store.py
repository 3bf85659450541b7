"""
Token storage backends

A store keeps a single cached bearer token. Saving a token for a different
backend replaces whatever was there before.
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Optional, Protocol, Union

from pydantic import ValidationError

from webnic_sdk.api.models import CachedToken
from webnic_sdk.utils.logger import get_logger


logger = get_logger(__name__)


class TokenStore(Protocol):
    """Protocol for bearer token storage."""

    def load(self) -> Optional[CachedToken]:
        """Return the stored token, or None if nothing usable is stored."""
        ...

    def save(self, token: CachedToken) -> None:
        """Store a token, replacing any previous one."""
        ...

    def invalidate(self) -> None:
        """Remove the stored token."""
        ...


class FileTokenStore:
    """
    JSON file backed token store.

    The file holds one object: ``{"token": ..., "expires_at": ..., "base_url": ...}``.
    Writes go to a temporary file in the same directory which is then moved
    over the target, so concurrent readers see either the old or the new token.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Optional[CachedToken]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Could not read token cache {self.path}: {e}")
            return None

        # UnicodeDecodeError is a ValueError too
        try:
            content = raw.decode("utf-8")
            data = json.loads(content) if content.strip() else {}
        except ValueError:
            logger.warning(f"Token cache {self.path} is not valid UTF-8 JSON, ignoring it")
            return None

        if not isinstance(data, dict) or not data.get("token") or not data.get("expires_at"):
            return None

        try:
            return CachedToken.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Token cache {self.path} has an unexpected shape: {e.error_count()} error(s)")
            return None

    def save(self, token: CachedToken) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(token.model_dump(mode="json"), indent=4)

        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                tmp_file.write(content)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

        logger.debug(f"Token cached in {self.path} until {token.expires_at.isoformat()}")

    def invalidate(self) -> None:
        try:
            self.path.unlink()
            logger.info(f"Cached token removed: {self.path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Could not remove token cache {self.path}: {e}")


class MemoryTokenStore:
    """In-process token store, mostly for tests and short scripts"""

    def __init__(self, token: Optional[CachedToken] = None):
        self._token = token
        self._lock = threading.Lock()

    def load(self) -> Optional[CachedToken]:
        with self._lock:
            return self._token

    def save(self, token: CachedToken) -> None:
        with self._lock:
            self._token = token

    def invalidate(self) -> None:
        with self._lock:
            self._token = None
