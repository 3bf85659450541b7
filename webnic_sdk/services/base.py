"""
Base Service
Common plumbing for the WebNIC API service wrappers
"""

from typing import Any, Dict, Mapping, Optional

from webnic_sdk.api.connector import ApiConnector


class BaseService:
    """
    Base class for WebNIC service wrappers.

    Each service is bound to a path prefix built from ``service_root`` and the
    connector's API version, e.g. ``/domain`` + ``/v2`` + ``/contact``.
    Subclasses set ``service_root`` and ``service_suffix``.
    """

    service_root: str = ""
    service_suffix: str = ""

    def __init__(self, connector: ApiConnector):
        """
        Args:
            connector: Shared ApiConnector used for every request
        """
        self.connector = connector
        self.service_path = (
            f"{self.service_root}{connector.credentials.api_version}{self.service_suffix}"
        )

    def _send(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Any] = None,
        files: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Send a request under this service's path and return the response dict.

        Returns:
            Decoded body merged with ``http_status_code`` and ``url_request``,
            or a ``{"code": "2400", "error": {"message": ...}}`` envelope
        """
        result = self.connector.send(
            method,
            path,
            query=query,
            body=body,
            service_path=self.service_path,
            files=files
        )
        return result.to_dict()

    def get_service_name(self) -> str:
        """
        Get service name.
        Default implementation returns class name.
        """
        return self.__class__.__name__


def compact(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop None and empty-string values from a parameter mapping"""
    return {key: value for key, value in params.items() if value is not None and value != ""}
