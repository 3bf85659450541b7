"""
Domain Host Service
Nameserver (host object) management at the registries
"""

from typing import Any, Dict

from webnic_sdk.services.base import BaseService


class DomainHost(BaseService):
    """Wraps the /domain/v2/host endpoints"""

    service_root = "/domain"
    service_suffix = "/host"

    def create_host_by_extension(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a host object at the registry of one extension.

        Args:
            post_field: ``{"host": "ns1.example.com", "ipList": [...], "ext": "com"}``
        """
        return self._send("POST", "/create/extension", body=post_field)

    def modify_host(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/modify", body=post_field)

    def get_host_info(self, host: str) -> Dict[str, Any]:
        return self._send("GET", "/info", {"host": host})

    def delete_host_by_extension(self, host: str, ext: str) -> Dict[str, Any]:
        return self._send("DELETE", "/extension", {"host": host, "ext": ext})

    def check_host(self, nameserver: str, ext: str) -> Dict[str, Any]:
        """
        Check whether a host object can be created at a registry.

        Returns:
            Response with ``data.available``; True means the host is not yet
            registered and must be created before it can be used
        """
        return self._send("POST", "/check", {"nameserver": nameserver, "ext": ext})

    def get_host_registered_registries(self, nameserver: str) -> Dict[str, Any]:
        return self._send("GET", "/registered-registries", {"nameserver": nameserver})
