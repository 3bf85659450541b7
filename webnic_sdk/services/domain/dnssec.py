"""
Domain DNSSEC Service
DS records published at the registry for a domain
"""

from typing import Any, Dict

from webnic_sdk.services.base import BaseService


class DomainDnssec(BaseService):
    """Wraps the /domain/v2/dnssec endpoints"""

    service_root = "/domain"
    service_suffix = "/dnssec"

    def check_dnssec_supported(self, domain_name: str) -> Dict[str, Any]:
        return self._send("GET", "/support", {"domainName": domain_name})

    def get_dnssec_info(self, domain_name: str) -> Dict[str, Any]:
        return self._send("GET", "", {"domainName": domain_name})

    def update_dnssec(self, domain_name: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """
        Replace the DS records of a domain.

        Args:
            domain_name: Domain name
            post_field: ``{"dsData": [{"keyTag", "algorithm", "digestType", "digest"}, ...]}``;
                values are passed to the registry unchanged
        """
        return self._send("POST", "", {"domainName": domain_name}, post_field)

    def delete_dnssec(self, domain_name: str) -> Dict[str, Any]:
        return self._send("DELETE", "", {"domainName": domain_name})
