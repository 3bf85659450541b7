"""
Domain Service
Domain lookups, registration lifecycle and domain settings
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from webnic_sdk.services.base import BaseService, compact


class Domain(BaseService):
    """Wraps the /domain/v2 endpoints for individual domains"""

    service_root = "/domain"

    def check_domain_pattern(self, domain_name: str) -> Dict[str, Any]:
        """
        Check whether a domain name follows the allowed naming pattern.

        Args:
            domain_name: Domain to check, e.g. 'example.com'

        Returns:
            Response with ``data.valid``
        """
        return self._send("GET", "/check-domain-pattern", {"domainName": domain_name})

    def query_domain(self, domain_name: str, rescode: Optional[str] = None) -> Dict[str, Any]:
        """
        Query a domain's availability.

        Args:
            domain_name: Domain to query
            rescode: Optional reseller code for special pricing

        Returns:
            Response with ``data.available``, ``data.premium``,
            ``data.punyCodeDomainName`` and ``data.premiumInfo``
        """
        return self._send("GET", "/query", compact({
            "domainName": domain_name,
            "rescode": rescode
        }))

    def count_total_domains(self) -> Dict[str, Any]:
        return self._send("GET", "/count")

    def get_domain_info(self, domain_name: str) -> Dict[str, Any]:
        """
        Get status, nameservers, contacts and expiry details of a domain.

        Args:
            domain_name: Domain owned by the reseller

        Returns:
            Response with ``data.status``, ``data.nameservers``,
            ``data.contactId`` (registrant/admin/technical/billing), ``data.dtexpire`` ...
        """
        return self._send("GET", "/info", {"domainName": domain_name})

    def get_universal_whois_info(self, domain_name: str) -> Dict[str, Any]:
        return self._send("GET", "/whois", {"domainName": domain_name})

    def update_domain_status(self, domain_name: str, status: str) -> Dict[str, Any]:
        """
        Lock or unlock a domain.

        Args:
            domain_name: Domain to update
            status: Registry status value, passed through as-is
        """
        return self._send("PUT", "/status", {
            "domainName": domain_name,
            "status": status
        })

    def get_default_nameservers(self) -> Dict[str, Any]:
        """Get WebNIC's default nameservers"""
        return self._send("GET", "/dns/default")

    def update_domain_nameserver(self, domain_name: str, nameservers: List[str]) -> Dict[str, Any]:
        return self._send("PUT", "/dns", {"domainName": domain_name}, {"nameservers": nameservers})

    def toggle_auto_renew(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("PUT", "/auto-renew/toggle", body=post_field)

    def toggle_whois_privacy(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("PUT", "/whois-privacy/toggle", body=post_field)

    def toggle_proxy_subscription(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("PUT", "/proxy", body=post_field)

    def register_domain(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """
        Register a domain.

        Args:
            post_field: Registration payload (domainName, term, nameservers,
                registrantUserId and the four *ContactId fields)

        Returns:
            Registration response
        """
        return self._send("POST", "/register", body=post_field)

    def renew_domain(self, renew_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Renew a domain.

        Args:
            renew_data: ``{"domainName": ..., "term": ..., "domainType": ...}``
        """
        return self._send("POST", "/renew", body=renew_data)

    def restore_domain(self, restore_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/restore", body=restore_data)

    def delete_domain(self, domain_name: str) -> Dict[str, Any]:
        return self._send("DELETE", "/delete", {"domainName": domain_name})

    def resend_verification_email(self, domain_name: str) -> Dict[str, Any]:
        return self._send("POST", "/resend-verification-email", {"domainName": domain_name})

    def download_certificate(self, domain_name: str, lang: Optional[str] = "eng") -> Dict[str, Any]:
        """
        Download the registration certificate of a domain.

        Args:
            domain_name: Domain name
            lang: Certificate language (default 'eng')
        """
        return self._send("GET", "/download/certificate", compact({
            "domainName": domain_name,
            "lang": lang
        }))

    def reset_auth_info(self, domain_name: str) -> Dict[str, Any]:
        """Reset the authorization (EPP) code of a domain"""
        return self._send("POST", "/auth-info/reset", {"domainName": domain_name})

    def send_auth_info(self, domain_name: str) -> Dict[str, Any]:
        """Email the authorization (EPP) code to the registrant"""
        return self._send("POST", "/auth-info/send", {"domainName": domain_name})

    def upload_verification_document(
        self,
        order_id: int,
        document_type: str,
        file_path: Union[str, Path]
    ) -> Dict[str, Any]:
        """
        Upload a verification document for a pending order.

        Args:
            order_id: Pending order ID, e.g. 72
            document_type: Document type, e.g. 'business_registration'
            file_path: Path of the file to upload

        Returns:
            Response with ``data`` holding the uploaded document's URL path

        Raises:
            FileNotFoundError: If file_path does not exist
        """
        path = Path(file_path)
        with path.open("rb") as document:
            return self._send(
                "POST",
                f"/upload-document/{order_id}",
                body={"type": document_type},
                files={"file": (path.name, document)}
            )

    def download_verification_document(self, order_id: int, document_url: str) -> Dict[str, Any]:
        return self._send("GET", f"/download-document/{order_id}", {"url": document_url})

    def get_domain_statistics(self, stat_type: str) -> Dict[str, Any]:
        return self._send("GET", "/statistics", {"type": stat_type})

    def get_top_domain_available_list(self, domain_name: str) -> Dict[str, Any]:
        return self._send("GET", "/top-domain-available-list", {"domainName": domain_name})
