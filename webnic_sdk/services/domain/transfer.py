"""
Domain Transfer Service
Registrar transfers (in and away) and reseller transfers
"""

from typing import Any, Dict

from webnic_sdk.services.base import BaseService


class DomainTransfer(BaseService):
    """Wraps the /domain/v2 transfer endpoints"""

    service_root = "/domain"

    def query_transfer_type(self, domain_name: str) -> Dict[str, Any]:
        """
        Find out how a domain can be moved to this account.

        Returns:
            Response with ``data.transferType``: 'registrar_transfer' when the
            domain sits at another registrar, 'reseller_transfer' when it is
            already with WebNIC under another reseller
        """
        return self._send("GET", "/query-transfer-type", {"domainName": domain_name})

    # Registrar transfer in

    def submit_registrar_transfer_in(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/transfer-in", body=post_field)

    def get_registrar_transfer_in_status_by_domain(self, domain_name: str) -> Dict[str, Any]:
        return self._send("GET", "/transfer-in/status", {"domainName": domain_name})

    def get_registrar_transfer_in_status_by_id(self, transfer_id: str) -> Dict[str, Any]:
        return self._send("GET", f"/transfer-in/status/{transfer_id}")

    # Registrar transfer away

    def get_registrar_transfer_away_status_by_domain(self, domain_name: str) -> Dict[str, Any]:
        return self._send("GET", "/transfer-away/status", {"domainName": domain_name})

    def get_registrar_transfer_away_status_by_id(self, transfer_id: str) -> Dict[str, Any]:
        return self._send("GET", f"/transfer-away/status/{transfer_id}")

    def update_registrar_transfer_away_status(self, transfer_id: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """
        Approve or reject an outgoing registrar transfer.

        Args:
            transfer_id: Transfer away ID
            post_field: ``{"status": "approve" | "reject", ...}``
        """
        return self._send("PUT", f"/transfer-away/status/{transfer_id}", body=post_field)

    # Reseller transfer

    def submit_reseller_transfer(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/reseller-transfer", body=post_field)

    def get_reseller_transfer_status_by_domain(self, domain_name: str) -> Dict[str, Any]:
        return self._send("GET", "/reseller-transfer/status", {"domainName": domain_name})

    def get_reseller_transfer_status_by_id(self, transfer_id: str) -> Dict[str, Any]:
        return self._send("GET", f"/reseller-transfer/status/{transfer_id}")

    def update_reseller_transfer_away_status(self, transfer_id: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("PUT", f"/reseller-transfer/status/{transfer_id}", body=post_field)
