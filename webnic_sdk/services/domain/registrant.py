"""
Registrant Service
Registrant (end customer) user accounts
"""

from typing import Any, Dict

from webnic_sdk.services.base import BaseService


class Registrant(BaseService):
    """Wraps the /domain/v2 registrant account endpoints"""

    service_root = "/domain"

    def create_account(self, username: str) -> Dict[str, Any]:
        """
        Create a registrant user account.

        Returns:
            Response with ``data.registrantUserId``
        """
        return self._send("POST", "/registrant/create", {"username": username})

    def get_account_list(self, username: str) -> Dict[str, Any]:
        return self._send("GET", "/registrant/list", {"username": username})

    def send_login_info(self, domain_name: str) -> Dict[str, Any]:
        return self._send("POST", "/send/login-info", {"domainName": domain_name})

    def update_registrant_user_by_domain_list(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/domain-list/registrant", body=post_field)

    def modify_account(self, domain_name: str, registrant_username: str) -> Dict[str, Any]:
        return self._send("POST", "/registrant-account", {
            "domainName": domain_name,
            "registrantUsername": registrant_username
        })
