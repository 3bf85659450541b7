"""
Contact Service
Create, query, modify and delete domain contacts
"""

from typing import Any, Dict

from webnic_sdk.services.base import BaseService


class Contact(BaseService):
    """Wraps the /domain/v2/contact endpoints"""

    service_root = "/domain"
    service_suffix = "/contact"

    def create_contact(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create one or more contacts.

        Args:
            post_field: Contact payload. ``contacts`` is a list of entries with
                ``contactType`` (registrant/administrator/technical/billing)
                and the address, phone and email fields. Registry specific
                data (CN unique codes, US nexus ...) goes under ``details``.

        Returns:
            Response whose ``data`` lists ``{"contactType", "contactId"}`` pairs
        """
        return self._send("POST", "/create", body=post_field)

    def create_contact_at_registry(
        self,
        ext: str,
        contact_type: str,
        contact_id: str,
        action: str
    ) -> Dict[str, Any]:
        """
        Push an existing contact to the registry of an extension.

        Args:
            ext: Extension, e.g. 'com'
            contact_type: 'registrant', 'administrator', 'technical' or 'billing'
            contact_id: WebNIC contact ID, e.g. 'WEBNIC1030T'
            action: Registry action, e.g. 'register'
        """
        return self._send("POST", f"/create/{ext}/{contact_type}", {
            "contactId": contact_id,
            "action": action
        })

    def query_contact_info(self, contact_id: str) -> Dict[str, Any]:
        return self._send("GET", "/query", {"contactId": contact_id})

    def modify_contact_at_registry(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/modify-at-registry", body=post_field)

    def modify_contact(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/modify", body=post_field)

    def replace_contact(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """Swap the contacts attached to a domain for other existing contacts"""
        return self._send("POST", "/replace", body=post_field)

    def delete_contact(self, contact_id: str) -> Dict[str, Any]:
        return self._send("DELETE", "/delete", {"contactId": contact_id})
