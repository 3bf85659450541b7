"""
DNS Zone Record Services
Basic and subscription records of a zone, and record templates
"""

from typing import Any, Dict, Optional

from webnic_sdk.services.base import BaseService


def _record_filter(params: Optional[Dict[str, Any]], *keys: str) -> Dict[str, Any]:
    params = params or {}
    return {key: params.get(key, "") for key in keys}


class DNSZoneRecord(BaseService):
    """Wraps the /dns/v2/zone record endpoints"""

    service_root = "/dns"
    service_suffix = "/zone"

    def get_zone_records(self, zone: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Get the records of a zone.

        Subscription records are returned when the zone has any, otherwise the
        basic records; ``sourceFrom`` on each record says which.

        Args:
            zone: Zone name, e.g. 'example.com'
            params: Optional filters ``type`` and ``name``
        """
        return self._send("GET", f"/zone/{zone}/records", params)

    def get_supported_record_types(self) -> Dict[str, Any]:
        return self._send("GET", "/record-types")

    def get_basic_record_nameservers(self) -> Dict[str, Any]:
        return self._send("GET", "/basic/record/nameservers")

    def get_subscription_record_nameservers(self) -> Dict[str, Any]:
        return self._send("GET", "/subscription/record/nameservers")

    # Basic records

    def get_zone_basic_records(self, zone: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._send("GET", f"/{zone}/basic/records", _record_filter(params, "type", "name"))

    def save_zone_basic_record(self, zone: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", f"/{zone}/basic/record", body=post_field)

    def delete_zone_basic_record(self, zone: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Delete a basic record.

        Args:
            zone: Zone name
            params: ``{"type": ..., "name": ...}``; both are required
        """
        return self._send("DELETE", f"/{zone}/basic/record", {
            "type": params["type"],
            "name": params["name"]
        })

    def save_zone_record(self, zone: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", f"/{zone}/record", body=post_field)

    def delete_zone_record(self, zone: str, params: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("DELETE", f"/{zone}/record", {
            "type": params["type"],
            "name": params["name"]
        })

    # Subscription records

    def get_zone_subscription_records(self, zone: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._send("GET", f"/{zone}/subscription/records", _record_filter(params, "type", "name"))

    def add_zone_subscription_record(self, zone: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """
        Add a subscription record.

        Args:
            zone: Zone name
            post_field: ``{"name", "type", "ttl", "rdatas": [{"value", "attributes"}], "remarks"}``
        """
        return self._send("POST", f"/{zone}/subscription/record", body=post_field)

    def remove_zone_subscription_record(self, zone: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """Remove individual rdata values from a subscription record"""
        return self._send("POST", f"/{zone}/subscription/record/remove", body=post_field)

    def replace_zone_subscription_record(self, zone: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", f"/{zone}/subscription/record/replace", body=post_field)

    def delete_zone_subscription_record(self, zone: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._send(
            "DELETE",
            f"/{zone}/subscription/record",
            _record_filter(params, "type", "name", "value")
        )


class DNSZoneRecordTemplate(BaseService):
    """Record templates that can be applied to subscription zones"""

    service_root = "/dns"
    service_suffix = "/zone/subscription"

    def get_zone_subscription_record_templates(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._send("GET", "/templates", _record_filter(params, "name", "limit"))

    def create_zone_subscription_record_template(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/template", body=post_field)

    def get_zone_subscription_record_template_by_id(self, template_id: str) -> Dict[str, Any]:
        return self._send("GET", f"/template/{template_id}")

    def update_zone_subscription_record_template_by_id(self, template_id: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("PUT", f"/template/{template_id}", body=post_field)

    def add_zone_sub_to_template(self, template_id: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """Attach subscription zones to a template"""
        return self._send("POST", f"/template/{template_id}/add", body=post_field)

    def remove_zone_sub_from_template(self, template_id: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", f"/template/{template_id}/remove", body=post_field)

    def delete_zone_subscription_record_template(self, template_id: str) -> Dict[str, Any]:
        return self._send("DELETE", f"/template/{template_id}")
