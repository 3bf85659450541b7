"""
DNS Zone Services
Zones, zone DNSSEC and URL/email forwarding
"""

from typing import Any, Dict, Optional

from webnic_sdk.services.base import BaseService


class DNSZone(BaseService):
    """Wraps the /dns/v2 zone endpoints"""

    service_root = "/dns"

    def get_domain_zones(self, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        List DNS zones.

        Args:
            filters: Optional query filters: zone, zoneType ('inzone' for
                WebNIC domains, 'outzone' otherwise), subscription,
                subscriptionId, limit (default 10, max 100)
        """
        return self._send("GET", "/zones", filters)

    def add_domain_zone(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/zone", body=post_field)

    def get_domain_zone(self, zone: str) -> Dict[str, Any]:
        return self._send("GET", f"/zone/{zone}")

    def delete_domain_zone(self, zone: str) -> Dict[str, Any]:
        return self._send("DELETE", f"/zone/{zone}")

    def get_domain_zone_statistics(self) -> Dict[str, Any]:
        return self._send("GET", "/statistics")

    def get_premium_subscription_statistics(self) -> Dict[str, Any]:
        return self._send("GET", "/premium-subscription/statistics")

    def add_domain_zone_to_ns_subscription(self, zone: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", f"/zone/{zone}/nameserver-subscription", body=post_field)


class DNSZoneDNSSEC(BaseService):
    """DNSSEC signing of hosted zones"""

    service_root = "/dns"

    def get_domain_zone_dnssec_info(self, zone: str) -> Dict[str, Any]:
        return self._send("GET", f"/zone/{zone}/subscription/dnssec/info")

    def enable_domain_zone_dnssec(self, zone: str) -> Dict[str, Any]:
        return self._send("PUT", f"/zone/{zone}/subscription/dnssec/enable")

    def disable_domain_zone_dnssec(self, zone: str) -> Dict[str, Any]:
        return self._send("PUT", f"/zone/{zone}/subscription/dnssec/disable")

    def get_domain_zone_dnssec_dnskey_record(self, zone: str) -> Dict[str, Any]:
        return self._send("GET", f"/zone/{zone}/subscription/dnssec/dnskey")

    def get_domain_zone_dnssec_ds_record(self, zone: str) -> Dict[str, Any]:
        """DS records to publish at the parent registry once signing is enabled"""
        return self._send("GET", f"/zone/{zone}/subscription/dnssec/ds")


class DNSZoneForwarding(BaseService):
    """URL and email forwarding rules of a zone"""

    service_root = "/dns"
    service_suffix = "/zone"

    def get_zone_url_forwardings(self, zone: str) -> Dict[str, Any]:
        return self._send("GET", f"/{zone}/url-forwardings")

    def add_zone_url_forwarding(self, zone: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", f"/{zone}/url-forwarding", body=post_field)

    def remove_zone_url_forwarding(self, zone: str, subdomain: str) -> Dict[str, Any]:
        return self._send("DELETE", f"/{zone}/url-forwarding", {"subdomain": subdomain})

    def get_zone_email_forwardings(self, zone: str) -> Dict[str, Any]:
        return self._send("GET", f"/{zone}/email-forwardings")

    def add_zone_email_forwarding(self, zone: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", f"/{zone}/email-forwarding", body=post_field)

    def remove_zone_email_forwarding(self, zone: str, user: str) -> Dict[str, Any]:
        return self._send("DELETE", f"/{zone}/email-forwarding", {"user": user})
