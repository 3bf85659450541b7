"""
DNS Subscription Services
Premium DNS subscriptions and white-label nameservers
"""

from typing import Any, Dict, Optional

from webnic_sdk.services.base import BaseService


class DNSSubscription(BaseService):
    """Wraps the /dns/v2/subscription endpoints"""

    service_root = "/dns"
    service_suffix = "/subscription"

    def add_domain_zone_to_partner_subscription(self, zone: str) -> Dict[str, Any]:
        return self._send("POST", f"/partner/zone/{zone}")

    def remove_domain_zone_from_partner_subscription(self, zone: str) -> Dict[str, Any]:
        return self._send("DELETE", f"/partner/zone/{zone}")

    def get_domain_subscription(self, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        List standalone domain subscriptions.

        Args:
            filters: Optional query filters: domainName, subscriptionId,
                subscriptionProduct, subscriptionAutoRenew, limit (max 100)
        """
        return self._send("GET", "/standalone-domains", filters)

    def subscribe_domain_subscription(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """
        Subscribe a domain to a DNS product.

        Args:
            post_field: ``{"domainName", "subscriptionProduct", "subscriptionTerm",
                "subscriptionAutoRenew"}``
        """
        return self._send("POST", "/standalone-domains", body=post_field)

    def get_domain_subscription_by_id(self, subscription_id: str) -> Dict[str, Any]:
        return self._send("GET", f"/standalone-domains/{subscription_id}")

    def get_domain_subscription_by_domain_name(self, domain_name: str) -> Dict[str, Any]:
        return self._send("GET", "/standalone-domain/get-by-domain", {"domainName": domain_name})

    def renew_domain_subscription(self, subscription_id: str, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("PUT", f"/standalone-domain/{subscription_id}/renew", body=post_field)

    def unsubscribe_domain_subscription(self, subscription_id: str) -> Dict[str, Any]:
        return self._send("DELETE", f"/standalone-domain/{subscription_id}")

    def enable_domain_subscription_auto_renewal(self, subscription_id: str) -> Dict[str, Any]:
        return self._send("PUT", f"/standalone-domain/{subscription_id}/auto-renewal/enable")

    def disable_domain_subscription_auto_renewal(self, subscription_id: str) -> Dict[str, Any]:
        return self._send("PUT", f"/standalone-domain/{subscription_id}/auto-renewal/disable")


class DNSSubscriptionWhitelabel(BaseService):
    """White-label nameservers of the partner subscription"""

    service_root = "/dns"
    service_suffix = "/subscription/whitelabel/ns"

    def get_whitelabel_nameserver(self) -> Dict[str, Any]:
        return self._send("GET", "")

    def save_whitelabel_nameservers(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "", body=post_field)

    def remove_whitelabel_nameservers(self) -> Dict[str, Any]:
        return self._send("DELETE", "")
