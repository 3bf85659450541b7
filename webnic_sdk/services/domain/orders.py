"""
Order, log and registry program services
Small endpoint groups under /domain/v2
"""

from typing import Any, Dict, List

from webnic_sdk.services.base import BaseService


class PendingOrder(BaseService):
    service_root = "/domain"

    def get_pending_order_info(self, order_id: str) -> Dict[str, Any]:
        return self._send("GET", "/order/info", {"id": order_id})


class DomainActionLog(BaseService):
    service_root = "/domain"

    def get_info(self, trace_id: str) -> Dict[str, Any]:
        """Look up the log entry of an earlier call by its trace ID"""
        return self._send("GET", "/log/info", {"traceId": trace_id})


class DomainBroker(BaseService):
    service_root = "/domain"

    def initiate_domain_broker(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", "/broker/initiate", body=post_field)


class RegistryProgram(BaseService):
    """Registry specific promotions (.hk bundles, free .tw domains)"""

    service_root = "/domain"

    def bundle_hk_domain(self, domain_name: str, bundle_domain_name: str) -> Dict[str, Any]:
        return self._send("POST", "/registry-program/bundle-hk-domain", {
            "domainName": domain_name,
            "bundleDomainName": bundle_domain_name
        })

    def check_free_tw_domain_eligible(self, ubn_id: str, company_name: str, domain_name: str) -> Dict[str, Any]:
        return self._send("POST", "/registry-program/check-free-tw-domain-eligibility", {
            "ubnId": ubn_id,
            "companyName": company_name,
            "domainName": domain_name
        })


class SecondhandDomain(BaseService):
    service_root = "/domain"

    def insert(self, secondhand_domains: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Insert secondhand domains.

        Args:
            secondhand_domains: List of ``{"domainName", "regid", "admid",
                "tecid", "bilid", "nameservers"}`` entries; sent as a JSON array
        """
        return self._send("POST", "/secondhand-domain/insert", body=secondhand_domains)
