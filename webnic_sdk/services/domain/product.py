"""
Domain Product Service
Extensions, pricing and registration rules
"""

from typing import Any, Dict, Optional

from webnic_sdk.services.base import BaseService


class DomainProduct(BaseService):
    """Wraps the /domain/v2 product and pricing endpoints"""

    service_root = "/domain"

    def get_smart_query_tlds(self, domain_name: str, sort_by: Optional[str] = None) -> Dict[str, Any]:
        return self._send("GET", "/smart-query", {"domainName": domain_name, "sortBy": sort_by})

    def get_domain_extensions(self) -> Dict[str, Any]:
        return self._send("GET", "/exts")

    def get_extensions_price(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """
        Get standard pricing for extensions.

        Args:
            post_field: ``{"filters": [...], "pagination": {"page": 1, "pageSize": 10}}``
        """
        return self._send("POST", "/exts/pricing", body=post_field)

    def get_extensions_promo_pricing(self, post_field: Dict[str, Any]) -> Dict[str, Any]:
        """
        Get promotional pricing for extensions.

        Same endpoint as get_extensions_price; the promo filter in
        ``post_field`` selects promotional prices.
        """
        return self._send("POST", "/exts/pricing", body=post_field)

    def get_extensions_rule(
        self,
        ext: str,
        rule_type: str,
        category: str = "",
        is_proxy: bool = False
    ) -> Dict[str, Any]:
        """
        Get the rules of an extension.

        Args:
            ext: Extension, e.g. '.com'
            rule_type: Rule type, e.g. 'registration' or 'DOCUPLOAD'
            category: Document category, only sent for DOCUPLOAD rules
            is_proxy: Proxy flag, only sent for DOCUPLOAD rules when True
        """
        params: Dict[str, Any] = {"ext": ext, "ruleType": rule_type}

        if rule_type == "DOCUPLOAD":
            params["category"] = category
            if is_proxy:
                params["isProxy"] = is_proxy

        return self._send("GET", "/ext-rules", params)
