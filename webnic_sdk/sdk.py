"""
WebNIC SDK entry point
Builds one connector and exposes every service wrapper on it
"""

from typing import Any, Dict, Mapping, Optional, Union

import requests

from webnic_sdk.api.connector import ApiConnector
from webnic_sdk.api.models import BatchRequestSpec, Credentials
from webnic_sdk.api.token_store import TokenStore
from webnic_sdk.services import (
    Action,
    Contact,
    DNSSubscription,
    DNSSubscriptionWhitelabel,
    DNSZone,
    DNSZoneDNSSEC,
    DNSZoneForwarding,
    DNSZoneRecord,
    DNSZoneRecordTemplate,
    Domain,
    DomainActionLog,
    DomainBroker,
    DomainDnssec,
    DomainHost,
    DomainProduct,
    DomainTransfer,
    PendingOrder,
    Registrant,
    RegistryProgram,
    SecondhandDomain,
)
from webnic_sdk.utils.config import Settings, get_settings
from webnic_sdk.utils.logger import configure_logging, get_logger


logger = get_logger(__name__)


class WebnicSDK:
    """
    WebNIC reseller API client.

    All services share one connector, so they share one HTTP session and one
    cached token.

    Example:
        sdk = WebnicSDK("api-username", "api-secret")   # OTE by default
        balance = sdk.get_account_balance()
        info = sdk.domain.get_domain_info("example.com")
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        token_endpoint: Optional[str] = None,
        api_version: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        config: Optional[Settings] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the SDK.

        Explicit arguments override values from config (WEBNIC_* environment
        variables / .env).

        Args:
            client_id: API username
            client_secret: API secret
            base_url: API base URL (default: OTE)
            token_endpoint: Credential exchange URL
            api_version: Version prefix for service paths (default '/v2')
            token_store: Token cache (default: JSON file from config)
            config: Optional Settings object. If None, loads from get_settings()
            session: Optional requests session

        Raises:
            ValueError: If no credentials are given or configured
        """
        self.config = config or get_settings()
        configure_logging(
            self.config.log_level,
            console=self.config.log_console,
            log_dir=self.config.log_dir,
            propagate=self.config.log_propagate
        )

        overrides = {
            "client_id": client_id,
            "client_secret": client_secret,
            "base_url": base_url,
            "token_endpoint": token_endpoint,
            "api_version": api_version,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if overrides:
            self.config = Settings(**{**self.config.model_dump(), **overrides})

        credentials: Credentials = self.config.to_credentials()

        self.connector = ApiConnector(
            credentials=credentials,
            token_store=token_store,
            config=self.config,
            session=session
        )

        # Domain services
        self.action = Action(self.connector)
        self.contact = Contact(self.connector)
        self.domain = Domain(self.connector)
        self.domain_host = DomainHost(self.connector)
        self.domain_dnssec = DomainDnssec(self.connector)
        self.domain_transfer = DomainTransfer(self.connector)
        self.pending_order = PendingOrder(self.connector)
        self.domain_product = DomainProduct(self.connector)
        self.registrant = Registrant(self.connector)
        self.domain_action_log = DomainActionLog(self.connector)
        self.registry_program = RegistryProgram(self.connector)
        self.domain_broker = DomainBroker(self.connector)
        self.secondhand_domain = SecondhandDomain(self.connector)

        # DNS services
        self.dns_subscription = DNSSubscription(self.connector)
        self.dns_subscription_whitelabel = DNSSubscriptionWhitelabel(self.connector)
        self.dns_zone = DNSZone(self.connector)
        self.dns_zone_dnssec = DNSZoneDNSSEC(self.connector)
        self.dns_zone_forwarding = DNSZoneForwarding(self.connector)
        self.dns_zone_record = DNSZoneRecord(self.connector)
        self.dns_zone_record_template = DNSZoneRecordTemplate(self.connector)

    def get_environment(self) -> str:
        """Get current environment (OTE or PRODUCTION)"""
        return self.connector.get_environment()

    def is_production(self) -> bool:
        return self.config.is_production()

    def get_account_balance(self) -> Dict[str, Any]:
        """
        Get the reseller account balance.

        Returns:
            Response with the balance under ``data``
        """
        result = self.connector.send(
            "GET",
            "/balance",
            service_path=f"/reseller{self.connector.credentials.api_version}"
        )
        return result.to_dict()

    def send_async_requests(
        self,
        requests_by_key: Mapping[Any, Union[BatchRequestSpec, Dict[str, Any]]]
    ) -> Dict[Any, Dict[str, Any]]:
        """
        Send several requests concurrently and collect the responses by key.

        Args:
            requests_by_key: Mapping of key to BatchRequestSpec or dict with
                ``method``, ``path`` (full path after the base URL, e.g.
                '/domain/v2/query'), optional ``query`` and ``body``

        Returns:
            Mapping of the same keys to response dicts; failed requests carry
            the ``{"code": "2400", "error": {...}}`` envelope

        Example:
            sdk.send_async_requests({
                "a": {"method": "GET", "path": "/domain/v2/query", "query": {"domainName": "a.com"}},
                "b": {"method": "GET", "path": "/domain/v2/query", "query": {"domainName": "b.com"}},
            })
        """
        results = self.connector.send_batch(requests_by_key)
        return {key: result.to_dict() for key, result in results.items()}

    def close(self) -> None:
        self.connector.close()

    def __enter__(self) -> "WebnicSDK":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
