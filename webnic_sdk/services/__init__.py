"""
Service layer - one wrapper class per WebNIC API area
"""

from webnic_sdk.services.base import BaseService
from webnic_sdk.services.domain import (
    Action,
    Contact,
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
from webnic_sdk.services.dns import (
    DNSSubscription,
    DNSSubscriptionWhitelabel,
    DNSZone,
    DNSZoneDNSSEC,
    DNSZoneForwarding,
    DNSZoneRecord,
    DNSZoneRecordTemplate,
)

__all__ = [
    "BaseService",
    # Domain
    "Action",
    "Contact",
    "Domain",
    "DomainActionLog",
    "DomainBroker",
    "DomainDnssec",
    "DomainHost",
    "DomainProduct",
    "DomainTransfer",
    "PendingOrder",
    "Registrant",
    "RegistryProgram",
    "SecondhandDomain",
    # DNS
    "DNSSubscription",
    "DNSSubscriptionWhitelabel",
    "DNSZone",
    "DNSZoneDNSSEC",
    "DNSZoneForwarding",
    "DNSZoneRecord",
    "DNSZoneRecordTemplate",
]
