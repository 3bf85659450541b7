"""
DNS hosting services (/dns/v2)
"""

from webnic_sdk.services.dns.subscription import DNSSubscription, DNSSubscriptionWhitelabel
from webnic_sdk.services.dns.zone import DNSZone, DNSZoneDNSSEC, DNSZoneForwarding
from webnic_sdk.services.dns.record import DNSZoneRecord, DNSZoneRecordTemplate

__all__ = [
    "DNSSubscription",
    "DNSSubscriptionWhitelabel",
    "DNSZone",
    "DNSZoneDNSSEC",
    "DNSZoneForwarding",
    "DNSZoneRecord",
    "DNSZoneRecordTemplate",
]
