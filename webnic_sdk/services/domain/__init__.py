"""
Domain services (/domain/v2)
"""

from webnic_sdk.services.domain.domain import Domain
from webnic_sdk.services.domain.contact import Contact
from webnic_sdk.services.domain.host import DomainHost
from webnic_sdk.services.domain.dnssec import DomainDnssec
from webnic_sdk.services.domain.transfer import DomainTransfer
from webnic_sdk.services.domain.product import DomainProduct
from webnic_sdk.services.domain.registrant import Registrant
from webnic_sdk.services.domain.orders import (
    PendingOrder,
    DomainActionLog,
    DomainBroker,
    RegistryProgram,
    SecondhandDomain,
)
from webnic_sdk.services.domain.action import Action

__all__ = [
    "Domain",
    "Contact",
    "DomainHost",
    "DomainDnssec",
    "DomainTransfer",
    "DomainProduct",
    "Registrant",
    "PendingOrder",
    "DomainActionLog",
    "DomainBroker",
    "RegistryProgram",
    "SecondhandDomain",
    "Action",
]
