"""
Action Service
Multi-step domain workflows built on the plain domain services
"""

import socket
from typing import Any, Dict, List, Optional

from webnic_sdk.api.connector import ApiConnector
from webnic_sdk.api.exceptions import InvalidRequestError
from webnic_sdk.api.models import BatchRequestSpec, SUCCESS_CODE, FAILURE_CODE
from webnic_sdk.services.base import BaseService
from webnic_sdk.services.domain.contact import Contact
from webnic_sdk.services.domain.domain import Domain
from webnic_sdk.services.domain.host import DomainHost
from webnic_sdk.services.domain.product import DomainProduct
from webnic_sdk.services.domain.registrant import Registrant
from webnic_sdk.services.domain.transfer import DomainTransfer
from webnic_sdk.utils.logger import get_logger
from webnic_sdk.utils.validators import ValidationError, extract_tld, validate_domain


logger = get_logger(__name__)

CONTACT_ID_KEYS = (
    "registrantContactId",
    "administratorContactId",
    "technicalContactId",
    "billingContactId",
)

# Roles as named in domain info's contactId object
CONTACT_ROLES = ("registrant", "admin", "technical", "billing")


def _error(message: str, **extra: Any) -> Dict[str, Any]:
    return {"code": FAILURE_CODE, "error": {"message": message}, **extra}


def _succeeded(response: Dict[str, Any]) -> bool:
    return str(response.get("code")) == SUCCESS_CODE


def resolve_ipv4(host: str) -> List[str]:
    """
    Resolve the IPv4 addresses of a host.

    Returns:
        List of addresses, empty if the lookup fails
    """
    try:
        _, _, addresses = socket.gethostbyname_ex(host)
    except OSError as e:
        logger.warning(f"Could not resolve {host}: {e}")
        return []
    return addresses


class Action(BaseService):
    """
    High-level domain workflows.

    Failures are returned as ``{"code": "2400", "error": {"message": ...}}``
    dicts, often with the failing step's response attached.
    """

    service_root = "/domain"

    def __init__(self, connector: ApiConnector):
        super().__init__(connector)
        self.contact = Contact(connector)
        self.domain = Domain(connector)
        self.domain_transfer = DomainTransfer(connector)
        self.domain_product = DomainProduct(connector)
        self.domain_host = DomainHost(connector)
        self.registrant = Registrant(connector)

    def search_domain(self, domain_name: str) -> Dict[str, Any]:
        """
        Query availability and, when the query succeeds, the transfer type.

        Args:
            domain_name: Domain to search

        Returns:
            ``{"queryDomain": {...}, "queryTransferType": {...}}``
        """
        query_result = self.domain.query_domain(domain_name)
        return_data = {"queryDomain": query_result.get("data")}

        if query_result.get("http_status_code") == 200 and _succeeded(query_result):
            transfer_type = self.domain_transfer.query_transfer_type(domain_name)
            return_data["queryTransferType"] = transfer_type.get("data")

        return return_data

    def register_domain(
        self,
        domain_data: Dict[str, Any],
        dns_data: Dict[str, Any],
        contact_ids: Optional[Dict[str, str]] = None,
        contact_data: Optional[Dict[str, Any]] = None,
        registrant_id: str = "",
        registrant_username: str = ""
    ) -> Dict[str, Any]:
        """
        Register a domain end to end.

        Steps: validate input, check availability, create missing nameserver
        hosts, create contacts and the registrant account when only their
        data was given, then submit the registration.

        Args:
            domain_data: Registration fields, at least ``domainName`` (plus
                ``term`` etc. passed through)
            dns_data: ``{"nameservers": [...], "ext": ..., "extList": [...]}``;
                ``extList[i]`` is the registry extension for nameserver i and
                defaults to the nameserver's own TLD
            contact_ids: Existing contact IDs (all four *ContactId keys)
            contact_data: Payload for Contact.create_contact when no IDs are given
            registrant_id: Existing registrant user ID
            registrant_username: Username for a new registrant account when
                no registrant_id is given

        Returns:
            Registration response with ``domainData`` attached, or an error dict
        """
        contact_ids = contact_ids or {}
        contact_data = contact_data or {}

        validation_error = self._validate_register_inputs(
            domain_data, dns_data, contact_ids, contact_data, registrant_id, registrant_username
        )
        if validation_error:
            return validation_error

        domain_name = domain_data["domainName"]
        logger.info(f"Registering domain: {domain_name}")

        query_result = self.domain.query_domain(domain_name)
        if not _succeeded(query_result):
            return query_result
        if not (query_result.get("data") or {}).get("available"):
            return _error("Domain Name is not available", queryDomain=query_result.get("data"))

        host_error = self._ensure_nameserver_hosts(dns_data)
        if host_error:
            return host_error

        contact_keys = self._prepare_contacts(contact_ids, contact_data)
        if "error" in contact_keys:
            return contact_keys

        registrant_key = self._prepare_registrant(registrant_id, registrant_username)
        if isinstance(registrant_key, dict):
            return registrant_key

        domain_data = {
            **domain_data,
            **contact_keys,
            "nameservers": dns_data["nameservers"],
            "registrantUserId": registrant_key,
        }

        register_result = self.domain.register_domain(domain_data)
        if str(register_result.get("code")) == FAILURE_CODE:
            logger.error(f"Registration of {domain_name} failed")
            return _error("Post Register Domain Failed", registerDomain=register_result)

        register_result["domainData"] = domain_data
        logger.info(f"Domain {domain_name} registration submitted")
        return register_result

    @staticmethod
    def _validate_register_inputs(
        domain_data: Dict[str, Any],
        dns_data: Dict[str, Any],
        contact_ids: Dict[str, str],
        contact_data: Dict[str, Any],
        registrant_id: str,
        registrant_username: str
    ) -> Optional[Dict[str, Any]]:
        if not domain_data.get("domainName"):
            return _error("Parameter Error: domainName is required")

        try:
            validate_domain(domain_data["domainName"])
        except ValidationError as e:
            return _error(f"Parameter Error: {e}")

        if not dns_data.get("nameservers") or not dns_data.get("ext"):
            return _error("Parameter Error: nameservers and ext are required")

        if not contact_ids and not contact_data:
            return _error("Parameter Error: Either contactIds or contactData must be provided")

        if not registrant_id and not registrant_username:
            return _error("Parameter Error: Either registrantId or registrantUsername must be provided")

        return None

    def _ensure_nameserver_hosts(self, dns_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Create host objects for nameservers the registry does not know yet"""
        ext_list = dns_data.get("extList") or []

        for index, nameserver in enumerate(dns_data["nameservers"]):
            if not nameserver:
                continue

            extension = ext_list[index] if index < len(ext_list) and ext_list[index] else None
            if not extension:
                extension = extract_tld(nameserver)

            host_check = self.domain_host.check_host(nameserver, extension)
            if not (host_check.get("data") or {}).get("available"):
                continue

            create_host = self.domain_host.create_host_by_extension({
                "host": nameserver,
                "ipList": resolve_ipv4(nameserver),
                "ext": extension,
            })
            if not _succeeded(create_host):
                return create_host

        return None

    def _prepare_contacts(self, contact_ids: Dict[str, str], contact_data: Dict[str, Any]) -> Dict[str, Any]:
        if contact_ids:
            for key in CONTACT_ID_KEYS:
                if key not in contact_ids:
                    return _error(f"Missing required Id: {key}")
            return dict(contact_ids)

        create_contact = self.contact.create_contact(contact_data)
        if not _succeeded(create_contact):
            return _error("Creating contact failed", createContact=create_contact)

        contact_keys = {
            f"{contact['contactType']}ContactId": contact["contactId"]
            for contact in create_contact.get("data") or []
        }
        if "registrantContactId" not in contact_keys:
            return _error("Creating contact failed", createContact=create_contact)

        # Roles that were not created separately reuse the registrant contact
        for key in CONTACT_ID_KEYS[1:]:
            contact_keys.setdefault(key, contact_keys["registrantContactId"])

        return contact_keys

    def _prepare_registrant(self, registrant_id: str, registrant_username: str):
        """Returns the registrant user ID, or an error dict"""
        if registrant_id:
            return registrant_id

        create_registrant = self.registrant.create_account(registrant_username)
        registrant_user_id = (create_registrant.get("data") or {}).get("registrantUserId")
        if not _succeeded(create_registrant) or not registrant_user_id:
            return _error("Create Registrant Account Failed", details=create_registrant)

        return registrant_user_id

    def info_domain(self, domain_name: str, contact_info: bool = False, only_contact: bool = False) -> Dict[str, Any]:
        """
        Get domain info, optionally with the four contacts resolved.

        The contact lookups are sent as one concurrent batch.

        Args:
            domain_name: Domain name
            contact_info: Also fetch registrant/admin/technical/billing contacts
            only_contact: With contact_info, return only the contacts

        Returns:
            The plain domain info response when contact_info is False,
            otherwise ``{"code", "domainInfo", "registrant", "admin", ...}``
        """
        domain_info = self.domain.get_domain_info(domain_name)
        if not _succeeded(domain_info) or not contact_info:
            return domain_info

        contact_id = (domain_info.get("data") or {}).get("contactId") or {}
        specs = {
            role: BatchRequestSpec(
                method="GET",
                path="/query",
                query={"contactId": contact_id.get(role)},
                service_path=self.contact.service_path,
            )
            for role in CONTACT_ROLES
        }
        results = self.connector.send_batch(specs)
        contacts = {role: results[role].data for role in CONTACT_ROLES}

        if only_contact:
            return {"code": SUCCESS_CODE, "contactId": contact_id, **contacts}

        return {"domainInfo": domain_info.get("data"), "code": SUCCESS_CODE, **contacts}

    def renew_domain(self, domain_name: str, term: str, domain_type: str = "") -> Dict[str, Any]:
        renew_data = {"domainName": domain_name, "term": term}
        if domain_type:
            renew_data["domainType"] = domain_type
        return self.domain.renew_domain(renew_data)

    def transfer_domain(
        self,
        domain_name: str,
        registrant_user_id: str = "",
        auth_info: str = "",
        contact_ids: Optional[Dict[str, str]] = None,
        nameservers: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Transfer a domain into this account.

        Registrar transfers need the auth code, contacts and nameservers;
        premium domains are flagged automatically. Any other transfer type is
        submitted as a reseller transfer.

        Args:
            domain_name: Domain to transfer
            registrant_user_id: Registrant user to own the domain
            auth_info: EPP authorization code (registrar transfers)
            contact_ids: The four *ContactId values (registrar transfers)
            nameservers: Nameservers to set (registrar transfers)
        """
        contact_ids = contact_ids or {}

        transfer_type_result = self.domain_transfer.query_transfer_type(domain_name)
        if not _succeeded(transfer_type_result):
            return transfer_type_result

        transfer_type = (transfer_type_result.get("data") or {}).get("transferType")
        logger.info(f"Transfer type for {domain_name}: {transfer_type}")

        if transfer_type == "registrar_transfer":
            domain_query = self.domain.query_domain(domain_name)
            transfer_data = {
                "domainName": domain_name,
                "registrantUserId": registrant_user_id,
                "authInfo": auth_info,
                **{key: contact_ids.get(key, "") for key in CONTACT_ID_KEYS},
                "nameservers": nameservers or [],
            }
            if (domain_query.get("data") or {}).get("premium"):
                transfer_data["domainType"] = "premium"
            return self.domain_transfer.submit_registrar_transfer_in(transfer_data)

        return self.domain_transfer.submit_reseller_transfer({
            "domainName": domain_name,
            "registrantUserId": registrant_user_id,
        })

    def check_price(self, price_type: str, filters_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Get standard or promotional extension pricing.

        Args:
            price_type: 'standard' or 'promo'
            filters_data: Filters and pagination passed to the pricing endpoint

        Raises:
            InvalidRequestError: If price_type is anything else
        """
        if price_type == "standard":
            return self.domain_product.get_extensions_price(filters_data)
        if price_type == "promo":
            return self.domain_product.get_extensions_promo_pricing(filters_data)

        raise InvalidRequestError(
            "Invalid price type specified. Accepted values are 'standard' or 'promo'."
        )
