"""
Tests for the service wrappers: each method must hit the right endpoint
with the right query and body.
The connector is mocked; only the request shape is checked.

Run:
    python -m pytest tests/test_services.py -v
"""

import logging
from unittest.mock import MagicMock

import pytest

from conftest import make_response
from webnic_sdk import WebnicSDK
from webnic_sdk.api.models import ApiResult
from webnic_sdk.services import (
    Contact,
    DNSSubscription,
    DNSSubscriptionWhitelabel,
    DNSZone,
    DNSZoneRecord,
    Domain,
    DomainHost,
    DomainProduct,
    DomainTransfer,
    Registrant,
    SecondhandDomain,
)
from webnic_sdk.utils.config import Settings
from webnic_sdk.utils.logger import configure_logging


@pytest.fixture
def connector(credentials):
    mock = MagicMock()
    mock.credentials = credentials
    mock.send.return_value = ApiResult(status_code="1000", payload={"code": "1000", "data": {}})
    return mock


def _sent(connector):
    """(method, full path, query, body) of the last request"""
    args, kwargs = connector.send.call_args
    method, path = args
    return method, kwargs["service_path"] + path, kwargs["query"], kwargs["body"]


# ===========================================================================
# 1. Endpoint table
# ===========================================================================

ENDPOINTS = [
    (Domain, "query_domain", ("example.com",),
     "GET", "/domain/v2/query", {"domainName": "example.com"}, None),
    (Domain, "query_domain", ("example.com", "RES1"),
     "GET", "/domain/v2/query", {"domainName": "example.com", "rescode": "RES1"}, None),
    (Domain, "get_domain_info", ("example.com",),
     "GET", "/domain/v2/info", {"domainName": "example.com"}, None),
    (Domain, "update_domain_status", ("example.com", "clientHold"),
     "PUT", "/domain/v2/status", {"domainName": "example.com", "status": "clientHold"}, None),
    (Domain, "update_domain_nameserver", ("example.com", ["ns1.webnic.cc", "ns2.webnic.cc"]),
     "PUT", "/domain/v2/dns", {"domainName": "example.com"}, {"nameservers": ["ns1.webnic.cc", "ns2.webnic.cc"]}),
    (Domain, "renew_domain", ({"domainName": "example.com", "term": 1},),
     "POST", "/domain/v2/renew", None, {"domainName": "example.com", "term": 1}),
    (Domain, "delete_domain", ("example.com",),
     "DELETE", "/domain/v2/delete", {"domainName": "example.com"}, None),
    (Domain, "download_certificate", ("example.com",),
     "GET", "/domain/v2/download/certificate", {"domainName": "example.com", "lang": "eng"}, None),
    (Contact, "create_contact_at_registry", ("my", "registrant", "CT1", "create"),
     "POST", "/domain/v2/contact/create/my/registrant", {"contactId": "CT1", "action": "create"}, None),
    (Contact, "query_contact_info", ("CT1",),
     "GET", "/domain/v2/contact/query", {"contactId": "CT1"}, None),
    (DomainHost, "check_host", ("ns1.example.com", "com"),
     "POST", "/domain/v2/host/check", {"nameserver": "ns1.example.com", "ext": "com"}, None),
    (DomainTransfer, "query_transfer_type", ("example.com",),
     "GET", "/domain/v2/query-transfer-type", {"domainName": "example.com"}, None),
    (DomainTransfer, "get_reseller_transfer_status_by_id", ("T42",),
     "GET", "/domain/v2/reseller-transfer/status/T42", None, None),
    (DomainProduct, "get_extensions_rule", (".com", "registration", "individual", True),
     "GET", "/domain/v2/ext-rules", {"ext": ".com", "ruleType": "registration"}, None),
    (DomainProduct, "get_extensions_rule", (".my", "DOCUPLOAD", "individual", True),
     "GET", "/domain/v2/ext-rules", {"ext": ".my", "ruleType": "DOCUPLOAD", "category": "individual", "isProxy": True}, None),
    (Registrant, "create_account", ("jdoe",),
     "POST", "/domain/v2/registrant/create", {"username": "jdoe"}, None),
    (SecondhandDomain, "insert", ([{"domainName": "a.com"}, {"domainName": "b.com"}],),
     "POST", "/domain/v2/secondhand-domain/insert", None, [{"domainName": "a.com"}, {"domainName": "b.com"}]),
    (DNSZone, "get_domain_zone", ("example.com",),
     "GET", "/dns/v2/zone/example.com", None, None),
    (DNSSubscription, "add_domain_zone_to_partner_subscription", ("example.com",),
     "POST", "/dns/v2/subscription/partner/zone/example.com", None, None),
    (DNSZoneRecord, "get_zone_records", ("example.com", {"type": "A"}),
     "GET", "/dns/v2/zone/zone/example.com/records", {"type": "A"}, None),
    (DNSZoneRecord, "get_zone_basic_records", ("example.com",),
     "GET", "/dns/v2/zone/example.com/basic/records", {"type": "", "name": ""}, None),
    (DNSZoneRecord, "delete_zone_basic_record", ("example.com", {"type": "A", "name": "www"}),
     "DELETE", "/dns/v2/zone/example.com/basic/record", {"type": "A", "name": "www"}, None),
]


class TestEndpoints:

    @pytest.mark.parametrize(
        "service_class, method_name, args, http_method, path, query, body", ENDPOINTS
    )
    def test_request_shape(self, connector, service_class, method_name, args, http_method, path, query, body):
        service = service_class(connector)

        response = getattr(service, method_name)(*args)

        assert response == {"code": "1000", "data": {}}
        assert _sent(connector) == (http_method, path, query, body)

    def test_service_path_follows_api_version(self, connector, credentials):
        connector.credentials = credentials.model_copy(update={"api_version": "/v3"})
        assert Domain(connector).service_path == "/domain/v3"
        assert DNSSubscriptionWhitelabel(connector).service_path == "/dns/v3/subscription/whitelabel/ns"

    def test_service_name(self, connector):
        assert Contact(connector).get_service_name() == "Contact"


class TestUploadVerificationDocument:

    def test_file_is_sent_as_multipart(self, connector, tmp_path):
        document = tmp_path / "ssm.pdf"
        document.write_bytes(b"%PDF-1.4")

        Domain(connector).upload_verification_document(72, "business_registration", document)

        args, kwargs = connector.send.call_args
        assert args == ("POST", "/upload-document/72")
        assert kwargs["body"] == {"type": "business_registration"}
        name, handle = kwargs["files"]["file"]
        assert name == "ssm.pdf"
        assert handle.closed

    def test_missing_file_raises(self, connector, tmp_path):
        with pytest.raises(FileNotFoundError):
            Domain(connector).upload_verification_document(72, "ic", tmp_path / "missing.pdf")
        connector.send.assert_not_called()


# ===========================================================================
# 2. WebnicSDK facade
# ===========================================================================

class TestWebnicSDK:

    def test_account_balance_url(self, settings, session):
        session.request.return_value = make_response({"code": "1000", "data": {"balance": "120.00"}})

        with WebnicSDK(config=settings, session=session) as sdk:
            response = sdk.get_account_balance()

        assert response["data"] == {"balance": "120.00"}
        assert session.request.call_args.kwargs["url"] == "https://oteapi.webnic.cc/reseller/v2/balance"
        session.close.assert_called_once()

    def test_services_share_one_connector(self, settings, session):
        sdk = WebnicSDK(config=settings, session=session)

        assert sdk.domain.connector is sdk.connector
        assert sdk.dns_zone_record.connector is sdk.connector
        assert sdk.action.contact.connector is sdk.connector
        assert sdk.get_environment() == "OTE"
        assert not sdk.is_production()

    def test_send_async_requests_returns_dicts(self, settings, session):
        sdk = WebnicSDK(config=settings, session=session)

        responses = sdk.send_async_requests({
            "a": {"method": "GET", "path": "/domain/v2/query", "query": {"domainName": "a.com"}},
            "b": {"method": "GET", "path": "/domain/v2/query", "query": {"domainName": "b.com"}},
        })

        assert set(responses) == {"a", "b"}
        assert responses["a"]["code"] == "1000"
        assert responses["b"]["url_request"].endswith("domainName=b.com")

    def test_explicit_arguments_override_config(self, settings, session):
        sdk = WebnicSDK(
            client_id="other-user",
            base_url="https://api.webnic.cc/",
            config=settings,
            session=session,
        )

        assert sdk.connector.credentials.client_id == "other-user"
        assert sdk.connector.base_url == "https://api.webnic.cc"
        assert sdk.get_environment() == "PRODUCTION"

    def test_missing_credentials_raise(self, tmp_path, session):
        config = Settings(client_id="", client_secret="", token_cache_file=tmp_path / "t.json")
        with pytest.raises(ValueError, match="WEBNIC_CLIENT_ID"):
            WebnicSDK(config=config, session=session)

    def test_logging_follows_settings(self, settings, session, tmp_path):
        config = settings.model_copy(update={"log_console": False, "log_dir": tmp_path / "logs"})
        try:
            WebnicSDK(config=config, session=session)

            package_logger = logging.getLogger("webnic_sdk")
            assert package_logger.propagate
            assert [type(h) for h in package_logger.handlers] == [logging.FileHandler]
            assert list((tmp_path / "logs").glob("webnic_*.log"))
        finally:
            configure_logging()
