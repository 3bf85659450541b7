"""
WebNIC SDK - Usage Examples
===========================

This file shows how to use the WebNIC SDK for common reseller operations.

Prerequisites:
1. Configure .env with WEBNIC_CLIENT_ID / WEBNIC_CLIENT_SECRET (see .env.example)
2. Keep WEBNIC_BASE_URL on https://oteapi.webnic.cc while testing
"""

from webnic_sdk import APIError, WebnicSDK
from webnic_sdk.utils.logger import get_logger

logger = get_logger(__name__)


# ==================== Example 1: Initialize SDK ====================

def example_initialize_sdk():
    """Initialize the SDK from WEBNIC_* settings"""
    sdk = WebnicSDK()

    print(f"Environment: {sdk.get_environment()}")
    print(f"Base URL: {sdk.connector.base_url}")
    print(f"Is Production: {sdk.is_production()}")

    return sdk


# ==================== Example 2: Check Domain Availability ====================

def example_check_availability(sdk: WebnicSDK):
    """Check if domains are available for registration"""
    domains_to_check = [
        "google.com",
        "myawesomeuniquedomain12345.com",
        "test-domain-xyz.net",
    ]

    for domain in domains_to_check:
        result = sdk.domain.query_domain(domain)
        if result.get("code") != "1000":
            print(f"Error checking {domain}: {result.get('error')}")
            continue

        data = result.get("data") or {}
        print(f"\nDomain: {domain}")
        print(f"  Available: {data.get('available', False)}")
        print(f"  Premium: {data.get('premium', False)}")


# ==================== Example 3: Concurrent Queries ====================

def example_concurrent_queries(sdk: WebnicSDK):
    """Query several domains at once with one token"""
    requests_by_key = {
        domain: {"method": "GET", "path": "/domain/v2/query", "query": {"domainName": domain}}
        for domain in ["alpha-example.com", "beta-example.com", "gamma-example.com"]
    }

    for domain, response in sdk.send_async_requests(requests_by_key).items():
        available = (response.get("data") or {}).get("available")
        print(f"{domain}: code={response.get('code')} available={available}")


# ==================== Example 4: Account Balance ====================

def example_account_balance(sdk: WebnicSDK):
    """Get the reseller account balance"""
    balance = sdk.get_account_balance()
    print(f"Balance response: {balance.get('data')}")


# ==================== Example 5: Domain Info With Contacts ====================

def example_domain_info(sdk: WebnicSDK, domain_name: str):
    """Get domain info with its four contacts resolved"""
    info = sdk.action.info_domain(domain_name, contact_info=True)

    if info.get("code") != "1000":
        print(f"Could not get info for {domain_name}: {info.get('error')}")
        return

    print(f"\nDetails for {domain_name}:")
    for role in ("registrant", "admin", "technical", "billing"):
        print(f"  {role}: {info.get(role)}")


# ==================== Example 6: Register Domain (CAREFUL!) ====================

def example_register_domain(sdk: WebnicSDK):
    """
    Register a domain end to end.

    WARNING: This places a real order when pointed at production!
    """
    if sdk.is_production():
        print("DANGER: You're in PRODUCTION mode!")
        response = input("Are you ABSOLUTELY sure you want to continue? (yes/no): ")
        if response.lower() != "yes":
            print("Registration cancelled for safety.")
            return

    result = sdk.action.register_domain(
        domain_data={"domainName": "test-registration-domain.com", "term": 1},
        dns_data={"nameservers": ["ns1.webnic.cc", "ns2.webnic.cc"], "ext": "com"},
        contact_ids={
            "registrantContactId": "WEBNIC1001T",
            "administratorContactId": "WEBNIC1001T",
            "technicalContactId": "WEBNIC1001T",
            "billingContactId": "WEBNIC1001T",
        },
        registrant_username="example-registrant",
    )
    print(f"Registration result: {result}")


# ==================== Example 7: Error Handling ====================

def example_error_handling(sdk: WebnicSDK):
    """Turn a failed result into an exception"""
    result = sdk.connector.send(
        "GET",
        "/info",
        {"domainName": "this-domain-does-not-exist-in-my-account.com"},
        service_path="/domain/v2",
    )

    try:
        result.raise_for_error()
    except APIError as e:
        print(f"API error: {e}")
        print(f"Status code: {e.status_code}")
        print(f"Response data: {e.response_data}")


# ==================== Main ====================

def main():
    """Run the read-only examples"""
    logger.info("Running WebNIC SDK examples")
    print("=" * 60)
    print("WebNIC SDK - Usage Examples")
    print("=" * 60)

    print("\n\n--- Example 1: Initialize SDK ---")
    with example_initialize_sdk() as sdk:
        print("\n\n--- Example 2: Check Domain Availability ---")
        example_check_availability(sdk)

        print("\n\n--- Example 3: Concurrent Queries ---")
        example_concurrent_queries(sdk)

        print("\n\n--- Example 4: Account Balance ---")
        example_account_balance(sdk)

        # Uncomment to run other examples:
        # example_domain_info(sdk, "my-domain.com")
        # example_error_handling(sdk)

        # DANGER: Only run this against OTE!
        # example_register_domain(sdk)


if __name__ == "__main__":
    main()
