"""
Input validation helpers for domain names and nameservers
"""

import re


class ValidationError(ValueError):
    """Raised when caller input fails validation"""
    pass


class DomainValidator:
    """Validator for domain and host names"""

    # RFC-compliant domain regex (IDNs are expected in their punycode form)
    DOMAIN_REGEX = re.compile(
        r'^(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+(?:[a-zA-Z]{2,}|xn--[a-zA-Z0-9-]{1,59})$'
    )

    @classmethod
    def validate(cls, domain: str) -> str:
        """
        Validate a domain name.

        Args:
            domain: Domain name to validate

        Returns:
            Cleaned domain name (lowercase, stripped)

        Raises:
            ValidationError: If domain is invalid
        """
        if not domain:
            raise ValidationError("Domain name cannot be empty")

        domain = domain.strip().lower()
        domain = re.sub(r'^https?://', '', domain)
        domain = domain.rstrip('/').rstrip('.')

        if len(domain) > 253:  # RFC 1035
            raise ValidationError("Domain name too long (max 253 characters)")

        if not cls.DOMAIN_REGEX.match(domain):
            raise ValidationError(
                f"Invalid domain format: {domain}. "
                "Domain must contain only letters, numbers, and hyphens."
            )

        return domain

    @classmethod
    def extract_tld(cls, domain: str) -> str:
        """
        Extract the last label of a domain or host name.

        Args:
            domain: Domain name (e.g. 'ns1.example.com')

        Returns:
            TLD (e.g. 'com'), or an empty string for a bare label
        """
        parts = domain.rstrip('.').split('.')
        if len(parts) < 2:
            return ""
        return parts[-1]


def validate_domain(domain: str) -> str:
    """Convenience function for domain validation"""
    return DomainValidator.validate(domain)


def extract_tld(domain: str) -> str:
    """Convenience function for TLD extraction"""
    return DomainValidator.extract_tld(domain)
