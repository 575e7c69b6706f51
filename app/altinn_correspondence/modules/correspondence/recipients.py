"""Recipient normalization into Altinn 3 addressing schemes.

Input is permissive: anything that is not a bare organization or person
number is passed through unchanged and left for the backend to validate.

Two strategies exist, selected per deployment by ALTINN_RECIPIENT_FORMAT:

- CountryCodeRecipientFormatter: "123456785" → "0192:123456785"
- UrnRecipientFormatter: "123456785" → "urn:altinn:organization:identifier-no:123456785",
  "01010112345" → "urn:altinn:person:identifier-no:01010112345"
"""

import re
from typing import Optional, Protocol

from altinn_correspondence.infrastructure.configuration import (
    AltinnSettings,
    RecipientFormat,
)

URN_PREFIX = "urn:altinn:"
ORGANIZATION_URN_PREFIX = "urn:altinn:organization:identifier-no:"
PERSON_URN_PREFIX = "urn:altinn:person:identifier-no:"

_ORGANIZATION_NUMBER = re.compile(r"[0-9]{9}")
_NATIONAL_IDENTITY_NUMBER = re.compile(r"[0-9]{11}")


class RecipientFormatter(Protocol):
    def format(self, recipient: Optional[str]) -> str: ...


def is_preformatted(recipient: str) -> bool:
    """True for URNs and "scheme:identifier" values, which pass through untouched."""
    return recipient.lower().startswith(URN_PREFIX) or ":" in recipient


def is_organization_number(recipient: str) -> bool:
    return _ORGANIZATION_NUMBER.fullmatch(recipient) is not None


def is_national_identity_number(recipient: str) -> bool:
    return _NATIONAL_IDENTITY_NUMBER.fullmatch(recipient) is not None


class CountryCodeRecipientFormatter:
    """Prefix 9-digit organization numbers with the country code."""

    def __init__(self, country_code: str = "0192") -> None:
        self.country_code = country_code

    def format(self, recipient: Optional[str]) -> str:
        if not recipient:
            return ""
        if is_preformatted(recipient):
            return recipient
        if is_organization_number(recipient):
            return f"{self.country_code}:{recipient}"
        return recipient


class UrnRecipientFormatter:
    """Turn organization and national identity numbers into Altinn URNs."""

    def format(self, recipient: Optional[str]) -> str:
        if not recipient:
            return ""
        if is_preformatted(recipient):
            return recipient
        if is_organization_number(recipient):
            return f"{ORGANIZATION_URN_PREFIX}{recipient}"
        if is_national_identity_number(recipient):
            return f"{PERSON_URN_PREFIX}{recipient}"
        return recipient


def formatter_for(settings: AltinnSettings) -> RecipientFormatter:
    """Build the formatter configured for this deployment."""
    if settings.recipient_format == RecipientFormat.URN:
        return UrnRecipientFormatter()
    return CountryCodeRecipientFormatter(settings.country_code)
