"""Authentication for outbound correspondence API calls.

Exports:
    AccessTokenProvider: Protocol for bearer token sources
    MaskinportenTokenProvider: JWT-grant client for Maskinporten
    AuthenticatingTransport: httpx transport setting the Authorization header
    TokenAcquisitionError: Raised when no token can be obtained
"""

from altinn_correspondence.infrastructure.auth.providers import (
    AccessTokenProvider,
    MaskinportenTokenProvider,
    TokenAcquisitionError,
    load_encoded_jwk,
)
from altinn_correspondence.infrastructure.auth.transport import (
    AuthenticatingTransport,
)

__all__ = [
    "AccessTokenProvider",
    "MaskinportenTokenProvider",
    "AuthenticatingTransport",
    "TokenAcquisitionError",
    "load_encoded_jwk",
]
