"""Client library for sending Altinn 3 correspondence on behalf of Digitalt dødsbo.

Public API:
    - CorrespondenceService / create_correspondence_service: send, search, get
    - CorrespondenceDetails, NotificationDetails, SearchQuery: caller inputs
    - CorrespondenceResult, SearchResult, GetResult: Result envelopes
    - CorrespondenceServiceException: raised only by send_or_raise()
    - AccessTokenProvider, MaskinportenTokenProvider: bearer token sources
"""

from altinn_correspondence.infrastructure.auth import (
    AccessTokenProvider,
    MaskinportenTokenProvider,
    TokenAcquisitionError,
)
from altinn_correspondence.infrastructure.configuration import (
    ConfigurationError,
    Settings,
    get_settings,
)
from altinn_correspondence.modules.correspondence import (
    CorrespondenceDetails,
    CorrespondenceResult,
    CorrespondenceService,
    CorrespondenceServiceException,
    GetRequest,
    GetResult,
    NotificationDetails,
    Receipt,
    SearchQuery,
    SearchResult,
    create_correspondence_service,
)

__all__ = [
    "AccessTokenProvider",
    "MaskinportenTokenProvider",
    "TokenAcquisitionError",
    "ConfigurationError",
    "Settings",
    "get_settings",
    "CorrespondenceDetails",
    "CorrespondenceResult",
    "CorrespondenceService",
    "CorrespondenceServiceException",
    "GetRequest",
    "GetResult",
    "NotificationDetails",
    "Receipt",
    "SearchQuery",
    "SearchResult",
    "create_correspondence_service",
]
