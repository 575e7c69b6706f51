"""External integration settings."""

from altinn_correspondence.infrastructure.configuration.integrations.altinn import (
    AltinnSettings,
    ApiEnvironment,
    RecipientFormat,
)
from altinn_correspondence.infrastructure.configuration.integrations.maskinporten import (
    MaskinportenEnvironment,
    MaskinportenSettings,
)

__all__ = [
    "AltinnSettings",
    "ApiEnvironment",
    "RecipientFormat",
    "MaskinportenEnvironment",
    "MaskinportenSettings",
]
