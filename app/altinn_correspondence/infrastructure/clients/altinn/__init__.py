"""Altinn 3 Correspondence API client."""

from altinn_correspondence.infrastructure.clients.altinn.client import (
    CORRESPONDENCE_PATH,
    AltinnCorrespondenceClient,
)

__all__ = ["AltinnCorrespondenceClient", "CORRESPONDENCE_PATH"]
