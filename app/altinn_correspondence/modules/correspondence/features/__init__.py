"""Correspondence feature handlers: send, search and get."""

from altinn_correspondence.modules.correspondence.features.base import Handler
from altinn_correspondence.modules.correspondence.features.get import GetHandler
from altinn_correspondence.modules.correspondence.features.search import (
    SearchHandler,
)
from altinn_correspondence.modules.correspondence.features.send import SendHandler

__all__ = ["Handler", "GetHandler", "SearchHandler", "SendHandler"]
