"""Unit tests for operation-scoped logging context."""

import pytest
import structlog

from altinn_correspondence.infrastructure.logging import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)


@pytest.mark.unit
class TestBindRequestContext:
    def test_binds_and_unbinds(self):
        with bind_request_context(correlation_id="key-1", operation="send"):
            context = structlog.contextvars.get_contextvars()
            assert context["correlation_id"] == "key-1"
            assert context["operation"] == "send"

        assert get_correlation_id() is None
        assert "operation" not in structlog.contextvars.get_contextvars()

    def test_generates_correlation_id(self):
        with bind_request_context():
            assert get_correlation_id()

    def test_extra_context(self):
        with bind_request_context(senders_reference="EXT_DD_SHIP_1"):
            assert (
                structlog.contextvars.get_contextvars()["senders_reference"]
                == "EXT_DD_SHIP_1"
            )

    def test_unbinds_on_error(self):
        with pytest.raises(RuntimeError):
            with bind_request_context(correlation_id="key-2"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None

    def test_clear_request_context(self):
        structlog.contextvars.bind_contextvars(correlation_id="stale")

        clear_request_context()

        assert get_correlation_id() is None
