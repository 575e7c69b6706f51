"""Fetch one correspondence overview."""

from altinn_correspondence.infrastructure.clients.altinn import (
    AltinnCorrespondenceClient,
)
from altinn_correspondence.infrastructure.logging import (
    bind_request_context,
    get_module_logger,
)
from altinn_correspondence.modules.correspondence.domain import GetRequest, GetResult
from altinn_correspondence.modules.correspondence.features.base import (
    failure_message,
)
from altinn_correspondence.modules.correspondence.schemas import (
    CorrespondenceOverview,
)

logger = get_module_logger()

GET_FAILURE_PREFIX = "Could not get correspondence from Altinn 3"


class GetHandler:
    def __init__(self, client: AltinnCorrespondenceClient) -> None:
        if client is None:
            raise ValueError("client is required")
        self._client = client

    async def handle(self, request: GetRequest) -> GetResult:
        with bind_request_context(
            correlation_id=str(request.correspondence_id), operation="get"
        ):
            logger.info("correspondence_get_started")
            try:
                result = await self._client.get_correspondence_overview(
                    request.correspondence_id
                )
                if not result.is_success:
                    message = failure_message(result, GET_FAILURE_PREFIX)
                    logger.warning(
                        "correspondence_get_failed",
                        status=result.status.value,
                        error=message,
                    )
                    return GetResult.failure(message)

                overview = CorrespondenceOverview.model_validate(result.data)
            except Exception as e:
                logger.exception("correspondence_get_unexpected_error", error=str(e))
                return GetResult.failure(f"{GET_FAILURE_PREFIX}: {e}")

            logger.info("correspondence_get_succeeded", status=overview.status.value)
            return GetResult.success(overview)
