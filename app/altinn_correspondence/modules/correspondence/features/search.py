"""Search correspondences."""

from altinn_correspondence.infrastructure.clients.altinn import (
    AltinnCorrespondenceClient,
)
from altinn_correspondence.infrastructure.logging import (
    bind_request_context,
    get_module_logger,
)
from altinn_correspondence.modules.correspondence.domain import (
    SearchQuery,
    SearchResult,
)
from altinn_correspondence.modules.correspondence.features.base import (
    failure_message,
)
from altinn_correspondence.modules.correspondence.schemas import (
    CorrespondencesSearchResponse,
)

logger = get_module_logger()

SEARCH_FAILURE_PREFIX = "Could not search correspondences in Altinn 3"
ROLE_REQUIRED = "Role is required for searching correspondences."
RESOURCE_ID_REQUIRED = "ResourceId is required for searching correspondences."


class SearchHandler:
    """Find correspondence ids matching a SearchQuery.

    Role and resource id are checked before any network call.
    """

    def __init__(self, client: AltinnCorrespondenceClient) -> None:
        if client is None:
            raise ValueError("client is required")
        self._client = client

    async def handle(self, query: SearchQuery) -> SearchResult:
        if query.role is None:
            return SearchResult.failure(ROLE_REQUIRED)
        if not query.resource_id:
            return SearchResult.failure(RESOURCE_ID_REQUIRED)

        with bind_request_context(operation="search"):
            log = logger.bind(resource_id=query.resource_id, role=query.role.value)
            log.info("correspondence_search_started")
            try:
                result = await self._client.search_correspondences(
                    query.to_query_params()
                )
                if not result.is_success:
                    message = failure_message(result, SEARCH_FAILURE_PREFIX)
                    log.warning(
                        "correspondence_search_failed",
                        status=result.status.value,
                        error=message,
                    )
                    return SearchResult.failure(message)

                response = CorrespondencesSearchResponse.model_validate(
                    result.data or {}
                )
            except Exception as e:
                log.exception("correspondence_search_unexpected_error", error=str(e))
                return SearchResult.failure(f"{SEARCH_FAILURE_PREFIX}: {e}")

            log.info("correspondence_search_succeeded", count=len(response.ids))
            return SearchResult.success(response.ids)
