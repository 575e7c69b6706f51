"""Send one correspondence."""

from datetime import datetime
from typing import Callable, Optional

from altinn_correspondence.infrastructure.clients.altinn import (
    AltinnCorrespondenceClient,
)
from altinn_correspondence.infrastructure.configuration import AltinnSettings
from altinn_correspondence.infrastructure.logging import (
    bind_request_context,
    get_module_logger,
)
from altinn_correspondence.modules.correspondence.domain import (
    CorrespondenceDetails,
    CorrespondenceResult,
    Receipt,
)
from altinn_correspondence.modules.correspondence.exceptions import (
    SEND_FAILURE_PREFIX,
    send_failure_message,
)
from altinn_correspondence.modules.correspondence.features.base import (
    failure_message,
    is_expected_failure,
)
from altinn_correspondence.modules.correspondence.recipients import (
    RecipientFormatter,
    formatter_for,
)
from altinn_correspondence.modules.correspondence.request_builder import (
    build_correspondence_request,
    resolve_senders_reference,
)
from altinn_correspondence.modules.correspondence.schemas import (
    InitializeCorrespondencesResponse,
)

logger = get_module_logger()


class SendHandler:
    """Build the payload, post it and map the answer to a CorrespondenceResult.

    Never raises for backend or infrastructure failures: a rejected
    request yields a failure carrying the backend's detail, anything else
    a failure prefixed "Could not send correspondence to Altinn 3".
    """

    def __init__(
        self,
        client: AltinnCorrespondenceClient,
        settings: AltinnSettings,
        formatter: Optional[RecipientFormatter] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if client is None:
            raise ValueError("client is required")
        if settings is None:
            raise ValueError("settings is required")
        self._client = client
        self._settings = settings
        self._formatter = formatter or formatter_for(settings)
        self._clock = clock

    async def handle(self, details: CorrespondenceDetails) -> CorrespondenceResult:
        senders_reference = resolve_senders_reference(
            details, self._settings.senders_reference_prefix
        )
        with bind_request_context(
            correlation_id=str(details.idempotency_key),
            operation="send",
            senders_reference=senders_reference,
        ):
            log = logger.bind(resource_id=self._settings.resource_id)
            log.info("correspondence_send_started")
            try:
                request = build_correspondence_request(
                    details,
                    resource_id=self._settings.resource_id,
                    formatter=self._formatter,
                    language_code=self._settings.language_code,
                    senders_reference_prefix=self._settings.senders_reference_prefix,
                    ignore_reservation_default=self._settings.ignore_reservation,
                    default_sender=self._settings.sender,
                    now=self._clock() if self._clock else None,
                )
                result = await self._client.initialize_correspondence(
                    request.to_payload()
                )

                if not result.is_success:
                    message = failure_message(result, SEND_FAILURE_PREFIX)
                    if is_expected_failure(result):
                        log.warning(
                            "correspondence_send_rejected",
                            status=result.status.value,
                            error=message,
                        )
                    else:
                        log.error(
                            "correspondence_send_failed",
                            status=result.status.value,
                            error=message,
                        )
                    return CorrespondenceResult.failure(message)

                acknowledgment = None
                if result.data:
                    acknowledgment = InitializeCorrespondencesResponse.model_validate(
                        result.data
                    )
            except Exception as e:
                log.exception("correspondence_send_unexpected_error", error=str(e))
                return CorrespondenceResult.from_exception(send_failure_message(e), e)

            receipt = Receipt(
                idempotency_key=details.idempotency_key,
                senders_reference=senders_reference,
                acknowledgment=acknowledgment,
            )
            log.info(
                "correspondence_send_succeeded",
                correspondence_ids=[str(i) for i in receipt.correspondence_ids],
            )
            return CorrespondenceResult.success(receipt)
