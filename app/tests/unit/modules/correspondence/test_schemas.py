"""Unit tests for the wire schemas."""

import uuid

import pytest

from altinn_correspondence.modules.correspondence.schemas import (
    CorrespondenceOverview,
    CorrespondenceStatus,
    CorrespondencesSearchResponse,
    InitializeCorrespondencesResponse,
    InitializedNotificationStatus,
)
from tests.factories.correspondence import (
    make_acknowledgment,
    make_notification_ack,
    make_overview,
)


@pytest.mark.unit
class TestInitializeCorrespondencesResponse:
    def test_parses_acknowledgment(self):
        order_id = str(uuid.uuid4())
        body = make_acknowledgment(
            notifications=[make_notification_ack(order_id=order_id)]
        )

        response = InitializeCorrespondencesResponse.model_validate(body)

        correspondence = response.correspondences[0]
        assert correspondence.status == CorrespondenceStatus.INITIALIZED
        assert correspondence.notifications[0].order_id == uuid.UUID(order_id)
        assert (
            correspondence.notifications[0].status
            == InitializedNotificationStatus.SUCCESS
        )

    def test_enums_accept_ordinals(self):
        body = make_acknowledgment(
            status=2, notifications=[make_notification_ack(status=1)]
        )

        correspondence = InitializeCorrespondencesResponse.model_validate(
            body
        ).correspondences[0]

        assert correspondence.status == CorrespondenceStatus.PUBLISHED
        assert (
            correspondence.notifications[0].status
            == InitializedNotificationStatus.MISSING_CONTACT
        )

    def test_enums_ignore_case(self):
        body = make_acknowledgment(status="readyforpublish")

        response = InitializeCorrespondencesResponse.model_validate(body)

        assert response.correspondences[0].status == (
            CorrespondenceStatus.READY_FOR_PUBLISH
        )

    def test_unknown_status_is_rejected(self):
        with pytest.raises(ValueError):
            InitializeCorrespondencesResponse.model_validate(
                make_acknowledgment(status="Teleported")
            )


@pytest.mark.unit
class TestCorrespondenceOverview:
    def test_parses_overview(self):
        overview = CorrespondenceOverview.model_validate(make_overview())

        assert overview.status == CorrespondenceStatus.PUBLISHED
        assert overview.content.message_title == "Melding om dødsfall"
        assert overview.reply_options[0].link_url == "https://oed.example/svar"
        assert overview.altinn2_correspondence_id is None

    def test_unknown_fields_are_ignored(self):
        overview = CorrespondenceOverview.model_validate(
            make_overview(someFutureField="x")
        )

        assert not hasattr(overview, "someFutureField")


@pytest.mark.unit
class TestSearchResponse:
    def test_parses_ids(self):
        ids = [str(uuid.uuid4()), str(uuid.uuid4())]

        response = CorrespondencesSearchResponse.model_validate({"ids": ids})

        assert [str(i) for i in response.ids] == ids
