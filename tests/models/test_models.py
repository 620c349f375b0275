"""Testes para validação e serialização dos modelos."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import ValidationError

from netmera.models import (
    AddTagToUsersRequest,
    CreateGeofenceRequest,
    Event,
    FireEventsRequest,
    GetDeviceTokensRequest,
    GetDeviceTokensResponse,
    GetPushStatsInDateRangeRequest,
    NotificationMessage,
    NotificationTarget,
    SendTransactionalNotificationRequest,
    TransactionalTarget,
    UserAndProfileAttributeMap,
)


class TestRequestValidation:
    """Requests inválidos falham na construção."""

    def test_tag_requires_ext_ids(self) -> None:
        with pytest.raises(ValidationError):
            AddTagToUsersRequest(tag="vip", ext_ids=[])

    def test_device_tokens_max_bounds(self) -> None:
        with pytest.raises(ValidationError):
            GetDeviceTokensRequest(max_results=0)
        assert GetDeviceTokensRequest().max_results == 100

    def test_date_range_must_be_ordered(self) -> None:
        with pytest.raises(ValidationError, match="end_date"):
            GetPushStatsInDateRangeRequest(
                start_date=datetime(2024, 2, 1), end_date=datetime(2024, 1, 1)
            )

    def test_date_range_rejects_mixed_timezones(self) -> None:
        """Data sem timezone misturada com data com timezone é ValidationError."""
        with pytest.raises(ValidationError, match="timezone"):
            GetPushStatsInDateRangeRequest(
                start_date=datetime(2024, 1, 1),
                end_date=datetime(2024, 1, 2, tzinfo=timezone.utc),
            )

    def test_date_range_accepts_aware_dates_in_different_zones(self) -> None:
        start = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
        end = datetime(2024, 1, 1, 10, tzinfo=timezone(timedelta(hours=-3)))
        request = GetPushStatsInDateRangeRequest(start_date=start, end_date=end)
        assert request.end_date > request.start_date

    def test_notification_target_requires_audience(self) -> None:
        with pytest.raises(ValidationError, match="target"):
            NotificationTarget()

    def test_notification_message_requires_platform(self) -> None:
        with pytest.raises(ValidationError):
            NotificationMessage(text="oi", platforms=[])

    def test_geofence_radius_positive(self) -> None:
        with pytest.raises(ValidationError):
            CreateGeofenceRequest(name="loja", latitude=0, longitude=0, radius=0)

    def test_profile_map_requires_attributes(self) -> None:
        with pytest.raises(ValidationError):
            UserAndProfileAttributeMap(ext_id="u-1", profile={})

    def test_requests_are_immutable(self) -> None:
        request = AddTagToUsersRequest(tag="vip", ext_ids=["u-1"])
        with pytest.raises(ValidationError):
            request.tag = "other"  # type: ignore[misc]


class TestSerialization:
    """Serialização para o formato da API."""

    def test_accepts_field_name_and_alias(self) -> None:
        by_name = AddTagToUsersRequest(tag="vip", ext_ids=["u-1"])
        by_alias = AddTagToUsersRequest.model_validate({"tag": "vip", "extIds": ["u-1"]})
        assert by_name == by_alias

    def test_transactional_payload(self) -> None:
        request = SendTransactionalNotificationRequest(
            notification_key=5,
            target=TransactionalTarget(ext_id="u-1"),
            params={"name": "Ana"},
        )
        assert request.to_payload() == {
            "notificationKey": 5,
            "target": {"extId": "u-1"},
            "params": {"name": "Ana"},
        }

    def test_event_parameters_flatten_attributes(self) -> None:
        event = Event(code="view", attributes={"page": "home"})
        assert event.parameters == {"code": "view", "page": "home"}

    def test_event_attributes_are_json_ready(self) -> None:
        """Atributos datetime/Decimal/UUID viram valores JSON."""
        order = UUID("12345678-1234-5678-1234-567812345678")
        event = Event(
            code="purchase",
            ext_id="u-1",
            attributes={"at": datetime(2024, 1, 1), "amount": Decimal("9.90"), "order": order},
        )
        assert event.parameters == {
            "code": "purchase",
            "extId": "u-1",
            "at": "2024-01-01T00:00:00",
            "amount": "9.90",
            "order": str(order),
        }

    @pytest.mark.parametrize("key", ["code", "extId"])
    def test_event_attributes_cannot_override_identity(self, key: str) -> None:
        with pytest.raises(ValidationError, match=key):
            Event(code="purchase", attributes={key: "other"})

    def test_fire_events_default_is_empty(self) -> None:
        assert FireEventsRequest().to_event_parameters() == []


class TestResponses:
    """Decodificação tolerante das responses."""

    def test_unknown_fields_are_ignored(self) -> None:
        response = GetDeviceTokensResponse.model_validate(
            {"list": [{"token": "t-1", "extra": 1}], "nextPage": None, "total": 10}
        )
        assert response.tokens[0].token == "t-1"
        assert not response.has_next_page
