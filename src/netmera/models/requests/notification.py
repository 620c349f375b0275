"""Requests de notificações, estatísticas e geofences."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from netmera.models.base import NetmeraModel
from netmera.models.common import NotificationMessage, NotificationTarget, TransactionalTarget


class SendBulkNotificationRequest(NetmeraModel):
    message: NotificationMessage
    target: NotificationTarget


class SendTransactionalNotificationRequest(NetmeraModel):
    """Envio de uma definição transacional já criada para um usuário."""

    notification_key: int = Field(..., ge=1)
    target: TransactionalTarget
    params: dict[str, Any] | None = None


class SendNotificationsInChunksRequest(NetmeraModel):
    """Várias notificações em massa em uma única chamada."""

    requests: list[SendBulkNotificationRequest] = Field(..., min_length=1)


class CreateTransactionalNotificationRequest(NetmeraModel):
    message: NotificationMessage
    personalized: bool | None = None


class GetPushStatsRequest(NetmeraModel):
    notification_key: int = Field(..., ge=1)


class GetPushStatsInDateRangeRequest(NetmeraModel):
    start_date: datetime
    end_date: datetime

    @model_validator(mode="after")
    def _check_range(self) -> GetPushStatsInDateRangeRequest:
        if (self.start_date.tzinfo is None) != (self.end_date.tzinfo is None):
            raise ValueError("start_date e end_date devem ambos ter (ou não ter) timezone")
        if self.end_date < self.start_date:
            raise ValueError("end_date deve ser posterior a start_date")
        return self


class GetPushResultsRequest(NetmeraModel):
    """Primeira página de resultados; as seguintes vêm de GetPushResultResponse."""

    notification_key: int = Field(..., ge=1)
    max_results: int = Field(default=100, ge=1, le=10_000)
    ext_id: str | None = None
    start: datetime | None = None
    end: datetime | None = None
    token: str | None = None


class CreateGeofenceRequest(NetmeraModel):
    name: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    radius: float = Field(..., gt=0)
    group: str | None = None
