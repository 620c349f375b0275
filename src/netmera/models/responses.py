"""Responses tipadas decodificadas do corpo de sucesso."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from netmera.models.base import NetmeraModel, PaginatedResponse


class GetProfileAttributesResponse(NetmeraModel):
    ext_id: str | None = None
    profile: dict[str, Any] = Field(default_factory=dict)


class DeviceInfo(NetmeraModel):
    token: str | None = None
    platform: str | None = None
    push_permitted: bool | None = None
    app_version: str | None = None
    os_version: str | None = None


class GetUserDevicesResponse(NetmeraModel):
    ext_id: str | None = None
    devices: list[DeviceInfo] = Field(default_factory=list)


class DeviceToken(NetmeraModel):
    token: str
    platform: str | None = None
    ext_id: str | None = None


class GetDeviceTokensResponse(PaginatedResponse):
    tokens: list[DeviceToken] = Field(default_factory=list, alias="list")


class NotificationResponse(NetmeraModel):
    notification_key: int | None = None
    total_count: int | None = None


class GetPushStatsResponse(NetmeraModel):
    notification_key: int | None = None
    sent: int = 0
    delivered: int = 0
    clicked: int = 0
    failed: int = 0


class GetPushStatsInDateRangeResponse(NetmeraModel):
    stats: list[GetPushStatsResponse] = Field(default_factory=list, alias="list")


class PushResult(NetmeraModel):
    ext_id: str | None = None
    token: str | None = None
    platform: str | None = None
    status: str | None = None
    sent_date: str | None = None


class GetPushResultResponse(PaginatedResponse):
    results: list[PushResult] = Field(default_factory=list, alias="list")
