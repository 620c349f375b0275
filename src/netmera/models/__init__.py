"""Contratos de request/response da REST API da Netmera."""

from netmera.models.base import NetmeraModel, PaginatedResponse
from netmera.models.common import (
    CategoryPreference,
    Device,
    Event,
    NotificationMessage,
    NotificationTarget,
    Platform,
    SingleUnsetObject,
    TransactionalTarget,
    UserAndProfileAttributeList,
    UserAndProfileAttributeMap,
)
from netmera.models.requests import (
    AddNewDevicesRequest,
    AddProfileAttributeRequest,
    AddTagToUsersRequest,
    CreateGeofenceRequest,
    CreateTransactionalNotificationRequest,
    DeleteProfileAttributeFromAllUsersRequest,
    DisablePushRequestWithExternalId,
    DisablePushRequestWithToken,
    EnablePushRequestWithExternalId,
    EnablePushRequestWithToken,
    FireEventsRequest,
    GetDeviceTokensRequest,
    GetProfileAttributesRequest,
    GetPushResultsRequest,
    GetPushStatsInDateRangeRequest,
    GetPushStatsRequest,
    GetUserDevicesRequest,
    PullProfileAttributesFromUserRequest,
    PushProfileAttributesToUserRequest,
    RemoveTagFromUsersRequest,
    SendBulkNotificationRequest,
    SendNotificationsInChunksRequest,
    SendTransactionalNotificationRequest,
    SetCategoryPreferenceRequest,
    UnsetProfileAttributesRequest,
)
from netmera.models.responses import (
    DeviceInfo,
    DeviceToken,
    GetDeviceTokensResponse,
    GetProfileAttributesResponse,
    GetPushResultResponse,
    GetPushStatsInDateRangeResponse,
    GetPushStatsResponse,
    GetUserDevicesResponse,
    NotificationResponse,
    PushResult,
)

__all__ = [
    "AddNewDevicesRequest",
    "AddProfileAttributeRequest",
    "AddTagToUsersRequest",
    "CategoryPreference",
    "CreateGeofenceRequest",
    "CreateTransactionalNotificationRequest",
    "DeleteProfileAttributeFromAllUsersRequest",
    "Device",
    "DeviceInfo",
    "DeviceToken",
    "DisablePushRequestWithExternalId",
    "DisablePushRequestWithToken",
    "EnablePushRequestWithExternalId",
    "EnablePushRequestWithToken",
    "Event",
    "FireEventsRequest",
    "GetDeviceTokensRequest",
    "GetDeviceTokensResponse",
    "GetProfileAttributesRequest",
    "GetProfileAttributesResponse",
    "GetPushResultResponse",
    "GetPushResultsRequest",
    "GetPushStatsInDateRangeRequest",
    "GetPushStatsInDateRangeResponse",
    "GetPushStatsRequest",
    "GetPushStatsResponse",
    "GetUserDevicesRequest",
    "GetUserDevicesResponse",
    "NetmeraModel",
    "NotificationMessage",
    "NotificationResponse",
    "NotificationTarget",
    "PaginatedResponse",
    "Platform",
    "PullProfileAttributesFromUserRequest",
    "PushProfileAttributesToUserRequest",
    "PushResult",
    "RemoveTagFromUsersRequest",
    "SendBulkNotificationRequest",
    "SendNotificationsInChunksRequest",
    "SendTransactionalNotificationRequest",
    "SetCategoryPreferenceRequest",
    "SingleUnsetObject",
    "TransactionalTarget",
    "UnsetProfileAttributesRequest",
    "UserAndProfileAttributeList",
    "UserAndProfileAttributeMap",
]
