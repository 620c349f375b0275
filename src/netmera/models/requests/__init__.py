"""Requests tipados, um por operação da API."""

from netmera.models.requests.device import (
    AddNewDevicesRequest,
    AddProfileAttributeRequest,
    AddTagToUsersRequest,
    DeleteProfileAttributeFromAllUsersRequest,
    DisablePushRequestWithExternalId,
    DisablePushRequestWithToken,
    EnablePushRequestWithExternalId,
    EnablePushRequestWithToken,
    GetDeviceTokensRequest,
    GetProfileAttributesRequest,
    GetUserDevicesRequest,
    PullProfileAttributesFromUserRequest,
    PushProfileAttributesToUserRequest,
    RemoveTagFromUsersRequest,
    SetCategoryPreferenceRequest,
    UnsetProfileAttributesRequest,
)
from netmera.models.requests.event import FireEventsRequest
from netmera.models.requests.notification import (
    CreateGeofenceRequest,
    CreateTransactionalNotificationRequest,
    GetPushResultsRequest,
    GetPushStatsInDateRangeRequest,
    GetPushStatsRequest,
    SendBulkNotificationRequest,
    SendNotificationsInChunksRequest,
    SendTransactionalNotificationRequest,
)

__all__ = [
    "AddNewDevicesRequest",
    "AddProfileAttributeRequest",
    "AddTagToUsersRequest",
    "CreateGeofenceRequest",
    "CreateTransactionalNotificationRequest",
    "DeleteProfileAttributeFromAllUsersRequest",
    "DisablePushRequestWithExternalId",
    "DisablePushRequestWithToken",
    "EnablePushRequestWithExternalId",
    "EnablePushRequestWithToken",
    "FireEventsRequest",
    "GetDeviceTokensRequest",
    "GetProfileAttributesRequest",
    "GetPushResultsRequest",
    "GetPushStatsInDateRangeRequest",
    "GetPushStatsRequest",
    "GetUserDevicesRequest",
    "PullProfileAttributesFromUserRequest",
    "PushProfileAttributesToUserRequest",
    "RemoveTagFromUsersRequest",
    "SendBulkNotificationRequest",
    "SendNotificationsInChunksRequest",
    "SendTransactionalNotificationRequest",
    "SetCategoryPreferenceRequest",
    "UnsetProfileAttributesRequest",
]
