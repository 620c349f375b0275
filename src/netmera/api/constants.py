"""Constantes da REST API da Netmera."""

from __future__ import annotations

NETMERA_HEADER_KEY: str = "X-netmera-api-key"

API_PREFIX: str = "/rest/3.0"

# Usuários e dispositivos
REGISTER_DEVICES_PATH = f"{API_PREFIX}/registerDevices"
DISABLE_PUSH_PATH = f"{API_PREFIX}/disablePush"
DISABLE_PUSH_FOR_TOKEN_PATH = f"{API_PREFIX}/disablePushForToken"
ENABLE_PUSH_PATH = f"{API_PREFIX}/enablePush"
ENABLE_PUSH_FOR_TOKEN_PATH = f"{API_PREFIX}/enablePushForToken"
ADD_TAG_PATH = f"{API_PREFIX}/tagUsers"
REMOVE_TAG_PATH = f"{API_PREFIX}/untagUsers"
SET_CATEGORY_PREFERENCES_PATH = f"{API_PREFIX}/setCategoryPreferences"
SET_PROFILE_ATTRIBUTES_PATH = f"{API_PREFIX}/setProfileAttributes"
UNSET_PROFILE_ATTRIBUTES_PATH = f"{API_PREFIX}/unsetProfileAttributes"
GET_PROFILE_ATTRIBUTES_PATH = f"{API_PREFIX}/getProfileAttributes"
PUSH_PROFILE_ATTRIBUTES_PATH = f"{API_PREFIX}/pushProfileAttributes"
PULL_PROFILE_ATTRIBUTES_PATH = f"{API_PREFIX}/pullProfileAttributes"
DELETE_PROFILE_ATTRIBUTE_PATH = f"{API_PREFIX}/deleteProfileAttribute"
GET_USER_DEVICES_PATH = f"{API_PREFIX}/getUserDevices"
GET_DEVICE_TOKENS_PATH = f"{API_PREFIX}/getDeviceTokens"

# Notificações
SEND_BULK_NOTIFICATION_PATH = f"{API_PREFIX}/sendBulkNotification"
SEND_NOTIFICATION_PATH = f"{API_PREFIX}/sendNotification"
SEND_NOTIFICATION_IN_CHUNKS_PATH = f"{API_PREFIX}/sendNotificationInChunks"
CREATE_NOTIFICATION_DEFINITION_PATH = f"{API_PREFIX}/createNotificationDefinition"
GET_PUSH_STATS_PATH = f"{API_PREFIX}/getPushStats"
GET_PUSH_STATS_IN_DATE_RANGE_PATH = f"{API_PREFIX}/getPushStatsInDateRange"
GET_PUSH_RESULTS_PATH = f"{API_PREFIX}/getPushResults"
CREATE_GEOFENCE_PATH = f"{API_PREFIX}/createGeofence"

# Eventos
FIRE_EVENT_PATH = f"{API_PREFIX}/fireEvent"
