"""Registro fechado de operações: tipo de request -> chamada HTTP.

Cada entrada sabe montar o httpx.Request a partir do request tipado e
decodificar o corpo de sucesso no tipo de response correspondente.
Responses paginadas também são despacháveis: buscam ``next_page``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from netmera.api import constants as paths
from netmera.models import (
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
    GetDeviceTokensResponse,
    GetProfileAttributesRequest,
    GetProfileAttributesResponse,
    GetPushResultResponse,
    GetPushResultsRequest,
    GetPushStatsInDateRangeRequest,
    GetPushStatsInDateRangeResponse,
    GetPushStatsRequest,
    GetPushStatsResponse,
    GetUserDevicesRequest,
    GetUserDevicesResponse,
    NotificationResponse,
    PaginatedResponse,
    PullProfileAttributesFromUserRequest,
    PushProfileAttributesToUserRequest,
    RemoveTagFromUsersRequest,
    SendBulkNotificationRequest,
    SendNotificationsInChunksRequest,
    SendTransactionalNotificationRequest,
    SetCategoryPreferenceRequest,
    UnsetProfileAttributesRequest,
)
from netmera.utils.errors import RequestValidationError, ResponseDecodeError

RequestT = TypeVar("RequestT")

QueryParams = dict[str, Any]


@dataclass(frozen=True)
class Operation(Generic[RequestT]):
    """Mapeamento de um tipo de request para uma chamada remota.

    Attributes:
        name: Nome da operação (usado em logs)
        method: Método HTTP
        path: Caminho relativo ao host; ignorado quando ``url`` é informado
        response_type: Modelo do corpo de sucesso; None para corpo vazio
        body: Projeção do request no corpo JSON
        params: Projeção do request na query string (valores None omitidos)
        url: Resolve a URL a partir do request (paginação)
    """

    name: str
    method: str
    path: str
    response_type: type[BaseModel] | None = None
    body: Callable[[RequestT], Any] | None = None
    params: Callable[[RequestT], QueryParams] | None = None
    url: Callable[[RequestT], str] | None = None

    def build_request(self, client: httpx.Client, request: RequestT) -> httpx.Request:
        url = self.url(request) if self.url is not None else self.path
        kwargs: dict[str, Any] = {}
        if self.params is not None:
            kwargs["params"] = _clean_params(self.params(request))
        if self.body is not None:
            kwargs["json"] = self.body(request)
        return client.build_request(self.method, url, **kwargs)

    def decode(self, response: httpx.Response) -> Any:
        """Decodifica o corpo de sucesso.

        Raises:
            ResponseDecodeError: Corpo não é JSON ou não casa com o modelo.
        """
        if self.response_type is None:
            return None
        try:
            data = response.json()
        except ValueError as exc:
            raise ResponseDecodeError(
                f"Resposta de {self.name} não é JSON válido",
                status_code=response.status_code,
            ) from exc
        try:
            return self.response_type.model_validate(data)
        except ValidationError as exc:
            raise ResponseDecodeError(
                f"Resposta de {self.name} não corresponde a {self.response_type.__name__}",
                status_code=response.status_code,
            ) from exc


def _clean_params(params: QueryParams) -> QueryParams:
    cleaned: QueryParams = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, datetime):
            cleaned[key] = value.isoformat()
        else:
            cleaned[key] = value
    return cleaned


def _payload(request: BaseModel) -> dict[str, Any]:
    return request.to_payload()  # type: ignore[attr-defined]


def _payload_list(items: list[BaseModel]) -> list[dict[str, Any]]:
    return [item.to_payload() for item in items]  # type: ignore[attr-defined]


def _next_page_url(response: PaginatedResponse) -> str:
    if not response.next_page:
        raise RequestValidationError(f"{type(response).__name__} não possui next_page")
    return response.next_page


def _post(
    name: str,
    path: str,
    body: Callable[[Any], Any],
    response_type: type[BaseModel] | None = None,
) -> Operation:
    return Operation(name=name, method="POST", path=path, body=body, response_type=response_type)


def _get(
    name: str,
    path: str,
    params: Callable[[Any], QueryParams],
    response_type: type[BaseModel],
) -> Operation:
    return Operation(
        name=name, method="GET", path=path, params=params, response_type=response_type
    )


def _next_page(name: str, response_type: type[PaginatedResponse]) -> Operation:
    return Operation(
        name=name, method="GET", path="", url=_next_page_url, response_type=response_type
    )


OPERATIONS: dict[type, Operation] = {
    # Usuários e dispositivos
    AddNewDevicesRequest: _post(
        "create_new_devices",
        paths.REGISTER_DEVICES_PATH,
        lambda r: _payload_list(r.device_list),
    ),
    DisablePushRequestWithExternalId: _post(
        "disable_push_with_external_id", paths.DISABLE_PUSH_PATH, _payload
    ),
    DisablePushRequestWithToken: _post(
        "disable_push_with_device_token", paths.DISABLE_PUSH_FOR_TOKEN_PATH, _payload
    ),
    EnablePushRequestWithExternalId: _post(
        "enable_push_with_external_id", paths.ENABLE_PUSH_PATH, _payload
    ),
    EnablePushRequestWithToken: _post(
        "enable_push_with_device_token", paths.ENABLE_PUSH_FOR_TOKEN_PATH, _payload
    ),
    AddTagToUsersRequest: _post("add_tag_to_users", paths.ADD_TAG_PATH, _payload),
    RemoveTagFromUsersRequest: _post("remove_tag_from_users", paths.REMOVE_TAG_PATH, _payload),
    SetCategoryPreferenceRequest: _post(
        "set_category_preferences",
        paths.SET_CATEGORY_PREFERENCES_PATH,
        lambda r: _payload_list(r.categories),
    ),
    AddProfileAttributeRequest: _post(
        "set_profile_attributes",
        paths.SET_PROFILE_ATTRIBUTES_PATH,
        lambda r: _payload_list(r.user_and_profile_attribute_maps),
    ),
    UnsetProfileAttributesRequest: _post(
        "unset_profile_attributes",
        paths.UNSET_PROFILE_ATTRIBUTES_PATH,
        lambda r: _payload_list(r.single_unset_objects),
    ),
    GetProfileAttributesRequest: _get(
        "get_profile_attributes",
        paths.GET_PROFILE_ATTRIBUTES_PATH,
        lambda r: {"extId": r.external_id},
        GetProfileAttributesResponse,
    ),
    PushProfileAttributesToUserRequest: _post(
        "push_profile_attributes_to_user",
        paths.PUSH_PROFILE_ATTRIBUTES_PATH,
        lambda r: _payload_list(r.user_and_profile_attribute_lists),
    ),
    PullProfileAttributesFromUserRequest: _post(
        "pull_profile_attributes_from_user",
        paths.PULL_PROFILE_ATTRIBUTES_PATH,
        lambda r: _payload_list(r.user_and_profile_attribute_lists),
    ),
    DeleteProfileAttributeFromAllUsersRequest: _post(
        "delete_profile_attribute_from_all_users",
        paths.DELETE_PROFILE_ATTRIBUTE_PATH,
        _payload,
    ),
    GetUserDevicesRequest: _get(
        "get_user_devices",
        paths.GET_USER_DEVICES_PATH,
        lambda r: {"extId": r.external_id, "pushPermitted": r.push_permitted},
        GetUserDevicesResponse,
    ),
    GetDeviceTokensRequest: _get(
        "get_device_tokens",
        paths.GET_DEVICE_TOKENS_PATH,
        lambda r: {"max": r.max_results, "offset": r.offset},
        GetDeviceTokensResponse,
    ),
    GetDeviceTokensResponse: _next_page("get_device_tokens_next_page", GetDeviceTokensResponse),
    # Notificações
    SendBulkNotificationRequest: _post(
        "send_bulk_notification",
        paths.SEND_BULK_NOTIFICATION_PATH,
        _payload,
        NotificationResponse,
    ),
    SendTransactionalNotificationRequest: _post(
        "send_notification", paths.SEND_NOTIFICATION_PATH, _payload
    ),
    SendNotificationsInChunksRequest: _post(
        "send_notification_in_chunks",
        paths.SEND_NOTIFICATION_IN_CHUNKS_PATH,
        lambda r: _payload_list(r.requests),
    ),
    CreateTransactionalNotificationRequest: _post(
        "create_notification_definition",
        paths.CREATE_NOTIFICATION_DEFINITION_PATH,
        _payload,
        NotificationResponse,
    ),
    GetPushStatsRequest: _get(
        "get_push_stats",
        paths.GET_PUSH_STATS_PATH,
        lambda r: {"notificationKey": r.notification_key},
        GetPushStatsResponse,
    ),
    GetPushStatsInDateRangeRequest: _get(
        "get_push_stats_in_date_range",
        paths.GET_PUSH_STATS_IN_DATE_RANGE_PATH,
        lambda r: {"startDate": r.start_date, "endDate": r.end_date},
        GetPushStatsInDateRangeResponse,
    ),
    GetPushResultsRequest: _get(
        "get_push_results",
        paths.GET_PUSH_RESULTS_PATH,
        lambda r: {
            "max": r.max_results,
            "notificationKey": r.notification_key,
            "extId": r.ext_id,
            "start": r.start,
            "end": r.end,
            "token": r.token,
        },
        GetPushResultResponse,
    ),
    GetPushResultResponse: _next_page("get_push_results_next_page", GetPushResultResponse),
    CreateGeofenceRequest: _post("create_geofence", paths.CREATE_GEOFENCE_PATH, _payload),
    # Eventos
    FireEventsRequest: _post(
        "fire_event",
        paths.FIRE_EVENT_PATH,
        lambda r: r.to_event_parameters(),
    ),
}


def resolve_operation(request: object) -> Operation:
    """Retorna a operação do tipo exato do request.

    Raises:
        TypeError: Tipo de request não suportado.
    """
    try:
        return OPERATIONS[type(request)]
    except KeyError:
        raise TypeError(f"Tipo de request não suportado: {type(request).__name__}") from None
