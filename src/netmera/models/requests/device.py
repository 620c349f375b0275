"""Requests de usuários, dispositivos, tags e atributos de perfil."""

from __future__ import annotations

from pydantic import Field

from netmera.models.base import NetmeraModel
from netmera.models.common import (
    CategoryPreference,
    Device,
    Platform,
    SingleUnsetObject,
    UserAndProfileAttributeList,
    UserAndProfileAttributeMap,
)


class AddNewDevicesRequest(NetmeraModel):
    """Registro de vários dispositivos de uma vez (importação em lote)."""

    device_list: list[Device] = Field(..., min_length=1)


class DisablePushRequestWithExternalId(NetmeraModel):
    """Opt-out de push para todos os dispositivos do usuário."""

    ext_id: str = Field(..., min_length=1)


class DisablePushRequestWithToken(NetmeraModel):
    """Opt-out de push apenas para o dispositivo do token."""

    token: str = Field(..., min_length=1)
    platform: Platform | None = None


class EnablePushRequestWithExternalId(NetmeraModel):
    ext_id: str = Field(..., min_length=1)


class EnablePushRequestWithToken(NetmeraModel):
    token: str = Field(..., min_length=1)
    platform: Platform | None = None


class AddTagToUsersRequest(NetmeraModel):
    tag: str = Field(..., min_length=1)
    ext_ids: list[str] = Field(..., min_length=1)


class RemoveTagFromUsersRequest(NetmeraModel):
    tag: str = Field(..., min_length=1)
    ext_ids: list[str] = Field(..., min_length=1)


class SetCategoryPreferenceRequest(NetmeraModel):
    categories: list[CategoryPreference] = Field(..., min_length=1)


class AddProfileAttributeRequest(NetmeraModel):
    user_and_profile_attribute_maps: list[UserAndProfileAttributeMap] = Field(
        ..., min_length=1
    )


class UnsetProfileAttributesRequest(NetmeraModel):
    single_unset_objects: list[SingleUnsetObject] = Field(..., min_length=1)


class GetProfileAttributesRequest(NetmeraModel):
    external_id: str = Field(..., min_length=1)


class PushProfileAttributesToUserRequest(NetmeraModel):
    user_and_profile_attribute_lists: list[UserAndProfileAttributeList] = Field(
        ..., min_length=1
    )


class PullProfileAttributesFromUserRequest(NetmeraModel):
    user_and_profile_attribute_lists: list[UserAndProfileAttributeList] = Field(
        ..., min_length=1
    )


class DeleteProfileAttributeFromAllUsersRequest(NetmeraModel):
    attribute: str = Field(..., min_length=1)


class GetUserDevicesRequest(NetmeraModel):
    external_id: str = Field(..., min_length=1)
    push_permitted: bool | None = None


class GetDeviceTokensRequest(NetmeraModel):
    """Primeira página de tokens; as seguintes vêm de GetDeviceTokensResponse."""

    max_results: int = Field(default=100, ge=1, le=10_000)
    offset: int = Field(default=0, ge=0)
