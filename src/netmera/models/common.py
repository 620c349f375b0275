"""Objetos aninhados usados pelos requests."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator, model_validator

from netmera.models.base import NetmeraModel

Platform = Literal["IOS", "ANDROID", "WEB", "HUAWEI"]

EVENT_RESERVED_KEYS = frozenset({"code", "extId"})


class Device(NetmeraModel):
    """Dispositivo para registro em lote."""

    token: str = Field(..., min_length=1)
    platform: Platform
    ext_id: str | None = None
    push_permitted: bool | None = None
    tags: list[str] | None = None


class CategoryPreference(NetmeraModel):
    ext_id: str = Field(..., min_length=1)
    category_id: int
    enabled: bool


class UserAndProfileAttributeMap(NetmeraModel):
    """Atributos de perfil a definir para um usuário."""

    ext_id: str = Field(..., min_length=1)
    profile: dict[str, Any] = Field(..., min_length=1)


class SingleUnsetObject(NetmeraModel):
    """Nomes de atributos de perfil a remover de um usuário."""

    ext_id: str = Field(..., min_length=1)
    profile: list[str] = Field(..., min_length=1)


class UserAndProfileAttributeList(NetmeraModel):
    """Valores a adicionar/remover de atributos de perfil do tipo lista."""

    ext_id: str = Field(..., min_length=1)
    profile: dict[str, list[Any]] = Field(..., min_length=1)


class NotificationMessage(NetmeraModel):
    title: str | None = None
    text: str = Field(..., min_length=1)
    platforms: list[Platform] = Field(..., min_length=1)
    sound: str | None = None
    custom_json: dict[str, Any] | None = None
    click_action: dict[str, Any] | None = None


class NotificationTarget(NetmeraModel):
    """Público alvo de uma notificação em massa."""

    send_to_all: bool | None = None
    ext_ids: list[str] | None = None
    tags: list[str] | None = None
    segments: list[str] | None = None

    @model_validator(mode="after")
    def _require_audience(self) -> NotificationTarget:
        if not (self.send_to_all or self.ext_ids or self.tags or self.segments):
            raise ValueError("target precisa de send_to_all, ext_ids, tags ou segments")
        return self


class TransactionalTarget(NetmeraModel):
    ext_id: str = Field(..., min_length=1)


class Event(NetmeraModel):
    """Evento para disparo em lote.

    ``attributes`` são os parâmetros específicos do evento; ``parameters``
    achata tudo no dicionário JSON cru esperado pelo endpoint.
    """

    code: str = Field(..., min_length=1)
    ext_id: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)

    @field_validator("attributes")
    @classmethod
    def _reject_reserved_keys(cls, value: dict[str, Any]) -> dict[str, Any]:
        reserved = sorted(EVENT_RESERVED_KEYS & value.keys())
        if reserved:
            raise ValueError(f"attributes não pode redefinir {', '.join(reserved)}")
        return value

    @property
    def parameters(self) -> dict[str, Any]:
        params = self.to_payload()
        attributes = params.pop("attributes", {})
        params.update(attributes)
        return params
