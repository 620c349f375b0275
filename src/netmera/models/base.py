"""Modelo base: imutável, camelCase no fio, None omitido."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class NetmeraModel(BaseModel):
    """Base para requests, responses e objetos aninhados."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serializa para o JSON esperado pela API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PaginatedResponse(NetmeraModel):
    """Resposta paginada; ``next_page`` é o token (URL) da próxima página."""

    next_page: str | None = None

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_page)
