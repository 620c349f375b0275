"""Request de disparo de eventos em lote."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from netmera.models.base import NetmeraModel
from netmera.models.common import Event


class FireEventsRequest(NetmeraModel):
    """Eventos disparados em uma única chamada.

    Lista vazia é válida e resulta em uma chamada com corpo ``[]``.
    """

    event_list: list[Event] = Field(default_factory=list)

    def to_event_parameters(self) -> list[dict[str, Any]]:
        """Projeta cada evento no dicionário cru de parâmetros."""
        return [event.parameters for event in self.event_list]
