"""Decodificação do corpo de erro da API Netmera."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from netmera.utils.errors import NetmeraApiError, ResponseDecodeError


class ErrorBody(BaseModel):
    """Informação estruturada de erro retornada pela Netmera."""

    model_config = ConfigDict(extra="allow", frozen=True)

    code: int | str | None = None
    message: str | None = None


def _extract_error_object(data: Any) -> dict[str, Any] | None:
    if not isinstance(data, dict):
        return None
    # Alguns endpoints aninham o erro em {"error": {...}}
    nested = data.get("error")
    if isinstance(nested, dict):
        return nested
    return data


def decode_api_error(response: httpx.Response) -> NetmeraApiError:
    """Converte uma resposta não-2xx em NetmeraApiError.

    Args:
        response: Resposta já lida (corpo disponível)

    Returns:
        NetmeraApiError com status e ErrorBody

    Raises:
        ResponseDecodeError: Se o corpo não for um objeto JSON
    """
    try:
        data = response.json()
    except ValueError as exc:
        raise ResponseDecodeError(
            "Corpo de erro não é JSON válido",
            status_code=response.status_code,
        ) from exc

    error_obj = _extract_error_object(data)
    if error_obj is None:
        raise ResponseDecodeError(
            "Corpo de erro não é um objeto JSON",
            status_code=response.status_code,
        )

    if error_obj.get("message") is None and isinstance(error_obj.get("error"), str):
        error_obj = {**error_obj, "message": error_obj["error"]}

    return NetmeraApiError(response.status_code, ErrorBody.model_validate(error_obj))
