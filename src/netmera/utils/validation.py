"""Validações de configuração executadas no momento da construção."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, TypeVar

from netmera.utils.errors import ConfigurationError

_T = TypeVar("_T")


def not_null(value: _T | None, name: str) -> _T:
    """Rejeita None."""
    if value is None:
        raise ConfigurationError(f"{name} não pode ser nulo")
    return value


def not_empty(value: Any, name: str) -> Any:
    """Rejeita None, strings em branco e coleções vazias."""
    not_null(value, name)
    if isinstance(value, str):
        if not value.strip():
            raise ConfigurationError(f"{name} não pode ser vazio")
    elif isinstance(value, Sized) and len(value) == 0:
        raise ConfigurationError(f"{name} não pode ser vazio")
    return value


def must_between(minimum: float, maximum: float, value: float, name: str) -> float:
    """Exige ``minimum <= value <= maximum``.

    Raises:
        ConfigurationError: Se o valor estiver fora do intervalo ou não for numérico.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} deve ser numérico")
    if value < minimum or value > maximum:
        raise ConfigurationError(
            f"{name} deve estar entre {minimum} e {maximum} (recebido: {value})"
        )
    return value
