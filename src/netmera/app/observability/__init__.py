"""Observabilidade: correlation_id por despacho.

Uso:
    from netmera.app.observability import get_correlation_id
"""

from netmera.app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
