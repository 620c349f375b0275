"""Settings do cliente Netmera carregadas do ambiente."""

from netmera.config.settings.netmera import (
    DEFAULT_TARGET_HOST,
    NetmeraSettings,
    get_netmera_settings,
)

__all__ = [
    "DEFAULT_TARGET_HOST",
    "NetmeraSettings",
    "get_netmera_settings",
]
