"""Bootstrap do cliente: builder e factory a partir de settings."""

from netmera.app.bootstrap.builder import NetmeraApiBuilder, create_netmera_client

__all__ = ["NetmeraApiBuilder", "create_netmera_client"]
