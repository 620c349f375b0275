"""Protocolos públicos do cliente."""

from netmera.app.protocols.netmera import NetmeraProtocol

__all__ = ["NetmeraProtocol"]
