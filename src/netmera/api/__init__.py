"""Camada de acesso à REST API da Netmera (transporte, erros, operações)."""
