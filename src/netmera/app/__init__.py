"""Camada de aplicação: dispatcher, callbacks e bootstrap."""
