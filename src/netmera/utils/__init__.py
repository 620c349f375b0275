"""Utilitários compartilhados (validação e exceções)."""
