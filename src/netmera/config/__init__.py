"""Configuração do cliente: settings de ambiente e logging estruturado."""
