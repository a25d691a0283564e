"""Adapters de infraestructura (parsers, texto, storage, repositorios, servicios)."""
