"""Crosscutting: configuración y logging compartidos por todas las capas."""

from .config import Settings, get_settings
from .logger import JSONFormatter, setup_logger

__all__ = ["Settings", "get_settings", "JSONFormatter", "setup_logger"]
