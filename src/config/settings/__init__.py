"""Agregador de settings do message_builder.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Serialization settings
from config.settings.serialization import (
    DEFAULT_XML_ROOT_TAG,
    SerializationSettings,
    get_serialization_settings,
)

__all__ = [
    # Constants
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_XML_ROOT_TAG",
    # Base
    "BaseSettings",
    "Environment",
    # Serialization
    "SerializationSettings",
    "get_base_settings",
    "get_serialization_settings",
]
