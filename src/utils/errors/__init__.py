"""Exceções utilitárias compartilhadas."""

from .exceptions import SerializationError

__all__ = [
    "SerializationError",
]
