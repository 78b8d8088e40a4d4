"""Coordinators — orquestração de builders."""

from app.coordinators.sender import Sender

__all__ = [
    "Sender",
]
