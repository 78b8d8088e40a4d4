"""Protocolos e contratos do core da aplicação."""

from .message_builder import MessageBuilderProtocol
from .models import Message

__all__ = [
    "Message",
    "MessageBuilderProtocol",
]
