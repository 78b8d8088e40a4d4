"""Builders de mensagem (JSON e XML).

Todos implementam MessageBuilderProtocol e compartilham o mesmo fluxo de
construção; apenas o encoding muda.
"""

from api.payload_builders.message.base import BaseMessageBuilder
from api.payload_builders.message.factory import get_message_builder
from api.payload_builders.message.json_builder import JSONMessageBuilder
from api.payload_builders.message.xml_builder import XMLMessageBuilder

__all__ = [
    "BaseMessageBuilder",
    "JSONMessageBuilder",
    "XMLMessageBuilder",
    "get_message_builder",
]
