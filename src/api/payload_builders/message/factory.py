"""Factory para obter o builder correto por formato de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.formats import MessageFormat

from .json_builder import JSONMessageBuilder
from .xml_builder import XMLMessageBuilder

if TYPE_CHECKING:
    from config.settings.serialization import SerializationSettings

    from .base import BaseMessageBuilder

# Mapeamento de formato para classe (builders têm estado: nunca compartilhar instâncias)
_BUILDERS: dict[MessageFormat, type[BaseMessageBuilder]] = {
    MessageFormat.JSON: JSONMessageBuilder,
    MessageFormat.XML: XMLMessageBuilder,
}


def get_message_builder(
    message_format: MessageFormat | str,
    settings: SerializationSettings | None = None,
) -> BaseMessageBuilder:
    """Retorna um builder novo para o formato.

    Args:
        message_format: Formato desejado (MessageFormat ou string, case-insensitive)
        settings: Configurações de serialização opcionais

    Returns:
        Instância nova do builder apropriado

    Raises:
        ValueError: Se o formato não for suportado
    """
    builder_cls = _BUILDERS[MessageFormat.parse(message_format)]
    return builder_cls(settings)
