"""Base compartilhada dos builders de mensagem.

Concentra o estado (recipient/text) e o fluxo de finalize; cada builder
concreto implementa apenas o encoding do seu formato.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from app.protocols.models import Message
from config.settings.serialization import get_serialization_settings
from utils.errors import SerializationError

if TYPE_CHECKING:
    from app.constants.formats import MessageFormat
    from config.settings.serialization import SerializationSettings

logger = logging.getLogger(__name__)


class BaseMessageBuilder(ABC):
    """Builder com estado de uma única sessão de construção.

    Implementa MessageBuilderProtocol. Sem sincronização interna: a mesma
    instância não deve ser usada por Senders concorrentes.

    Args:
        settings: Configurações de serialização. Se None, usa
            get_serialization_settings().
    """

    message_format: MessageFormat

    def __init__(self, settings: SerializationSettings | None = None) -> None:
        self._settings = settings or get_serialization_settings()
        self._recipient = ""
        self._text = ""

    def set_recipient(self, recipient: str) -> None:
        """Armazena o destinatário (sem validação, sobrescreve)."""
        self._recipient = recipient

    def set_text(self, text: str) -> None:
        """Armazena o texto da mensagem (sem validação, sobrescreve)."""
        self._text = text

    def finalize(self) -> Message:
        """Serializa o estado atual em uma nova Message.

        Pode ser chamado várias vezes; cada chamada reflete o estado atual.
        Campos nunca definidos são serializados como string vazia.

        Returns:
            Message com body serializado e format do builder.

        Raises:
            SerializationError: Se o codec rejeitar o estado atual.
        """
        try:
            body = self._encode(self._recipient, self._text)
        except (TypeError, ValueError) as exc:
            # UnicodeEncodeError é subclasse de ValueError
            logger.error(
                "message_serialization_failed",
                extra={
                    "format": str(self.message_format),
                    "builder": type(self).__name__,
                    "error_type": type(exc).__name__,
                },
            )
            raise SerializationError(
                f"Falha ao serializar mensagem {self.message_format}: {exc}",
                message_format=str(self.message_format),
            ) from exc

        logger.debug(
            "message_built",
            extra={
                "format": str(self.message_format),
                "builder": type(self).__name__,
                "size_bytes": len(body),
            },
        )
        return Message(body=body, format=self.message_format)

    @abstractmethod
    def _encode(self, recipient: str, text: str) -> bytes:
        """Codifica recipient/text no formato do builder."""
