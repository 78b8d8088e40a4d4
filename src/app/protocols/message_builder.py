"""Protocolo de construção de mensagens (Builder)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import Message


@runtime_checkable
class MessageBuilderProtocol(Protocol):
    """Contrato mínimo de um builder de mensagens.

    Cada instância acumula recipient/text de uma única sessão de construção.
    Não há sincronização interna: não compartilhar a mesma instância entre
    Senders concorrentes.
    """

    def set_recipient(self, recipient: str) -> None:
        """Armazena o destinatário (sobrescreve valor anterior)."""
        ...

    def set_text(self, text: str) -> None:
        """Armazena o texto da mensagem (sobrescreve valor anterior)."""
        ...

    def finalize(self) -> Message:
        """Serializa o estado atual em uma nova Message.

        Raises:
            SerializationError: Se o codec rejeitar o estado atual.
        """
        ...
