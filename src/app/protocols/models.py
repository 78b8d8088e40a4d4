"""Modelos compartilhados entre builders e coordinators."""

from __future__ import annotations

from dataclasses import dataclass

from app.constants.formats import MessageFormat


@dataclass(slots=True, frozen=True)
class Message:
    """Mensagem serializada produzida por um builder.

    Attributes:
        body: Bytes serializados (UTF-8)
        format: Formato de serialização (JSON|XML)
    """

    body: bytes
    format: MessageFormat

    def text(self) -> str:
        """Retorna o corpo decodificado como UTF-8."""
        return self.body.decode("utf-8")
