"""Exceções de domínio da construção de mensagens."""

from __future__ import annotations


class SerializationError(RuntimeError):
    """Falha do codec ao serializar o estado de um builder.

    Args:
        message: Descrição da falha (sem PII).
        message_format: Formato alvo da serialização (ex: "JSON").
    """

    def __init__(self, message: str, *, message_format: str = "") -> None:
        super().__init__(message)
        self.message_format = message_format
