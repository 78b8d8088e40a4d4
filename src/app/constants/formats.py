"""Enums de domínio para formatos de serialização de mensagens."""

from __future__ import annotations

from enum import StrEnum


class MessageFormat(StrEnum):
    """Formatos de saída suportados pelos builders."""

    JSON = "JSON"
    XML = "XML"

    @classmethod
    def parse(cls, value: MessageFormat | str) -> MessageFormat:
        """Converte string (case-insensitive) para MessageFormat.

        Raises:
            ValueError: Se o formato não for suportado.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Formato de mensagem não suportado: {value}. Válidos: {valid}") from None
