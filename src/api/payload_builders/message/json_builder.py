"""Builder de mensagens JSON."""

from __future__ import annotations

import json

from app.constants.formats import MessageFormat

from .base import BaseMessageBuilder


class JSONMessageBuilder(BaseMessageBuilder):
    """Builder que serializa a mensagem como objeto JSON.

    Saída: {"message": <text>, "recipient": <recipient>}. A chave do texto
    é "message" (não "text") por compatibilidade com consumidores
    existentes. Consumidores não devem depender da ordem das chaves.
    """

    message_format = MessageFormat.JSON

    def _encode(self, recipient: str, text: str) -> bytes:
        payload = {
            "recipient": recipient,
            "message": text,
        }
        encoded = json.dumps(
            payload,
            ensure_ascii=self._settings.json_ensure_ascii,
            sort_keys=self._settings.json_sort_keys,
            separators=(",", ":"),
        )
        # Surrogates isolados falham aqui com UnicodeEncodeError
        return encoded.encode("utf-8")
