"""Builder de mensagens XML."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from app.constants.formats import MessageFormat

from .base import BaseMessageBuilder

if TYPE_CHECKING:
    from config.settings.serialization import SerializationSettings

# Caracteres fora do conjunto Char do XML 1.0
_INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _ensure_xml_text(field: str, value: str) -> str:
    """Rejeita texto que não pode ser representado em XML 1.0.

    Raises:
        ValueError: Se houver caractere inválido.
        TypeError: Se value não for string.
    """
    if not isinstance(value, str):
        raise TypeError(f"Campo {field} deve ser str, recebido {type(value).__name__}")
    match = _INVALID_XML_CHARS.search(value)
    if match:
        raise ValueError(
            f"Caractere inválido para XML 1.0 no campo {field}: U+{ord(match.group()):04X}"
        )
    return value


class XMLMessageBuilder(BaseMessageBuilder):
    """Builder que serializa a mensagem como documento XML.

    Saída: <XMLMessage><recipient>...</recipient><body>...</body></XMLMessage>.
    O texto vai no elemento "body" (não "text") por compatibilidade.
    Sem atributos nem namespaces.

    Raises:
        ValueError: Se settings.xml_root_tag não for um nome XML válido.
    """

    message_format = MessageFormat.XML

    def __init__(self, settings: SerializationSettings | None = None) -> None:
        super().__init__(settings)
        errors = self._settings.validate()
        if errors:
            raise ValueError("; ".join(errors))

    def _encode(self, recipient: str, text: str) -> bytes:
        root = ET.Element(self._settings.xml_root_tag)
        ET.SubElement(root, "recipient").text = _ensure_xml_text("recipient", recipient)
        ET.SubElement(root, "body").text = _ensure_xml_text("body", text)

        document = ET.tostring(
            root,
            encoding="utf-8",
            xml_declaration=self._settings.xml_declaration,
            short_empty_elements=False,
        )
        # Parsers normalizam CR/CRLF para LF; CR literal só aparece em texto
        return document.replace(b"\r", b"&#13;")
