"""Settings de serialização dos builders de mensagem.

Controlam detalhes de encoding que não alteram o contrato dos campos
(recipient/message no JSON, recipient/body no XML).
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

# Nome do tipo de registro usado como raiz do documento XML
DEFAULT_XML_ROOT_TAG: str = "XMLMessage"

# Nome XML simplificado (sem namespace/prefixo)
_XML_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.-]*$")


@dataclass(frozen=True)
class SerializationSettings:
    """Configurações de serialização.

    Attributes:
        json_ensure_ascii: Escapa caracteres não-ASCII como \\uXXXX
        json_sort_keys: Emite chaves do objeto JSON em ordem alfabética
        xml_root_tag: Nome do elemento raiz do documento XML
        xml_declaration: Inclui declaração <?xml ...?> no documento
    """

    json_ensure_ascii: bool = False
    json_sort_keys: bool = True
    xml_root_tag: str = DEFAULT_XML_ROOT_TAG
    xml_declaration: bool = False

    def validate(self) -> list[str]:
        """Valida configurações de serialização.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not _XML_NAME_PATTERN.match(self.xml_root_tag):
            errors.append(f"XML_ROOT_TAG inválido: {self.xml_root_tag!r}")

        return errors


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in ("true", "1", "yes")


def _load_serialization_from_env() -> SerializationSettings:
    """Carrega SerializationSettings de variáveis de ambiente."""
    return SerializationSettings(
        json_ensure_ascii=_env_flag("JSON_ENSURE_ASCII", False),
        json_sort_keys=_env_flag("JSON_SORT_KEYS", True),
        xml_root_tag=os.getenv("XML_ROOT_TAG", DEFAULT_XML_ROOT_TAG),
        xml_declaration=_env_flag("XML_DECLARATION", False),
    )


@lru_cache(maxsize=1)
def get_serialization_settings() -> SerializationSettings:
    """Retorna instância cacheada de SerializationSettings."""
    return _load_serialization_from_env()
