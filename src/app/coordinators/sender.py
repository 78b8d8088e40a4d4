"""Sender — Director do padrão Builder.

Executa a sequência fixa de construção sobre qualquer builder que
implemente MessageBuilderProtocol. Trocar o builder muda apenas o formato
de saída; a sequência e os valores permanecem os mesmos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.letter import SANTA_LETTER_TEXT, SANTA_RECIPIENT

if TYPE_CHECKING:
    from app.protocols.message_builder import MessageBuilderProtocol
    from app.protocols.models import Message

logger = logging.getLogger(__name__)


class Sender:
    """Monta a carta para o Papai Noel usando o builder recebido.

    Sem estado: uma mesma instância pode ser usada com vários builders.
    """

    def build_message(self, builder: MessageBuilderProtocol) -> Message:
        """Define recipient e texto fixos e finaliza o builder.

        Args:
            builder: Builder concreto (JSON, XML, ...)

        Returns:
            Message produzida pelo builder.

        Raises:
            SerializationError: Propagado sem tratamento a partir do builder.
        """
        logger.info(
            "building_message",
            extra={"component": "sender", "builder": type(builder).__name__},
        )
        builder.set_recipient(SANTA_RECIPIENT)
        builder.set_text(SANTA_LETTER_TEXT)
        return builder.finalize()
