"""Conteúdo fixo da carta montada pelo Sender."""

from __future__ import annotations

SANTA_RECIPIENT: str = "Santa Claus"

SANTA_LETTER_TEXT: str = (
    "I have tried to be good all year and hope that you and your reindeers "
    "will be able to deliver me a nice present."
)
