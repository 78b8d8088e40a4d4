"""Constantes da aplicação."""

from app.constants.formats import MessageFormat
from app.constants.letter import SANTA_LETTER_TEXT, SANTA_RECIPIENT

__all__ = [
    "SANTA_LETTER_TEXT",
    "SANTA_RECIPIENT",
    "MessageFormat",
]
