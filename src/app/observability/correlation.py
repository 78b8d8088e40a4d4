"""Correlation id das execuções de construção de mensagens.

Cada execução do Sender (ex: uma chamada do entry point) recebe um
correlation_id, injetado nos logs por CorrelationIdFilter.
Usa ContextVar para ser thread/async-safe.

Uso:
    from app.observability import correlation_scope

    with correlation_scope() as correlation_id:
        sender.build_message(builder)
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior ao sair.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Yields:
        correlation_id ativo no bloco.
    """
    value = correlation_id or generate_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
