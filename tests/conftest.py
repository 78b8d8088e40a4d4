"""Configuração do pytest para o projeto message_builder."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import get_base_settings, get_serialization_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Restaura handlers/nível do root logger após testes que chamam configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Limpa o cache das settings para que monkeypatch.setenv tenha efeito."""
    get_base_settings.cache_clear()
    get_serialization_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_serialization_settings.cache_clear()
