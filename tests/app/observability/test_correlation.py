"""Testes para app.observability.correlation."""

from __future__ import annotations

import uuid

from app.observability import correlation_scope, generate_correlation_id, get_correlation_id


def test_default_is_empty() -> None:
    assert get_correlation_id() == ""


def test_scope_sets_and_restores() -> None:
    with correlation_scope("corr-1") as value:
        assert value == "corr-1"
        assert get_correlation_id() == "corr-1"
        with correlation_scope("corr-2"):
            assert get_correlation_id() == "corr-2"
        assert get_correlation_id() == "corr-1"
    assert get_correlation_id() == ""


def test_scope_generates_uuid_when_missing() -> None:
    with correlation_scope() as value:
        assert uuid.UUID(value).version == 4


def test_generate_correlation_id_is_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()
