from __future__ import annotations

import pytest

from goldensign import config
from goldensign.registry import Registry, get_registry
from goldensign.storage import MemoryStorage


def test_postgres_prefix_is_rewritten(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@host/db")
    assert config._database_url() == "postgresql://u:p@host/db"


def test_default_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert config._database_url() == "sqlite:///./database/goldensign.db"


def test_registry_defaults_to_configured_origin() -> None:
    reg = Registry(MemoryStorage())
    assert reg.origin == config.settings.ORIGIN


def test_get_registry_with_injected_storage() -> None:
    storage = MemoryStorage()
    reg = get_registry(storage=storage, origin="https://x.test")
    assert reg.storage is storage
    assert reg.generate_event_url("a") == "https://x.test/inscription?id=a"
