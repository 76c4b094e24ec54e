from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from goldensign.registry import Registry
from goldensign.storage import MemoryStorage, SqlStorage

ORIGIN = "https://goldensign.test"


def chess_open(**overrides) -> dict:
    data = {
        "title": "Chess Open",
        "description": "Torneio aberto de xadrez rápido",
        "type": "tournament",
        "maxParticipants": 2,
        "date": "2099-01-01",
    }
    data.update(overrides)
    return data


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def registry(storage: MemoryStorage) -> Registry:
    return Registry(storage, origin=ORIGIN)


@pytest.fixture
def sql_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def sql_storage(sql_engine) -> SqlStorage:
    return SqlStorage(sessionmaker(autocommit=False, autoflush=False, bind=sql_engine))
