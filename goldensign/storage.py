# -*- coding: utf-8 -*-
"""
Armazenamento chave/valor usado pelo Registry.

Cada chave guarda texto bruto (a coleção inteira serializada). O Registry só
precisa de "ler texto por chave" e "gravar texto por chave"; os testes usam
MemoryStorage e a aplicação usa SqlStorage.
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy.exc import SQLAlchemyError

from goldensign.database import Base
from goldensign.errors import StorageFailure
from goldensign.models.slot import StorageSlot

logger = logging.getLogger(__name__)


class StorageBackend(ABC):

    @abstractmethod
    def get_item(self, key):
        """Texto guardado em key, ou None se a chave não existe."""

    @abstractmethod
    def set_item(self, key, value):
        """Grava value em key, substituindo o que houver."""

    def set_items(self, items):
        """Grava várias chaves. Backends transacionais gravam tudo ou nada."""
        for key, value in items.items():
            self.set_item(key, value)


class MemoryStorage(StorageBackend):
    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get_item(self, key):
        return self._data.get(key)

    def set_item(self, key, value):
        self._data[key] = value

    def set_items(self, items):
        self._data.update(items)


class SqlStorage(StorageBackend):
    """
    Slots chave/valor numa tabela SQLAlchemy (storage_slots).

    Cada escrita abre a própria sessão e faz um único commit; em caso de erro
    faz rollback e levanta StorageFailure.
    """

    def __init__(self, session_factory):
        self.session_factory = session_factory
        try:
            Base.metadata.create_all(bind=session_factory.kw["bind"], tables=[StorageSlot.__table__])
        except SQLAlchemyError as e:
            logger.error(f"Erro ao criar a tabela de slots: {e}")
            raise StorageFailure(f"Armazenamento indisponível: {e}") from e

    def get_item(self, key):
        db = self.session_factory()
        try:
            slot = db.get(StorageSlot, key)
            return slot.value if slot is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Erro ao ler o slot {key}: {e}")
            raise StorageFailure(f"Não foi possível ler '{key}': {e}", key=key) from e
        finally:
            db.close()

    def set_item(self, key, value):
        self.set_items({key: value})

    def set_items(self, items):
        db = self.session_factory()
        try:
            for key, value in items.items():
                slot = db.get(StorageSlot, key)
                if slot is None:
                    db.add(StorageSlot(key=key, value=value))
                else:
                    slot.value = value
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            keys = ", ".join(items)
            logger.error(f"Erro ao gravar os slots {keys}: {e}")
            raise StorageFailure(f"Não foi possível gravar '{keys}': {e}", key=keys) from e
        finally:
            db.close()
