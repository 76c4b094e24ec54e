# -*- coding: utf-8 -*-
"""
GoldenSign: inscrições para torneios e cursos, guardadas localmente.
"""

from goldensign.errors import (
    CapacityExceeded,
    DuplicateEmail,
    GoldenSignError,
    NothingToExport,
    RegistryError,
    StorageFailure,
    UnknownEvent,
)
from goldensign.registry import Registry, get_registry
from goldensign.schemas.event import Event, EventCreate, EventType
from goldensign.schemas.inscription import Inscription, InscriptionCreate, InscriptionStatus
from goldensign.storage import MemoryStorage, SqlStorage, StorageBackend

__all__ = [
    "Registry",
    "get_registry",
    "Event",
    "EventCreate",
    "EventType",
    "Inscription",
    "InscriptionCreate",
    "InscriptionStatus",
    "StorageBackend",
    "MemoryStorage",
    "SqlStorage",
    "GoldenSignError",
    "RegistryError",
    "UnknownEvent",
    "CapacityExceeded",
    "DuplicateEmail",
    "StorageFailure",
    "NothingToExport",
]
