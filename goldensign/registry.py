# -*- coding: utf-8 -*-
"""
Registry: dono das coleções de eventos e inscrições e da sua persistência.

As duas coleções são carregadas inteiras na construção, alteradas em memória e
regravadas inteiras a cada escrita. Não há trava nem mesclagem: se duas
instâncias (ou dois processos) escrevem no mesmo armazenamento, vence a
última escrita. Use reload() para reler o estado gravado.
"""

import logging
import random
import time
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from goldensign import links
from goldensign.config import settings
from goldensign.errors import CapacityExceeded, DuplicateEmail, StorageFailure, UnknownEvent
from goldensign.schemas.event import Event, EventCreate
from goldensign.schemas.inscription import Inscription, InscriptionCreate, InscriptionStatus

logger = logging.getLogger(__name__)

EVENTS_KEY = "goldensign_events"
INSCRIPTIONS_KEY = "goldensign_inscriptions"

_events_adapter = TypeAdapter(List[Event])
_inscriptions_adapter = TypeAdapter(List[Inscription])

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(number):
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def _utcnow():
    return datetime.now(timezone.utc)


class Registry:
    def __init__(self, storage, origin=None):
        self.storage = storage
        self.origin = origin or settings.ORIGIN
        self.events: List[Event] = []
        self.inscriptions: List[Inscription] = []
        self.reload()

    # --- Persistência ---

    def _load(self, key, adapter):
        raw = self.storage.get_item(key)
        if raw is None:
            return []
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Conteúdo inválido no slot {key}: {e}")
            raise StorageFailure(f"Dados ilegíveis em '{key}'", key=key) from e

    def reload(self):
        """(Re)carrega as duas coleções do armazenamento."""
        self.events = self._load(EVENTS_KEY, _events_adapter)
        self.inscriptions = self._load(INSCRIPTIONS_KEY, _inscriptions_adapter)

    def _serialize_events(self, events):
        return _events_adapter.dump_json(events, by_alias=True).decode("utf-8")

    def _serialize_inscriptions(self, inscriptions):
        return _inscriptions_adapter.dump_json(inscriptions, by_alias=True).decode("utf-8")

    def _commit(self, events=None, inscriptions=None):
        """
        Grava as coleções informadas e só então as instala em memória.

        Se o armazenamento falhar, o estado em memória continua igual ao gravado.
        """
        items = {}
        if events is not None:
            items[EVENTS_KEY] = self._serialize_events(events)
        if inscriptions is not None:
            items[INSCRIPTIONS_KEY] = self._serialize_inscriptions(inscriptions)
        self.storage.set_items(items)
        if events is not None:
            self.events = events
        if inscriptions is not None:
            self.inscriptions = inscriptions

    # --- Eventos ---

    def create_event(self, data=None, **fields) -> Event:
        if data is None:
            data = EventCreate(**fields)
        elif not isinstance(data, EventCreate):
            data = EventCreate(**dict(data, **fields))

        event = Event(
            id=self.generate_id(),
            created_at=_utcnow(),
            **data.model_dump(),
        )
        self._commit(events=self.events + [event])
        logger.info(f"Evento criado: {event.id} ({event.type.value}) '{event.title}'")
        return event

    def get_event(self, event_id) -> Optional[Event]:
        return next((e for e in self.events if e.id == event_id), None)

    def get_events(self) -> List[Event]:
        return list(self.events)

    def delete_event(self, event_id):
        """
        Remove o evento e todas as inscrições com esse event_id, mesmo órfãs.

        Se nada casar, não grava nada.
        """
        events = [e for e in self.events if e.id != event_id]
        inscriptions = [i for i in self.inscriptions if i.event_id != event_id]
        removed = len(self.inscriptions) - len(inscriptions)
        if len(events) == len(self.events) and removed == 0:
            return
        self._commit(events=events, inscriptions=inscriptions)
        logger.info(f"Evento excluído: {event_id} (com {removed} inscrições)")

    def available_slots(self, event_id) -> Optional[int]:
        event = self.get_event(event_id)
        if event is None:
            return None
        return event.max_participants - len(self.get_inscriptions_for_event(event_id))

    # --- Inscrições ---

    def create_inscription(self, data=None, **fields) -> Inscription:
        if data is None:
            data = InscriptionCreate(**fields)
        elif not isinstance(data, InscriptionCreate):
            data = InscriptionCreate(**dict(data, **fields))

        event = self.get_event(data.event_id)
        if event is None:
            logger.warning(f"Inscrição recusada: evento {data.event_id} não existe")
            raise UnknownEvent(data.event_id)

        existing = self.get_inscriptions_for_event(event.id)
        if len(existing) >= event.max_participants:
            logger.warning(f"Inscrição recusada: evento {event.id} lotado")
            raise CapacityExceeded(event.id, event.max_participants)

        email = data.email.lower()
        if any(i.email.lower() == email for i in existing):
            logger.warning(f"Inscrição recusada: {data.email} já inscrito em {event.id}")
            raise DuplicateEmail(event.id, data.email)

        inscription = Inscription(
            id=self.generate_id(),
            status=InscriptionStatus.accepted,
            created_at=_utcnow(),
            **data.model_dump(),
        )
        self._commit(inscriptions=self.inscriptions + [inscription])
        logger.info(f"Inscrição criada: {inscription.id} no evento {event.id}")
        return inscription

    def get_inscriptions_for_event(self, event_id) -> List[Inscription]:
        return [i for i in self.inscriptions if i.event_id == event_id]

    def get_inscription(self, inscription_id) -> Optional[Inscription]:
        return next((i for i in self.inscriptions if i.id == inscription_id), None)

    def get_confirmation(self, inscription_id):
        """(inscrição, evento) para a página de comprovante, ou None se faltar algum."""
        inscription = self.get_inscription(inscription_id)
        if inscription is None:
            return None
        event = self.get_event(inscription.event_id)
        if event is None:
            return None
        return inscription, event

    # --- Utilitários ---

    def generate_id(self):
        """
        Id = tempo atual (ms) em base 36 + sorteio aleatório em base 36.

        Não é criptográfico; ids nunca servem de fronteira de segurança. Um
        id que já exista em alguma coleção é descartado e sorteado de novo.
        """
        taken = {e.id for e in self.events} | {i.id for i in self.inscriptions}
        while True:
            new_id = _to_base36(int(time.time() * 1000)) + _to_base36(random.getrandbits(52))
            if new_id not in taken:
                return new_id

    def generate_event_url(self, event_id):
        return links.event_url(self.origin, event_id)

    def generate_confirmation_url(self, inscription_id):
        return links.confirmation_url(self.origin, inscription_id)


def get_registry(storage=None, origin=None):
    """Registry ligado ao banco configurado em DATABASE_URL."""
    if storage is None:
        from goldensign.database import get_session_factory
        from goldensign.storage import SqlStorage

        storage = SqlStorage(get_session_factory())
    return Registry(storage, origin=origin)
