# -*- coding: utf-8 -*-
"""
Situação das vagas de cada evento (Aberto, Lotado, Encerrado) e filtros da listagem.
"""

from dataclasses import dataclass
from enum import Enum

from goldensign.schemas.event import Event, EventType, now_for


class EventStatus(str, Enum):
    open = "Open"
    full = "Full"
    past = "Past"


@dataclass
class EventAvailability:
    event: Event
    registered: int
    available_slots: int
    is_full: bool
    is_past: bool

    @property
    def status(self):
        # Evento encerrado tem precedência sobre lotado
        if self.is_past:
            return EventStatus.past
        if self.is_full:
            return EventStatus.full
        return EventStatus.open


def _is_past(event, now):
    if now is None:
        now = now_for(event.date)
    elif now.tzinfo is None and event.date.tzinfo is not None:
        # now naive = hora local
        now = now.astimezone()
    elif now.tzinfo is not None and event.date.tzinfo is None:
        # data naive do evento = hora local; leva now para a hora local naive
        now = now.astimezone().replace(tzinfo=None)
    return event.date < now


def availability(registry, event, now=None):
    registered = len(registry.get_inscriptions_for_event(event.id))
    available = event.max_participants - registered
    return EventAvailability(
        event=event,
        registered=registered,
        available_slots=available,
        is_full=available <= 0,
        is_past=_is_past(event, now),
    )


def filter_events(registry, events, type_filter="all", status_filter="all", now=None):
    """
    Filtra eventos por tipo ('all', 'tournament', 'course') e situação
    ('all', 'open', 'full', 'past').
    """
    if type_filter != "all":
        type_filter = EventType(type_filter)
    if status_filter not in ("all", "open", "full", "past"):
        raise ValueError(f"Filtro de situação inválido: {status_filter}")

    result = []
    for event in events:
        if type_filter != "all" and event.type != type_filter:
            continue
        info = availability(registry, event, now=now)
        if status_filter == "open" and (info.is_full or info.is_past):
            continue
        if status_filter == "full" and not info.is_full:
            continue
        if status_filter == "past" and not info.is_past:
            continue
        result.append(event)
    return result
