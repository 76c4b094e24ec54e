# -*- coding: utf-8 -*-
"""
Exportação em CSV: participantes de um evento e visão geral de todos os eventos.
"""

import csv
import re
from datetime import date

import pandas as pd

from goldensign.availability import availability
from goldensign.errors import NothingToExport, UnknownEvent
from goldensign.formatting import format_date

PARTICIPANT_COLUMNS = ["Name", "Email", "Registration Date"]
OVERVIEW_COLUMNS = [
    "Event", "Type", "Date", "Max Participants",
    "Current Participants", "Available Slots", "Status",
]


def _to_csv(df):
    # Cabeçalho sem aspas; só os valores de texto vão entre aspas
    header = ",".join(df.columns) + "\n"
    return header + df.to_csv(index=False, header=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")


def event_participants_csv(registry, event_id):
    event = registry.get_event(event_id)
    if event is None:
        raise UnknownEvent(event_id)

    inscriptions = registry.get_inscriptions_for_event(event_id)

    header = (
        f"Event: {event.title}\n"
        f"Type: {event.type.value}\n"
        f"Date: {format_date(event.date)}\n"
        f"Max Participants: {event.max_participants}\n"
        f"Current Participants: {len(inscriptions)}\n"
        "\n"
    )
    df = pd.DataFrame(
        [[i.name, i.email, format_date(i.created_at)] for i in inscriptions],
        columns=PARTICIPANT_COLUMNS,
    )
    return header + _to_csv(df)


def event_participants_filename(event):
    return f"{re.sub(r'[^a-z0-9]', '_', event.title, flags=re.IGNORECASE).lower()}_participants.csv"


def overview_csv(registry, now=None):
    events = registry.get_events()
    if not events:
        raise NothingToExport("Nenhum evento para exportar")

    rows = []
    for event in events:
        info = availability(registry, event, now=now)
        rows.append([
            event.title,
            event.type.value,
            format_date(event.date),
            event.max_participants,
            info.registered,
            info.available_slots,
            info.status.value,
        ])
    return _to_csv(pd.DataFrame(rows, columns=OVERVIEW_COLUMNS))


def overview_filename(today=None):
    today = today or date.today()
    return f"communities_overview_{today.isoformat()}.csv"
