# -*- coding: utf-8 -*-
"""
Linha de comando do GoldenSign: criar eventos, inscrever participantes,
exibir comprovantes e exportar CSVs.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from goldensign import links
from goldensign.availability import availability, filter_events
from goldensign.config import configure_logging
from goldensign.errors import GoldenSignError
from goldensign.export import (
    event_participants_csv,
    event_participants_filename,
    overview_csv,
    overview_filename,
)
from goldensign.formatting import format_date, format_date_short
from goldensign.registry import get_registry


def build_parser():
    parser = argparse.ArgumentParser(description='GoldenSign - inscrições em torneios e cursos')
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("create-event", help="Cria um torneio ou curso")
    p.add_argument("--title", required=True)
    p.add_argument("--description", required=True)
    p.add_argument("--type", choices=["tournament", "course"], default="tournament")
    p.add_argument("--date", required=True, help="Data ISO, ex.: 2099-01-01T10:00")
    p.add_argument("--max-participants", type=int, required=True)

    p = sub.add_parser("list-events", help="Lista os eventos")
    p.add_argument("--type", default="all", choices=["all", "tournament", "course"])
    p.add_argument("--status", default="all", choices=["all", "open", "full", "past"])

    p = sub.add_parser("show-event", help="Detalhes e inscritos de um evento")
    p.add_argument("event_id")

    p = sub.add_parser("register", help="Inscreve um participante")
    p.add_argument("event", help="Id do evento ou link de inscrição")
    p.add_argument("--name", required=True)
    p.add_argument("--email", required=True)

    p = sub.add_parser("confirmation", help="Mostra o comprovante de uma inscrição")
    p.add_argument("inscription", help="Id da inscrição ou link do comprovante")

    p = sub.add_parser("delete-event", help="Exclui um evento e suas inscrições")
    p.add_argument("event_id")

    p = sub.add_parser("export-event", help="Exporta os inscritos de um evento em CSV")
    p.add_argument("event_id")
    p.add_argument("--output", type=Path)

    p = sub.add_parser("export-overview", help="Exporta a visão geral dos eventos em CSV")
    p.add_argument("--output", type=Path)

    return parser


def _resolve_id(value):
    # Aceita tanto o id puro quanto o link compartilhado
    if "?" in value:
        return links.id_from_url(value)
    return value


def _write_csv(content, output, default_name):
    path = output or Path(default_name)
    path.write_text(content, encoding="utf-8")
    print(f"CSV gravado em {path}")


def run(args, registry):
    if args.command == "create-event":
        event = registry.create_event(
            title=args.title,
            description=args.description,
            type=args.type,
            date=args.date,
            max_participants=args.max_participants,
        )
        print(f"{event.type.value.capitalize()} criado: {event.id}")
        print(f"Link de inscrição: {registry.generate_event_url(event.id)}")

    elif args.command == "list-events":
        events = filter_events(registry, registry.get_events(), args.type, args.status)
        if not events:
            print("Nenhum evento encontrado.")
        for event in events:
            info = availability(registry, event)
            print(
                f"{event.id}  [{info.status.value}] {event.title} ({event.type.value}) - "
                f"{format_date_short(event.date)} - {info.registered}/{event.max_participants} participantes"
            )

    elif args.command == "show-event":
        event = registry.get_event(args.event_id)
        if event is None:
            logging.error(f"Evento não encontrado: {args.event_id}")
            return 1
        info = availability(registry, event)
        print(f"{event.title} ({event.type.value})")
        print(event.description)
        print(f"Data: {format_date(event.date)}")
        print(f"Inscritos: {info.registered} de {event.max_participants} ({info.available_slots} vagas)")
        print(f"Link de inscrição: {registry.generate_event_url(event.id)}")
        for inscription in registry.get_inscriptions_for_event(event.id):
            print(f"  - {inscription.name} <{inscription.email}> em {format_date_short(inscription.created_at)}")

    elif args.command == "register":
        event_id = _resolve_id(args.event)
        inscription = registry.create_inscription(event_id=event_id, name=args.name, email=args.email)
        event = registry.get_event(inscription.event_id)
        print(f'Inscrição confirmada em "{event.title}"!')
        print(f"Comprovante: {registry.generate_confirmation_url(inscription.id)}")

    elif args.command == "confirmation":
        found = registry.get_confirmation(_resolve_id(args.inscription))
        if found is None:
            logging.error("Inscrição não encontrada.")
            return 1
        inscription, event = found
        print(f"Comprovante {inscription.id} ({inscription.status.value})")
        print(f"Participante: {inscription.name} <{inscription.email}>")
        print(f"Evento: {event.title} ({event.type.value}) em {format_date(event.date)}")
        print(f"Inscrito em: {format_date(inscription.created_at)}")

    elif args.command == "delete-event":
        registry.delete_event(args.event_id)
        print(f"Evento {args.event_id} excluído.")

    elif args.command == "export-event":
        content = event_participants_csv(registry, args.event_id)
        _write_csv(content, args.output, event_participants_filename(registry.get_event(args.event_id)))

    elif args.command == "export-overview":
        _write_csv(overview_csv(registry), args.output, overview_filename())

    return 0


def main(argv=None, registry=None):
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        registry = registry or get_registry()
        return run(args, registry)
    except ValidationError as e:
        logging.error(f"Dados inválidos: {e}")
        return 1
    except GoldenSignError as e:
        logging.error(str(e))
        return 1
    except OSError as e:
        logging.error(f"Erro ao gravar arquivo: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
