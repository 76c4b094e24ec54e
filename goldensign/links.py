# -*- coding: utf-8 -*-
"""
Links compartilháveis: inscrição num evento e comprovante de inscrição.
"""

from urllib.parse import parse_qs, urlencode, urlsplit


def _build(origin, page, item_id):
    return f"{origin.rstrip('/')}/{page}?{urlencode({'id': item_id})}"


def event_url(origin, event_id):
    return _build(origin, "inscription", event_id)


def confirmation_url(origin, inscription_id):
    return _build(origin, "confirmation", inscription_id)


def id_from_url(url):
    """Extrai o parâmetro 'id' de um link compartilhado (None se não houver)."""
    values = parse_qs(urlsplit(url).query).get("id")
    if not values or not values[0]:
        return None
    return values[0]
