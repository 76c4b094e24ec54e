from __future__ import annotations

from goldensign import links


def test_event_and_confirmation_urls() -> None:
    assert links.event_url("http://localhost:8000", "abc") == "http://localhost:8000/inscription?id=abc"
    assert links.confirmation_url("http://localhost:8000/", "xyz") == "http://localhost:8000/confirmation?id=xyz"


def test_ids_are_query_encoded() -> None:
    assert links.event_url("https://x.test", "a b&c") == "https://x.test/inscription?id=a+b%26c"


def test_id_from_url_reverses_the_builders() -> None:
    url = links.confirmation_url("https://x.test", "lq2xa01def")
    assert links.id_from_url(url) == "lq2xa01def"
    assert links.id_from_url(links.event_url("https://x.test", "a b&c")) == "a b&c"


def test_id_from_url_without_id() -> None:
    assert links.id_from_url("https://x.test/inscription") is None
    assert links.id_from_url("https://x.test/inscription?id=") is None
    assert links.id_from_url("https://x.test/inscription?other=1") is None
