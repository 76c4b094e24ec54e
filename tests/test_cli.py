from __future__ import annotations

from pathlib import Path

import pytest

from goldensign.registry import Registry

from main import main


def _create(registry: Registry, capsys: pytest.CaptureFixture, max_participants: int = 1) -> str:
    code = main(
        [
            "create-event",
            "--title", "Chess Open",
            "--description", "Torneio aberto",
            "--type", "tournament",
            "--date", "2099-01-01T10:00",
            "--max-participants", str(max_participants),
        ],
        registry=registry,
    )
    assert code == 0
    capsys.readouterr()
    return registry.get_events()[-1].id


def test_create_list_and_show(registry: Registry, capsys: pytest.CaptureFixture) -> None:
    event_id = _create(registry, capsys)

    assert main(["list-events"], registry=registry) == 0
    out = capsys.readouterr().out
    assert event_id in out
    assert "[Open]" in out

    assert main(["show-event", event_id], registry=registry) == 0
    assert registry.generate_event_url(event_id) in capsys.readouterr().out

    assert main(["show-event", "ghost"], registry=registry) == 1


def test_register_by_link_and_confirmation(registry: Registry, capsys: pytest.CaptureFixture) -> None:
    event_id = _create(registry, capsys)
    link = registry.generate_event_url(event_id)

    assert main(["register", link, "--name", "Ana", "--email", "ana@example.com"], registry=registry) == 0
    out = capsys.readouterr().out
    inscription = registry.get_inscriptions_for_event(event_id)[0]
    assert registry.generate_confirmation_url(inscription.id) in out

    assert main(["confirmation", registry.generate_confirmation_url(inscription.id)], registry=registry) == 0
    assert "Ana <ana@example.com>" in capsys.readouterr().out

    # lotado
    assert main(["register", event_id, "--name", "Bruno", "--email", "bruno@example.com"], registry=registry) == 1
    assert main(["confirmation", "ghost"], registry=registry) == 1


def test_invalid_event_returns_error(registry: Registry) -> None:
    code = main(
        [
            "create-event",
            "--title", "Antigo",
            "--description", "No passado",
            "--date", "2000-01-01",
            "--max-participants", "5",
        ],
        registry=registry,
    )
    assert code == 1
    assert registry.get_events() == []


def test_exports_and_delete(registry: Registry, capsys: pytest.CaptureFixture, tmp_path: Path) -> None:
    event_id = _create(registry, capsys, max_participants=3)
    main(["register", event_id, "--name", "Ana", "--email", "ana@example.com"], registry=registry)

    participants = tmp_path / "participants.csv"
    overview = tmp_path / "overview.csv"
    assert main(["export-event", event_id, "--output", str(participants)], registry=registry) == 0
    assert main(["export-overview", "--output", str(overview)], registry=registry) == 0
    assert "ana@example.com" in participants.read_text(encoding="utf-8")
    assert "Chess Open" in overview.read_text(encoding="utf-8")

    assert main(["delete-event", event_id], registry=registry) == 0
    assert registry.get_events() == []
    assert registry.inscriptions == []
    assert main(["export-overview", "--output", str(overview)], registry=registry) == 1


def test_export_into_missing_directory_returns_error(registry: Registry, capsys: pytest.CaptureFixture, tmp_path: Path) -> None:
    event_id = _create(registry, capsys)
    missing = tmp_path / "nao-existe" / "out.csv"

    assert main(["export-event", event_id, "--output", str(missing)], registry=registry) == 1
    assert main(["export-overview", "--output", str(missing)], registry=registry) == 1
    assert not missing.exists()
