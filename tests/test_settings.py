from __future__ import annotations

from pathlib import Path

from ticket_analyzer.models import Route
from ticket_analyzer.settings import load_settings


def test_load_settings_defaults(monkeypatch) -> None:
    for name in ("TICKET_ANALYZER_DATA_PATH", "TICKET_ANALYZER_ORIGIN", "TICKET_ANALYZER_DESTINATION"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.data_path == Path("data/tickets.json")
    assert settings.route == Route("VVO", "TLV")


def test_load_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("TICKET_ANALYZER_DATA_PATH", "/srv/tickets.json")
    monkeypatch.setenv("TICKET_ANALYZER_ORIGIN", "LED")
    monkeypatch.setenv("TICKET_ANALYZER_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.data_path == Path("/srv/tickets.json")
    assert settings.origin == "LED"
    assert settings.log_level == "DEBUG"
