from __future__ import annotations

from fastapi.testclient import TestClient

from ticket_analyzer.api_server import create_app
from ticket_analyzer.settings import Settings


def test_health(tickets_file) -> None:
    client = TestClient(create_app(Settings(data_path=tickets_file)))
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_returns_plain_text_report(tickets_file, expected_report) -> None:
    client = TestClient(create_app(Settings(data_path=tickets_file)))

    response = client.get("/api/tickets/analyze")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == expected_report


def test_analyze_without_matching_route(tickets_file) -> None:
    client = TestClient(create_app(Settings(data_path=tickets_file, origin="KJA", destination="TLV")))

    response = client.get("/api/tickets/analyze")

    assert response.status_code == 200
    assert response.text == "Нет билетов между Владивостоком и Тель-Авивом."


def test_analyze_reloads_file_per_request(tickets_file) -> None:
    client = TestClient(create_app(Settings(data_path=tickets_file)))
    assert client.get("/api/tickets/analyze").text.startswith("Минимальное")

    tickets_file.write_text('{"tickets": []}', encoding="utf-8")

    assert client.get("/api/tickets/analyze").text == "Нет билетов между Владивостоком и Тель-Авивом."


def test_malformed_dataset_is_opaque_server_error(tmp_path) -> None:
    path = tmp_path / "tickets.json"
    path.write_text('{"flights": []}', encoding="utf-8")
    client = TestClient(create_app(Settings(data_path=path)))

    response = client.get("/api/tickets/analyze")

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to analyze tickets"}


def test_bad_time_is_opaque_server_error(tmp_path) -> None:
    path = tmp_path / "tickets.json"
    path.write_text(
        '{"tickets": [{"origin": "VVO", "destination": "TLV", "carrier": "S7", '
        '"price": 1, "departure_time": "9h00", "arrival_time": "10:00"}]}',
        encoding="utf-8",
    )
    client = TestClient(create_app(Settings(data_path=path)))

    assert client.get("/api/tickets/analyze").status_code == 500


def test_missing_dataset_file(tmp_path) -> None:
    client = TestClient(create_app(Settings(data_path=tmp_path / "absent.json")))
    response = client.get("/api/tickets/summary")
    assert response.status_code == 500


def test_summary_endpoint(tickets_file) -> None:
    client = TestClient(create_app(Settings(data_path=tickets_file)))

    response = client.get("/api/tickets/summary")

    assert response.status_code == 200
    payload = response.json()
    assert payload["origin"] == "VVO"
    assert payload["destination"] == "TLV"
    assert payload["ticket_count"] == 3
    assert payload["min_duration_by_carrier"] == {"S7": 90, "TK": 20}
    assert payload["price_gap"] == 100.0


def test_non_utf8_dataset_is_opaque_server_error(tmp_path) -> None:
    path = tmp_path / "tickets.json"
    path.write_bytes(b'{"tickets": [\xff]}')
    client = TestClient(create_app(Settings(data_path=path)))

    response = client.get("/api/tickets/analyze")

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to analyze tickets"}
