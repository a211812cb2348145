from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def raw_ticket_document() -> dict:
    return {
        "tickets": [
            {
                "origin": "VVO",
                "destination": "TLV",
                "carrier": "S7",
                "price": 100,
                "departure_time": "9:00",
                "arrival_time": "11:30",
            },
            {
                "origin": "vvo",
                "destination": "tlv",
                "carrier": "S7",
                "price": 200,
                "departure_time": "10:00",
                "arrival_time": "11:30",
            },
            {
                "origin": "VVO",
                "destination": "TLV",
                "carrier": "TK",
                "price": 600,
                "departure_time": "23:50",
                "arrival_time": "0:10",
            },
            {
                "origin": "LED",
                "destination": "TLV",
                "carrier": "SU",
                "price": 5000,
                "departure_time": "08:00",
                "arrival_time": "09:00",
            },
        ]
    }


@pytest.fixture
def expected_report() -> str:
    return (
        "Минимальное время полета для каждого авиаперевозчика:\n"
        "S7: 90 минут\n"
        "TK: 20 минут\n"
        "\n"
        "Разница между средней ценой и медианой: 100.0 рублей"
    )


@pytest.fixture
def tickets_file(tmp_path: Path, raw_ticket_document: dict) -> Path:
    path = tmp_path / "tickets.json"
    path.write_text(json.dumps(raw_ticket_document, ensure_ascii=False), encoding="utf-8")
    return path
