"""Loading ticket datasets from JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, NoReturn

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import MAX_PRICE, TICKETS_KEY
from .errors import MalformedInputError, MissingFieldError, TypeMismatchError
from .models import Ticket

logger = logging.getLogger(__name__)


class TicketRecord(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    origin: str
    destination: str
    carrier: str
    price: int = Field(ge=-MAX_PRICE - 1, le=MAX_PRICE)
    departure_time: str
    arrival_time: str


def _raise_for_validation_error(exc: ValidationError, index: int | None) -> NoReturn:
    first = exc.errors()[0]
    field = str(first["loc"][0]) if first.get("loc") else "?"
    value = first.get("input")
    if first["type"] == "missing" or value is None:
        raise MissingFieldError(field, index=index) from exc
    raise TypeMismatchError(field, value, index=index) from exc


def parse_ticket_record(record: Any, index: int | None = None) -> Ticket:
    if not isinstance(record, Mapping):
        raise MalformedInputError(f"Ticket #{index} is not an object: {record!r}")
    try:
        parsed = TicketRecord.model_validate(dict(record))
    except ValidationError as exc:
        _raise_for_validation_error(exc, index)
    return Ticket(
        origin=parsed.origin,
        destination=parsed.destination,
        carrier=parsed.carrier,
        price=parsed.price,
        departure_time=parsed.departure_time,
        arrival_time=parsed.arrival_time,
    )


def parse_tickets_document(document: Any) -> list[Ticket]:
    """Turn a ``{"tickets": [...]}`` document into tickets, failing on the first bad record."""
    if not isinstance(document, Mapping):
        raise MalformedInputError("Tickets document must be a JSON object")
    records = document.get(TICKETS_KEY)
    if records is None or not isinstance(records, list):
        raise MalformedInputError("Tickets node is missing or not an array")
    return [parse_ticket_record(record, index=i) for i, record in enumerate(records)]


def load_tickets_document(path: str | Path) -> dict[str, Any]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"Tickets file '{path}' is not valid UTF-8: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Invalid JSON in '{path}': {exc}") from exc


def load_tickets(path: str | Path) -> list[Ticket]:
    tickets = parse_tickets_document(load_tickets_document(path))
    logger.debug("Loaded %d tickets from %s", len(tickets), path)
    return tickets
