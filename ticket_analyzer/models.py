"""Domain models for flight tickets."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import DEFAULT_DESTINATION, DEFAULT_ORIGIN
from .durations import compute_duration


@dataclass(frozen=True)
class Ticket:
    origin: str
    destination: str
    carrier: str
    price: int
    departure_time: str  # H:mm or HH:mm (24h)
    arrival_time: str  # H:mm or HH:mm (24h), may cross midnight
    flight_duration: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "flight_duration", compute_duration(self.departure_time, self.arrival_time))

    def as_row(self) -> dict[str, object]:
        return {
            "origin": self.origin,
            "destination": self.destination,
            "carrier": self.carrier,
            "price": self.price,
            "departure_time": self.departure_time,
            "arrival_time": self.arrival_time,
            "flight_duration": self.flight_duration,
        }


@dataclass(frozen=True)
class Route:
    origin: str
    destination: str

    def matches(self, ticket: Ticket) -> bool:
        return (
            ticket.origin.lower() == self.origin.lower()
            and ticket.destination.lower() == self.destination.lower()
        )

    def label(self) -> str:
        return f"{self.origin.upper()}-{self.destination.upper()}"


DEFAULT_ROUTE = Route(DEFAULT_ORIGIN, DEFAULT_DESTINATION)
