"""Route filtering and aggregation over parsed tickets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import pandas as pd

from .models import DEFAULT_ROUTE, Route, Ticket

TICKET_COLUMNS = [
    "origin",
    "destination",
    "carrier",
    "price",
    "departure_time",
    "arrival_time",
    "flight_duration",
]


@dataclass(frozen=True)
class PriceStatistics:
    mean: float
    median: float

    @property
    def gap(self) -> float:
        return self.mean - self.median


@dataclass(frozen=True)
class AnalysisResult:
    route: Route
    ticket_count: int
    min_durations: dict[str, int] = field(default_factory=dict)
    prices: PriceStatistics | None = None

    @property
    def is_empty(self) -> bool:
        return self.ticket_count == 0


def tickets_to_frame(tickets: Iterable[Ticket]) -> pd.DataFrame:
    return pd.DataFrame([ticket.as_row() for ticket in tickets], columns=TICKET_COLUMNS)


def filter_by_route(tickets: Iterable[Ticket], route: Route = DEFAULT_ROUTE) -> list[Ticket]:
    return [ticket for ticket in tickets if route.matches(ticket)]


def min_duration_by_carrier(tickets: Sequence[Ticket]) -> dict[str, int]:
    """Shortest flight per carrier, keyed in carrier-name order."""
    frame = tickets_to_frame(tickets)
    if frame.empty:
        return {}
    grouped = frame.groupby("carrier", sort=True)["flight_duration"].min()
    return {str(carrier): int(minutes) for carrier, minutes in grouped.items()}


def price_statistics(prices: Sequence[int]) -> PriceStatistics:
    if len(prices) == 0:
        return PriceStatistics(mean=0.0, median=0.0)
    series = pd.Series(list(prices), dtype="int64")
    return PriceStatistics(mean=float(series.mean()), median=float(series.median()))


def analyze_tickets(tickets: Iterable[Ticket], route: Route = DEFAULT_ROUTE) -> AnalysisResult:
    matched = filter_by_route(tickets, route)
    if not matched:
        return AnalysisResult(route=route, ticket_count=0)

    return AnalysisResult(
        route=route,
        ticket_count=len(matched),
        min_durations=min_duration_by_carrier(matched),
        prices=price_statistics([ticket.price for ticket in matched]),
    )
