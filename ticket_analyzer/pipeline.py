"""Pipeline orchestration for ticket analysis."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from .analysis import AnalysisResult, analyze_tickets
from .loader import load_tickets, parse_tickets_document
from .models import DEFAULT_ROUTE, Route, Ticket
from .report import build_summary, format_report


def run_ticket_pipeline(document: Any, route: Route = DEFAULT_ROUTE) -> AnalysisResult:
    return analyze_tickets(parse_tickets_document(document), route=route)


@dataclass
class TicketAnalysisSession:
    result: AnalysisResult

    @classmethod
    def from_tickets(cls, tickets: Iterable[Ticket], route: Route = DEFAULT_ROUTE) -> "TicketAnalysisSession":
        return cls(analyze_tickets(tickets, route=route))

    @classmethod
    def from_document(cls, document: Any, route: Route = DEFAULT_ROUTE) -> "TicketAnalysisSession":
        return cls(run_ticket_pipeline(document, route=route))

    @classmethod
    def from_file(cls, path: str | Path, route: Route = DEFAULT_ROUTE) -> "TicketAnalysisSession":
        return cls.from_tickets(load_tickets(path), route=route)

    def report(self) -> str:
        return format_report(self.result)

    def summary(self) -> dict[str, Any]:
        return build_summary(self.result)
