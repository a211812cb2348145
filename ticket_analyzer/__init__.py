"""Flight ticket route analysis package."""

from .analysis import AnalysisResult, PriceStatistics, analyze_tickets
from .models import DEFAULT_ROUTE, Route, Ticket
from .pipeline import TicketAnalysisSession, run_ticket_pipeline

__all__ = [
    "AnalysisResult",
    "PriceStatistics",
    "analyze_tickets",
    "DEFAULT_ROUTE",
    "Route",
    "Ticket",
    "TicketAnalysisSession",
    "run_ticket_pipeline",
]
