"""FastAPI server for ticket route analysis."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse

from .errors import TicketAnalyzerError
from .pipeline import TicketAnalysisSession
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)

ANALYSIS_FAILED_DETAIL = "Failed to analyze tickets"


def _run_session(settings: Settings) -> TicketAnalysisSession:
    try:
        session = TicketAnalysisSession.from_file(settings.data_path, route=settings.route)
    except (TicketAnalyzerError, OSError) as exc:
        logger.exception("Ticket analysis failed for %s", settings.data_path)
        raise HTTPException(status_code=500, detail=ANALYSIS_FAILED_DETAIL) from exc

    logger.info(
        "Analyzed %s for route %s: %d matching tickets",
        settings.data_path,
        settings.route.label(),
        session.result.ticket_count,
    )
    return session


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="Ticket Analyzer API", version="1.0.0")

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/tickets/analyze", response_class=PlainTextResponse)
    def analyze_tickets() -> PlainTextResponse:
        session = _run_session(settings)
        return PlainTextResponse(content=session.report())

    @app.get("/api/tickets/summary")
    def ticket_summary() -> JSONResponse:
        session = _run_session(settings)
        payload: dict[str, Any] = session.summary()
        return JSONResponse(content=payload)

    return app
