"""Command-line entry point: ``python -m ticket_analyzer``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .errors import TicketAnalyzerError
from .models import Route
from .pipeline import TicketAnalysisSession
from .settings import configure_logging, load_settings

logger = logging.getLogger("ticket_analyzer")


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(prog="ticket_analyzer", description="Flight ticket route analysis")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Print the route report for a tickets file")
    analyze.add_argument("path", nargs="?", default=str(settings.data_path))
    analyze.add_argument("--origin", default=settings.origin)
    analyze.add_argument("--destination", default=settings.destination)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    return parser


def run_analyze(path: str, origin: str, destination: str) -> int:
    try:
        session = TicketAnalysisSession.from_file(path, route=Route(origin, destination))
    except (TicketAnalyzerError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(session.report())
    return 0


def run_server(host: str, port: int, reload: bool = False) -> int:
    import uvicorn

    logger.info("Starting Ticket Analyzer API on http://%s:%d", host, port)
    uvicorn.run("ticket_analyzer.api_server:create_app", factory=True, host=host, port=port, reload=reload)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging(load_settings().log_level)
    args = build_parser().parse_args(argv)
    if args.command == "analyze":
        return run_analyze(args.path, args.origin, args.destination)
    return run_server(args.host, args.port, reload=args.reload)


if __name__ == "__main__":
    sys.exit(main())
