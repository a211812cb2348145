from __future__ import annotations

from ticket_analyzer.api_server import create_app
from ticket_analyzer.settings import configure_logging, load_settings

configure_logging(load_settings().log_level)

app = create_app()
