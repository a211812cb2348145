"""Environment-driven configuration for the ticket analyzer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .constants import DEFAULT_DATA_PATH, DEFAULT_DESTINATION, DEFAULT_ORIGIN
from .models import Route

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    data_path: Path
    origin: str = DEFAULT_ORIGIN
    destination: str = DEFAULT_DESTINATION
    log_level: str = "INFO"

    @property
    def route(self) -> Route:
        return Route(self.origin, self.destination)


def load_settings() -> Settings:
    return Settings(
        data_path=Path(os.getenv("TICKET_ANALYZER_DATA_PATH", DEFAULT_DATA_PATH)),
        origin=os.getenv("TICKET_ANALYZER_ORIGIN", DEFAULT_ORIGIN),
        destination=os.getenv("TICKET_ANALYZER_DESTINATION", DEFAULT_DESTINATION),
        log_level=os.getenv("TICKET_ANALYZER_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
