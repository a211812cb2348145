"""Constants for the ticket analyzer."""

from __future__ import annotations

DEFAULT_ORIGIN = "VVO"
DEFAULT_DESTINATION = "TLV"
DEFAULT_DATA_PATH = "data/tickets.json"

MINUTES_PER_DAY = 24 * 60

TICKETS_KEY = "tickets"

MAX_PRICE = 2**63 - 1

NO_TICKETS_MESSAGE = "Нет билетов между Владивостоком и Тель-Авивом."
MIN_DURATION_HEADER = "Минимальное время полета для каждого авиаперевозчика:"
DURATION_UNIT = "минут"
PRICE_GAP_LABEL = "Разница между средней ценой и медианой:"
CURRENCY_UNIT = "рублей"
