"""Text and JSON rendering of analysis results."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from .analysis import AnalysisResult
from .constants import (
    CURRENCY_UNIT,
    DURATION_UNIT,
    MIN_DURATION_HEADER,
    NO_TICKETS_MESSAGE,
    PRICE_GAP_LABEL,
)


def format_amount(value: float) -> str:
    """Render a float the way existing report consumers expect (``100.0``, ``1.0E7``)."""
    value = float(value)
    magnitude = abs(value)
    if magnitude == 0 or 1e-3 <= magnitude < 1e7:
        return repr(value)

    decimal = Decimal(repr(magnitude)).normalize()
    digits = "".join(str(d) for d in decimal.as_tuple().digits)
    mantissa = f"{digits[0]}.{digits[1:] or '0'}"
    sign = "-" if value < 0 else ""
    return f"{sign}{mantissa}E{decimal.adjusted()}"


def format_report(result: AnalysisResult) -> str:
    if result.is_empty or result.prices is None:
        return NO_TICKETS_MESSAGE

    lines = [MIN_DURATION_HEADER]
    for carrier, minutes in result.min_durations.items():
        lines.append(f"{carrier}: {minutes} {DURATION_UNIT}")
    lines.append("")
    lines.append(f"{PRICE_GAP_LABEL} {format_amount(result.prices.gap)} {CURRENCY_UNIT}")
    return "\n".join(lines)


def build_summary(result: AnalysisResult) -> dict[str, Any]:
    prices = result.prices
    return {
        "origin": result.route.origin.upper(),
        "destination": result.route.destination.upper(),
        "ticket_count": result.ticket_count,
        "min_duration_by_carrier": dict(result.min_durations),
        "mean_price": prices.mean if prices else None,
        "median_price": prices.median if prices else None,
        "price_gap": prices.gap if prices else None,
    }
