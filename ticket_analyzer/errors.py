"""Exceptions raised while loading and analyzing ticket datasets."""

from __future__ import annotations


class TicketAnalyzerError(ValueError):
    """Base class for failures that abort a whole analysis."""


class MalformedInputError(TicketAnalyzerError):
    pass


class MissingFieldError(TicketAnalyzerError):
    def __init__(self, field: str, index: int | None = None) -> None:
        self.field = field
        self.index = index
        where = f" in ticket #{index}" if index is not None else ""
        super().__init__(f"Required field '{field}' is missing{where}")


class TypeMismatchError(TicketAnalyzerError):
    def __init__(self, field: str, value: object, index: int | None = None) -> None:
        self.field = field
        self.value = value
        self.index = index
        where = f" in ticket #{index}" if index is not None else ""
        super().__init__(f"Field '{field}' has unexpected value {value!r}{where}")


class TimeParseError(TicketAnalyzerError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Failed to parse time: {value!r} (expected H:mm)")
