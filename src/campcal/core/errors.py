from __future__ import annotations

from typing import Any, Dict, List, Optional


class CampcalError(Exception):
    """Base error.

    Attributes:
        message: Human-readable error description.
        details: Additional context, rendered into ``str(err)``.
    """

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class CalendarError(CampcalError, ValueError):
    """Raised when a calendar definition cannot support the requested operation."""


class EmptyCalendarError(CalendarError):
    """Raised when day arithmetic is attempted on a calendar with no months."""

    def __init__(self, calendar_name: str = "") -> None:
        details = {"calendar": calendar_name} if calendar_name else None
        super().__init__("Calendar has no months defined", details=details)


class DateParseError(CampcalError, ValueError):
    """Raised by strict parsing entry points when a date string is malformed."""

    def __init__(self, text: Any) -> None:
        self.text = text
        super().__init__("Invalid calendar date", details={"value": text})


class CalendarValidationError(CampcalError, ValueError):
    """Raised when a calendar or weather payload fails schema validation."""

    def __init__(self, message: str, *, errors: Optional[List[Dict[str, Any]]] = None,
                 source: Optional[str] = None) -> None:
        self.errors = errors or []
        details: Dict[str, Any] = {}
        if source:
            details["source"] = source
        if self.errors:
            details["error_count"] = len(self.errors)
        super().__init__(message, details=details)
