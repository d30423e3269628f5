from __future__ import annotations
from pathlib import Path
from typing import Optional

from campcal.core.engine import CalendarRegistry
from campcal.core.errors import CalendarValidationError
from campcal.core.logging import get_logger
from campcal.engines.specs import ALL_SPECS

logger = get_logger(__name__)

def build_registry(calendar_dir: Optional[Path] = None) -> CalendarRegistry:
    calendars = dict(ALL_SPECS)
    reg = CalendarRegistry(calendars)
    if calendar_dir is not None:
        load_directory(reg, calendar_dir)
    return reg

def load_directory(reg: CalendarRegistry, calendar_dir: Path) -> int:
    """Register every ``*.json`` calendar in a directory; invalid files are skipped with a warning."""
    from campcal.schema import load_calendar

    calendar_dir = Path(calendar_dir)
    if not calendar_dir.is_dir():
        logger.warning("calendar_dir_missing", path=str(calendar_dir))
        return 0

    loaded = 0
    for path in sorted(calendar_dir.glob("*.json")):
        try:
            cal = load_calendar(path)
        except CalendarValidationError as exc:
            logger.warning("calendar_skipped", path=str(path), error=exc.message, details=exc.details)
            continue
        reg.register(cal.name, cal, overwrite=True, validate=False)
        loaded += 1
    return loaded
