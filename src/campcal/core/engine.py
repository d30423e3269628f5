from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from .logging import get_logger
from .types import CalendarDefinition

logger = get_logger(__name__)


@dataclass
class CalendarRegistry:
    """
    Named calendar definitions.

    Definitions added through ``register`` pass the stored-payload schema
    first, so a registered calendar always round-trips through JSON.
    Preset definitions handed to the constructor are taken as-is.
    """
    _calendars: Dict[str, CalendarDefinition] = field(default_factory=dict)

    def get(self, name: str) -> CalendarDefinition:
        try:
            return self._calendars[name]
        except KeyError:
            raise KeyError(f"Unknown calendar '{name}'. Available: {self.list()}") from None

    def list(self) -> List[str]:
        return sorted(self._calendars)

    def register(
        self,
        name: str,
        calendar: CalendarDefinition,
        *,
        overwrite: bool = False,
        validate: bool = True,
    ) -> None:
        if name in self._calendars and not overwrite:
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        if validate:
            from campcal.schema import validate_definition
            validate_definition(calendar, name=name)
        replaced = name in self._calendars
        self._calendars[name] = calendar
        logger.debug("calendar_registered", calendar=name, months=calendar.month_count, replaced=replaced)

    def unregister(self, name: str) -> CalendarDefinition:
        calendar = self.get(name)
        del self._calendars[name]
        logger.debug("calendar_unregistered", calendar=name)
        return calendar

    def __contains__(self, name: object) -> bool:
        return name in self._calendars

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._calendars)
