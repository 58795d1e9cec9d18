from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from ..attendance.model import DayData
from ..core.exceptions import ValidationError
from ..dogs.model import Dog
from ..schedules.model import RecurringSchedule
from ..settings.model import Settings

# Errors a strict decode of a differently-shaped tree can raise.
DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError, ValidationError)


@dataclass
class Document:
    """The whole persisted state. Every write replaces all of it."""

    dogs: list[Dog] = field(default_factory=list)
    daily_data: dict[str, DayData] = field(default_factory=dict)
    recurring_schedules: list[RecurringSchedule] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)

    def day(self, date_str: str) -> DayData:
        """Ledger for a date, created on first touch."""
        day = self.daily_data.get(date_str)
        if day is None:
            day = DayData()
            self.daily_data[date_str] = day
        return day

    def find_dog(self, dog_id: str) -> Optional[Dog]:
        return next((d for d in self.dogs if d.id == dog_id), None)

    def find_schedule(self, schedule_id: str) -> Optional[RecurringSchedule]:
        return next((s for s in self.recurring_schedules if s.id == schedule_id), None)

    def refresh_projections(self) -> None:
        for day in self.daily_data.values():
            day.attendance.sync_legacy()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Document":
        """Strict decode of the current document shape."""

        if not isinstance(data, dict):
            raise TypeError("Document root must be a JSON object")
        return cls(
            dogs=[Dog.from_dict(d) for d in data["dogs"]],
            daily_data={str(k): DayData.from_dict(v) for k, v in data["daily_data"].items()},
            recurring_schedules=[RecurringSchedule.from_dict(s) for s in data["recurring_schedules"]],
            settings=Settings.from_dict(data["settings"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "dogs": [d.to_dict() for d in self.dogs],
            "daily_data": {k: v.to_dict() for k, v in self.daily_data.items()},
            "recurring_schedules": [s.to_dict() for s in self.recurring_schedules],
            "settings": self.settings.to_dict(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
