from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..common.validators import require_str_field
from ..core.enums import PatternKind, ServiceType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class RecurrencePattern:
    """A recurrence rule. Only CUSTOM uses `days` (0-6, Sunday=0)."""

    kind: PatternKind
    days: frozenset[int] = field(default_factory=frozenset)

    @classmethod
    def custom(cls, days) -> "RecurrencePattern":
        return cls(kind=PatternKind.CUSTOM, days=frozenset(int(d) for d in days))

    @classmethod
    def from_json(cls, value: Any) -> "RecurrencePattern":
        """Decode `"Weekly"` style names or `{"Custom": [1, 3, 5]}`."""

        if isinstance(value, str):
            if value == PatternKind.CUSTOM.value:
                raise ValidationError("Custom pattern requires a list of weekdays")
            try:
                return cls(kind=PatternKind(value))
            except ValueError:
                raise ValidationError(f"Unknown recurrence pattern '{value}'") from None

        if isinstance(value, dict) and list(value) == [PatternKind.CUSTOM.value]:
            days = value[PatternKind.CUSTOM.value]
            if not isinstance(days, list):
                raise ValidationError("Custom pattern weekdays must be a list")
            return cls.custom(days)

        raise ValidationError(f"Unrecognized recurrence pattern {value!r}")

    def to_json(self) -> Any:
        if self.kind == PatternKind.CUSTOM:
            return {PatternKind.CUSTOM.value: sorted(self.days)}
        return self.kind.value


@dataclass
class RecurringSchedule:
    id: str
    dog_id: str
    service_type: ServiceType
    pattern: RecurrencePattern
    start_date: str
    created_at: str
    end_date: Optional[str] = None
    drop_off_time: Optional[str] = None
    pick_up_time: Optional[str] = None
    active: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecurringSchedule":
        return cls(
            id=require_str_field(data, "id"),
            dog_id=require_str_field(data, "dog_id"),
            service_type=ServiceType(data["service_type"]),
            pattern=RecurrencePattern.from_json(data["pattern"]),
            start_date=require_str_field(data, "start_date"),
            created_at=require_str_field(data, "created_at"),
            end_date=data.get("end_date"),
            drop_off_time=data.get("drop_off_time"),
            pick_up_time=data.get("pick_up_time"),
            active=bool(data["active"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "dog_id": self.dog_id,
            "service_type": self.service_type.value,
            "pattern": self.pattern.to_json(),
            "start_date": self.start_date,
            "end_date": self.end_date,
            "drop_off_time": self.drop_off_time,
            "pick_up_time": self.pick_up_time,
            "active": self.active,
            "created_at": self.created_at,
        }
