from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..common.validators import require_str_field
from ..core.constants import MIGRATED_ATTENDANCE_NOTE
from ..core.enums import AttendanceType, ServiceType


def entry_key(dog_id: str, service_type: ServiceType) -> str:
    """Ledger key for one dog/service pair on a date."""
    return f"{dog_id}_{service_type.value}"


@dataclass
class AttendanceEntry:
    """Domain entity: one dog's attendance for one service on one date."""

    dog_id: str
    service_type: ServiceType
    attending: bool
    drop_off_time: Optional[str] = None
    pick_up_time: Optional[str] = None
    notes: Optional[str] = None

    @property
    def key(self) -> str:
        return entry_key(self.dog_id, self.service_type)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttendanceEntry":
        return cls(
            dog_id=require_str_field(data, "dog_id"),
            service_type=ServiceType(data["service_type"]),
            attending=bool(data["attending"]),
            drop_off_time=data.get("drop_off_time"),
            pick_up_time=data.get("pick_up_time"),
            notes=data.get("notes"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "dog_id": self.dog_id,
            "service_type": self.service_type.value,
            "attending": self.attending,
            "drop_off_time": self.drop_off_time,
            "pick_up_time": self.pick_up_time,
            "notes": self.notes,
        }


@dataclass
class DailyRecord:
    """Free-text daily checklist record for one dog."""

    checklist: Optional[dict[str, bool]] = None
    feeding_times: Optional[str] = None
    drop_off_time: Optional[str] = None
    pick_up_time: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyRecord":
        checklist = data.get("checklist")
        return cls(
            checklist={str(k): bool(v) for k, v in checklist.items()} if checklist is not None else None,
            feeding_times=data.get("feeding_times"),
            drop_off_time=data.get("drop_off_time"),
            pick_up_time=data.get("pick_up_time"),
            notes=data.get("notes"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "checklist": dict(self.checklist) if self.checklist is not None else None,
            "feeding_times": self.feeding_times,
            "drop_off_time": self.drop_off_time,
            "pick_up_time": self.pick_up_time,
            "notes": self.notes,
        }


@dataclass
class DayAttendance:
    """Attendance for one date.

    `entries` is the source of truth. `dogs` is the legacy checklist view
    (dog -> attending, Daycare only) and is rebuilt by `sync_legacy`.
    """

    entries: dict[str, AttendanceEntry] = field(default_factory=dict)
    dogs: dict[str, bool] = field(default_factory=dict)
    types: dict[str, AttendanceType] = field(default_factory=dict)

    def sync_legacy(self) -> None:
        self.dogs = {
            entry.dog_id: entry.attending
            for entry in self.entries.values()
            if entry.service_type == ServiceType.DAYCARE
        }

    def adopt_legacy_flags(self, legacy: dict[str, Any], records: dict[str, DailyRecord]) -> None:
        """Turn checklist flags that have no Daycare entry into entries.

        Older app versions toggled only the `dogs` map, so a flag may be the
        only trace of that day's attendance.
        """

        for dog_id, attending in legacy.items():
            key = entry_key(str(dog_id), ServiceType.DAYCARE)
            if key in self.entries:
                continue
            record = records.get(str(dog_id))
            self.entries[key] = AttendanceEntry(
                dog_id=str(dog_id),
                service_type=ServiceType.DAYCARE,
                attending=bool(attending),
                drop_off_time=record.drop_off_time if record else None,
                pick_up_time=record.pick_up_time if record else None,
                notes=MIGRATED_ATTENDANCE_NOTE,
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any], records: Optional[dict[str, DailyRecord]] = None) -> "DayAttendance":
        attendance = cls(
            entries={str(k): AttendanceEntry.from_dict(v) for k, v in data["entries"].items()},
            types={str(k): AttendanceType(v) for k, v in (data.get("types") or {}).items()},
        )
        attendance.adopt_legacy_flags(data.get("dogs") or {}, records or {})
        attendance.sync_legacy()
        return attendance

    def to_dict(self) -> dict[str, Any]:
        return {
            "dogs": dict(self.dogs),
            "entries": {k: v.to_dict() for k, v in self.entries.items()},
            "types": {k: v.value for k, v in self.types.items()},
        }


@dataclass
class DayData:
    """The ledger for one calendar date."""

    attendance: DayAttendance = field(default_factory=DayAttendance)
    records: dict[str, DailyRecord] = field(default_factory=dict)
    am_temp: Optional[str] = None
    pm_temp: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DayData":
        records = {str(k): DailyRecord.from_dict(v) for k, v in data["records"].items()}
        return cls(
            attendance=DayAttendance.from_dict(data["attendance"], records),
            records=records,
            am_temp=data.get("am_temp"),
            pm_temp=data.get("pm_temp"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "attendance": self.attendance.to_dict(),
            "records": {k: v.to_dict() for k, v in self.records.items()},
            "am_temp": self.am_temp,
            "pm_temp": self.pm_temp,
        }
