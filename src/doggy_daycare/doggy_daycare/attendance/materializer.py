from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import format_iso_date, is_blank, iter_dates, parse_iso_date, require_iso_date
from ..common.validators import require_date_range
from ..core.constants import AUTO_GENERATED_MARKERS, AUTO_SCHEDULED_NOTE, DEFAULT_FORWARD_WINDOW_DAYS
from ..core.enums import ServiceType
from ..schedules.model import RecurringSchedule
from ..schedules.recurrence import occurs
from ..storage.document import Document
from .model import AttendanceEntry, DailyRecord, DayData, entry_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ScheduleBounds:
    schedule: RecurringSchedule
    start: date
    end: Optional[date]


@dataclass
class AttendanceMaterializer:
    """Turns recurring schedules into ledger entries.

    Writes are insert-if-absent (entries) or fill-if-blank (daily record
    times), so running twice over the same range changes nothing and
    manually entered attendance is never overwritten.
    """

    forward_window_days: int = DEFAULT_FORWARD_WINDOW_DAYS

    def materialize(self, document: Document, start: date, end: date) -> int:
        """Fill in occurrences from `start` to `end` inclusive; returns entries added."""

        require_date_range(start, end)
        bounds = [self._bounds(s) for s in document.recurring_schedules if s.active]

        created = 0
        for current in iter_dates(start, end):
            for item in bounds:
                if current < item.start:
                    continue
                if item.end is not None and current > item.end:
                    continue
                if not occurs(current, item.start, item.schedule.pattern):
                    continue
                if self._insert(document, current, item.schedule):
                    created += 1

        logger.debug("Materialized %d attendance entries between %s and %s", created, start, end)
        return created

    def default_window(self, start_date: Optional[str], end_date: Optional[str], today: date) -> tuple[date, date]:
        """Range used after a dog or schedule changes.

        At least `forward_window_days` ahead, reaching back to a backdated
        anchor and forward to a later end date. Unparsable bounds are ignored.
        """

        forward = today + timedelta(days=self.forward_window_days)
        start = today
        end = forward

        anchor = _parse_or_none(start_date)
        if anchor is not None:
            start = min(today, anchor)
        until = _parse_or_none(end_date)
        if until is not None:
            end = max(forward, until)
        return start, end

    def clear_future_for_dog(self, document: Document, dog_id: str, today: date) -> int:
        """Drop every entry for the dog on `today` or later; earlier dates are history."""

        removed = 0
        for date_str, day in document.daily_data.items():
            day_date = _parse_or_none(date_str)
            if day_date is None or day_date < today:
                continue
            keys = [key for key, entry in day.attendance.entries.items() if entry.dog_id == dog_id]
            for key in keys:
                del day.attendance.entries[key]
            removed += len(keys)
            day.attendance.dogs.pop(dog_id, None)
        return removed

    def clear_auto_generated(self, document: Document) -> int:
        removed = 0
        for day in document.daily_data.values():
            keys = [key for key, entry in day.attendance.entries.items() if _is_machine_generated(entry)]
            for key in keys:
                del day.attendance.entries[key]
            removed += len(keys)
            day.attendance.sync_legacy()
        return removed

    def _bounds(self, schedule: RecurringSchedule) -> _ScheduleBounds:
        start = require_iso_date(schedule.start_date, "schedule start date")
        end = None
        if not is_blank(schedule.end_date):
            end = require_iso_date(schedule.end_date, "schedule end date")
        return _ScheduleBounds(schedule=schedule, start=start, end=end)

    def _insert(self, document: Document, current: date, schedule: RecurringSchedule) -> bool:
        day = document.day(format_iso_date(current))
        key = entry_key(schedule.dog_id, schedule.service_type)
        if key in day.attendance.entries:
            return False

        day.attendance.entries[key] = AttendanceEntry(
            dog_id=schedule.dog_id,
            service_type=schedule.service_type,
            attending=True,
            drop_off_time=schedule.drop_off_time,
            pick_up_time=schedule.pick_up_time,
            notes=AUTO_SCHEDULED_NOTE,
        )

        if schedule.service_type == ServiceType.DAYCARE:
            day.attendance.dogs[schedule.dog_id] = True
            _backfill_record_times(day, schedule)
        return True


def _backfill_record_times(day: DayData, schedule: RecurringSchedule) -> None:
    """Copy schedule times into the dog's daily record where it has none."""

    if is_blank(schedule.drop_off_time) and is_blank(schedule.pick_up_time):
        return

    record = day.records.get(schedule.dog_id)
    if record is None:
        record = DailyRecord()
        day.records[schedule.dog_id] = record

    if not is_blank(schedule.drop_off_time) and is_blank(record.drop_off_time):
        record.drop_off_time = schedule.drop_off_time
    if not is_blank(schedule.pick_up_time) and is_blank(record.pick_up_time):
        record.pick_up_time = schedule.pick_up_time


def _is_machine_generated(entry: AttendanceEntry) -> bool:
    return bool(entry.notes) and any(marker in entry.notes for marker in AUTO_GENERATED_MARKERS)


def _parse_or_none(value: Optional[str]) -> Optional[date]:
    if is_blank(value):
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        return None
