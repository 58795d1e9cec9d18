from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import require_iso_date
from ..core.enums import AttendanceType, ServiceType
from ..storage.document import Document
from ..storage.store import DocumentStore
from .materializer import AttendanceMaterializer
from .model import AttendanceEntry, DailyRecord, DayData, entry_key

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, store: DocumentStore, *, materializer: Optional[AttendanceMaterializer] = None):
        self._store = store
        self._materializer = materializer or AttendanceMaterializer()

    def generate(self, start_date: str, end_date: str) -> int:
        """Materialize every active schedule over the range; returns entries added."""

        start = require_iso_date(start_date, "start date")
        end = require_iso_date(end_date, "end date")
        created = self._store.write(lambda document: self._materializer.materialize(document, start, end))
        logger.info("Generated %d attendance entries for %s..%s", created, start_date, end_date)
        return created

    def clear_auto_generated(self) -> int:
        removed = self._store.write(self._materializer.clear_auto_generated)
        logger.info("Cleared %d machine-generated attendance entries", removed)
        return removed

    def get_day(self, date_str: str) -> Optional[DayData]:
        require_iso_date(date_str, "date")
        return self._store.read(lambda document: document.daily_data.get(date_str))

    def get_attendance_for_date(self, date_str: str) -> dict[str, AttendanceEntry]:
        day = self.get_day(date_str)
        return dict(day.attendance.entries) if day else {}

    def update_detailed_attendance(
        self,
        date_str: str,
        *,
        dog_id: str,
        service_type: ServiceType,
        attending: bool,
        drop_off_time: Optional[str] = None,
        pick_up_time: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> AttendanceEntry:
        """Manual edit of one dog/service entry; replaces whatever was there."""

        require_iso_date(date_str, "date")
        entry = AttendanceEntry(
            dog_id=dog_id,
            service_type=service_type,
            attending=attending,
            drop_off_time=drop_off_time,
            pick_up_time=pick_up_time,
            notes=notes,
        )

        def _update(document: Document) -> AttendanceEntry:
            document.day(date_str).attendance.entries[entry.key] = entry
            return entry

        return self._store.write(_update)

    def update_attendance(self, date_str: str, *, dog_id: str, attending: bool) -> None:
        """Daily checklist toggle. Writes the dog's Daycare entry."""

        require_iso_date(date_str, "date")

        def _update(document: Document) -> None:
            entries = document.day(date_str).attendance.entries
            key = entry_key(dog_id, ServiceType.DAYCARE)
            existing = entries.get(key)
            if existing is None:
                entries[key] = AttendanceEntry(dog_id=dog_id, service_type=ServiceType.DAYCARE, attending=attending)
            else:
                existing.attending = attending

        self._store.write(_update)

    def update_attendance_type(self, date_str: str, *, dog_id: str, attendance_type: AttendanceType) -> None:
        require_iso_date(date_str, "date")

        def _update(document: Document) -> None:
            document.day(date_str).attendance.types[dog_id] = attendance_type

        self._store.write(_update)

    def update_daily_record(self, date_str: str, *, dog_id: str, record: DailyRecord) -> None:
        require_iso_date(date_str, "date")

        def _update(document: Document) -> None:
            document.day(date_str).records[dog_id] = record

        self._store.write(_update)

    def update_temperature(self, date_str: str, *, am_temp: Optional[str] = None, pm_temp: Optional[str] = None) -> None:
        """Set AM/PM readings; a None reading leaves the stored one alone."""

        require_iso_date(date_str, "date")

        def _update(document: Document) -> None:
            day = document.day(date_str)
            if am_temp is not None:
                day.am_temp = am_temp
            if pm_temp is not None:
                day.pm_temp = pm_temp

        self._store.write(_update)
