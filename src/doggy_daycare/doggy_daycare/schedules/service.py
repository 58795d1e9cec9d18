from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Optional

from ..attendance.materializer import AttendanceMaterializer
from ..common.datetime_utils import is_blank, require_iso_date, today_local, utc_now_iso
from ..common.validators import require_date_range
from ..core.enums import ServiceType
from ..core.exceptions import NotFoundError
from ..storage.document import Document
from ..storage.store import DocumentStore
from .model import RecurrencePattern, RecurringSchedule

logger = logging.getLogger(__name__)


class ScheduleService:
    """Manually managed recurring schedules.

    Adding or editing a schedule materializes its default window in the same
    store cycle.
    """

    def __init__(self, store: DocumentStore, *, materializer: Optional[AttendanceMaterializer] = None):
        self._store = store
        self._materializer = materializer or AttendanceMaterializer()

    def list_schedules(self, *, dog_id: Optional[str] = None) -> list[RecurringSchedule]:
        def _list(document: Document) -> list[RecurringSchedule]:
            return [s for s in document.recurring_schedules if dog_id is None or s.dog_id == dog_id]

        return self._store.read(_list)

    def add_schedule(
        self,
        *,
        dog_id: str,
        service_type: ServiceType,
        pattern: RecurrencePattern,
        start_date: str,
        end_date: Optional[str] = None,
        drop_off_time: Optional[str] = None,
        pick_up_time: Optional[str] = None,
        today: Optional[date] = None,
    ) -> RecurringSchedule:
        _validate_bounds(start_date, end_date)
        schedule = RecurringSchedule(
            id=str(uuid.uuid4()),
            dog_id=dog_id,
            service_type=service_type,
            pattern=pattern,
            start_date=start_date,
            end_date=end_date,
            drop_off_time=drop_off_time,
            pick_up_time=pick_up_time,
            active=True,
            created_at=utc_now_iso(),
        )

        def _add(document: Document) -> RecurringSchedule:
            if document.find_dog(dog_id) is None:
                raise NotFoundError("Dog not found")
            document.recurring_schedules.append(schedule)
            self._materialize_for(document, schedule, today or today_local())
            return schedule

        created = self._store.write(_add)
        logger.info("Added %s schedule %s for dog %s", service_type.value, created.id, dog_id)
        return created

    def update_schedule(self, schedule: RecurringSchedule, *, today: Optional[date] = None) -> RecurringSchedule:
        """Replace a schedule wholesale; existing attendance entries are kept."""

        _validate_bounds(schedule.start_date, schedule.end_date)

        def _update(document: Document) -> RecurringSchedule:
            index = next((i for i, s in enumerate(document.recurring_schedules) if s.id == schedule.id), None)
            if index is None:
                raise NotFoundError("Schedule not found")
            if not schedule.created_at:
                schedule.created_at = document.recurring_schedules[index].created_at
            document.recurring_schedules[index] = schedule
            if schedule.active:
                self._materialize_for(document, schedule, today or today_local())
            return schedule

        return self._store.write(_update)

    def delete_schedule(self, schedule_id: str) -> None:
        def _delete(document: Document) -> None:
            if document.find_schedule(schedule_id) is None:
                raise NotFoundError("Schedule not found")
            document.recurring_schedules = [s for s in document.recurring_schedules if s.id != schedule_id]

        self._store.write(_delete)

    def _materialize_for(self, document: Document, schedule: RecurringSchedule, today: date) -> None:
        start, end = self._materializer.default_window(schedule.start_date, schedule.end_date, today)
        self._materializer.materialize(document, start, end)


def _validate_bounds(start_date: str, end_date: Optional[str]) -> None:
    start = require_iso_date(start_date, "start date")
    if not is_blank(end_date):
        require_date_range(start, require_iso_date(end_date, "end date"))
