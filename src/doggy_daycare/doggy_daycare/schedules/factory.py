from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from ..common.datetime_utils import format_iso_date, is_blank, utc_now_iso
from ..core.enums import ServiceType
from ..dogs.model import Dog
from .model import RecurrencePattern, RecurringSchedule


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class ScheduleFactory:
    """Factory Pattern: turn a dog's weekly selections into recurring schedules.

    Pure transform: removing the dog's previous schedules and persisting the
    new ones is up to the caller.
    """

    id_factory: Callable[[], str] = field(default=_new_id)
    clock: Callable[[], str] = field(default=utc_now_iso)

    def derive_schedules(self, dog: Dog, *, today: date) -> list[RecurringSchedule]:
        descriptor = dog.schedule
        if not descriptor.active:
            return []

        start_date = descriptor.start_date
        if is_blank(start_date):
            start_date = format_iso_date(today)

        # Boarding has no same-day drop-off/pick-up.
        selections = (
            (ServiceType.DAYCARE, descriptor.daycare_days, descriptor.daycare_drop_off, descriptor.daycare_pick_up),
            (ServiceType.TRAINING, descriptor.training_days, descriptor.training_drop_off, descriptor.training_pick_up),
            (ServiceType.BOARDING, descriptor.boarding_days, None, None),
        )

        schedules: list[RecurringSchedule] = []
        for service_type, days, drop_off, pick_up in selections:
            if not days:
                continue
            schedules.append(
                RecurringSchedule(
                    id=self.id_factory(),
                    dog_id=dog.id,
                    service_type=service_type,
                    pattern=RecurrencePattern.custom(days),
                    start_date=start_date,
                    end_date=descriptor.end_date,
                    drop_off_time=drop_off,
                    pick_up_time=pick_up,
                    active=True,
                    created_at=self.clock(),
                )
            )
        return schedules
