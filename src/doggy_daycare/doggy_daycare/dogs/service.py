from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Optional

from ..attendance.materializer import AttendanceMaterializer
from ..common.datetime_utils import parse_iso_date, today_local, utc_now_iso
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..schedules.factory import ScheduleFactory
from ..storage.document import Document
from ..storage.store import DocumentStore
from .model import Dog, DogSchedule

logger = logging.getLogger(__name__)


def describe_age(date_of_birth: str, *, today: Optional[date] = None) -> str:
    """Human readable age, e.g. "2 years 3 months"."""

    try:
        born = parse_iso_date(date_of_birth)
    except ValueError:
        raise ValidationError("Invalid date format. Expected YYYY-MM-DD") from None

    age_days = ((today or today_local()) - born).days
    if age_days < 0:
        return "Not yet born"

    years = age_days // 365
    months = (age_days % 365) // 30

    def _plural(count: int, unit: str) -> str:
        return f"{count} {unit}{'' if count == 1 else 's'}"

    if years > 0:
        if months > 0:
            return f"{_plural(years, 'year')} {_plural(months, 'month')}"
        return _plural(years, "year")
    if months > 0:
        return _plural(months, "month")
    return _plural(age_days, "day")


class DogService:
    """Use cases that create, edit and remove dogs together with their schedules."""

    def __init__(
        self,
        store: DocumentStore,
        *,
        schedule_factory: Optional[ScheduleFactory] = None,
        materializer: Optional[AttendanceMaterializer] = None,
    ):
        self._store = store
        self._factory = schedule_factory or ScheduleFactory()
        self._materializer = materializer or AttendanceMaterializer()

    def list_dogs(self) -> list[Dog]:
        return self._store.read(lambda document: list(document.dogs))

    def add_dog(
        self,
        *,
        name: str,
        owner: str,
        phone: str = "",
        email: str = "",
        breed: str = "",
        date_of_birth: Optional[str] = None,
        vaccine_date: Optional[str] = None,
        schedule: Optional[DogSchedule] = None,
        household_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Dog:
        today = today or today_local()
        dog = Dog(
            id=str(uuid.uuid4()),
            name=require_non_empty(name, "Dog name"),
            owner=require_non_empty(owner, "Owner"),
            phone=phone,
            email=email,
            breed=breed,
            created_at=utc_now_iso(),
            schedule=schedule or DogSchedule(),
            date_of_birth=date_of_birth,
            vaccine_date=vaccine_date,
            household_id=household_id or None,
        )

        def _add(document: Document) -> Dog:
            document.dogs.append(dog)
            if dog.schedule.active and dog.schedule.has_days:
                self._schedule_dog(document, dog, today)
            return dog

        created = self._store.write(_add)
        logger.info("Added dog %s (%s)", created.id, created.name)
        return created

    def update_dog(
        self,
        dog_id: str,
        *,
        name: str,
        owner: str,
        phone: str = "",
        email: str = "",
        breed: str = "",
        date_of_birth: Optional[str] = None,
        vaccine_date: Optional[str] = None,
        consent_last_signed: Optional[str] = None,
        schedule: Optional[DogSchedule] = None,
        household_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Dog:
        """Replace a dog's fields and regenerate its schedules.

        Attendance from today onwards is rebuilt from the new schedule;
        earlier dates are left as recorded.
        """

        today = today or today_local()
        name = require_non_empty(name, "Dog name")
        owner = require_non_empty(owner, "Owner")

        def _update(document: Document) -> Dog:
            index = next((i for i, d in enumerate(document.dogs) if d.id == dog_id), None)
            if index is None:
                raise NotFoundError("Dog not found")

            current = document.dogs[index]
            edited = Dog(
                id=current.id,
                name=name,
                owner=owner,
                phone=phone,
                email=email,
                breed=breed,
                created_at=current.created_at,
                schedule=schedule or DogSchedule(),
                date_of_birth=date_of_birth,
                vaccine_date=vaccine_date,
                consent_last_signed=consent_last_signed,
                household_id=household_id or None,
            )

            document.recurring_schedules = [s for s in document.recurring_schedules if s.dog_id != dog_id]
            self._materializer.clear_future_for_dog(document, dog_id, today)
            document.dogs[index] = edited
            self._schedule_dog(document, edited, today)
            return edited

        return self._store.write(_update)

    def delete_dog(self, dog_id: str) -> None:
        """Remove the dog and its schedules. Recorded attendance is kept."""

        def _delete(document: Document) -> None:
            if document.find_dog(dog_id) is None:
                raise NotFoundError("Dog not found")
            document.dogs = [d for d in document.dogs if d.id != dog_id]
            document.recurring_schedules = [s for s in document.recurring_schedules if s.dog_id != dog_id]

        self._store.write(_delete)
        logger.info("Deleted dog %s", dog_id)

    def _schedule_dog(self, document: Document, dog: Dog, today: date) -> None:
        document.recurring_schedules.extend(self._factory.derive_schedules(dog, today=today))
        start, end = self._materializer.default_window(dog.schedule.start_date, dog.schedule.end_date, today)
        self._materializer.materialize(document, start, end)
