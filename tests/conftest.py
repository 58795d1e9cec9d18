from __future__ import annotations

from datetime import date

import pytest

from doggy_daycare.attendance.materializer import AttendanceMaterializer
from doggy_daycare.attendance.service import AttendanceService
from doggy_daycare.core.enums import ServiceType
from doggy_daycare.dogs.model import Dog, DogSchedule
from doggy_daycare.dogs.service import DogService
from doggy_daycare.schedules.model import RecurrencePattern, RecurringSchedule
from doggy_daycare.schedules.service import ScheduleService
from doggy_daycare.storage.store import DocumentStore

TODAY = date(2024, 1, 10)


def make_dog(dog_id: str = "dog-a", *, schedule: DogSchedule | None = None) -> Dog:
    return Dog(
        id=dog_id,
        name="Rex",
        owner="Jordan River",
        phone="0400000000",
        email="jordan@example.com",
        breed="Kelpie",
        created_at="2024-01-01T09:00:00+00:00",
        schedule=schedule or DogSchedule.inactive(),
    )


def make_schedule(
    *,
    dog_id: str = "dog-a",
    service_type: ServiceType = ServiceType.DAYCARE,
    pattern: RecurrencePattern | None = None,
    start_date: str = "2024-01-01",
    end_date: str | None = None,
    drop_off_time: str | None = None,
    pick_up_time: str | None = None,
    active: bool = True,
    schedule_id: str = "sched-1",
) -> RecurringSchedule:
    return RecurringSchedule(
        id=schedule_id,
        dog_id=dog_id,
        service_type=service_type,
        pattern=pattern or RecurrencePattern.custom([1, 3, 5]),
        start_date=start_date,
        end_date=end_date,
        drop_off_time=drop_off_time,
        pick_up_time=pick_up_time,
        active=active,
        created_at="2024-01-01T09:00:00+00:00",
    )


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def store(data_path):
    return DocumentStore(data_path)


@pytest.fixture
def materializer():
    return AttendanceMaterializer(forward_window_days=30)


@pytest.fixture
def dog_service(store, materializer):
    return DogService(store, materializer=materializer)


@pytest.fixture
def schedule_service(store, materializer):
    return ScheduleService(store, materializer=materializer)


@pytest.fixture
def attendance_service(store, materializer):
    return AttendanceService(store, materializer=materializer)
