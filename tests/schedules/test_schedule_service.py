from __future__ import annotations

import pytest
from conftest import TODAY, make_dog, make_schedule

from doggy_daycare.core.enums import PatternKind, ServiceType
from doggy_daycare.core.exceptions import NotFoundError, ValidationError
from doggy_daycare.schedules.model import RecurrencePattern

WEEKLY = RecurrencePattern(kind=PatternKind.WEEKLY)


@pytest.fixture
def seeded_store(store):
    store.write(lambda d: d.dogs.append(make_dog()))
    return store


def test_add_schedule_materializes_its_window(schedule_service, seeded_store):
    schedule = schedule_service.add_schedule(
        dog_id="dog-a",
        service_type=ServiceType.TRAINING,
        pattern=WEEKLY,
        start_date="2024-01-10",
        drop_off_time="10:00",
        today=TODAY,
    )

    assert schedule_service.list_schedules() == [schedule]
    days = seeded_store.read(lambda d: sorted(d.daily_data))
    assert days == ["2024-01-10", "2024-01-17", "2024-01-24", "2024-01-31", "2024-02-07"]


def test_add_schedule_for_unknown_dog_raises(schedule_service, seeded_store):
    with pytest.raises(NotFoundError):
        schedule_service.add_schedule(
            dog_id="nobody", service_type=ServiceType.DAYCARE, pattern=WEEKLY, start_date="2024-01-10", today=TODAY
        )
    assert schedule_service.list_schedules() == []


def test_add_schedule_rejects_end_before_start(schedule_service, seeded_store):
    with pytest.raises(ValidationError):
        schedule_service.add_schedule(
            dog_id="dog-a",
            service_type=ServiceType.DAYCARE,
            pattern=WEEKLY,
            start_date="2024-01-10",
            end_date="2024-01-01",
            today=TODAY,
        )


def test_update_keeps_created_at_and_existing_entries(schedule_service, seeded_store):
    added = schedule_service.add_schedule(
        dog_id="dog-a", service_type=ServiceType.DAYCARE, pattern=WEEKLY, start_date="2024-01-10", today=TODAY
    )
    replacement = make_schedule(schedule_id=added.id, pattern=RecurrencePattern.custom([4]), start_date="2024-01-10")
    replacement.created_at = ""

    updated = schedule_service.update_schedule(replacement, today=TODAY)

    assert updated.created_at == added.created_at
    entries = seeded_store.read(lambda d: {k for k, day in d.daily_data.items() if day.attendance.entries})
    assert "2024-01-10" in entries  # Wednesday, from the first rule
    assert "2024-01-11" in entries  # Thursday, from the replacement


def test_update_and_delete_unknown_schedule_raise(schedule_service, seeded_store):
    with pytest.raises(NotFoundError):
        schedule_service.update_schedule(make_schedule(schedule_id="missing"), today=TODAY)
    with pytest.raises(NotFoundError):
        schedule_service.delete_schedule("missing")


def test_list_filters_by_dog_and_delete_removes(schedule_service, store):
    store.write(lambda d: d.recurring_schedules.extend(
        [make_schedule(schedule_id="s1"), make_schedule(dog_id="dog-b", schedule_id="s2")]
    ))

    assert [s.id for s in schedule_service.list_schedules(dog_id="dog-b")] == ["s2"]

    schedule_service.delete_schedule("s1")

    assert [s.id for s in schedule_service.list_schedules()] == ["s2"]
