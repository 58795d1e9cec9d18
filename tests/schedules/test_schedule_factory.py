from __future__ import annotations

from datetime import date
from itertools import count

from conftest import make_dog

from doggy_daycare.core.enums import PatternKind, ServiceType
from doggy_daycare.dogs.model import DogSchedule
from doggy_daycare.schedules.factory import ScheduleFactory


def _factory() -> ScheduleFactory:
    ids = count(1)
    return ScheduleFactory(id_factory=lambda: f"s{next(ids)}", clock=lambda: "2024-01-10T00:00:00+00:00")


def test_inactive_descriptor_yields_nothing():
    dog = make_dog(schedule=DogSchedule(daycare_days=[1, 2], active=False))

    assert _factory().derive_schedules(dog, today=date(2024, 1, 10)) == []


def test_one_custom_schedule_per_selected_service():
    dog = make_dog(
        schedule=DogSchedule(
            daycare_days=[1, 3],
            boarding_days=[6],
            daycare_drop_off="08:00",
            daycare_pick_up="17:00",
            start_date="2024-01-01",
            end_date="2024-06-30",
        )
    )

    schedules = _factory().derive_schedules(dog, today=date(2024, 1, 10))

    assert [s.service_type for s in schedules] == [ServiceType.DAYCARE, ServiceType.BOARDING]
    daycare, boarding = schedules
    assert daycare.pattern.kind == PatternKind.CUSTOM
    assert daycare.pattern.days == frozenset({1, 3})
    assert (daycare.drop_off_time, daycare.pick_up_time) == ("08:00", "17:00")
    assert daycare.start_date == "2024-01-01"
    assert daycare.end_date == "2024-06-30"
    assert daycare.dog_id == dog.id
    assert daycare.active is True
    assert (daycare.id, boarding.id) == ("s1", "s2")


def test_boarding_never_carries_times():
    dog = make_dog(schedule=DogSchedule(boarding_days=[0, 6], daycare_drop_off="08:00", daycare_pick_up="17:00"))

    (boarding,) = _factory().derive_schedules(dog, today=date(2024, 1, 10))

    assert boarding.drop_off_time is None
    assert boarding.pick_up_time is None


def test_blank_start_date_anchors_on_today():
    dog = make_dog(schedule=DogSchedule(training_days=[2], start_date="  "))

    (training,) = _factory().derive_schedules(dog, today=date(2024, 1, 10))

    assert training.start_date == "2024-01-10"
