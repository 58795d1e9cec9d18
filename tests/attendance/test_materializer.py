from __future__ import annotations

from datetime import date

import pytest
from conftest import TODAY, make_dog, make_schedule

from doggy_daycare.attendance.materializer import AttendanceMaterializer
from doggy_daycare.attendance.model import AttendanceEntry, DailyRecord
from doggy_daycare.core.constants import AUTO_SCHEDULED_NOTE
from doggy_daycare.core.enums import PatternKind, ServiceType
from doggy_daycare.core.exceptions import ValidationError
from doggy_daycare.schedules.model import RecurrencePattern
from doggy_daycare.storage.document import Document

DAILY = RecurrencePattern(kind=PatternKind.DAILY)


def _document(*schedules) -> Document:
    return Document(dogs=[make_dog()], recurring_schedules=list(schedules))


def test_materialize_inserts_auto_scheduled_entries():
    document = _document(make_schedule(drop_off_time="08:00", pick_up_time="17:00"))

    created = AttendanceMaterializer().materialize(document, date(2024, 1, 1), date(2024, 1, 7))

    # Mon 1st, Wed 3rd, Fri 5th
    assert created == 3
    assert sorted(document.daily_data) == ["2024-01-01", "2024-01-03", "2024-01-05"]
    entry = document.daily_data["2024-01-03"].attendance.entries["dog-a_Daycare"]
    assert entry.attending is True
    assert entry.notes == AUTO_SCHEDULED_NOTE
    assert (entry.drop_off_time, entry.pick_up_time) == ("08:00", "17:00")
    assert document.daily_data["2024-01-03"].attendance.dogs == {"dog-a": True}


def test_manual_entry_survives_materialization():
    document = _document(make_schedule(pattern=DAILY))
    manual = AttendanceEntry(dog_id="dog-a", service_type=ServiceType.DAYCARE, attending=False, notes="Sick")
    document.day("2024-03-01").attendance.entries[manual.key] = manual

    AttendanceMaterializer().materialize(document, date(2024, 3, 1), date(2024, 3, 1))

    kept = document.daily_data["2024-03-01"].attendance.entries["dog-a_Daycare"]
    assert kept.attending is False
    assert kept.notes == "Sick"


def test_second_run_changes_nothing():
    document = _document(make_schedule(drop_off_time="08:00"))
    materializer = AttendanceMaterializer()

    materializer.materialize(document, date(2024, 1, 1), date(2024, 2, 29))
    first = document.to_json()
    second_count = materializer.materialize(document, date(2024, 1, 1), date(2024, 2, 29))

    assert second_count == 0
    assert document.to_json() == first


def test_range_and_schedule_bounds_are_respected():
    document = _document(make_schedule(pattern=DAILY, start_date="2024-01-05", end_date="2024-01-07"))

    AttendanceMaterializer().materialize(document, date(2024, 1, 1), date(2024, 1, 31))

    assert sorted(document.daily_data) == ["2024-01-05", "2024-01-06", "2024-01-07"]


def test_inactive_schedules_are_ignored():
    document = _document(make_schedule(pattern=DAILY, active=False))

    assert AttendanceMaterializer().materialize(document, date(2024, 1, 1), date(2024, 1, 31)) == 0
    assert document.daily_data == {}


def test_backfill_only_fills_blank_record_times():
    document = _document(make_schedule(pattern=DAILY, drop_off_time="08:00", pick_up_time="17:00"))
    document.day("2024-01-02").records["dog-a"] = DailyRecord(drop_off_time="07:30", notes="Early")

    AttendanceMaterializer().materialize(document, date(2024, 1, 2), date(2024, 1, 3))

    kept = document.daily_data["2024-01-02"].records["dog-a"]
    assert kept.drop_off_time == "07:30"
    assert kept.pick_up_time == "17:00"
    assert kept.notes == "Early"
    created = document.daily_data["2024-01-03"].records["dog-a"]
    assert (created.drop_off_time, created.pick_up_time) == ("08:00", "17:00")


def test_training_leaves_legacy_map_and_records_alone():
    document = _document(
        make_schedule(service_type=ServiceType.TRAINING, pattern=DAILY, drop_off_time="10:00", pick_up_time="11:00")
    )

    AttendanceMaterializer().materialize(document, date(2024, 1, 2), date(2024, 1, 2))

    day = document.daily_data["2024-01-02"]
    assert "dog-a_Training" in day.attendance.entries
    assert day.attendance.dogs == {}
    assert day.records == {}


def test_several_services_for_one_dog_coexist():
    document = _document(
        make_schedule(pattern=DAILY),
        make_schedule(service_type=ServiceType.BOARDING, pattern=DAILY, schedule_id="sched-2"),
    )

    AttendanceMaterializer().materialize(document, date(2024, 1, 2), date(2024, 1, 2))

    assert set(document.daily_data["2024-01-02"].attendance.entries) == {"dog-a_Daycare", "dog-a_Boarding"}


def test_reversed_range_is_rejected():
    with pytest.raises(ValidationError):
        AttendanceMaterializer().materialize(_document(), date(2024, 1, 31), date(2024, 1, 1))


def test_unparsable_schedule_date_is_rejected():
    document = _document(make_schedule(start_date="01/02/2024"))

    with pytest.raises(ValidationError):
        AttendanceMaterializer().materialize(document, date(2024, 1, 1), date(2024, 1, 7))


def test_default_window_is_forward_days_from_today():
    start, end = AttendanceMaterializer(forward_window_days=30).default_window(None, None, TODAY)

    assert start == TODAY
    assert end == date(2024, 2, 9)


def test_default_window_reaches_back_to_backdated_anchor_and_out_to_end_date():
    materializer = AttendanceMaterializer(forward_window_days=30)

    start, end = materializer.default_window("2023-12-01", "2024-06-30", TODAY)

    assert start == date(2023, 12, 1)
    assert end == date(2024, 6, 30)


def test_default_window_ignores_future_anchor_early_end_and_garbage():
    materializer = AttendanceMaterializer(forward_window_days=30)

    assert materializer.default_window("2024-01-20", "2024-01-15", TODAY) == (TODAY, date(2024, 2, 9))
    assert materializer.default_window("not-a-date", "  ", TODAY) == (TODAY, date(2024, 2, 9))


def test_clear_auto_generated_keeps_manual_entries():
    document = _document(make_schedule(pattern=DAILY))
    materializer = AttendanceMaterializer()
    materializer.materialize(document, date(2024, 1, 1), date(2024, 1, 3))
    manual = AttendanceEntry(dog_id="dog-b", service_type=ServiceType.DAYCARE, attending=True, notes="Walk-in")
    document.day("2024-01-02").attendance.entries[manual.key] = manual
    legacy = AttendanceEntry(
        dog_id="dog-c", service_type=ServiceType.TRAINING, attending=True, notes="Scheduled (not confirmed)"
    )
    document.day("2024-01-02").attendance.entries[legacy.key] = legacy

    removed = materializer.clear_auto_generated(document)

    assert removed == 4
    day = document.daily_data["2024-01-02"]
    assert set(day.attendance.entries) == {"dog-b_Daycare"}
    assert day.attendance.dogs == {"dog-b": True}


def test_clear_future_for_dog_keeps_history_and_other_dogs():
    document = _document(make_schedule(pattern=DAILY))
    materializer = AttendanceMaterializer()
    materializer.materialize(document, date(2024, 1, 8), date(2024, 1, 12))
    other = AttendanceEntry(dog_id="dog-b", service_type=ServiceType.DAYCARE, attending=True)
    document.day("2024-01-11").attendance.entries[other.key] = other

    removed = materializer.clear_future_for_dog(document, "dog-a", TODAY)

    assert removed == 3
    assert "dog-a_Daycare" in document.daily_data["2024-01-09"].attendance.entries
    assert "dog-a_Daycare" not in document.daily_data["2024-01-10"].attendance.entries
    assert set(document.daily_data["2024-01-11"].attendance.entries) == {"dog-b_Daycare"}


def test_clear_future_for_dog_ignores_ids_sharing_a_prefix():
    document = Document(
        recurring_schedules=[
            make_schedule(dog_id="1", pattern=DAILY, schedule_id="s1"),
            make_schedule(dog_id="1_2", pattern=DAILY, schedule_id="s2"),
        ]
    )
    materializer = AttendanceMaterializer()
    materializer.materialize(document, TODAY, TODAY)

    assert materializer.clear_future_for_dog(document, "1", TODAY) == 1
    assert set(document.daily_data["2024-01-10"].attendance.entries) == {"1_2_Daycare"}
