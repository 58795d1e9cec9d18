from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.materializer import AttendanceMaterializer
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_FORWARD_WINDOW_DAYS
from .dogs.service import DogService
from .schedules.factory import ScheduleFactory
from .schedules.service import ScheduleService
from .settings.service import SettingsService
from .storage.store import DocumentStore


@dataclass(frozen=True)
class Container:
    store: DocumentStore
    materializer: AttendanceMaterializer

    dog_service: DogService
    schedule_service: ScheduleService
    attendance_service: AttendanceService
    settings_service: SettingsService


def build_container(*, data_path: Path | str, forward_window_days: int = DEFAULT_FORWARD_WINDOW_DAYS) -> Container:
    store = DocumentStore(data_path)
    materializer = AttendanceMaterializer(forward_window_days=int(forward_window_days))

    dog_service = DogService(store, schedule_factory=ScheduleFactory(), materializer=materializer)
    schedule_service = ScheduleService(store, materializer=materializer)
    attendance_service = AttendanceService(store, materializer=materializer)
    settings_service = SettingsService(store)

    return Container(
        store=store,
        materializer=materializer,
        dog_service=dog_service,
        schedule_service=schedule_service,
        attendance_service=attendance_service,
        settings_service=settings_service,
    )
