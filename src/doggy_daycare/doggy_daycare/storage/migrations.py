"""Schema migrations for documents written by older app versions.

Each step takes the raw JSON tree, patches in place whatever it owns and
returns the tree. Steps only add or drop fields that a strict decode would
reject, so they are independent of each other and may run in any order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from ..core.constants import MIGRATED_ATTENDANCE_NOTE
from ..core.enums import ServiceType
from ..attendance.model import entry_key
from ..dogs.model import DogSchedule
from ..settings.model import default_whatsapp_templates

logger = logging.getLogger(__name__)

Tree = dict[str, Any]


@dataclass(frozen=True)
class MigrationStep:
    name: str
    apply: Callable[[Tree], Tree]


def add_business_phone(tree: Tree) -> Tree:
    settings = tree.get("settings")
    if isinstance(settings, dict) and "business_phone" not in settings:
        settings["business_phone"] = ""
    return tree


def add_whatsapp_templates(tree: Tree) -> Tree:
    settings = tree.get("settings")
    if isinstance(settings, dict) and "whatsapp_templates" not in settings:
        settings["whatsapp_templates"] = default_whatsapp_templates().to_dict()
    return tree


def drop_legacy_age(tree: Tree) -> Tree:
    # An age string cannot be turned back into a birth date.
    for dog in _dogs(tree):
        if "age" in dog and "date_of_birth" not in dog:
            del dog["age"]
            dog["date_of_birth"] = None
    return tree


def add_schedule_descriptor(tree: Tree) -> Tree:
    for dog in _dogs(tree):
        if "schedule" not in dog:
            dog["schedule"] = DogSchedule.inactive().to_dict()
    return tree


def add_recurring_schedules(tree: Tree) -> Tree:
    if "recurring_schedules" not in tree:
        tree["recurring_schedules"] = []
    return tree


def add_attendance_entries(tree: Tree) -> Tree:
    """Give old per-date attendance an `entries` map built from the legacy flags."""

    daily_data = tree.get("daily_data")
    if not isinstance(daily_data, dict):
        return tree

    for day in daily_data.values():
        if not isinstance(day, dict):
            continue
        records = day.setdefault("records", {})
        attendance = day.get("attendance")
        if not isinstance(attendance, dict):
            continue
        attendance.setdefault("types", {})
        if "entries" in attendance:
            continue

        entries: dict[str, Any] = {}
        for dog_id, attending in (attendance.get("dogs") or {}).items():
            entry = {
                "dog_id": dog_id,
                "service_type": ServiceType.DAYCARE.value,
                "attending": bool(attending),
                "drop_off_time": None,
                "pick_up_time": None,
                "notes": MIGRATED_ATTENDANCE_NOTE,
            }
            record = records.get(dog_id) if isinstance(records, dict) else None
            if isinstance(record, dict):
                entry["drop_off_time"] = record.get("drop_off_time")
                entry["pick_up_time"] = record.get("pick_up_time")
            entries[entry_key(dog_id, ServiceType.DAYCARE)] = entry
        attendance["entries"] = entries
    return tree


def _dogs(tree: Tree) -> list[dict[str, Any]]:
    dogs = tree.get("dogs")
    if not isinstance(dogs, list):
        return []
    return [dog for dog in dogs if isinstance(dog, dict)]


MIGRATION_STEPS: tuple[MigrationStep, ...] = (
    MigrationStep("settings_business_phone", add_business_phone),
    MigrationStep("settings_whatsapp_templates", add_whatsapp_templates),
    MigrationStep("dogs_legacy_age", drop_legacy_age),
    MigrationStep("dogs_schedule_descriptor", add_schedule_descriptor),
    MigrationStep("recurring_schedules_list", add_recurring_schedules),
    MigrationStep("daily_data_entries", add_attendance_entries),
)


def run_migrations(tree: Any) -> Any:
    if not isinstance(tree, dict):
        return tree
    for step in MIGRATION_STEPS:
        logger.debug("Applying migration step %s", step.name)
        tree = step.apply(tree)
    return tree
