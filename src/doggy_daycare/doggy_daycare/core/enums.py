from __future__ import annotations

from enum import Enum


class ServiceType(str, Enum):
    """Service a dog is enrolled in; the value is also the entry-key suffix."""

    DAYCARE = "Daycare"
    TRAINING = "Training"
    BOARDING = "Boarding"


class AttendanceType(str, Enum):
    """Per-dog day classification shown on the daily checklist."""

    NOT_ATTENDING = "not_attending"
    HALF_DAY = "half_day"
    FULL_DAY = "full_day"


class PatternKind(str, Enum):
    """Recurrence pattern kinds. CUSTOM carries a weekday set."""

    NONE = "None"
    DAILY = "Daily"
    WEEKLY = "Weekly"
    BIWEEKLY = "BiWeekly"
    MONTHLY = "Monthly"
    CUSTOM = "Custom"
