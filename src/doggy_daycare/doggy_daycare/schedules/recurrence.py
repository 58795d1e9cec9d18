"""Recurrence evaluation.

`occurs` decides whether a pattern anchored on a start date fires on a
candidate date. Callers pre-filter candidates that fall before the anchor or
after a schedule's end date.
"""

from __future__ import annotations

from datetime import date

from ..common.datetime_utils import last_day_of_month, weekday_index
from ..core.enums import PatternKind
from .model import RecurrencePattern

BIWEEKLY_INTERVAL_DAYS = 14


def occurs(candidate: date, anchor: date, pattern: RecurrencePattern) -> bool:
    kind = pattern.kind

    if kind == PatternKind.NONE:
        return False

    if kind == PatternKind.DAILY:
        return True

    if kind == PatternKind.WEEKLY:
        return candidate.weekday() == anchor.weekday()

    if kind == PatternKind.BIWEEKLY:
        if candidate.weekday() != anchor.weekday():
            return False
        days_since_anchor = (candidate - anchor).days
        return days_since_anchor >= 0 and days_since_anchor % BIWEEKLY_INTERVAL_DAYS == 0

    if kind == PatternKind.MONTHLY:
        # Anchors past the end of a short month fire on its last day.
        target_day = min(anchor.day, last_day_of_month(candidate))
        return candidate.day == target_day

    if kind == PatternKind.CUSTOM:
        return weekday_index(candidate) in pattern.days

    return False
