from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Iterable, Optional, Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_date_range(start: date, end: date) -> None:
    if end < start:
        raise ValidationError(f"End date {end.isoformat()} is before start date {start.isoformat()}")


def require_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {field_name} '{value}' (expected one of: {allowed})") from None


def require_weekdays(values: Optional[Iterable[Any]], field_name: str) -> list[int]:
    days: list[int] = []
    for value in values or []:
        try:
            day = int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} contains a non-numeric weekday: {value!r}") from None
        if day < 0 or day > 6:
            raise ValidationError(f"{field_name} weekday {day} is outside 0-6")
        days.append(day)
    return days


def require_str_field(data: dict[str, Any], key: str) -> str:
    """Strict decode of a required text field; null or non-text is a shape error."""
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value
