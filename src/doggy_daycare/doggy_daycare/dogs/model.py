from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..common.validators import require_str_field


@dataclass
class DogSchedule:
    """Weekly service selection embedded in a dog record.

    Weekday numbers run 0-6 with Sunday=0. An inactive descriptor is ignored
    entirely when schedules are derived.
    """

    daycare_days: list[int] = field(default_factory=list)
    training_days: list[int] = field(default_factory=list)
    boarding_days: list[int] = field(default_factory=list)
    daycare_drop_off: Optional[str] = None
    daycare_pick_up: Optional[str] = None
    training_drop_off: Optional[str] = None
    training_pick_up: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    active: bool = True

    @property
    def has_days(self) -> bool:
        return bool(self.daycare_days or self.training_days or self.boarding_days)

    @classmethod
    def inactive(cls) -> "DogSchedule":
        return cls(active=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DogSchedule":
        return cls(
            daycare_days=[int(d) for d in data["daycare_days"]],
            training_days=[int(d) for d in data["training_days"]],
            boarding_days=[int(d) for d in data["boarding_days"]],
            daycare_drop_off=data.get("daycare_drop_off"),
            daycare_pick_up=data.get("daycare_pick_up"),
            training_drop_off=data.get("training_drop_off"),
            training_pick_up=data.get("training_pick_up"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            active=bool(data["active"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "daycare_days": list(self.daycare_days),
            "training_days": list(self.training_days),
            "boarding_days": list(self.boarding_days),
            "daycare_drop_off": self.daycare_drop_off,
            "daycare_pick_up": self.daycare_pick_up,
            "training_drop_off": self.training_drop_off,
            "training_pick_up": self.training_pick_up,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "active": self.active,
        }


@dataclass
class Dog:
    id: str
    name: str
    owner: str
    phone: str
    email: str
    breed: str
    created_at: str
    schedule: DogSchedule = field(default_factory=DogSchedule.inactive)
    date_of_birth: Optional[str] = None
    vaccine_date: Optional[str] = None
    consent_last_signed: Optional[str] = None
    household_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Dog":
        return cls(
            id=require_str_field(data, "id"),
            name=require_str_field(data, "name"),
            owner=require_str_field(data, "owner"),
            phone=require_str_field(data, "phone"),
            email=require_str_field(data, "email"),
            breed=require_str_field(data, "breed"),
            created_at=require_str_field(data, "created_at"),
            schedule=DogSchedule.from_dict(data["schedule"]),
            date_of_birth=data.get("date_of_birth"),
            vaccine_date=data.get("vaccine_date"),
            consent_last_signed=data.get("consent_last_signed"),
            household_id=data.get("household_id"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "owner": self.owner,
            "phone": self.phone,
            "email": self.email,
            "breed": self.breed,
            "date_of_birth": self.date_of_birth,
            "vaccine_date": self.vaccine_date,
            "consent_last_signed": self.consent_last_signed,
            "created_at": self.created_at,
            "schedule": self.schedule.to_dict(),
            "household_id": self.household_id,
        }
