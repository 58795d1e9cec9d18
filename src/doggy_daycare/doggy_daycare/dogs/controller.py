from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from ..common.http import json_body, optional_str
from ..common.validators import require_weekdays
from ..container import Container
from ..core.exceptions import ValidationError
from .model import DogSchedule
from .service import describe_age


def parse_dog_schedule(payload: Any) -> DogSchedule:
    """Build a schedule descriptor from request JSON; missing means no schedule."""

    if payload is None:
        return DogSchedule()
    if not isinstance(payload, dict):
        raise ValidationError("schedule must be an object")

    return DogSchedule(
        daycare_days=require_weekdays(payload.get("daycare_days"), "daycare_days"),
        training_days=require_weekdays(payload.get("training_days"), "training_days"),
        boarding_days=require_weekdays(payload.get("boarding_days"), "boarding_days"),
        daycare_drop_off=optional_str(payload, "daycare_drop_off"),
        daycare_pick_up=optional_str(payload, "daycare_pick_up"),
        training_drop_off=optional_str(payload, "training_drop_off"),
        training_pick_up=optional_str(payload, "training_pick_up"),
        start_date=optional_str(payload, "start_date"),
        end_date=optional_str(payload, "end_date"),
        active=bool(payload.get("active", True)),
    )


def _dog_fields(payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "name": str(payload.get("name") or ""),
        "owner": str(payload.get("owner") or ""),
        "phone": str(payload.get("phone") or ""),
        "email": str(payload.get("email") or ""),
        "breed": str(payload.get("breed") or ""),
        "date_of_birth": optional_str(payload, "date_of_birth"),
        "vaccine_date": optional_str(payload, "vaccine_date"),
        "schedule": parse_dog_schedule(payload.get("schedule")),
        "household_id": optional_str(payload, "household_id"),
    }


def register(app: Flask, container: Container) -> None:
    dogs = container.dog_service

    @app.get("/api/dogs", endpoint="dogs_list")
    def dogs_list():
        return jsonify([d.to_dict() for d in dogs.list_dogs()])

    @app.post("/api/dogs", endpoint="dogs_add")
    def dogs_add():
        dog = dogs.add_dog(**_dog_fields(json_body()))
        return jsonify(dog.to_dict()), 201

    @app.put("/api/dogs/<dog_id>", endpoint="dogs_update")
    def dogs_update(dog_id: str):
        payload = json_body()
        dog = dogs.update_dog(
            dog_id,
            consent_last_signed=optional_str(payload, "consent_last_signed"),
            **_dog_fields(payload),
        )
        return jsonify(dog.to_dict())

    @app.delete("/api/dogs/<dog_id>", endpoint="dogs_delete")
    def dogs_delete(dog_id: str):
        dogs.delete_dog(dog_id)
        return "", 204

    @app.get("/api/dogs/age", endpoint="dogs_age")
    def dogs_age():
        return jsonify({"age": describe_age(request.args.get("date_of_birth") or "")})
