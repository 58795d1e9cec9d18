from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, optional_str
from ..common.validators import require_enum, require_non_empty
from ..container import Container
from ..core.enums import ServiceType
from .model import RecurrencePattern, RecurringSchedule


def register(app: Flask, container: Container) -> None:
    schedules = container.schedule_service

    @app.get("/api/schedules", endpoint="schedules_list")
    def schedules_list():
        items = schedules.list_schedules(dog_id=request.args.get("dog_id") or None)
        return jsonify([s.to_dict() for s in items])

    @app.post("/api/schedules", endpoint="schedules_add")
    def schedules_add():
        payload = json_body()
        schedule = schedules.add_schedule(
            dog_id=require_non_empty(str(payload.get("dog_id") or ""), "dog_id"),
            service_type=require_enum(ServiceType, payload.get("service_type"), "service_type"),
            pattern=RecurrencePattern.from_json(payload.get("pattern")),
            start_date=str(payload.get("start_date") or ""),
            end_date=optional_str(payload, "end_date"),
            drop_off_time=optional_str(payload, "drop_off_time"),
            pick_up_time=optional_str(payload, "pick_up_time"),
        )
        return jsonify(schedule.to_dict()), 201

    @app.put("/api/schedules/<schedule_id>", endpoint="schedules_update")
    def schedules_update(schedule_id: str):
        payload = json_body()
        schedule = RecurringSchedule(
            id=schedule_id,
            dog_id=require_non_empty(str(payload.get("dog_id") or ""), "dog_id"),
            service_type=require_enum(ServiceType, payload.get("service_type"), "service_type"),
            pattern=RecurrencePattern.from_json(payload.get("pattern")),
            start_date=str(payload.get("start_date") or ""),
            created_at=str(payload.get("created_at") or ""),
            end_date=optional_str(payload, "end_date"),
            drop_off_time=optional_str(payload, "drop_off_time"),
            pick_up_time=optional_str(payload, "pick_up_time"),
            active=bool(payload.get("active", True)),
        )
        return jsonify(schedules.update_schedule(schedule).to_dict())

    @app.delete("/api/schedules/<schedule_id>", endpoint="schedules_delete")
    def schedules_delete(schedule_id: str):
        schedules.delete_schedule(schedule_id)
        return "", 204
