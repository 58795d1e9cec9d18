from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, optional_str, require_bool
from ..common.validators import require_enum, require_non_empty
from ..container import Container
from ..core.enums import AttendanceType, ServiceType
from ..core.exceptions import ValidationError
from .model import DailyRecord


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    @app.post("/api/attendance/generate", endpoint="attendance_generate")
    def attendance_generate():
        payload = json_body()
        created = attendance.generate(str(payload.get("start_date") or ""), str(payload.get("end_date") or ""))
        return jsonify({"created": created})

    @app.post("/api/attendance/clear-auto", endpoint="attendance_clear_auto")
    def attendance_clear_auto():
        return jsonify({"removed": attendance.clear_auto_generated()})

    @app.get("/api/days/<date_str>", endpoint="day_get")
    def day_get(date_str: str):
        day = attendance.get_day(date_str)
        return jsonify(day.to_dict() if day else None)

    @app.get("/api/days/<date_str>/attendance", endpoint="day_attendance_get")
    def day_attendance_get(date_str: str):
        entries = attendance.get_attendance_for_date(date_str)
        return jsonify({key: entry.to_dict() for key, entry in entries.items()})

    @app.put("/api/days/<date_str>/attendance", endpoint="day_attendance_update")
    def day_attendance_update(date_str: str):
        payload = json_body()
        entry = attendance.update_detailed_attendance(
            date_str,
            dog_id=require_non_empty(str(payload.get("dog_id") or ""), "dog_id"),
            service_type=require_enum(ServiceType, payload.get("service_type"), "service_type"),
            attending=require_bool(payload, "attending"),
            drop_off_time=optional_str(payload, "drop_off_time"),
            pick_up_time=optional_str(payload, "pick_up_time"),
            notes=optional_str(payload, "notes"),
        )
        return jsonify(entry.to_dict())

    @app.put("/api/days/<date_str>/attendance/legacy", endpoint="day_attendance_legacy")
    def day_attendance_legacy(date_str: str):
        payload = json_body()
        attendance.update_attendance(
            date_str,
            dog_id=require_non_empty(str(payload.get("dog_id") or ""), "dog_id"),
            attending=require_bool(payload, "attending"),
        )
        return "", 204

    @app.put("/api/days/<date_str>/attendance/type", endpoint="day_attendance_type")
    def day_attendance_type(date_str: str):
        payload = json_body()
        attendance.update_attendance_type(
            date_str,
            dog_id=require_non_empty(str(payload.get("dog_id") or ""), "dog_id"),
            attendance_type=require_enum(AttendanceType, payload.get("attendance_type"), "attendance_type"),
        )
        return "", 204

    @app.put("/api/days/<date_str>/records/<dog_id>", endpoint="day_record_update")
    def day_record_update(date_str: str, dog_id: str):
        payload = json_body()
        try:
            record = DailyRecord.from_dict(payload)
        except (AttributeError, TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid daily record: {exc}") from exc
        attendance.update_daily_record(date_str, dog_id=dog_id, record=record)
        return "", 204

    @app.put("/api/days/<date_str>/temperature", endpoint="day_temperature")
    def day_temperature(date_str: str):
        payload = json_body()
        attendance.update_temperature(
            date_str,
            am_temp=optional_str(payload, "am_temp"),
            pm_temp=optional_str(payload, "pm_temp"),
        )
        return "", 204
