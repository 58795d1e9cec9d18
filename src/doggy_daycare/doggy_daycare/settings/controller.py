from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..common.http import json_body
from ..container import Container
from ..core.exceptions import ValidationError
from .model import CloudBackupConfig, Settings

_MODEL_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def register(app: Flask, container: Container) -> None:
    settings = container.settings_service
    store = container.store

    @app.get("/api/settings", endpoint="settings_get")
    def settings_get():
        return jsonify(settings.get_settings().to_dict())

    @app.put("/api/settings", endpoint="settings_update")
    def settings_update():
        try:
            updated = Settings.from_dict(json_body())
        except _MODEL_ERRORS as exc:
            raise ValidationError(f"Invalid settings: {exc}") from exc
        settings.update_settings(updated)
        return jsonify(updated.to_dict())

    @app.get("/api/settings/cloud-backup", endpoint="cloud_backup_get")
    def cloud_backup_get():
        return jsonify(settings.get_cloud_backup_config().to_dict())

    @app.put("/api/settings/cloud-backup", endpoint="cloud_backup_update")
    def cloud_backup_update():
        try:
            config = CloudBackupConfig.from_dict(json_body())
        except _MODEL_ERRORS as exc:
            raise ValidationError(f"Invalid cloud backup config: {exc}") from exc
        settings.update_cloud_backup_config(config)
        return jsonify(config.to_dict())

    @app.get("/api/export", endpoint="data_export")
    def data_export():
        return Response(store.export_json(), mimetype="application/json")

    @app.post("/api/import", endpoint="data_import")
    def data_import():
        store.import_json(request.get_data(as_text=True))
        return "", 204
