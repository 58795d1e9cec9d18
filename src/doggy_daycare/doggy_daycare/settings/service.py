from __future__ import annotations

from ..storage.document import Document
from ..storage.store import DocumentStore
from .model import CloudBackupConfig, Settings


class SettingsService:
    def __init__(self, store: DocumentStore):
        self._store = store

    def get_settings(self) -> Settings:
        return self._store.read(lambda document: document.settings)

    def update_settings(self, settings: Settings) -> None:
        def _update(document: Document) -> None:
            document.settings = settings

        self._store.write(_update)

    def get_cloud_backup_config(self) -> CloudBackupConfig:
        return self._store.read(lambda document: document.settings.cloud_backup or CloudBackupConfig())

    def update_cloud_backup_config(self, config: CloudBackupConfig) -> None:
        def _update(document: Document) -> None:
            document.settings.cloud_backup = config

        self._store.write(_update)
