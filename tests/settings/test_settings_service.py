from __future__ import annotations

from doggy_daycare.settings.model import CloudBackupConfig, Settings, default_email_templates
from doggy_daycare.settings.service import SettingsService


def test_defaults_come_from_a_fresh_document(store):
    settings = SettingsService(store).get_settings()

    assert settings.business_phone == ""
    assert settings.cloud_backup is None
    assert settings.email_templates == default_email_templates()
    assert "{dogName}" in settings.whatsapp_templates.consent_form


def test_update_settings_persists(store, data_path):
    SettingsService(store).update_settings(Settings(business_name="Paws", business_phone="0299998888"))

    reloaded = SettingsService(type(store)(data_path)).get_settings()
    assert (reloaded.business_name, reloaded.business_phone) == ("Paws", "0299998888")


def test_cloud_backup_config_round_trips(store):
    service = SettingsService(store)
    assert service.get_cloud_backup_config() == CloudBackupConfig()

    service.update_cloud_backup_config(CloudBackupConfig(enabled=True, cloud_directory="/mnt/cloud", max_backups=5))

    assert service.get_cloud_backup_config().max_backups == 5
    assert service.get_settings().cloud_backup.cloud_directory == "/mnt/cloud"
